from __future__ import annotations

from typing import Hashable, Optional, Protocol, runtime_checkable

from ..models import MessageTemplate


@runtime_checkable
class TranslationSource(Protocol):
    """Anything that can turn a translation key and a locale into a template."""

    def translate(self, key: str, locale: Hashable) -> Optional[MessageTemplate]:
        ...
