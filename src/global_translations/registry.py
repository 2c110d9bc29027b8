from __future__ import annotations

import logging
import threading
from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any, Optional

from .errors import AlreadyBound, InvalidArgument
from .models import Binding, MessageTemplate
from .renderer import TranslatableComponentRenderer
from .sources.base import TranslationSource


@dataclass(frozen=True)
class _State:
    bindings: tuple[Binding, ...] = ()
    identifiers: frozenset = frozenset()


class GlobalTranslationSource:
    """Process-wide, ordered collection of translation sources.

    Sources are consulted in registration order and the first one that
    produces a template wins. Writers serialize on a lock and publish a new
    immutable state; readers take the current state without locking, so a
    ``translate`` call always walks one consistent snapshot.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)
        self._lock = threading.Lock()
        self._state = _State()
        self.renderer = TranslatableComponentRenderer(self)

    @classmethod
    def instance(cls) -> "GlobalTranslationSource":
        return _INSTANCE

    def register(self, identifier: Hashable, source: TranslationSource) -> None:
        _require_identifier(identifier)
        if source is None:
            raise InvalidArgument(f"source is required for {identifier}")
        if source is self:
            raise InvalidArgument(f"cannot register GlobalTranslationSource to itself as {identifier}")

        with self._lock:
            state = self._state
            if identifier in state.identifiers:
                raise AlreadyBound(identifier)
            self._state = _State(
                bindings=state.bindings + (Binding(identifier, source),),
                identifiers=state.identifiers | {identifier},
            )
            count = len(self._state.bindings)
        self.logger.debug("translation source registered: id=%s sources=%d", identifier, count)

    def unregister(self, identifier: Hashable) -> None:
        _require_identifier(identifier)

        with self._lock:
            state = self._state
            if identifier not in state.identifiers:
                removed = False
            else:
                self._state = _State(
                    bindings=tuple(b for b in state.bindings if b.identifier != identifier),
                    identifiers=state.identifiers - {identifier},
                )
                removed = True
            count = len(self._state.bindings)

        if removed:
            self.logger.debug("translation source unregistered: id=%s sources=%d", identifier, count)
        else:
            self.logger.debug("unregister ignored, nothing bound: id=%s", identifier)

    def translate(self, key: str, locale: Hashable) -> Optional[MessageTemplate]:
        if key is None:
            raise InvalidArgument("key is required")
        if locale is None:
            raise InvalidArgument("locale is required")

        for binding in self._state.bindings:
            result = binding.source.translate(key, locale)
            if result is not None:
                return result
        return None

    def enumerate(self) -> tuple[Binding, ...]:
        return self._state.bindings

    def is_registered(self, identifier: Hashable) -> bool:
        return identifier in self._state.identifiers

    def examinable_properties(self) -> tuple[tuple[str, Any], ...]:
        return (("sources", self.enumerate()),)

    def __contains__(self, identifier: object) -> bool:
        return self.is_registered(identifier)

    def __len__(self) -> int:
        return len(self._state.bindings)

    def __repr__(self) -> str:
        parts = []
        for name, value in self.examinable_properties():
            rendered = ", ".join(str(binding) for binding in value)
            parts.append(f"{name}=[{rendered}]")
        return f"{type(self).__name__}({', '.join(parts)})"


def _require_identifier(identifier: Any) -> None:
    if identifier is None:
        raise InvalidArgument("identifier is required")
    try:
        hash(identifier)
    except TypeError as exc:
        raise InvalidArgument(f"identifier must be hashable: {identifier!r}") from exc


_INSTANCE = GlobalTranslationSource()


def global_translation_source() -> GlobalTranslationSource:
    return _INSTANCE
