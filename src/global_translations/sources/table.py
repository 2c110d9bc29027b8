from __future__ import annotations

import threading
from typing import Hashable, Mapping, Optional

from ..errors import InvalidArgument
from ..models import MessageTemplate


class MessageTableSource:
    """In-memory table of message patterns keyed by (key, locale)."""

    def __init__(self, name: str):
        self.name = name
        self._lock = threading.Lock()
        self._messages: dict[tuple[str, Hashable], MessageTemplate] = {}

    def add(self, key: str, locale: Hashable, pattern: str) -> None:
        if key is None or locale is None or pattern is None:
            raise InvalidArgument("key, locale and pattern are required")
        with self._lock:
            self._messages[(key, locale)] = MessageTemplate(pattern=pattern, locale=locale)

    def add_all(self, locale: Hashable, patterns: Mapping[str, str]) -> None:
        for key, pattern in patterns.items():
            self.add(key, locale, pattern)

    def translate(self, key: str, locale: Hashable) -> Optional[MessageTemplate]:
        return self._messages.get((key, locale))

    def __len__(self) -> int:
        return len(self._messages)

    def __repr__(self) -> str:
        return f"MessageTableSource(name={self.name!r}, messages={len(self._messages)})"
