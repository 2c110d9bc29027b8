from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Hashable

from .errors import InvalidArgument

DEFAULT_NAMESPACE = "global"

_NAMESPACE_PATTERN = re.compile(r"^[a-z0-9_.-]+$")
_VALUE_PATTERN = re.compile(r"^[a-z0-9_./-]+$")


@dataclass(frozen=True)
class Key:
    """A namespaced identifier such as ``ui:menu``."""

    namespace: str
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.namespace, str) or not _NAMESPACE_PATTERN.match(self.namespace):
            raise InvalidArgument(f"invalid key namespace: {self.namespace!r}")
        if not isinstance(self.value, str) or not _VALUE_PATTERN.match(self.value):
            raise InvalidArgument(f"invalid key value: {self.value!r}")

    @classmethod
    def parse(cls, raw: str) -> "Key":
        if raw is None:
            raise InvalidArgument("key string is required")
        namespace, sep, value = raw.partition(":")
        if not sep:
            return cls(DEFAULT_NAMESPACE, raw)
        return cls(namespace, value)

    def __str__(self) -> str:
        return f"{self.namespace}:{self.value}"


@dataclass(frozen=True)
class MessageTemplate:
    """A message pattern with ``{0}``-style positional placeholders.

    Literal braces are written doubled (``{{`` and ``}}``).
    """

    pattern: str
    locale: Hashable

    def format(self, *args: Any) -> str:
        return self.pattern.format(*args)


@dataclass(frozen=True)
class Binding:
    identifier: Hashable
    source: Any

    def __str__(self) -> str:
        return f"{self.identifier}={self.source!r}"
