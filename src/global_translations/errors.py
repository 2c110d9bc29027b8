from __future__ import annotations


class TranslationRegistryError(Exception):
    """Base class for errors raised by the translation registry."""


class InvalidArgument(TranslationRegistryError, ValueError):
    pass


class AlreadyBound(TranslationRegistryError, LookupError):
    def __init__(self, identifier: object):
        super().__init__(f"translation source already registered for {identifier}")
        self.identifier = identifier
