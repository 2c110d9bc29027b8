from typing import Optional

import pytest

from global_translations.models import MessageTemplate
from global_translations.registry import GlobalTranslationSource, global_translation_source
from global_translations.sources.table import MessageTableSource


class RecordingSource:
    def __init__(self, messages: dict, name: str = "recording"):
        self.name = name
        self.messages = messages
        self.calls: list[tuple[str, str]] = []

    def translate(self, key: str, locale) -> Optional[MessageTemplate]:
        self.calls.append((key, locale))
        pattern = self.messages.get((key, locale))
        if pattern is None:
            return None
        return MessageTemplate(pattern=pattern, locale=locale)


def table(name: str, locale: str, patterns: dict) -> MessageTableSource:
    source = MessageTableSource(name)
    source.add_all(locale, patterns)
    return source


@pytest.fixture
def registry() -> GlobalTranslationSource:
    return GlobalTranslationSource()


@pytest.fixture
def global_registry():
    registry = global_translation_source()
    before = registry.enumerate()
    yield registry
    for binding in registry.enumerate():
        if binding not in before:
            registry.unregister(binding.identifier)
