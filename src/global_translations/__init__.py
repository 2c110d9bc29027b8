"""Process-wide registry of translation sources."""

from .errors import AlreadyBound, InvalidArgument, TranslationRegistryError
from .models import Binding, Key, MessageTemplate
from .registry import GlobalTranslationSource, global_translation_source
from .renderer import Translatable, TranslatableComponentRenderer
from .sources import MessageTableSource, TranslationSource

__all__ = [
    "AlreadyBound",
    "Binding",
    "GlobalTranslationSource",
    "InvalidArgument",
    "Key",
    "MessageTableSource",
    "MessageTemplate",
    "Translatable",
    "TranslatableComponentRenderer",
    "TranslationRegistryError",
    "TranslationSource",
    "global_translation_source",
]
