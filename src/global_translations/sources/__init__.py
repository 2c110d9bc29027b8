"""Translation sources that can be bound into the global registry."""

from .base import TranslationSource
from .table import MessageTableSource

__all__ = ["MessageTableSource", "TranslationSource"]
