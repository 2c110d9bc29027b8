import pytest

from global_translations.errors import InvalidArgument
from global_translations.models import MessageTemplate
from global_translations.sources.table import MessageTableSource


def test_table_source_returns_template_for_key_and_locale() -> None:
    source = MessageTableSource("ui")
    source.add_all("en_US", {"menu.ok": "OK", "menu.cancel": "Cancel"})
    source.add("menu.ok", "fr_FR", "D'accord")

    assert source.translate("menu.ok", "en_US") == MessageTemplate("OK", "en_US")
    assert source.translate("menu.ok", "fr_FR") == MessageTemplate("D'accord", "fr_FR")
    assert source.translate("menu.cancel", "fr_FR") is None
    assert len(source) == 3


def test_table_source_overwrites_existing_pattern() -> None:
    source = MessageTableSource("ui")
    source.add("menu.ok", "en_US", "OK")
    source.add("menu.ok", "en_US", "Okay")

    assert source.translate("menu.ok", "en_US").pattern == "Okay"


def test_table_source_rejects_missing_values() -> None:
    source = MessageTableSource("ui")

    with pytest.raises(InvalidArgument):
        source.add("menu.ok", None, "OK")
