from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Hashable, Optional

from bs4 import BeautifulSoup

from .errors import InvalidArgument
from .models import MessageTemplate

TRANSLATE_ATTR = "data-translate"
ARGS_ATTR = "data-args"


@dataclass(frozen=True)
class Translatable:
    key: str
    args: tuple[Any, ...] = ()
    fallback: Optional[str] = None


class TranslatableComponentRenderer:
    """Renders translatable components against a translation source for a locale."""

    def __init__(
        self,
        source: Any,
        translate_attr: str = TRANSLATE_ATTR,
        args_attr: str = ARGS_ATTR,
    ):
        self.source = source
        self.translate_attr = translate_attr
        self.args_attr = args_attr

    def render(self, component: Translatable, locale: Hashable) -> str:
        args = [
            self.render(arg, locale) if isinstance(arg, Translatable) else arg
            for arg in component.args
        ]
        template = self.source.translate(component.key, locale)
        if template is None:
            return component.fallback if component.fallback is not None else component.key
        return _format(component.key, template, args)

    def render_markup(self, html: str, locale: Hashable) -> str:
        """Replace the text of every translatable element in ``html``.

        The args attribute may hold a JSON array of positional arguments.
        Elements whose key does not resolve are left untouched.
        """
        soup = BeautifulSoup(html, "html.parser")
        for tag in soup.find_all(attrs={self.translate_attr: True}):
            key = tag[self.translate_attr]
            args = self._parse_args(key, tag.get(self.args_attr))
            template = self.source.translate(key, locale)
            if template is None:
                continue
            tag.string = _format(key, template, args)
            del tag[self.translate_attr]
            if self.args_attr in tag.attrs:
                del tag[self.args_attr]
        return str(soup)

    def _parse_args(self, key: str, raw: Optional[str]) -> list[Any]:
        if not raw:
            return []
        try:
            args = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise InvalidArgument(f"{self.args_attr} for {key} must be a JSON array: {raw}") from exc
        if not isinstance(args, list):
            raise InvalidArgument(f"{self.args_attr} for {key} must be a JSON array: {raw}")
        return args


def _format(key: str, template: MessageTemplate, args: list[Any]) -> str:
    try:
        return template.format(*args)
    except (IndexError, KeyError) as exc:
        raise InvalidArgument(
            f"message {key} needs arguments that were not supplied: {template.pattern!r}"
        ) from exc
