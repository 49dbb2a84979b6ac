"""Render trees for element output.

A render tree is built by an element and turned into HTML only when
``render()`` is called, so callers can inspect or alter the parts first
(the formatted address keeps its country and field spans addressable by
name, for instance).
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from markupsafe import Markup, escape

from webform_address.addressing.address_format import AddressFormat
from webform_address.addressing.formatter import replace_placeholders

_BLOCK_BREAK = re.compile(r"<br\s*/?>|<hr\s*/?>|</(?:p|li|div|h[1-6])>", re.IGNORECASE)


class Renderable:
    """Base class for render tree nodes."""

    cache_contexts: list[str]

    def render(self) -> Markup:
        raise NotImplementedError


def _attributes(attributes: dict[str, Any]) -> Markup:
    parts = []
    for name, value in attributes.items():
        if isinstance(value, (list, tuple)):
            value = " ".join(str(item) for item in value)
        parts.append(Markup(' {}="{}"').format(name, value))
    return Markup("").join(parts)


@dataclass
class HtmlTag(Renderable):
    """A single HTML element, e.g. ``<span class="locality">Mountain View</span>``.

    ``value`` is escaped on render unless it is already ``Markup``.
    """

    tag: str
    value: str = ""
    attributes: dict[str, Any] = field(default_factory=dict)
    placeholder: str | None = None
    cache_contexts: list[str] = field(default_factory=list)

    @property
    def classes(self) -> list[str]:
        return list(self.attributes.get("class", []))

    def render(self) -> Markup:
        return Markup("<{0}{1}>{2}</{0}>").format(
            Markup(self.tag), _attributes(self.attributes), escape(self.value)
        )


@dataclass
class MarkupBuild(Renderable):
    """Pre-built markup, optionally wrapped in a prefix and suffix."""

    markup: str
    prefix: str = ""
    suffix: str = ""
    cache_contexts: list[str] = field(default_factory=list)

    def render(self) -> Markup:
        return Markup(self.prefix) + Markup(self.markup) + Markup(self.suffix)


@dataclass
class ItemList(Renderable):
    """Several rendered items joined as a list, by commas or by rules."""

    items: list[Renderable]
    list_type: str = "ul"
    cache_contexts: list[str] = field(default_factory=list)

    def render(self) -> Markup:
        rendered = [item.render() for item in self.items]
        if self.list_type in ("ul", "ol"):
            body = Markup("").join(Markup("<li>{}</li>").format(item) for item in rendered)
            return Markup("<{0}>{1}</{0}>").format(Markup(self.list_type), body)
        if self.list_type == "hr":
            return Markup("<hr>").join(rendered)
        return Markup(", ").join(rendered)


@dataclass
class FormattedAddress(Renderable):
    """An address laid out by its country's address format.

    ``fields`` holds one span per enabled field, keyed by field name; the
    country span is always appended on the last line.
    """

    address_format: AddressFormat
    country_code: str
    country: HtmlTag
    fields: dict[str, HtmlTag] = field(default_factory=dict)
    locale: str = "und"
    prefix: str = '<p class="address" translate="no">'
    suffix: str = "</p>"
    cache_contexts: list[str] = field(default_factory=list)

    def render(self) -> Markup:
        format_string = self.address_format.format + "\n%country"
        replacements = {f"%{name}": "" for name in self.address_format.used_fields}
        for tag in [self.country, *self.fields.values()]:
            if tag.placeholder:
                replacements[tag.placeholder] = str(tag.render()) if tag.value else ""
        content = replace_placeholders(format_string, replacements)
        body = Markup("<br>\n".join(content.split("\n")))
        return Markup(self.prefix) + body + Markup(self.suffix)


def render_html(build: Renderable | None) -> Markup:
    """Render a tree to HTML; an empty build renders as an empty string."""
    if build is None:
        return Markup("")
    return build.render()


def html_to_text(html: str) -> str:
    """Convert rendered HTML to plain text.

    Line breaks, rules and closing block tags become newlines; other tags
    are dropped, entities are unescaped and whitespace inside a line is
    collapsed.
    """
    lines = (Markup(chunk).striptags() for chunk in _BLOCK_BREAK.split(str(html)))
    return "\n".join(line for line in lines if line).strip()
