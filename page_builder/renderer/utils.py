"""Common helpers shared by renderer implementations."""
from __future__ import annotations

from html import escape
from typing import Mapping


def style_to_css(style: Mapping[str, str]) -> str:
    """Serialize declarations as ``prop: value; prop: value;`` in insertion order."""
    return " ".join(f"{prop}: {value};" for prop, value in style.items())


def style_attr(style: Mapping[str, str]) -> str:
    """Return a ` style="..."` attribute, or nothing when there are no declarations."""
    if not style:
        return ""
    return f' style="{escape(style_to_css(style))}"'


def attr(value: str) -> str:
    return escape(value, quote=True)


def text(value: str) -> str:
    return escape(value, quote=False)
