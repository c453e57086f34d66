#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/utils/html_utils.py
"""HTML-related utility helpers."""

from __future__ import annotations

from html import escape as _html_escape
from typing import Mapping


def escape_html(text: str, *, enabled: bool = True, quote: bool = True) -> str:
    """Escape HTML special characters when enabled."""
    if not enabled:
        return text
    return _html_escape(text, quote=quote)


def render_attributes(attributes: Mapping[str, str]) -> str:
    """Render a mapping as a string of HTML attributes.

    Each attribute is prefixed by a space; values are escaped. ``id`` is
    always written first so headings read ``<h2 id="..." class="...">``.

    Parameters
    ----------
    attributes : Mapping[str, str]
        Attribute names and values

    Returns
    -------
    str
        Attribute string, empty when there are no attributes

    """
    parts = []
    if "id" in attributes:
        parts.append(f' id="{escape_html(attributes["id"])}"')
    for name, value in attributes.items():
        if name == "id":
            continue
        parts.append(f' {name}="{escape_html(value)}"')
    return "".join(parts)


def script_tag(src: str, *, attrs: str = "") -> str:
    """Return an external ``<script>`` element line."""
    return f'<script{attrs} src="{escape_html(src)}"></script>\n'


def stylesheet_tag(href: str) -> str:
    """Return a ``<link rel="stylesheet">`` element line."""
    return f'<link rel="stylesheet" href="{escape_html(href)}">\n'
