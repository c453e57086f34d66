#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/utils/text.py
"""Text processing utilities for the parser.

This module provides heading identifier generation and the heading
attribute syntax (``## Title {#id .class key=value}``).

Functions
---------
heading_slug : Convert heading text to an identifier
parse_attribute_block : Parse the body of a ``{...}`` attribute block
split_trailing_attributes : Separate a trailing attribute block from text

Classes
-------
HeadingIdGenerator : Generate unique heading identifiers for one document

Examples
--------
Basic slug generation:

    >>> from md2html.utils.text import HeadingIdGenerator
    >>> ids = HeadingIdGenerator()
    >>> ids.generate("Getting Started")
    'getting-started'
    >>> ids.generate("Getting Started")
    'getting-started-1'

"""

from __future__ import annotations

import html
import re
import shlex
from typing import Optional

import emoji

from md2html.constants import DEFAULT_HEADING_ID

_TRAILING_ATTRIBUTES = re.compile(r"[ \t]*\{([^{}\n]*)\}[ \t]*$")
_ATTRIBUTE_NAME = re.compile(r"^[A-Za-z_:][A-Za-z0-9_.:-]*$")
_ENTITY = re.compile(r"&(?:#[0-9]{1,7}|#[xX][0-9a-fA-F]{1,6}|[A-Za-z][A-Za-z0-9]{1,31});")


def decode_entities(text: str) -> str:
    """Replace complete entity and numeric character references with their characters.

    Only references terminated by ``;`` are decoded; unknown names are kept.

    Examples
    --------
        >>> decode_entities("&lt;b&gt; &amp; &#65; &copy")
        '<b> & A &copy'

    """
    if "&" not in text:
        return text
    return _ENTITY.sub(lambda m: html.unescape(m.group(0)), text)


def expand_emoji_shortcodes(text: str) -> str:
    """Replace GitHub-style ``:name:`` shortcodes with emoji characters.

    Names are looked up in the alias table of the ``emoji`` package, which
    covers the GitHub names (``:+1:``, ``:tada:``, ``:smile:``). Unknown
    names are left as written.

    Examples
    --------
        >>> expand_emoji_shortcodes("ship it :rocket: :not_an_emoji:")
        'ship it 🚀 :not_an_emoji:'

    """
    if ":" not in text:
        return text
    return emoji.emojize(text, language="alias")


def heading_slug(text: str) -> str:
    """Convert heading text to an identifier.

    ASCII letters and digits are kept (lower-cased), whitespace, ``-`` and
    ``_`` become ``-``, and every other character is dropped, including all
    non-ASCII characters. Runs of separators are not collapsed.

    Parameters
    ----------
    text : str
        Plain heading text

    Returns
    -------
    str
        Identifier, ``"heading"`` when nothing usable remains

    Examples
    --------
        >>> heading_slug("API Reference (v2.0)")
        'api-reference-v20'
        >>> heading_slug("  --  ")
        '--'

    """
    result = []
    for char in text.strip():
        if char.isascii() and char.isalnum():
            result.append(char.lower())
        elif char.isascii() and (char.isspace() or char in "-_"):
            result.append("-")
    return "".join(result) or DEFAULT_HEADING_ID


class HeadingIdGenerator:
    """Generate unique heading identifiers within a single document.

    Duplicates get a numeric suffix starting at ``-1``. Identifiers set
    explicitly through the attribute syntax are registered with
    :meth:`reserve` so generated ones never collide with them.
    """

    def __init__(self) -> None:
        self._seen: set[str] = set()

    def reserve(self, identifier: str) -> None:
        """Record an explicitly assigned identifier."""
        self._seen.add(identifier)

    def generate(self, text: str) -> str:
        """Return a unique identifier for ``text``."""
        base = heading_slug(text)
        if base not in self._seen:
            self._seen.add(base)
            return base
        counter = 1
        while f"{base}-{counter}" in self._seen:
            counter += 1
        identifier = f"{base}-{counter}"
        self._seen.add(identifier)
        return identifier


def parse_attribute_block(body: str) -> Optional[dict[str, str]]:
    """Parse the inside of a ``{...}`` attribute block.

    Parameters
    ----------
    body : str
        Text between the braces, e.g. ``#intro .lead data-x="1 2"``

    Returns
    -------
    dict or None
        Attributes (classes joined by spaces), or None if any token is not
        a valid attribute

    """
    try:
        tokens = shlex.split(body, posix=True)
    except ValueError:
        return None
    if not tokens:
        return None

    attributes: dict[str, str] = {}
    classes: list[str] = []
    for token in tokens:
        if token.startswith("#") and len(token) > 1:
            attributes["id"] = token[1:]
        elif token.startswith(".") and len(token) > 1:
            classes.append(token[1:])
        elif "=" in token:
            name, value = token.split("=", 1)
            if not _ATTRIBUTE_NAME.match(name):
                return None
            attributes[name] = value
        else:
            return None

    if classes:
        attributes["class"] = " ".join(classes)
    return attributes


def split_trailing_attributes(text: str) -> tuple[str, Optional[dict[str, str]]]:
    """Separate a trailing ``{...}`` attribute block from heading text.

    Returns
    -------
    tuple of (str, dict or None)
        The text without the block and the parsed attributes; the text is
        returned unchanged with None when there is no valid block

    """
    match = _TRAILING_ATTRIBUTES.search(text)
    if match is None:
        return text, None
    attributes = parse_attribute_block(match.group(1))
    if attributes is None:
        return text, None
    return text[: match.start()], attributes


__all__ = [
    "HeadingIdGenerator",
    "decode_entities",
    "expand_emoji_shortcodes",
    "heading_slug",
    "parse_attribute_block",
    "split_trailing_attributes",
]
