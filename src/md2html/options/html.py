#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/options/html.py
"""Configuration options for HTML rendering.

The options cover the standalone page shell (language, highlight.js,
MathJax and mermaid script injection) and raw HTML pass-through.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from md2html.constants import (
    DEFAULT_HIGHLIGHT_ENABLED,
    DEFAULT_HIGHLIGHT_LANGUAGES,
    DEFAULT_HIGHLIGHT_STYLE,
    DEFAULT_HTML_LANGUAGE,
    DEFAULT_HTML_STANDALONE,
    DEFAULT_HTML_UNSAFE,
    DEFAULT_MATH_ENABLED,
    DEFAULT_MERMAID_ENABLED,
)
from md2html.options.base import BaseRendererOptions

_ASSET_NAME = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_.\-]*$")


@dataclass(frozen=True)
class HtmlRendererOptions(BaseRendererOptions):
    """Configuration options for rendering the tree to HTML.

    Parameters
    ----------
    standalone : bool, default True
        Wrap the body in a complete page (doctype, head, title, scripts).
        When False only the body fragment is produced.
    language : str, default "en"
        Value of the ``<html lang>`` attribute.
    highlight : bool, default True
        Include highlight.js in the page head.
    highlight_style : str, default "github"
        highlight.js stylesheet name. An empty style disables highlight.js.
    highlight_languages : tuple of str, default ()
        Additional highlight.js language modules to load.
    math : bool, default False
        Include MathJax in the page head.
    mermaid : bool, default True
        Include the mermaid script when the document contains diagram blocks.
    unsafe : bool, default True
        Pass raw HTML through. When False raw HTML is replaced by a comment.

    """

    standalone: bool = field(
        default=DEFAULT_HTML_STANDALONE,
        metadata={"help": "Generate complete HTML document (vs body fragment)", "importance": "core"},
    )
    language: str = field(
        default=DEFAULT_HTML_LANGUAGE,
        metadata={"help": "HTML lang attribute", "importance": "core"},
    )
    highlight: bool = field(
        default=DEFAULT_HIGHLIGHT_ENABLED,
        metadata={"help": "Use highlight.js", "importance": "core"},
    )
    highlight_style: str = field(
        default=DEFAULT_HIGHLIGHT_STYLE,
        metadata={"help": "highlight.js style", "importance": "core"},
    )
    highlight_languages: tuple[str, ...] = field(
        default=DEFAULT_HIGHLIGHT_LANGUAGES,
        metadata={"help": "Additional highlight.js languages", "importance": "advanced"},
    )
    math: bool = field(
        default=DEFAULT_MATH_ENABLED,
        metadata={"help": "Use MathJax", "importance": "core"},
    )
    mermaid: bool = field(
        default=DEFAULT_MERMAID_ENABLED,
        metadata={"help": "Load mermaid.js when diagram blocks are present", "importance": "core"},
    )
    unsafe: bool = field(
        default=DEFAULT_HTML_UNSAFE,
        metadata={"help": "Pass raw HTML through unchanged", "importance": "security"},
    )

    def __post_init__(self) -> None:
        """Validate and normalize field values.

        Raises
        ------
        ValueError
            If a style or language name could not form a CDN path.

        """
        super().__post_init__()

        # Accept any iterable (lists from config files) but store a tuple.
        if not isinstance(self.highlight_languages, tuple):
            object.__setattr__(self, "highlight_languages", tuple(self.highlight_languages))

        if self.highlight_style and not _ASSET_NAME.match(self.highlight_style):
            raise ValueError(f"Invalid highlight.js style name: {self.highlight_style!r}")
        for name in self.highlight_languages:
            if not _ASSET_NAME.match(name):
                raise ValueError(f"Invalid highlight.js language name: {name!r}")
