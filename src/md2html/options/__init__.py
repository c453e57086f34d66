#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/options/__init__.py
"""Configuration options for parsing and rendering."""

from md2html.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from md2html.options.html import HtmlRendererOptions
from md2html.options.markdown import MarkdownParserOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "HtmlRendererOptions",
    "MarkdownParserOptions",
]
