#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/parsers/__init__.py
"""Parsers producing the document tree."""

from md2html.parsers.base import BaseParser
from md2html.parsers.markdown import MarkdownParser, normalize_line_endings

__all__ = ["BaseParser", "MarkdownParser", "normalize_line_endings"]
