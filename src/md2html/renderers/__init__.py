#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/renderers/__init__.py
"""Renderers turning the document tree into output text."""

from md2html.renderers.base import BaseRenderer, RenderFunc, TextWriter
from md2html.renderers.diagram import register_diagram_renderer, render_diagram_block
from md2html.renderers.html import HtmlRenderer

__all__ = [
    "BaseRenderer",
    "HtmlRenderer",
    "RenderFunc",
    "TextWriter",
    "register_diagram_renderer",
    "render_diagram_block",
]
