#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/renderers/diagram.py
"""Render diagram blocks as mermaid containers.

A diagram block is raw: its lines are HTML-escaped and written verbatim
inside ``<pre class="mermaid">``, never interpreted as markdown. The
client-side mermaid script turns the container into a drawing.
"""

from __future__ import annotations

from md2html.ast.nodes import DiagramBlock, Node
from md2html.ast.walk import WalkStatus
from md2html.renderers.base import BaseRenderer, TextWriter
from md2html.utils.html_utils import escape_html

DIAGRAM_KIND = DiagramBlock.kind


def render_diagram_block(writer: TextWriter, source: str, node: Node, entering: bool) -> WalkStatus:
    """Write the opening container and lines on enter, the closing tag on leave."""
    if entering:
        writer.write('<pre class="mermaid">')
        for line in getattr(node, "lines", []):
            writer.write(escape_html(line))
    else:
        writer.write("</pre>\n")
    return WalkStatus.CONTINUE


def register_diagram_renderer(renderer: BaseRenderer) -> None:
    """Install :func:`render_diagram_block` for the diagram block kind."""
    renderer.register(DIAGRAM_KIND, render_diagram_block)


__all__ = ["DIAGRAM_KIND", "register_diagram_renderer", "render_diagram_block"]
