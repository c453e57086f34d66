#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/renderers/html.py
"""HTML rendering from the document tree.

This module provides the HtmlRenderer class which walks the tree and writes
HTML through a table of render functions keyed by node kind. Diagram blocks
are rendered by :mod:`md2html.renderers.diagram`, installed on every new
renderer.

In standalone mode the body is wrapped in a page shell::

    <!DOCTYPE html>
    <html lang="en">
    <head>
    <meta charset="UTF-8">
    <title>...</title>
    (highlight.js, MathJax and mermaid scripts as enabled)
    </head>
    <body>
    ...
    </body>
    </html>

"""

from __future__ import annotations

import io
import logging
import re
from typing import Optional

from md2html.ast.nodes import (
    CodeBlock,
    Document,
    Heading,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    TableCell,
    TableRow,
)
from md2html.ast.utils import contains_kind
from md2html.ast.walk import WalkStatus
from md2html.constants import (
    HIGHLIGHT_JS_BASE_URL,
    MATHJAX_POLYFILL_URL,
    MATHJAX_SCRIPT_URL,
    MERMAID_SCRIPT_URL,
    RAW_HTML_OMITTED,
)
from md2html.context import ConversionContext
from md2html.options.html import HtmlRendererOptions
from md2html.renderers.base import BaseRenderer, TextWriter
from md2html.renderers.diagram import DIAGRAM_KIND, register_diagram_renderer
from md2html.utils.html_utils import escape_html, render_attributes, script_tag, stylesheet_tag

logger = logging.getLogger(__name__)

_DANGEROUS_URL = re.compile(r"^\s*(javascript|vbscript|file):", re.IGNORECASE)
_SAFE_DATA_IMAGE = re.compile(r"^\s*data:image/(png|gif|jpeg|webp);", re.IGNORECASE)


class HtmlRenderer(BaseRenderer):
    """Render the document tree to HTML.

    Parameters
    ----------
    options : HtmlRendererOptions or None, default = None
        HTML rendering options

    Examples
    --------
    Basic usage:

        >>> from md2html.ast import Document, Heading, Text
        >>> from md2html.renderers.html import HtmlRenderer
        >>> doc = Document(children=[
        ...     Heading(level=1, content=[Text(content="Title")])
        ... ])
        >>> html = HtmlRenderer().render_to_string(doc)

    Overriding the output for one node kind:

        >>> renderer = HtmlRenderer()
        >>> renderer.register("thematic_break", lambda w, s, n, e: ...)

    """

    def __init__(self, options: HtmlRendererOptions | None = None):
        """Initialize the HTML renderer with options."""
        BaseRenderer._validate_options_type(options, HtmlRendererOptions, "html")
        options = options or HtmlRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: HtmlRendererOptions = options

        for kind, func in (
            ("document", self.render_document),
            ("heading", self.render_heading),
            ("paragraph", self.render_paragraph),
            ("code_block", self.render_code_block),
            ("block_quote", self.render_block_quote),
            ("list", self.render_list),
            ("list_item", self.render_list_item),
            ("table", self.render_table),
            ("table_row", self.render_table_row),
            ("table_cell", self.render_table_cell),
            ("thematic_break", self.render_thematic_break),
            ("html_block", self.render_html_block),
            ("text", self.render_text),
            ("emphasis", self.render_emphasis),
            ("strong", self.render_strong),
            ("strikethrough", self.render_strikethrough),
            ("code", self.render_code),
            ("link", self.render_link),
            ("image", self.render_image),
            ("line_break", self.render_line_break),
            ("html_inline", self.render_html_inline),
        ):
            self.register(kind, func)
        register_diagram_renderer(self)

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def render_body(self, document: Document) -> str:
        """Render the document content without the page shell."""
        buffer = io.StringIO()
        self.render_nodes(buffer, document.source, document)
        return buffer.getvalue()

    def render_to_string(self, document: Document, context: Optional[ConversionContext] = None) -> str:
        """Render a document to HTML.

        Parameters
        ----------
        document : Document
            The document node to render
        context : ConversionContext, optional
            Supplies the page title; falls back to ``document.metadata["title"]``

        Returns
        -------
        str
            A body fragment, or a complete page when ``standalone`` is set

        """
        body = self.render_body(document)
        if not self.options.standalone:
            return body

        title = context.title if context is not None and context.title else document.metadata.get("title", "")
        return self._wrap_in_document(document, body, str(title or ""))

    def _wrap_in_document(self, document: Document, body: str, title: str) -> str:
        """Wrap the rendered body in the page shell."""
        parts = [
            "<!DOCTYPE html>\n",
            f'<html lang="{escape_html(self.options.language)}">\n',
            "<head>\n",
            '<meta charset="UTF-8">\n',
            f"<title>{escape_html(title)}</title>\n",
        ]

        if self.options.highlight and self.options.highlight_style:
            parts.append(stylesheet_tag(f"{HIGHLIGHT_JS_BASE_URL}/styles/{self.options.highlight_style}.min.css"))
            parts.append(script_tag(f"{HIGHLIGHT_JS_BASE_URL}/highlight.min.js"))
            for language in self.options.highlight_languages:
                parts.append(script_tag(f"{HIGHLIGHT_JS_BASE_URL}/languages/{language}.min.js"))
            parts.append("<script>hljs.initHighlightingOnLoad();</script>\n")

        if self.options.math:
            parts.append(script_tag(MATHJAX_POLYFILL_URL))
            parts.append(script_tag(MATHJAX_SCRIPT_URL, attrs=' id="MathJax-script" async'))

        if self.options.mermaid and contains_kind(document, DIAGRAM_KIND):
            parts.append(script_tag(MERMAID_SCRIPT_URL))
            parts.append("<script>mermaid.initialize({ startOnLoad: true });</script>\n")

        parts.extend(["</head>\n", "<body>\n", body, "</body>\n", "</html>\n"])
        return "".join(parts)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _in_tight_list(node: Node) -> bool:
        item = node.parent
        if not isinstance(item, ListItem):
            return False
        lst = item.parent
        return isinstance(lst, List) and lst.tight

    def _safe_url(self, url: str, *, image: bool = False) -> str:
        if self.options.unsafe:
            return url
        if _DANGEROUS_URL.match(url):
            return ""
        if url.lstrip().lower().startswith("data:") and not (image and _SAFE_DATA_IMAGE.match(url)):
            return ""
        return url

    def _write_raw(self, writer: TextWriter, content: str, *, block: bool) -> None:
        if self.options.unsafe:
            writer.write(content)
        else:
            writer.write(RAW_HTML_OMITTED + ("\n" if block else ""))

    # ------------------------------------------------------------------
    # Block nodes
    # ------------------------------------------------------------------

    def render_document(self, writer: TextWriter, source: str, node: Node, entering: bool) -> WalkStatus:
        """Documents contribute no markup of their own."""
        return WalkStatus.CONTINUE

    def render_heading(self, writer: TextWriter, source: str, node: Node, entering: bool) -> WalkStatus:
        """Render ``<hN>`` with the heading's attributes."""
        assert isinstance(node, Heading)
        if entering:
            writer.write(f"<h{node.level}{render_attributes(node.attributes)}>")
        else:
            writer.write(f"</h{node.level}>\n")
        return WalkStatus.CONTINUE

    def render_paragraph(self, writer: TextWriter, source: str, node: Node, entering: bool) -> WalkStatus:
        """Render a paragraph; paragraphs in tight lists have no ``<p>`` wrapper."""
        assert isinstance(node, Paragraph)
        tight = self._in_tight_list(node)
        if entering:
            if not tight:
                writer.write("<p>")
            item = node.parent
            if isinstance(item, ListItem) and item.task_status is not None and node.previous_sibling is None:
                checked = 'checked="" ' if item.task_status == "checked" else ""
                writer.write(f'<input {checked}disabled="" type="checkbox"> ')
        elif tight:
            if node.next_sibling is not None:
                writer.write("\n")
        else:
            writer.write("</p>\n")
        return WalkStatus.CONTINUE

    def render_code_block(self, writer: TextWriter, source: str, node: Node, entering: bool) -> WalkStatus:
        """Render ``<pre><code>`` with a ``language-*`` class for fenced blocks."""
        assert isinstance(node, CodeBlock)
        if entering:
            if node.language:
                writer.write(f'<pre><code class="language-{escape_html(node.language)}">')
            else:
                writer.write("<pre><code>")
            for line in node.lines:
                writer.write(escape_html(line))
        else:
            writer.write("</code></pre>\n")
        return WalkStatus.SKIP_CHILDREN

    def render_block_quote(self, writer: TextWriter, source: str, node: Node, entering: bool) -> WalkStatus:
        """Render ``<blockquote>``."""
        writer.write("<blockquote>\n" if entering else "</blockquote>\n")
        return WalkStatus.CONTINUE

    def render_list(self, writer: TextWriter, source: str, node: Node, entering: bool) -> WalkStatus:
        """Render ``<ul>`` or ``<ol>``, with ``start`` when it is not 1."""
        assert isinstance(node, List)
        tag = "ol" if node.ordered else "ul"
        if entering:
            start = f' start="{node.start}"' if node.ordered and node.start != 1 else ""
            writer.write(f"<{tag}{start}>\n")
        else:
            writer.write(f"</{tag}>\n")
        return WalkStatus.CONTINUE

    def render_list_item(self, writer: TextWriter, source: str, node: Node, entering: bool) -> WalkStatus:
        """Render ``<li>``; block content starts on a new line unless it is a tight paragraph."""
        assert isinstance(node, ListItem)
        if entering:
            writer.write("<li>")
            first = node.children[0] if node.children else None
            if first is not None and not (isinstance(first, Paragraph) and self._in_tight_list(first)):
                writer.write("\n")
        else:
            writer.write("</li>\n")
        return WalkStatus.CONTINUE

    def render_table(self, writer: TextWriter, source: str, node: Node, entering: bool) -> WalkStatus:
        """Render ``<table>``; sections are opened and closed by the rows."""
        writer.write("<table>\n" if entering else "</table>\n")
        return WalkStatus.CONTINUE

    def render_table_row(self, writer: TextWriter, source: str, node: Node, entering: bool) -> WalkStatus:
        """Render ``<tr>`` inside ``<thead>`` or ``<tbody>``."""
        assert isinstance(node, TableRow)
        if node.is_header:
            writer.write("<thead>\n<tr>\n" if entering else "</tr>\n</thead>\n")
            return WalkStatus.CONTINUE

        if entering:
            previous = node.previous_sibling
            if previous is None or (isinstance(previous, TableRow) and previous.is_header):
                writer.write("<tbody>\n")
            writer.write("<tr>\n")
        else:
            writer.write("</tr>\n")
            if node.next_sibling is None:
                writer.write("</tbody>\n")
        return WalkStatus.CONTINUE

    def render_table_cell(self, writer: TextWriter, source: str, node: Node, entering: bool) -> WalkStatus:
        """Render ``<th>`` in the header row and ``<td>`` elsewhere."""
        assert isinstance(node, TableCell)
        row = node.parent
        tag = "th" if isinstance(row, TableRow) and row.is_header else "td"
        if entering:
            style = f' style="text-align: {node.alignment}"' if node.alignment else ""
            writer.write(f"<{tag}{style}>")
        else:
            writer.write(f"</{tag}>\n")
        return WalkStatus.CONTINUE

    def render_thematic_break(self, writer: TextWriter, source: str, node: Node, entering: bool) -> WalkStatus:
        """Render ``<hr>``."""
        if entering:
            writer.write("<hr>\n")
        return WalkStatus.CONTINUE

    def render_html_block(self, writer: TextWriter, source: str, node: Node, entering: bool) -> WalkStatus:
        """Pass raw HTML through, or replace it with a comment when not ``unsafe``."""
        if entering:
            content = getattr(node, "content", "")
            self._write_raw(writer, content if content.endswith("\n") else content + "\n", block=True)
        return WalkStatus.CONTINUE

    # ------------------------------------------------------------------
    # Inline nodes
    # ------------------------------------------------------------------

    def render_text(self, writer: TextWriter, source: str, node: Node, entering: bool) -> WalkStatus:
        """Write escaped text."""
        if entering:
            writer.write(escape_html(getattr(node, "content", "")))
        return WalkStatus.CONTINUE

    def render_emphasis(self, writer: TextWriter, source: str, node: Node, entering: bool) -> WalkStatus:
        """Render ``<em>``."""
        writer.write("<em>" if entering else "</em>")
        return WalkStatus.CONTINUE

    def render_strong(self, writer: TextWriter, source: str, node: Node, entering: bool) -> WalkStatus:
        """Render ``<strong>``."""
        writer.write("<strong>" if entering else "</strong>")
        return WalkStatus.CONTINUE

    def render_strikethrough(self, writer: TextWriter, source: str, node: Node, entering: bool) -> WalkStatus:
        """Render ``<del>``."""
        writer.write("<del>" if entering else "</del>")
        return WalkStatus.CONTINUE

    def render_code(self, writer: TextWriter, source: str, node: Node, entering: bool) -> WalkStatus:
        """Render an inline code span."""
        if entering:
            writer.write(f"<code>{escape_html(getattr(node, 'content', ''))}</code>")
        return WalkStatus.CONTINUE

    def render_link(self, writer: TextWriter, source: str, node: Node, entering: bool) -> WalkStatus:
        """Render ``<a href>`` with an optional title."""
        assert isinstance(node, Link)
        if entering:
            title = f' title="{escape_html(node.title)}"' if node.title else ""
            writer.write(f'<a href="{escape_html(self._safe_url(node.url))}"{title}>')
        else:
            writer.write("</a>")
        return WalkStatus.CONTINUE

    def render_image(self, writer: TextWriter, source: str, node: Node, entering: bool) -> WalkStatus:
        """Render ``<img>``; the destination may be a data URI after inlining."""
        assert isinstance(node, Image)
        if entering:
            title = f' title="{escape_html(node.title)}"' if node.title else ""
            src = escape_html(self._safe_url(node.url, image=True))
            writer.write(f'<img src="{src}" alt="{escape_html(node.alt_text)}"{title}>')
        return WalkStatus.CONTINUE

    def render_line_break(self, writer: TextWriter, source: str, node: Node, entering: bool) -> WalkStatus:
        """Render a soft break as a newline and a hard break as ``<br>``."""
        assert isinstance(node, LineBreak)
        if entering:
            writer.write("\n" if node.soft else "<br>\n")
        return WalkStatus.CONTINUE

    def render_html_inline(self, writer: TextWriter, source: str, node: Node, entering: bool) -> WalkStatus:
        """Pass inline HTML through, or replace it with a comment when not ``unsafe``."""
        if entering:
            self._write_raw(writer, getattr(node, "content", ""), block=False)
        return WalkStatus.CONTINUE


__all__ = ["HtmlRenderer"]
