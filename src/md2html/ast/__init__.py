#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/ast/__init__.py
"""Document tree for parsed markdown.

The module consists of several components:

- nodes: node classes with parent back-references and child editing
- walk: depth-first traversal with enter/leave events
- utils: text extraction and lookup helpers

Examples
--------
Basic usage:

    >>> from md2html.ast import Document, Heading, Paragraph, Text
    >>> from md2html.renderers.html import HtmlRenderer
    >>>
    >>> doc = Document(children=[
    ...     Heading(level=1, content=[Text(content="Title")]),
    ...     Paragraph(content=[Text(content="Hello world")])
    ... ])
    >>> html = HtmlRenderer().render_to_string(doc)

"""

from __future__ import annotations

from md2html.ast.nodes import (
    Alignment,
    BlockQuote,
    Code,
    CodeBlock,
    DiagramBlock,
    Document,
    Emphasis,
    Heading,
    HTMLBlock,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
)
from md2html.ast.utils import contains_kind, extract_text, find_first
from md2html.ast.walk import BaseWalker, Walker, WalkStatus, iter_events, walk, walk_nodes

__all__ = [
    # Nodes
    "Alignment",
    "BlockQuote",
    "Code",
    "CodeBlock",
    "DiagramBlock",
    "Document",
    "Emphasis",
    "Heading",
    "HTMLBlock",
    "HTMLInline",
    "Image",
    "LineBreak",
    "Link",
    "List",
    "ListItem",
    "Node",
    "Paragraph",
    "Strikethrough",
    "Strong",
    "Table",
    "TableCell",
    "TableRow",
    "Text",
    "ThematicBreak",
    # Traversal
    "BaseWalker",
    "Walker",
    "WalkStatus",
    "iter_events",
    "walk",
    "walk_nodes",
    # Utilities
    "contains_kind",
    "extract_text",
    "find_first",
]
