#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/ast/nodes.py
"""AST node classes for document representation.

This module defines the node hierarchy produced by the markdown parser and
consumed by the transform stages and the HTML renderer.

Every node carries a string ``kind`` used for render dispatch and a weak
back-reference to its parent. The parent exclusively owns its child
sequence; the back-reference is for lookup only and never keeps a parent
alive.

Node Hierarchy
--------------
Block-level nodes:
    - Document, Heading, Paragraph, CodeBlock, DiagramBlock, BlockQuote
    - List, ListItem, Table, TableRow, TableCell
    - ThematicBreak, HTMLBlock

Inline nodes:
    - Text, Emphasis, Strong, Strikethrough, Code
    - Link, Image, LineBreak, HTMLInline

Structural edits go through ``replace_child``, ``insert_child``,
``append_child`` and ``remove_child`` so that back-references stay
consistent. Child lookup is by identity, never by equality: two code blocks
with identical content are distinct nodes.

"""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from typing import Any, ClassVar, Literal, Optional

Alignment = Literal["left", "center", "right"]


class Node:
    """Base class for all AST nodes.

    Subclasses are dataclasses. Container subclasses name the field that
    holds their children in ``child_field``; leaf nodes leave it ``None``.

    Attributes
    ----------
    kind : str
        Identifier used by the renderer's dispatch table
    is_raw : bool
        True for nodes whose content is emitted verbatim and never
        re-interpreted as markdown
    child_field : str or None
        Name of the dataclass field holding the ordered child sequence

    """

    kind: ClassVar[str] = "node"
    is_raw: ClassVar[bool] = False
    child_field: ClassVar[Optional[str]] = None

    metadata: dict[str, Any]

    def __post_init__(self) -> None:
        """Adopt children by pointing their back-references at this node."""
        if not hasattr(self, "_parent_ref"):
            self._parent_ref: Optional[weakref.ReferenceType[Node]] = None
        for child in self.child_nodes():
            child._set_parent(self)

    def _set_parent(self, parent: Optional[Node]) -> None:
        self._parent_ref = weakref.ref(parent) if parent is not None else None

    @property
    def parent(self) -> Optional[Node]:
        """Return the parent node, or None for a root or detached node."""
        ref = getattr(self, "_parent_ref", None)
        return ref() if ref is not None else None

    def child_nodes(self) -> list[Node]:
        """Return a snapshot of the child nodes in document order.

        Returns
        -------
        list of Node
            A new list; mutating it does not affect the tree

        """
        if self.child_field is None:
            return []
        return list(getattr(self, self.child_field))

    def _child_list(self) -> list[Node]:
        if self.child_field is None:
            raise TypeError(f"{type(self).__name__} nodes cannot hold children")
        return getattr(self, self.child_field)

    def index_of(self, child: Node) -> int:
        """Return the position of ``child`` among this node's children.

        Parameters
        ----------
        child : Node
            Child to locate (compared by identity)

        Returns
        -------
        int
            Index in the child sequence

        Raises
        ------
        ValueError
            If ``child`` is not a child of this node

        """
        for index, candidate in enumerate(self._child_list()):
            if candidate is child:
                return index
        raise ValueError(f"{type(child).__name__} is not a child of {type(self).__name__}")

    def replace_child(self, old: Node, new: Node) -> None:
        """Replace ``old`` with ``new`` at the same position.

        Parameters
        ----------
        old : Node
            Existing child to replace
        new : Node
            Node taking its place

        Raises
        ------
        ValueError
            If ``old`` is not a child of this node

        """
        children = self._child_list()
        index = self.index_of(old)
        children[index] = new
        new._set_parent(self)
        old._set_parent(None)

    def insert_child(self, index: int, child: Node) -> None:
        """Insert ``child`` before position ``index``."""
        self._child_list().insert(index, child)
        child._set_parent(self)

    def append_child(self, child: Node) -> None:
        """Append ``child`` at the end of the child sequence."""
        self._child_list().append(child)
        child._set_parent(self)

    def remove_child(self, child: Node) -> None:
        """Detach ``child`` from this node."""
        del self._child_list()[self.index_of(child)]
        child._set_parent(None)

    @property
    def next_sibling(self) -> Optional[Node]:
        """Return the following sibling, if any."""
        parent = self.parent
        if parent is None:
            return None
        siblings = parent._child_list()
        index = parent.index_of(self) + 1
        return siblings[index] if index < len(siblings) else None

    @property
    def previous_sibling(self) -> Optional[Node]:
        """Return the preceding sibling, if any."""
        parent = self.parent
        if parent is None:
            return None
        index = parent.index_of(self)
        return parent._child_list()[index - 1] if index > 0 else None


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root document node containing all other nodes.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the document
    metadata : dict, default = empty dict
        Document-level metadata (title, etc.)
    source : str, default = ''
        Normalized markdown text the tree was parsed from

    """

    kind: ClassVar[str] = "document"
    child_field: ClassVar[Optional[str]] = "children"

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    source: str = field(default="", repr=False)


@dataclass
class Heading(Node):
    """Heading node (h1-h6).

    Parameters
    ----------
    level : int
        Heading level (1-6, where 1 is most important)
    content : list of Node, default = empty list
        Inline nodes representing heading text
    attributes : dict, default = empty dict
        HTML attributes (``id``, ``class`` and arbitrary key/values)
    metadata : dict, default = empty dict
        Heading metadata

    """

    kind: ClassVar[str] = "heading"
    child_field: ClassVar[Optional[str]] = "content"

    level: int
    content: list[Node] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 6."""
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")
        super().__post_init__()


@dataclass
class Paragraph(Node):
    """Paragraph node containing inline content."""

    kind: ClassVar[str] = "paragraph"
    child_field: ClassVar[Optional[str]] = "content"

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class CodeBlock(Node):
    """Code block node, fenced or indented.

    Parameters
    ----------
    content : str
        Code content (not parsed as markdown)
    language : str or None, default = None
        First token of the info-string, used for syntax highlighting
    info : str or None, default = None
        Full info-string following the opening fence
    fenced : bool, default = True
        False for indented code blocks, which never carry an info-string
    metadata : dict, default = empty dict
        Code block metadata

    """

    kind: ClassVar[str] = "code_block"
    is_raw: ClassVar[bool] = True

    content: str
    language: Optional[str] = None
    info: Optional[str] = None
    fenced: bool = True
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def lines(self) -> list[str]:
        """Return the content as line spans, each keeping its line ending."""
        return self.content.splitlines(keepends=True)


@dataclass
class DiagramBlock(Node):
    """Raw diagram block produced by reclassifying a fenced code block.

    The block carries the same line spans as the code block it replaced and
    is rendered verbatim inside a diagram container. It is never parsed as
    markdown.

    Parameters
    ----------
    lines : list of str, default = empty list
        Source line spans, each keeping its line ending
    metadata : dict, default = empty dict
        Diagram metadata

    """

    kind: ClassVar[str] = "diagram_block"
    is_raw: ClassVar[bool] = True

    lines: list[str] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def content(self) -> str:
        """Return the joined line spans."""
        return "".join(self.lines)


@dataclass
class BlockQuote(Node):
    """Block quote node containing other block elements."""

    kind: ClassVar[str] = "block_quote"
    child_field: ClassVar[Optional[str]] = "children"

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class ListItem(Node):
    """List item node.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the item
    task_status : {'checked', 'unchecked'} or None, default = None
        Task list checkbox state, None for ordinary items
    metadata : dict, default = empty dict
        List item metadata

    """

    kind: ClassVar[str] = "list_item"
    child_field: ClassVar[Optional[str]] = "children"

    children: list[Node] = field(default_factory=list)
    task_status: Optional[Literal["checked", "unchecked"]] = None
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class List(Node):
    """Ordered or unordered list.

    Parameters
    ----------
    ordered : bool, default = False
        Whether the list is numbered
    items : list of ListItem, default = empty list
        List items
    start : int, default = 1
        First number of an ordered list
    tight : bool, default = True
        Tight lists render their paragraphs without ``<p>`` wrappers
    metadata : dict, default = empty dict
        List metadata

    """

    kind: ClassVar[str] = "list"
    child_field: ClassVar[Optional[str]] = "items"

    ordered: bool = False
    items: list[Node] = field(default_factory=list)
    start: int = 1
    tight: bool = True
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class TableCell(Node):
    """Table cell containing inline content."""

    kind: ClassVar[str] = "table_cell"
    child_field: ClassVar[Optional[str]] = "content"

    content: list[Node] = field(default_factory=list)
    alignment: Optional[Alignment] = None
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class TableRow(Node):
    """Table row; the header row has ``is_header`` set."""

    kind: ClassVar[str] = "table_row"
    child_field: ClassVar[Optional[str]] = "cells"

    cells: list[Node] = field(default_factory=list)
    is_header: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Table(Node):
    """Table node.

    The header row, when present, is the first entry of ``rows`` and has
    ``is_header`` set. Body rows follow in document order.

    """

    kind: ClassVar[str] = "table"
    child_field: ClassVar[Optional[str]] = "rows"

    rows: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def header(self) -> Optional[TableRow]:
        """Return the header row, if any."""
        if self.rows and isinstance(self.rows[0], TableRow) and self.rows[0].is_header:
            return self.rows[0]
        return None


@dataclass
class ThematicBreak(Node):
    """Horizontal rule."""

    kind: ClassVar[str] = "thematic_break"

    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class HTMLBlock(Node):
    """Raw HTML block passed through by the renderer."""

    kind: ClassVar[str] = "html_block"
    is_raw: ClassVar[bool] = True

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text node."""

    kind: ClassVar[str] = "text"

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Emphasis(Node):
    """Emphasis (italic) node."""

    kind: ClassVar[str] = "emphasis"
    child_field: ClassVar[Optional[str]] = "content"

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Strong(Node):
    """Strong (bold) node."""

    kind: ClassVar[str] = "strong"
    child_field: ClassVar[Optional[str]] = "content"

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Strikethrough(Node):
    """Strikethrough node (GFM)."""

    kind: ClassVar[str] = "strikethrough"
    child_field: ClassVar[Optional[str]] = "content"

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Code(Node):
    """Inline code span."""

    kind: ClassVar[str] = "code"

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Link(Node):
    """Hyperlink with optional title."""

    kind: ClassVar[str] = "link"
    child_field: ClassVar[Optional[str]] = "content"

    url: str
    content: list[Node] = field(default_factory=list)
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Image(Node):
    """Image node.

    Parameters
    ----------
    url : str
        Image destination: a local path, a remote URL, or a data URI once
        the image has been inlined
    alt_text : str, default = ''
        Alternative text, flattened from the inline children at parse time
    title : str or None, default = None
        Optional image title
    metadata : dict, default = empty dict
        Image metadata

    """

    kind: ClassVar[str] = "image"

    url: str
    alt_text: str = ""
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class LineBreak(Node):
    """Line break node; ``soft`` breaks come from plain newlines."""

    kind: ClassVar[str] = "line_break"

    soft: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class HTMLInline(Node):
    """Raw inline HTML."""

    kind: ClassVar[str] = "html_inline"
    is_raw: ClassVar[bool] = True

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)


__all__ = [
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
]
