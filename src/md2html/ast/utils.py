#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/ast/utils.py
"""Utility functions for working with AST nodes.

Functions
---------
extract_text : Extract plain text from a node or list of nodes
find_first : Return the first node of a given kind in document order
contains_kind : Test whether any node of a given kind is present

Examples
--------
Extract text from a heading:

    >>> from md2html.ast import Heading, Text, Emphasis
    >>> from md2html.ast.utils import extract_text
    >>>
    >>> heading = Heading(level=1, content=[
    ...     Text(content="Hello "),
    ...     Emphasis(content=[Text(content="World")])
    ... ])
    >>> extract_text(heading, joiner="")
    'Hello World'

"""

from __future__ import annotations

from typing import Optional, Union

from md2html.ast.nodes import Code, Image, Node, Text
from md2html.ast.walk import WalkStatus, walk_nodes


def extract_text(node_or_nodes: Union[Node, list[Node]], joiner: str = " ") -> str:
    """Extract plain text from a node or list of nodes.

    Text-bearing nodes (Text, inline Code, and the alt text of an Image)
    are concatenated in document order, formatting wrappers contribute
    nothing of their own.

    Parameters
    ----------
    node_or_nodes : Node or list of Node
        A single node or list of nodes to extract text from
    joiner : str, default = " "
        String used to join text parts at each level. Use "" to reproduce
        the exact text of the source, as the title extractor does.

    Returns
    -------
    str
        Concatenated text content

    """
    if isinstance(node_or_nodes, list):
        text_parts = []
        for node in node_or_nodes:
            extracted = extract_text(node, joiner=joiner)
            if extracted:
                text_parts.append(extracted)
        return joiner.join(text_parts)

    node = node_or_nodes
    if isinstance(node, (Text, Code)):
        return node.content
    if isinstance(node, Image):
        return node.alt_text

    return extract_text(node.child_nodes(), joiner=joiner)


def find_first(root: Node, kind: str) -> Optional[Node]:
    """Return the first node with the given ``kind`` in document order, if any."""
    found: list[Node] = []

    def on_enter(node: Node) -> WalkStatus:
        if node.kind == kind:
            found.append(node)
            return WalkStatus.STOP
        return WalkStatus.CONTINUE

    walk_nodes(root, on_enter)
    return found[0] if found else None


def contains_kind(root: Node, kind: str) -> bool:
    """Return True if any node of ``kind`` is present under ``root``."""
    return find_first(root, kind) is not None


__all__ = [
    "contains_kind",
    "extract_text",
    "find_first",
]
