#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/transforms/diagram.py
"""Reclassify ``mermaid`` fenced code blocks as diagram blocks.

The stage works in two phases. It first walks the tree and collects every
matching code block without touching anything, then replaces each one in
its parent with a :class:`~md2html.ast.nodes.DiagramBlock` holding the same
lines. Editing the tree only after the walk keeps the traversal stable.
"""

from __future__ import annotations

import logging

from md2html.ast.nodes import CodeBlock, DiagramBlock, Document, Node
from md2html.ast.walk import WalkStatus, walk_nodes
from md2html.constants import DIAGRAM_LANGUAGE, RECLASSIFY_DIAGRAMS_PRIORITY, RECLASSIFY_DIAGRAMS_STAGE
from md2html.context import ConversionContext
from md2html.transforms.pipeline import BaseTransform

logger = logging.getLogger(__name__)


def is_diagram_block(node: Node) -> bool:
    """Return True for a fenced code block whose language is exactly ``mermaid``."""
    return isinstance(node, CodeBlock) and node.fenced and node.language == DIAGRAM_LANGUAGE


class ReclassifyDiagramsTransform(BaseTransform):
    """Replace fenced ``mermaid`` code blocks with diagram blocks.

    Runs only when ``context.diagrams`` is set. The language match is exact
    and case-sensitive; indented code blocks are never reclassified.
    """

    name = RECLASSIFY_DIAGRAMS_STAGE
    priority = RECLASSIFY_DIAGRAMS_PRIORITY

    def transform(self, document: Document, context: ConversionContext) -> None:
        """Reclassify every matching code block in ``document``."""
        if not context.diagrams:
            return

        targets: list[CodeBlock] = []

        def on_enter(node: Node) -> WalkStatus:
            if is_diagram_block(node):
                targets.append(node)  # type: ignore[arg-type]
                return WalkStatus.SKIP_CHILDREN
            return WalkStatus.CONTINUE

        walk_nodes(document, on_enter)

        for block in targets:
            parent = block.parent
            if parent is None:
                continue
            parent.replace_child(block, DiagramBlock(lines=list(block.lines)))

        if targets:
            logger.debug(f"Reclassified {len(targets)} diagram block(s)")
