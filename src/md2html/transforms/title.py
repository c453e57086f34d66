#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/transforms/title.py
"""Derive the document title from the first heading."""

from __future__ import annotations

import logging

from md2html.ast.nodes import Document, Heading, Node
from md2html.ast.utils import extract_text
from md2html.ast.walk import WalkStatus, walk_nodes
from md2html.constants import EXTRACT_TITLE_PRIORITY, EXTRACT_TITLE_STAGE
from md2html.context import ConversionContext
from md2html.transforms.pipeline import BaseTransform

logger = logging.getLogger(__name__)


class ExtractTitleTransform(BaseTransform):
    """Fill an empty title slot with the text of the first heading.

    The heading's inline text is flattened without separators, so
    ``# Hello *World*`` yields ``Hello World``. A title already present on
    the context is kept, and a document without headings leaves the slot
    empty. The title is also stored in ``document.metadata["title"]``.
    """

    name = EXTRACT_TITLE_STAGE
    priority = EXTRACT_TITLE_PRIORITY

    def transform(self, document: Document, context: ConversionContext) -> None:
        """Set ``context.title`` from the first heading when it is empty."""
        if context.title:
            document.metadata.setdefault("title", context.title)
            return

        def on_enter(node: Node) -> WalkStatus:
            if isinstance(node, Heading):
                context.set_title(extract_text(node, joiner=""))
                return WalkStatus.STOP
            return WalkStatus.CONTINUE

        walk_nodes(document, on_enter)

        if context.title:
            logger.debug(f"Extracted title: {context.title!r}")
            document.metadata["title"] = context.title
