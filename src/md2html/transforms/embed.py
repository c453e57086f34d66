#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/transforms/embed.py
"""Inline locally referenced images as base64 data URIs.

Only destinations without a URI scheme are touched. A file whose extension
is not recognised, or that cannot be read, is reported as a warning and its
image node is left exactly as it was; the conversion carries on.
"""

from __future__ import annotations

import logging
from pathlib import Path
from urllib.parse import unquote

from md2html.ast.nodes import Document, Image, Node
from md2html.ast.walk import WalkStatus, walk_nodes
from md2html.constants import EMBED_IMAGES_PRIORITY, EMBED_IMAGES_STAGE
from md2html.context import ConversionContext
from md2html.transforms.pipeline import BaseTransform
from md2html.utils.images import build_data_uri, has_uri_scheme, join_under, media_type_for_path

logger = logging.getLogger(__name__)


class EmbedImagesTransform(BaseTransform):
    """Replace local image destinations with data URIs.

    Runs only when ``context.embed_images`` is set. Destinations are joined
    below ``context.base_dir``, absolute ones included.

    Examples
    --------
        >>> context = ConversionContext(base_dir=Path("docs"), embed_images=True)
        >>> EmbedImagesTransform().transform(document, context)

    """

    name = EMBED_IMAGES_STAGE
    priority = EMBED_IMAGES_PRIORITY

    def transform(self, document: Document, context: ConversionContext) -> None:
        """Inline every local image in ``document``."""
        if not context.embed_images:
            return

        base_dir = context.resolve_base_dir()

        def on_enter(node: Node) -> WalkStatus:
            if isinstance(node, Image):
                self._embed(node, base_dir, context)
            return WalkStatus.CONTINUE

        walk_nodes(document, on_enter)

    def _embed(self, image: Image, base_dir: Path, context: ConversionContext) -> None:
        if not image.url:
            return
        if has_uri_scheme(image.url):
            logger.debug(f"Skipping remote image: {image.url}")
            return

        path = join_under(base_dir, unquote(image.url)).absolute()

        media_type = media_type_for_path(path)
        if media_type is None:
            context.warn(f"detect {path}: unknown media type", logger)
            return

        try:
            data = path.read_bytes()
        except OSError as e:
            context.warn(f"read {path}: {e.strerror or e}", logger)
            return

        image.url = build_data_uri(media_type, data)
        logger.debug(f"Embedded {path} ({media_type}, {len(data)} bytes)")
