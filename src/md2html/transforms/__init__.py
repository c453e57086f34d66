#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/transforms/__init__.py
"""Document tree stages run between parsing and rendering.

Built-in stages
---------------
- EmbedImagesTransform: inline local images as data URIs
- ExtractTitleTransform: take the title from the first heading
- ReclassifyDiagramsTransform: turn ``mermaid`` code blocks into diagram blocks

"""

from md2html.transforms.diagram import ReclassifyDiagramsTransform
from md2html.transforms.embed import EmbedImagesTransform
from md2html.transforms.pipeline import BaseTransform, Stage, TransformPipeline, default_pipeline
from md2html.transforms.title import ExtractTitleTransform

__all__ = [
    "BaseTransform",
    "EmbedImagesTransform",
    "ExtractTitleTransform",
    "ReclassifyDiagramsTransform",
    "Stage",
    "TransformPipeline",
    "default_pipeline",
]
