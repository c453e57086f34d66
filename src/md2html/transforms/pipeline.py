#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/transforms/pipeline.py
"""Ordered execution of document tree stages.

A stage is a named transform with an integer priority. The pipeline keeps
stages sorted by ascending priority, with ties kept in registration order,
and runs each one in turn against the parsed document and the conversion
context. The built-in stages all run in the late slot after structural
parsing:

=====================  ========
Stage                  Priority
=====================  ========
embed-images           900
extract-title          910
reclassify-diagrams    920
=====================  ========

Examples
--------
Run the built-in stages:

    >>> from md2html.context import ConversionContext
    >>> from md2html.transforms.pipeline import default_pipeline
    >>> context = ConversionContext(embed_images=True)
    >>> default_pipeline().run(document, context)

Add a custom stage:

    >>> pipeline = default_pipeline()
    >>> pipeline.add(MyTransform(), priority=100)

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator, Optional

from md2html.ast.nodes import Document
from md2html.constants import DEFAULT_STAGE_PRIORITY
from md2html.context import ConversionContext
from md2html.exceptions import Md2HtmlError, TransformError

logger = logging.getLogger(__name__)


class BaseTransform(ABC):
    """Base class for document tree stages.

    Subclasses mutate or inspect the document in place. A stage decides for
    itself, from the context, whether it has anything to do.
    """

    name: str = "transform"
    priority: int = DEFAULT_STAGE_PRIORITY

    @abstractmethod
    def transform(self, document: Document, context: ConversionContext) -> None:
        """Apply the stage to ``document``.

        Parameters
        ----------
        document : Document
            Parsed document, modified in place
        context : ConversionContext
            Per-conversion state

        """


@dataclass(frozen=True)
class Stage:
    """A transform registered under a name and priority."""

    name: str
    priority: int
    transform: BaseTransform


class TransformPipeline:
    """Ordered list of stages run by a fixed driver.

    Parameters
    ----------
    stages : iterable of Stage, optional
        Initial stages

    """

    def __init__(self, stages: Optional[list[Stage]] = None) -> None:
        self._stages: list[Stage] = []
        for stage in stages or []:
            self.add(stage.transform, priority=stage.priority, name=stage.name)

    def add(self, transform: BaseTransform, priority: int = DEFAULT_STAGE_PRIORITY, name: Optional[str] = None) -> None:
        """Register a transform.

        A stage with the same name replaces the existing one.

        Parameters
        ----------
        transform : BaseTransform
            Stage implementation
        priority : int, default 500
            Lower priorities run first
        name : str, optional
            Stage name, defaults to ``transform.name``

        """
        stage_name = name or transform.name
        for existing in self._stages:
            if existing.name == stage_name:
                logger.warning(f"Stage '{stage_name}' already registered, overwriting")
                self._stages.remove(existing)
                break

        stage = Stage(name=stage_name, priority=priority, transform=transform)
        # Insert after every stage with priority <= ours so ties keep registration order.
        index = len(self._stages)
        for i, existing in enumerate(self._stages):
            if existing.priority > priority:
                index = i
                break
        self._stages.insert(index, stage)

    def remove(self, name: str) -> None:
        """Remove the stage called ``name``.

        Raises
        ------
        KeyError
            If no stage has that name

        """
        for stage in self._stages:
            if stage.name == name:
                self._stages.remove(stage)
                return
        raise KeyError(name)

    @property
    def stages(self) -> list[Stage]:
        """Return the stages in execution order."""
        return list(self._stages)

    def names(self) -> list[str]:
        """Return the stage names in execution order."""
        return [stage.name for stage in self._stages]

    def __iter__(self) -> Iterator[Stage]:
        return iter(self.stages)

    def __len__(self) -> int:
        return len(self._stages)

    def run(self, document: Document, context: ConversionContext) -> Document:
        """Run every stage against ``document`` in priority order.

        Parameters
        ----------
        document : Document
            Parsed document, modified in place
        context : ConversionContext
            Per-conversion state

        Returns
        -------
        Document
            The same document, for chaining

        Raises
        ------
        TransformError
            If a stage raises an unexpected exception

        """
        logger.debug(f"Applying {len(self._stages)} stage(s)")
        for stage in self.stages:
            logger.debug(f"Applying stage: {stage.name} (priority {stage.priority})")
            try:
                stage.transform.transform(document, context)
            except Md2HtmlError:
                raise
            except Exception as e:
                raise TransformError(
                    f"Stage '{stage.name}' failed: {e}", transform_name=stage.name, original_error=e
                ) from e
        return document


def default_pipeline() -> TransformPipeline:
    """Build the pipeline holding the built-in stages."""
    from md2html.transforms.diagram import ReclassifyDiagramsTransform
    from md2html.transforms.embed import EmbedImagesTransform
    from md2html.transforms.title import ExtractTitleTransform

    pipeline = TransformPipeline()
    for transform in (EmbedImagesTransform(), ExtractTitleTransform(), ReclassifyDiagramsTransform()):
        pipeline.add(transform, priority=transform.priority, name=transform.name)
    return pipeline
