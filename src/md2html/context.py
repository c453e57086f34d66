#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/context.py
"""Per-conversion state shared by the transform stages and the renderer.

A :class:`ConversionContext` is created once for each conversion and never
shared between conversions. It replaces process-wide settings: the base
directory used to resolve local images, the title slot, and the toggles
that decide which stages run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass
class ConversionContext:
    """Mutable state for a single conversion.

    Parameters
    ----------
    base_dir : Path, optional
        Directory that relative image paths are resolved against. When None
        the current working directory is used.
    title : str, default ''
        Document title. An empty title may be filled in once by the title
        extractor; a non-empty title supplied by the caller is never replaced.
    embed_images : bool, default False
        Run the image inliner.
    diagrams : bool, default True
        Run the diagram reclassifier.
    diagnostics : list of str
        Non-fatal warnings raised during the conversion, in order.

    """

    base_dir: Optional[Path] = None
    title: str = ""
    embed_images: bool = False
    diagrams: bool = True
    diagnostics: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Normalize ``base_dir`` to a Path."""
        if self.base_dir is not None and not isinstance(self.base_dir, Path):
            self.base_dir = Path(self.base_dir)

    def resolve_base_dir(self) -> Path:
        """Return the directory used to resolve relative paths."""
        return self.base_dir if self.base_dir is not None else Path.cwd()

    def set_title(self, title: str) -> bool:
        """Fill the title slot if it is still empty.

        Parameters
        ----------
        title : str
            Candidate title

        Returns
        -------
        bool
            True if the title was written

        """
        if self.title:
            return False
        self.title = title
        return True

    def warn(self, message: str, source: Optional[logging.Logger] = None) -> None:
        """Log a non-fatal diagnostic and record it on the context."""
        (source or logger).warning(message)
        self.diagnostics.append(message)
