#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/renderers/base.py
"""Base classes for document tree renderers.

Renderers walk the tree and dispatch on ``node.kind`` through a table of
render functions. A render function has the signature::

    func(writer, source, node, entering) -> WalkStatus

where ``writer`` is a text stream receiving the output, ``source`` is the
normalized markdown the tree was parsed from, and ``entering`` tells enter
events from leave events. Returning ``SKIP_CHILDREN`` on enter means the
function rendered the node's children itself.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Callable, Optional, Protocol, Union

from md2html.ast.nodes import Document, Node
from md2html.ast.walk import WalkStatus, walk
from md2html.context import ConversionContext
from md2html.exceptions import InvalidOptionsError, RenderingError
from md2html.options.base import BaseRendererOptions
from md2html.utils.io_utils import write_text


class TextWriter(Protocol):
    """Anything with a ``write(str)`` method, such as ``io.StringIO``."""

    def write(self, text: str, /) -> int:
        """Append ``text`` to the output."""
        ...


RenderFunc = Callable[[TextWriter, str, Node, bool], WalkStatus]


class BaseRenderer(ABC):
    """Abstract base class for renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options
        self._render_funcs: dict[str, RenderFunc] = {}

    def register(self, kind: str, func: RenderFunc) -> None:
        """Install ``func`` as the render function for nodes of ``kind``.

        An existing entry for the same kind is replaced.
        """
        self._render_funcs[kind] = func

    def render_func_for(self, kind: str) -> RenderFunc:
        """Return the render function registered for ``kind``.

        Raises
        ------
        RenderingError
            If no function is registered for the kind

        """
        try:
            return self._render_funcs[kind]
        except KeyError:
            raise RenderingError(f"No renderer registered for node kind '{kind}'", rendering_stage="dispatch") from None

    def render_nodes(self, writer: TextWriter, source: str, root: Node) -> None:
        """Walk ``root`` and dispatch every enter and leave event."""
        walk(root, _DispatchWalker(self, writer, source))

    @abstractmethod
    def render_to_string(self, document: Document, context: Optional[ConversionContext] = None) -> str:
        """Render a document to a string."""

    def render(
        self,
        document: Document,
        output: Union[str, Path, IO[bytes], IO[str]],
        context: Optional[ConversionContext] = None,
    ) -> None:
        """Render a document and write it to a path or stream.

        Raises
        ------
        OutputWriteError
            If the output cannot be written

        """
        write_text(self.render_to_string(document, context), output)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                component_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )


class _DispatchWalker:
    def __init__(self, renderer: BaseRenderer, writer: TextWriter, source: str) -> None:
        self._renderer = renderer
        self._writer = writer
        self._source = source

    def on_enter(self, node: Node) -> WalkStatus:
        return self._renderer.render_func_for(node.kind)(self._writer, self._source, node, True)

    def on_leave(self, node: Node) -> WalkStatus:
        return self._renderer.render_func_for(node.kind)(self._writer, self._source, node, False)


__all__ = ["BaseRenderer", "RenderFunc", "TextWriter"]
