#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/api.py
"""The major exported API functions for markdown to HTML conversion."""

import logging
from dataclasses import fields
from pathlib import Path
from typing import Any, Optional, TypeVar, Union

from md2html.ast.nodes import Document
from md2html.context import ConversionContext
from md2html.options.base import BaseParserOptions, BaseRendererOptions
from md2html.options.html import HtmlRendererOptions
from md2html.options.markdown import MarkdownParserOptions
from md2html.parsers.markdown import MarkdownParser
from md2html.renderers.html import HtmlRenderer
from md2html.transforms.pipeline import TransformPipeline
from md2html.utils.io_utils import InputSource, OutputTarget, read_text, write_text

logger = logging.getLogger(__name__)

OptionsT = TypeVar("OptionsT", BaseParserOptions, BaseRendererOptions)


def _options_with_overrides(
    options_class: type[OptionsT], options: Optional[OptionsT], kwargs: dict[str, Any]
) -> OptionsT:
    """Build options of ``options_class`` and apply the keyword overrides it knows.

    Keys consumed are removed from ``kwargs``.
    """
    base = options if options is not None else options_class()
    names = {f.name for f in fields(options_class)}
    updates = {key: kwargs.pop(key) for key in list(kwargs) if key in names}
    return base.create_updated(**updates) if updates else base


def to_ast(
    markdown: str,
    context: Optional[ConversionContext] = None,
    parser_options: Optional[MarkdownParserOptions] = None,
    pipeline: Optional[TransformPipeline] = None,
) -> Document:
    """Parse markdown into a document tree and run the stages.

    Parameters
    ----------
    markdown : str
        Markdown source
    context : ConversionContext, optional
        Per-conversion state; a fresh context is created when omitted
    parser_options : MarkdownParserOptions, optional
        Parser configuration
    pipeline : TransformPipeline, optional
        Stages to run, the built-in stages by default

    Returns
    -------
    Document
        The transformed tree

    """
    parser = MarkdownParser(parser_options, pipeline=pipeline)
    return parser.parse(markdown, context if context is not None else ConversionContext())


def convert(
    markdown: str,
    context: Optional[ConversionContext] = None,
    parser_options: Optional[MarkdownParserOptions] = None,
    renderer_options: Optional[HtmlRendererOptions] = None,
    **kwargs: Any,
) -> str:
    r"""Convert markdown text to HTML.

    Parameters
    ----------
    markdown : str
        Markdown source
    context : ConversionContext, optional
        Per-conversion state (base directory, title, stage toggles). A fresh
        context is created when omitted; never reuse one across calls.
    parser_options : MarkdownParserOptions, optional
        Parser configuration
    renderer_options : HtmlRendererOptions, optional
        Renderer configuration
    kwargs : Any
        Individual option fields, applied on top of the options objects
        (e.g. ``standalone=False``, ``language="ja"``)

    Returns
    -------
    str
        Rendered HTML

    Raises
    ------
    TypeError
        If an unknown keyword argument is given

    Examples
    --------
        >>> html = convert("# Title\n\nContent", standalone=False)
        >>> html.splitlines()[0]
        '<h1 id="title">Title</h1>'

    """
    parser_options = _options_with_overrides(MarkdownParserOptions, parser_options, kwargs)
    renderer_options = _options_with_overrides(HtmlRendererOptions, renderer_options, kwargs)
    if kwargs:
        raise TypeError(f"Unknown conversion options: {', '.join(sorted(kwargs))}")

    context = context if context is not None else ConversionContext()
    document = to_ast(markdown, context, parser_options)
    return HtmlRenderer(renderer_options).render_to_string(document, context)


def markdown_to_html(
    markdown: str,
    *,
    title: str = "",
    embed_images: bool = False,
    diagrams: bool = True,
    base_dir: Union[str, Path, None] = None,
    **kwargs: Any,
) -> str:
    """Convert markdown to HTML, building the conversion context from keywords.

    Parameters
    ----------
    markdown : str
        Markdown source
    title : str, default ''
        Page title; when empty the first heading is used
    embed_images : bool, default False
        Inline local images as data URIs
    diagrams : bool, default True
        Render ``mermaid`` code blocks as diagrams
    base_dir : str or Path, optional
        Directory for resolving relative image paths
    kwargs : Any
        Option fields forwarded to :func:`convert`

    """
    context = ConversionContext(
        base_dir=Path(base_dir) if base_dir is not None else None,
        title=title,
        embed_images=embed_images,
        diagrams=diagrams,
    )
    return convert(markdown, context, **kwargs)


def convert_file(
    source: InputSource,
    output: Optional[OutputTarget] = None,
    *,
    context: Optional[ConversionContext] = None,
    parser_options: Optional[MarkdownParserOptions] = None,
    renderer_options: Optional[HtmlRendererOptions] = None,
    **kwargs: Any,
) -> Optional[str]:
    """Convert a markdown file or stream to HTML.

    Parameters
    ----------
    source : str, Path, IO[bytes] or IO[str]
        Markdown input
    output : str, Path, IO[bytes], IO[str] or None, optional
        Destination. When None the HTML is returned instead.
    context : ConversionContext, optional
        Per-conversion state. When the input is a path and the context has
        no ``base_dir``, the input file's directory is used.
    parser_options : MarkdownParserOptions, optional
        Parser configuration
    renderer_options : HtmlRendererOptions, optional
        Renderer configuration
    kwargs : Any
        Option fields forwarded to :func:`convert`

    Returns
    -------
    str or None
        The HTML when ``output`` is None, otherwise None

    Raises
    ------
    InputReadError
        If the input cannot be read
    OutputWriteError
        If the output cannot be written

    """
    context = context if context is not None else ConversionContext()
    if context.base_dir is None and isinstance(source, (str, Path)):
        context.base_dir = Path(source).parent

    markdown = read_text(source)
    logger.debug(f"Read {len(markdown)} characters of markdown")

    html_text = convert(markdown, context, parser_options, renderer_options, **kwargs)
    if output is None:
        return html_text

    write_text(html_text, output)
    return None


__all__ = ["convert", "convert_file", "markdown_to_html", "to_ast"]
