#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/__init__.py
"""md2html - convert markdown documents to standalone HTML pages.

md2html parses markdown (CommonMark plus GitHub extensions: tables,
strikethrough, task lists and autolinks) into a document tree, runs a short
pipeline of stages over the tree, and renders it to HTML.

Built-in stages
---------------
- **embed-images**: inline local images as base64 data URIs
- **extract-title**: use the first heading as the page title
- **reclassify-diagrams**: render ``mermaid`` code blocks as diagrams

The standalone page can load highlight.js, MathJax and mermaid from a CDN.

Requirements
------------
- Python 3.10+
- mistune 3 for markdown tokenizing

Examples
--------
Basic conversion:

    >>> from md2html import convert
    >>> html = convert("# Hello\\n\\nWorld", standalone=False)
    >>> print(html)
    <h1 id="hello">Hello</h1>
    <p>World</p>

Converting a file with local images inlined:

    >>> from md2html import ConversionContext, convert_file
    >>> convert_file("README.md", "README.html", context=ConversionContext(embed_images=True))

See Also
--------
md2html.ast : document tree node definitions and traversal
md2html.transforms : stage pipeline

"""

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "md2html requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from md2html.api import convert, convert_file, markdown_to_html, to_ast
from md2html.context import ConversionContext
from md2html.exceptions import (
    ConfigError,
    FileError,
    InputReadError,
    Md2HtmlError,
    OutputWriteError,
    ParsingError,
    RenderingError,
    TransformError,
    ValidationError,
)
from md2html.options import HtmlRendererOptions, MarkdownParserOptions

__all__ = [
    "__version__",
    "convert",
    "convert_file",
    "markdown_to_html",
    "to_ast",
    "ConversionContext",
    "HtmlRendererOptions",
    "MarkdownParserOptions",
    "Md2HtmlError",
    "ConfigError",
    "FileError",
    "InputReadError",
    "OutputWriteError",
    "ParsingError",
    "RenderingError",
    "TransformError",
    "ValidationError",
]
