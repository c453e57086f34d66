"""Test utilities for the md2html test suite.

This module provides small helpers for building document trees and
temporary directories shared by the unit and integration tests.
"""

import base64
import shutil
import tempfile
from pathlib import Path

from md2html.ast import CodeBlock, Document, Paragraph, Text

# Base64 encoded 1x1 pixel PNG for testing
MINIMAL_PNG_B64 = "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mP8/w8AAn8B9FpQHLwAAAAASUVORK5CYII="
MINIMAL_PNG_BYTES = base64.b64decode(MINIMAL_PNG_B64)


def create_test_temp_dir() -> Path:
    """Create a temporary directory for test files."""
    return Path(tempfile.mkdtemp(prefix="md2html_test_"))


def cleanup_test_dir(path: Path) -> None:
    """Remove a directory created by :func:`create_test_temp_dir`."""
    shutil.rmtree(path, ignore_errors=True)


def paragraph(text: str) -> Paragraph:
    """Build a paragraph holding a single text node."""
    return Paragraph(content=[Text(content=text)])


def fenced(content: str, language: str | None = None) -> CodeBlock:
    """Build a fenced code block with an optional language."""
    return CodeBlock(content=content, language=language, info=language, fenced=True)


def document(*children) -> Document:
    """Build a document from block nodes."""
    return Document(children=list(children))
