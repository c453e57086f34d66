#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/utils/io_utils.py
"""I/O utilities for reading markdown input and writing HTML output.

Inputs and outputs may be file paths or file-like objects in text or binary
mode. Failures are raised as :class:`~md2html.exceptions.InputReadError` and
:class:`~md2html.exceptions.OutputWriteError`.

"""

from __future__ import annotations

import io
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast

from md2html.exceptions import InputReadError, OutputWriteError

InputSource = Union[str, Path, IO[bytes], IO[str]]
OutputTarget = Union[str, Path, IO[bytes], IO[str]]


def _is_binary_stream(stream: object) -> bool:
    if isinstance(stream, BytesIO):
        return True
    if isinstance(stream, StringIO):
        return False
    if isinstance(stream, io.TextIOBase):
        return False
    if isinstance(stream, (io.BufferedIOBase, io.RawIOBase)):
        return True
    mode = getattr(stream, "mode", "")
    return isinstance(mode, str) and "b" in mode


def stream_name(stream: object, default: str) -> str:
    """Return a printable name for a stream, e.g. ``<stdin>``."""
    name = getattr(stream, "name", None)
    return name if isinstance(name, str) else default


def read_text(source: InputSource) -> str:
    """Read markdown text from a path or stream.

    Bytes are decoded as UTF-8; a leading byte order mark is dropped.

    Parameters
    ----------
    source : str, Path, IO[bytes] or IO[str]
        File path or readable stream

    Returns
    -------
    str
        Decoded text

    Raises
    ------
    InputReadError
        If the source cannot be read or decoded

    """
    if isinstance(source, (str, Path)):
        try:
            return Path(source).read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            raise InputReadError(str(source), original_error=e) from e

    name = stream_name(source, "<input>")
    try:
        data = source.read()
    except OSError as e:
        raise InputReadError(name, original_error=e) from e

    if isinstance(data, bytes):
        try:
            return data.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise InputReadError(name, original_error=e) from e
    return data[1:] if data.startswith("\ufeff") else data


def write_text(content: str, output: OutputTarget) -> None:
    """Write text to a path or to a text or binary stream.

    Raises
    ------
    OutputWriteError
        If the destination cannot be written
    TypeError
        If ``output`` is neither a path nor a writable stream

    """
    if isinstance(output, (str, Path)):
        try:
            Path(output).write_text(content, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(str(output), original_error=e) from e
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output)}")

    try:
        if _is_binary_stream(output):
            cast(IO[bytes], output).write(content.encode("utf-8"))
        else:
            cast(IO[str], output).write(content)
        flush = getattr(output, "flush", None)
        if flush is not None:
            flush()
    except OSError as e:
        raise OutputWriteError(stream_name(output, "<output>"), original_error=e) from e


__all__ = ["InputSource", "OutputTarget", "read_text", "stream_name", "write_text"]
