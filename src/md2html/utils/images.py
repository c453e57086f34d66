#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/utils/images.py
"""Image handling utilities for the image inliner.

This module classifies local image files by extension, builds base64 data
URIs, and tells local path references apart from URLs.

"""

from __future__ import annotations

import base64
import mimetypes
import re
from pathlib import Path, PurePath

# Built from the interpreter's static defaults only; system mime.types files
# are never consulted so classification is the same on every host.
_MIME_TYPES = mimetypes.MimeTypes()

_SCHEME = re.compile(r"^([A-Za-z][A-Za-z0-9+.\-]*):")


def has_uri_scheme(url: str) -> bool:
    """Check whether a destination carries a URI scheme.

    Single-letter schemes are Windows drive letters (``C:\\img.png``) and
    count as local paths.

    Examples
    --------
        >>> has_uri_scheme("https://example.com/a.png")
        True
        >>> has_uri_scheme("data:image/png;base64,AAAA")
        True
        >>> has_uri_scheme("images/a.png")
        False
        >>> has_uri_scheme("C:/images/a.png")
        False

    """
    match = _SCHEME.match(url)
    return match is not None and len(match.group(1)) > 1


def join_under(base_dir: Path, destination: str) -> Path:
    """Join an image destination below ``base_dir``.

    A leading root is dropped, so ``/img/a.png`` resolves to
    ``<base_dir>/img/a.png`` rather than to the filesystem root.

    Examples
    --------
        >>> join_under(Path("/docs"), "/img/a.png")
        PosixPath('/docs/img/a.png')

    """
    pure = PurePath(destination)
    parts = pure.parts[1:] if pure.anchor else pure.parts
    return base_dir.joinpath(*parts)

def media_type_for_path(path: str | Path) -> str | None:
    """Classify a file by its extension.

    The suffix is looked up exactly first, then lower-cased. File contents
    are never inspected.

    Parameters
    ----------
    path : str or Path
        File path whose suffix is classified

    Returns
    -------
    str or None
        Media type such as ``image/png``, or None if the suffix is unknown

    """
    suffix = Path(path).suffix
    if not suffix:
        return None
    for strict in (True, False):
        table = _MIME_TYPES.types_map[strict]
        media_type = table.get(suffix) or table.get(suffix.lower())
        if media_type:
            return media_type
    return None


def build_data_uri(media_type: str, data: bytes) -> str:
    """Encode bytes as ``data:<media_type>;base64,<payload>``.

    The payload is standard base64 with padding and without line wrapping.
    """
    return f"data:{media_type};base64,{base64.b64encode(data).decode('ascii')}"


__all__ = [
    "build_data_uri",
    "has_uri_scheme",
    "join_under",
    "media_type_for_path",
]
