#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/utils/__init__.py
"""Utility modules for the md2html package.

This package contains HTML escaping helpers, image classification and data
URI encoding, entity and emoji shortcode expansion, and heading identifier
generation.
"""

from md2html.utils.html_utils import escape_html, render_attributes
from md2html.utils.images import build_data_uri, has_uri_scheme, join_under, media_type_for_path
from md2html.utils.text import (
    HeadingIdGenerator,
    decode_entities,
    expand_emoji_shortcodes,
    heading_slug,
    split_trailing_attributes,
)

__all__ = [
    "HeadingIdGenerator",
    "build_data_uri",
    "decode_entities",
    "escape_html",
    "expand_emoji_shortcodes",
    "has_uri_scheme",
    "heading_slug",
    "join_under",
    "media_type_for_path",
    "render_attributes",
    "split_trailing_attributes",
]
