#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/constants.py
"""Constants and default values for the md2html library.

Constants are organized by category:
1. Stage names and priorities
2. HTML page shell defaults and CDN locations
3. CLI exit codes
"""

from __future__ import annotations

# =============================================================================
# Stage names and priorities
# =============================================================================

# Built-in stages run after structural parsing, in ascending priority order.
EMBED_IMAGES_STAGE = "embed-images"
EXTRACT_TITLE_STAGE = "extract-title"
RECLASSIFY_DIAGRAMS_STAGE = "reclassify-diagrams"

EMBED_IMAGES_PRIORITY = 900
EXTRACT_TITLE_PRIORITY = 910
RECLASSIFY_DIAGRAMS_PRIORITY = 920

DEFAULT_STAGE_PRIORITY = 500

DIAGRAM_LANGUAGE = "mermaid"

# =============================================================================
# HTML page shell
# =============================================================================

DEFAULT_HTML_LANGUAGE = "en"
DEFAULT_HTML_STANDALONE = True
DEFAULT_HTML_UNSAFE = True
DEFAULT_HIGHLIGHT_ENABLED = True
DEFAULT_HIGHLIGHT_STYLE = "github"
DEFAULT_HIGHLIGHT_LANGUAGES: tuple[str, ...] = ()
DEFAULT_MATH_ENABLED = False
DEFAULT_MERMAID_ENABLED = True

HIGHLIGHT_JS_BASE_URL = "https://cdn.jsdelivr.net/gh/highlightjs/cdn-release@10/build"
MATHJAX_POLYFILL_URL = "https://polyfill.io/v3/polyfill.min.js?features=es6"
MATHJAX_SCRIPT_URL = "https://cdn.jsdelivr.net/npm/mathjax@3/es5/tex-mml-chtml.js"
MERMAID_SCRIPT_URL = "https://cdn.jsdelivr.net/npm/mermaid@10/dist/mermaid.min.js"

RAW_HTML_OMITTED = "<!-- raw HTML omitted -->"

DEFAULT_HEADING_ID = "heading"

# =============================================================================
# CLI exit codes
# =============================================================================

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_USAGE_ERROR = 2

ENV_PREFIX = "MD2HTML_"
CONFIG_ENV_VAR = "MD2HTML_CONFIG"
