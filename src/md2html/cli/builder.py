#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/cli/builder.py
"""Argument parser construction and option resolution for the md2html CLI.

Parser options are generated from the :class:`MarkdownParserOptions` field
metadata; page options are declared by hand to keep the short flag names
(``--hl``, ``--hlstyle``, ``-m``) users know.

Values are resolved in this order (highest first): explicit command-line
arguments, configuration file values, ``MD2HTML_<DEST>`` environment
variables, built-in defaults.
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import MISSING, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

from md2html.cli.custom_actions import (
    TrackingBooleanAction,
    TrackingCommaListAction,
    TrackingStoreAction,
    TrackingStoreFalseAction,
    TrackingStoreTrueAction,
    parse_comma_list,
    provided_args,
)
from md2html.constants import (
    DEFAULT_HIGHLIGHT_ENABLED,
    DEFAULT_HIGHLIGHT_STYLE,
    DEFAULT_HTML_LANGUAGE,
    DEFAULT_HTML_STANDALONE,
    DEFAULT_HTML_UNSAFE,
    DEFAULT_MATH_ENABLED,
    DEFAULT_MERMAID_ENABLED,
    EXIT_ERROR,
    EXIT_SUCCESS,
    EXIT_USAGE_ERROR,
)
from md2html.context import ConversionContext
from md2html.exceptions import ConfigError, ValidationError
from md2html.options.html import HtmlRendererOptions
from md2html.options.markdown import MarkdownParserOptions

logger = logging.getLogger(__name__)

MARKDOWN_PREFIX = "markdown"

# Destinations read from the top level of a configuration file.
RENDERER_KEYS = (
    "standalone",
    "language",
    "highlight",
    "highlight_style",
    "highlight_languages",
    "math",
    "mermaid",
    "unsafe",
)
CONTEXT_KEYS = ("title", "embed_images")


@dataclass
class ConversionSettings:
    """Everything one CLI conversion needs, resolved from all sources."""

    context: ConversionContext
    parser_options: MarkdownParserOptions
    renderer_options: HtmlRendererOptions


def _package_version() -> str:
    from md2html import __version__

    return __version__


def add_markdown_arguments(parser: argparse.ArgumentParser) -> None:
    """Add one flag per boolean :class:`MarkdownParserOptions` field.

    A field that defaults to True gets ``--markdown-no-<name>``, one that
    defaults to False gets ``--markdown-<name>``. Destinations are
    ``markdown.<field>``, so ``MD2HTML_MARKDOWN_<FIELD>`` sets a default.
    """
    group = parser.add_argument_group("Markdown parser options")
    for option_field in fields(MarkdownParserOptions):
        if option_field.default is MISSING or not isinstance(option_field.default, bool):
            continue

        flag_name = option_field.name.replace("_", "-")
        dest = f"{MARKDOWN_PREFIX}.{option_field.name}"
        help_text = option_field.metadata.get("help", "")

        if option_field.default:
            group.add_argument(
                f"--{MARKDOWN_PREFIX}-no-{flag_name}",
                action=TrackingStoreFalseAction,
                dest=dest,
                default=True,
                help=f"Disable: {help_text}",
            )
        else:
            group.add_argument(
                f"--{MARKDOWN_PREFIX}-{flag_name}",
                action=TrackingStoreTrueAction,
                dest=dest,
                default=False,
                help=help_text,
            )


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="md2html",
        description="Convert markdown to HTML. Reads INPUT (default stdin) and writes OUTPUT (default stdout).",
    )
    parser.add_argument("input", nargs="?", default="-", metavar="INPUT", help='Markdown file ("-" for stdin)')
    parser.add_argument("output", nargs="?", default="-", metavar="OUTPUT", help='HTML file ("-" for stdout)')
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    page = parser.add_argument_group("Page options")
    page.add_argument("--title", action=TrackingStoreAction, type=str, default="", help="Document title")
    page.add_argument(
        "--lang",
        action=TrackingStoreAction,
        dest="language",
        type=str,
        default=DEFAULT_HTML_LANGUAGE,
        help=f"HTML lang attribute (default: {DEFAULT_HTML_LANGUAGE})",
    )
    page.add_argument(
        "--hl",
        "--no-hl",
        action=TrackingBooleanAction,
        dest="highlight",
        default=DEFAULT_HIGHLIGHT_ENABLED,
        help="Use highlight.js (default: on)",
    )
    page.add_argument(
        "--hlstyle",
        action=TrackingStoreAction,
        dest="highlight_style",
        type=str,
        default=DEFAULT_HIGHLIGHT_STYLE,
        help=f"highlight.js style (default: {DEFAULT_HIGHLIGHT_STYLE})",
    )
    page.add_argument(
        "--hllang",
        action=TrackingCommaListAction,
        dest="highlight_languages",
        metavar="LANGS",
        help="Comma separated list of highlight.js languages (repeatable)",
    )
    page.add_argument(
        "-m", "--math", action=TrackingStoreTrueAction, default=DEFAULT_MATH_ENABLED, help="Use MathJax"
    )
    page.add_argument(
        "--mermaid",
        "--no-mermaid",
        action=TrackingBooleanAction,
        dest="mermaid",
        default=DEFAULT_MERMAID_ENABLED,
        help="Render mermaid code blocks as diagrams and load the mermaid script (default: on)",
    )
    page.add_argument(
        "--embed",
        action=TrackingStoreTrueAction,
        dest="embed_images",
        help="Inline local images as base64 data URIs",
    )
    page.add_argument(
        "--fragment",
        action=TrackingStoreFalseAction,
        dest="standalone",
        default=DEFAULT_HTML_STANDALONE,
        help="Write only the body fragment, without the page shell",
    )
    page.add_argument(
        "--safe",
        action=TrackingStoreFalseAction,
        dest="unsafe",
        default=DEFAULT_HTML_UNSAFE,
        help="Replace raw HTML with a comment instead of passing it through",
    )

    add_markdown_arguments(parser)

    config_group = parser.add_argument_group("Configuration")
    config_group.add_argument(
        "--config",
        type=str,
        metavar="PATH",
        help="Configuration file (.toml, .yaml, .json or pyproject.toml). "
        "Defaults to MD2HTML_CONFIG, then auto-discovery.",
    )
    config_group.add_argument("--no-config", action="store_true", help="Ignore all configuration files")

    logging_group = parser.add_argument_group("Logging")
    logging_group.add_argument(
        "--log-level",
        action=TrackingStoreAction,
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set logging level (default: WARNING)",
    )
    logging_group.add_argument("--log-file", action=TrackingStoreAction, type=str, help="Also write logs to this file")
    logging_group.add_argument(
        "-v", "--verbose", action=TrackingStoreTrueAction, help="Enable debug logging (same as --log-level DEBUG)"
    )
    logging_group.add_argument(
        "--trace", action=TrackingStoreTrueAction, help="Debug logging with timestamps and logger names"
    )

    return parser


def _resolve(parsed_args: argparse.Namespace, dest: str, config: Dict[str, Any], key: str) -> Any:
    if dest in provided_args(parsed_args) or key not in config:
        return getattr(parsed_args, dest)
    return config[key]


def _coerce_languages(value: Any) -> tuple[str, ...]:
    if isinstance(value, str):
        return parse_comma_list(value)
    if isinstance(value, (list, tuple)):
        return tuple(str(item).strip() for item in value if str(item).strip())
    raise ValidationError(
        f"highlight_languages must be a list or comma separated string, got {type(value).__name__}",
        parameter_name="highlight_languages",
        parameter_value=value,
    )


def _warn_unknown_keys(config: Dict[str, Any]) -> None:
    known = set(RENDERER_KEYS) | set(CONTEXT_KEYS) | {MARKDOWN_PREFIX}
    for key in sorted(set(config) - known):
        logger.warning(f"Ignoring unknown configuration key: {key}")

    markdown_section = config.get(MARKDOWN_PREFIX, {})
    if isinstance(markdown_section, dict):
        markdown_known = {f.name for f in fields(MarkdownParserOptions)}
        for key in sorted(set(markdown_section) - markdown_known):
            logger.warning(f"Ignoring unknown configuration key: {MARKDOWN_PREFIX}.{key}")


def build_conversion_settings(
    parsed_args: argparse.Namespace, config: Optional[Dict[str, Any]] = None
) -> ConversionSettings:
    """Resolve parsed arguments and configuration values into conversion settings.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Result of :func:`create_parser` parsing
    config : dict, optional
        Loaded configuration. Top-level keys name page options (``language``,
        ``highlight_style``, ``title``, ...); a ``markdown`` table holds
        parser options.

    Returns
    -------
    ConversionSettings
        Context and options for one conversion

    Raises
    ------
    ConfigError
        If the ``markdown`` section is not a table
    ValidationError
        If a resolved value is rejected by the options classes

    """
    config = config or {}
    _warn_unknown_keys(config)

    markdown_config = config.get(MARKDOWN_PREFIX, {})
    if not isinstance(markdown_config, dict):
        raise ConfigError(f"'{MARKDOWN_PREFIX}' configuration must be a table, got {type(markdown_config).__name__}")

    parser_values = {
        f.name: _resolve(parsed_args, f"{MARKDOWN_PREFIX}.{f.name}", markdown_config, f.name)
        for f in fields(MarkdownParserOptions)
        if hasattr(parsed_args, f"{MARKDOWN_PREFIX}.{f.name}")
    }
    renderer_values = {key: _resolve(parsed_args, key, config, key) for key in RENDERER_KEYS}
    renderer_values["highlight_languages"] = _coerce_languages(renderer_values["highlight_languages"])

    try:
        parser_options = MarkdownParserOptions(**parser_values)
        renderer_options = HtmlRendererOptions(**renderer_values)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid option value: {e}", original_error=e) from e

    context = ConversionContext(
        title=str(_resolve(parsed_args, "title", config, "title") or ""),
        embed_images=bool(_resolve(parsed_args, "embed_images", config, "embed_images")),
        diagrams=renderer_options.mermaid,
    )
    if parsed_args.input != "-":
        context.base_dir = Path(parsed_args.input).parent

    logger.debug(f"Parser options: {parser_options}")
    logger.debug(f"Renderer options: {renderer_options}")
    return ConversionSettings(context=context, parser_options=parser_options, renderer_options=renderer_options)


__all__ = [
    "EXIT_ERROR",
    "EXIT_SUCCESS",
    "EXIT_USAGE_ERROR",
    "ConversionSettings",
    "add_markdown_arguments",
    "build_conversion_settings",
    "create_parser",
]
