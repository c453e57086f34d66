#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/cli/__init__.py
"""Command-line interface for the md2html conversion library.

Reads markdown from INPUT (or stdin) and writes HTML to OUTPUT (or stdout).

Environment Variable Support
----------------------------
Options support environment variable defaults using the pattern
MD2HTML_<DEST> where destination names are converted to uppercase with
dots replaced by underscores (``MD2HTML_HIGHLIGHT_STYLE``,
``MD2HTML_MARKDOWN_PARSE_TABLES``). ``MD2HTML_CONFIG`` names a
configuration file. Configuration file values override environment
defaults; command-line arguments override both.

Examples
--------
Convert a file to a standalone page::

    $ md2html README.md README.html

Use a pipe, with MathJax and extra highlight.js languages::

    $ cat notes.md | md2html -m --hllang go,rust > notes.html

Inline local images and write only the body::

    $ md2html --embed --fragment doc.md

"""

import argparse
import logging
import os
import sys
from typing import IO, Any

from md2html.api import convert_file
from md2html.cli.builder import (
    EXIT_ERROR,
    EXIT_SUCCESS,
    EXIT_USAGE_ERROR,
    build_conversion_settings,
    create_parser,
)
from md2html.cli.config import load_config_with_priority
from md2html.constants import CONFIG_ENV_VAR
from md2html.exceptions import ConfigError, Md2HtmlError, ValidationError
from md2html.logging_utils import configure_logging

logger = logging.getLogger(__name__)

__all__ = ["main", "create_parser", "build_conversion_settings"]


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments."""
    # --trace takes highest precedence, then --verbose, then --log-level
    if parsed_args.trace:
        log_level = logging.DEBUG
    elif parsed_args.verbose and parsed_args.log_level == "WARNING":
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _input_source(name: str) -> Any:
    if name == "-":
        return getattr(sys.stdin, "buffer", sys.stdin)
    return name


def _output_target(name: str) -> Any:
    if name == "-":
        return sys.stdout
    return name


def _report(error: Exception, stream: IO[str]) -> None:
    print(f"md2html: {error}", file=stream)


def main(args: list[str] | None = None) -> int:
    """Run the md2html command and return its exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    try:
        if parsed_args.no_config:
            config = {}
        else:
            config = load_config_with_priority(parsed_args.config, os.environ.get(CONFIG_ENV_VAR))
        settings = build_conversion_settings(parsed_args, config)
    except (ConfigError, ValidationError) as e:
        _report(e, sys.stderr)
        return EXIT_USAGE_ERROR

    try:
        convert_file(
            _input_source(parsed_args.input),
            _output_target(parsed_args.output),
            context=settings.context,
            parser_options=settings.parser_options,
            renderer_options=settings.renderer_options,
        )
    except Md2HtmlError as e:
        logger.debug("Conversion failed", exc_info=True)
        _report(e, sys.stderr)
        return EXIT_ERROR

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
