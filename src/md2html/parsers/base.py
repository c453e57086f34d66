#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/parsers/base.py
"""Base class for parsers producing the document tree."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from md2html.ast.nodes import Document
from md2html.context import ConversionContext
from md2html.exceptions import InvalidOptionsError
from md2html.options.base import BaseParserOptions


class BaseParser(ABC):
    """Abstract base class for parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Parser-specific options

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with options."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                component_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, text: str, context: Optional[ConversionContext] = None) -> Document:
        """Parse ``text`` into a Document and run the registered stages."""
