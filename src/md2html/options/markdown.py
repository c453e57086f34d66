#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/options/markdown.py
"""Configuration options for markdown parsing."""

from __future__ import annotations

from dataclasses import dataclass, field

from md2html.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for markdown-to-tree parsing.

    The defaults enable the GitHub Flavored Markdown extensions together with
    automatic heading identifiers, the heading attribute syntax and emoji
    shortcodes.

    Parameters
    ----------
    parse_tables : bool, default True
        Whether to parse table syntax (GFM pipe tables).
    parse_strikethrough : bool, default True
        Whether to parse strikethrough syntax (~~text~~).
    parse_task_lists : bool, default True
        Whether to parse task list checkboxes (- [ ] and - [x]).
    parse_autolinks : bool, default True
        Whether to turn bare URLs into links.
    auto_heading_id : bool, default True
        Whether to assign an ``id`` attribute to every heading.
    heading_attributes : bool, default True
        Whether to parse a trailing ``{#id .class key=value}`` block on headings.
    parse_emoji : bool, default True
        Whether to replace GitHub-style ``:shortcode:`` names (``:smile:``,
        ``:+1:``) in text with emoji characters. Unknown names are kept.

    """

    parse_tables: bool = field(
        default=True,
        metadata={"help": "Parse table syntax (GFM pipe tables)", "importance": "core"},
    )
    parse_strikethrough: bool = field(
        default=True,
        metadata={"help": "Parse strikethrough syntax (~~text~~)", "importance": "core"},
    )
    parse_task_lists: bool = field(
        default=True,
        metadata={"help": "Parse task list checkboxes (- [ ] and - [x])", "importance": "core"},
    )
    parse_autolinks: bool = field(
        default=True,
        metadata={"help": "Turn bare URLs into links", "importance": "core"},
    )
    auto_heading_id: bool = field(
        default=True,
        metadata={"help": "Generate id attributes for headings", "importance": "advanced"},
    )
    heading_attributes: bool = field(
        default=True,
        metadata={"help": "Parse {#id .class} attribute blocks on headings", "importance": "advanced"},
    )
    parse_emoji: bool = field(
        default=True,
        metadata={"help": "Expand :shortcode: emoji names in text", "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate options by calling parent validation."""
        super().__post_init__()
