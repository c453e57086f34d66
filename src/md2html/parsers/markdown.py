#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2html/parsers/markdown.py
"""Markdown to document tree parser.

Tokenizing is delegated to mistune (>= 3). Its token stream is folded into
the node classes of :mod:`md2html.ast.nodes`. Heading identifiers,
heading attribute blocks and emoji shortcodes are applied along the way,
and the registered stages are then run against the finished tree.

"""

from __future__ import annotations

import html
import logging
from typing import Any, Literal, Optional

import mistune

from md2html.ast import (
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    HTMLBlock,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
    extract_text,
    walk_nodes,
)
from md2html.ast.walk import WalkStatus
from md2html.constants import DEFAULT_STAGE_PRIORITY
from md2html.context import ConversionContext
from md2html.exceptions import ParsingError
from md2html.options.markdown import MarkdownParserOptions
from md2html.parsers.base import BaseParser
from md2html.transforms.pipeline import BaseTransform, TransformPipeline, default_pipeline
from md2html.utils.text import (
    HeadingIdGenerator,
    decode_entities,
    expand_emoji_shortcodes,
    split_trailing_attributes,
)

logger = logging.getLogger(__name__)


def normalize_line_endings(text: str) -> str:
    r"""Convert ``\r\n`` and lone ``\r`` line endings to ``\n``."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


class MarkdownParser(BaseParser):
    r"""Parse markdown into a Document.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options
    pipeline : TransformPipeline or None, default = None
        Stages run after the tree is built. None installs the built-in
        stages; pass an empty ``TransformPipeline()`` to run none.

    Examples
    --------
    Basic parsing:

        >>> parser = MarkdownParser()
        >>> doc = parser.parse("# Hello\n\nThis is **bold**.")

    Registering an extra stage:

        >>> parser.add_transform(MyTransform(), priority=100, name="my-stage")

    """

    def __init__(
        self, options: MarkdownParserOptions | None = None, pipeline: Optional[TransformPipeline] = None
    ) -> None:
        """Initialize the parser with options and its stage pipeline."""
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options
        self.pipeline = pipeline if pipeline is not None else default_pipeline()

        plugins = []
        if self.options.parse_strikethrough:
            plugins.append("strikethrough")
        if self.options.parse_tables:
            plugins.append("table")
        if self.options.parse_task_lists:
            plugins.append("task_lists")
        if self.options.parse_autolinks:
            plugins.append("url")

        # Tokens are folded into nodes here rather than rendered by mistune.
        self._markdown = mistune.create_markdown(plugins=plugins, renderer=None)

    def add_transform(
        self, transform: BaseTransform, priority: int = DEFAULT_STAGE_PRIORITY, name: Optional[str] = None
    ) -> None:
        """Register a stage to run after parsing.

        Parameters
        ----------
        transform : BaseTransform
            Stage implementation
        priority : int, default 500
            Lower priorities run first
        name : str, optional
            Stage name, defaults to ``transform.name``

        """
        self.pipeline.add(transform, priority=priority, name=name)

    def parse(self, text: str, context: Optional[ConversionContext] = None) -> Document:
        """Parse markdown text and run the registered stages.

        Parameters
        ----------
        text : str
            Markdown source
        context : ConversionContext, optional
            Per-conversion state; a fresh context is used when omitted

        Returns
        -------
        Document
            Document tree after every stage has run

        Raises
        ------
        ParsingError
            If the tokenizer fails

        """
        document = self.build_tree(text)
        self.pipeline.run(document, context if context is not None else ConversionContext())
        return document

    def build_tree(self, text: str) -> Document:
        """Parse markdown text into a Document without running any stage."""
        source = normalize_line_endings(text)

        try:
            tokens, _state = self._markdown.parse(source)
        except Exception as e:
            raise ParsingError(f"Failed to tokenize markdown: {e}", parsing_stage="tokenize", original_error=e) from e

        children = self._process_tokens(tokens if isinstance(tokens, list) else [])
        document = Document(children=children, source=source)

        if self.options.heading_attributes or self.options.auto_heading_id:
            self._assign_heading_attributes(document)

        return document

    # ------------------------------------------------------------------
    # Headings
    # ------------------------------------------------------------------

    def _assign_heading_attributes(self, document: Document) -> None:
        """Apply attribute blocks, then generate ids for headings lacking one."""
        headings: list[Heading] = []

        def on_enter(node: Node) -> WalkStatus:
            if isinstance(node, Heading):
                headings.append(node)
                return WalkStatus.SKIP_CHILDREN
            return WalkStatus.CONTINUE

        walk_nodes(document, on_enter)

        ids = HeadingIdGenerator()
        if self.options.heading_attributes:
            for heading in headings:
                self._apply_attribute_block(heading)
                if "id" in heading.attributes:
                    ids.reserve(heading.attributes["id"])

        if self.options.auto_heading_id:
            for heading in headings:
                if "id" not in heading.attributes:
                    heading.attributes["id"] = ids.generate(extract_text(heading, joiner=""))

    @staticmethod
    def _apply_attribute_block(heading: Heading) -> None:
        if not heading.content or not isinstance(heading.content[-1], Text):
            return
        last = heading.content[-1]
        remaining, attributes = split_trailing_attributes(last.content)
        if attributes is None:
            return
        heading.attributes.update(attributes)
        remaining = remaining.rstrip()
        if remaining:
            last.content = remaining
        else:
            heading.remove_child(last)

    # ------------------------------------------------------------------
    # Block tokens
    # ------------------------------------------------------------------

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process a list of block tokens into nodes."""
        nodes: list[Node] = []
        for token in tokens:
            node = self._process_token(token)
            if node is not None:
                nodes.append(node)
        return nodes

    def _process_token(self, token: dict[str, Any]) -> Node | None:
        """Process a single block token; blank lines and unknown tokens yield None."""
        token_type = token.get("type", "")

        if token_type == "heading":
            return self._process_heading(token)
        elif token_type in ("paragraph", "block_text"):
            # block_text is the paragraph form used inside tight list items
            return Paragraph(content=self._process_inline_tokens(token.get("children", [])))
        elif token_type == "block_code":
            return self._process_code_block(token)
        elif token_type == "block_quote":
            return BlockQuote(children=self._process_tokens(token.get("children", [])))
        elif token_type == "list":
            return self._process_list(token)
        elif token_type == "table":
            return self._process_table(token)
        elif token_type == "thematic_break":
            return ThematicBreak()
        elif token_type == "block_html":
            return HTMLBlock(content=token.get("raw", ""))

        if token_type not in ("blank_line", ""):
            logger.debug(f"Ignoring unsupported token type: {token_type}")
        return None

    def _process_heading(self, token: dict[str, Any]) -> Heading:
        attrs = token.get("attrs", {})
        level = attrs.get("level", 1) if isinstance(attrs, dict) else 1
        if not isinstance(level, int) or not 1 <= level <= 6:
            level = 1
        return Heading(level=level, content=self._process_inline_tokens(token.get("children", [])))

    def _process_code_block(self, token: dict[str, Any]) -> CodeBlock:
        """Process a fenced or indented code block token.

        The language is the first word of the info-string; indented blocks
        never have one.
        """
        content = token.get("raw", "")
        fenced = token.get("style") != "indent"
        attrs = token.get("attrs") or {}

        info = attrs.get("info") if fenced else None
        language = None
        if info:
            info = html.unescape(info.strip())
            parts = info.split(maxsplit=1)
            language = parts[0] if parts else None
        else:
            info = None

        return CodeBlock(content=content, language=language, info=info, fenced=fenced)

    def _process_list(self, token: dict[str, Any]) -> List:
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}

        ordered = bool(attrs.get("ordered", False))
        start = attrs.get("start", 1)
        # mistune keeps ``tight`` on the token itself rather than in attrs
        tight = bool(token.get("tight", attrs.get("tight", True)))

        items = [
            self._process_list_item(child)
            for child in token.get("children", [])
            if isinstance(child, dict) and child.get("type") in ("list_item", "task_list_item")
        ]
        return List(ordered=ordered, items=items, start=start if isinstance(start, int) else 1, tight=tight)

    def _process_list_item(self, token: dict[str, Any]) -> ListItem:
        task_status: Literal["checked", "unchecked"] | None = None
        attrs = token.get("attrs") or {}
        if token.get("type") == "task_list_item" or "checked" in attrs:
            task_status = "checked" if attrs.get("checked") else "unchecked"
        return ListItem(children=self._process_tokens(token.get("children", [])), task_status=task_status)

    def _process_table(self, token: dict[str, Any]) -> Table:
        """Process a table token into header and body rows."""
        rows: list[Node] = []
        for section in token.get("children", []):
            section_type = section.get("type", "")
            if section_type == "table_head":
                # Header cells are direct children of table_head
                rows.append(TableRow(cells=self._process_cells(section.get("children", [])), is_header=True))
            elif section_type == "table_body":
                for row_token in section.get("children", []):
                    rows.append(TableRow(cells=self._process_cells(row_token.get("children", []))))
        return Table(rows=rows)

    def _process_cells(self, cell_tokens: list[dict[str, Any]]) -> list[Node]:
        cells: list[Node] = []
        for cell_token in cell_tokens:
            if cell_token.get("type") != "table_cell":
                continue
            alignment = (cell_token.get("attrs") or {}).get("align")
            cells.append(
                TableCell(
                    content=self._process_inline_tokens(cell_token.get("children", [])),
                    alignment=alignment if alignment in ("left", "center", "right") else None,
                )
            )
        return cells

    # ------------------------------------------------------------------
    # Inline tokens
    # ------------------------------------------------------------------

    def _process_inline_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process inline tokens, merging adjacent text runs."""
        nodes: list[Node] = []
        for token in tokens:
            node = self._process_inline_token(token)
            if node is None:
                continue
            if isinstance(node, Text) and nodes and isinstance(nodes[-1], Text):
                nodes[-1].content += node.content
            else:
                nodes.append(node)
        if self.options.parse_emoji:
            # shortcodes may span text runs split at "_" by the tokenizer
            for node in nodes:
                if isinstance(node, Text):
                    node.content = expand_emoji_shortcodes(node.content)
        return nodes

    def _process_inline_token(self, token: dict[str, Any]) -> Node | None:
        token_type = token.get("type", "")

        handler_map: dict[str, Any] = {
            "text": self._handle_text_token,
            "strong": self._handle_strong_token,
            "emphasis": self._handle_emphasis_token,
            "codespan": self._handle_codespan_token,
            "link": self._handle_link_token,
            "image": self._handle_image_token,
            "linebreak": self._handle_linebreak_token,
            "softbreak": self._handle_softbreak_token,
            "strikethrough": self._handle_strikethrough_token,
            "inline_html": self._handle_inline_html_token,
        }

        handler = handler_map.get(token_type)
        if handler:
            return handler(token)
        logger.debug(f"Ignoring unsupported inline token type: {token_type}")
        return None

    def _handle_text_token(self, token: dict[str, Any]) -> Text:
        # mistune leaves entity references in text undecoded
        return Text(content=decode_entities(token.get("raw", "")))

    def _handle_strong_token(self, token: dict[str, Any]) -> Strong:
        return Strong(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_emphasis_token(self, token: dict[str, Any]) -> Emphasis:
        return Emphasis(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_strikethrough_token(self, token: dict[str, Any]) -> Strikethrough:
        return Strikethrough(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_codespan_token(self, token: dict[str, Any]) -> Code:
        return Code(content=token.get("raw", ""))

    def _handle_link_token(self, token: dict[str, Any]) -> Link:
        attrs = token.get("attrs") or {}
        return Link(
            url=self._destination(attrs.get("url", "")),
            content=self._process_inline_tokens(token.get("children", [])),
            title=self._title(attrs.get("title")),
        )

    def _handle_image_token(self, token: dict[str, Any]) -> Image:
        """Handle image token; the alt text is flattened from the children."""
        attrs = token.get("attrs") or {}
        alt_text = self._flatten_raw(token.get("children", []))
        if self.options.parse_emoji:
            alt_text = expand_emoji_shortcodes(alt_text)
        return Image(
            url=self._destination(attrs.get("url", "")),
            alt_text=alt_text,
            title=self._title(attrs.get("title")),
        )

    def _handle_linebreak_token(self, token: dict[str, Any]) -> LineBreak:
        return LineBreak(soft=False)

    def _handle_softbreak_token(self, token: dict[str, Any]) -> LineBreak:
        return LineBreak(soft=True)

    def _handle_inline_html_token(self, token: dict[str, Any]) -> HTMLInline:
        return HTMLInline(content=token.get("raw", ""))

    def _flatten_raw(self, tokens: list[dict[str, Any]]) -> str:
        parts = []
        for token in tokens:
            if not isinstance(token, dict):
                continue
            if token.get("type") == "text":
                parts.append(decode_entities(token.get("raw", "")))
            elif "raw" in token:
                parts.append(token["raw"])
            elif token.get("type") == "softbreak":
                parts.append("\n")
            else:
                parts.append(self._flatten_raw(token.get("children", [])))
        return "".join(parts)

    @staticmethod
    def _destination(url: str) -> str:
        # mistune hands destinations over HTML-escaped; the tree holds them plain
        return html.unescape(url or "")

    @staticmethod
    def _title(title: Optional[str]) -> Optional[str]:
        return html.unescape(title) if title else None


__all__ = ["MarkdownParser", "normalize_line_endings"]
