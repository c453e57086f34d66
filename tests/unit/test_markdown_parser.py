#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_markdown_parser.py
"""Unit tests for the markdown to document tree parser.

Tests cover:
- Block structure (headings, code blocks, lists, tables, quotes)
- Inline structure (emphasis, links, images, breaks, emoji shortcodes)
- Heading identifiers and attribute blocks
- Parser options and line-ending normalization

"""

import pytest

from md2html.ast import (
    BlockQuote,
    Code,
    CodeBlock,
    DiagramBlock,
    Emphasis,
    Heading,
    Image,
    LineBreak,
    Link,
    List,
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    Text,
    ThematicBreak,
)
from md2html.exceptions import InvalidOptionsError
from md2html.options import HtmlRendererOptions, MarkdownParserOptions
from md2html.parsers import MarkdownParser, normalize_line_endings
from md2html.transforms import TransformPipeline


def build(markdown: str, **options):
    """Parse without running any stage."""
    parser = MarkdownParser(MarkdownParserOptions(**options), pipeline=TransformPipeline())
    return parser.parse(markdown)


@pytest.mark.unit
class TestBlocks:
    """Tests for block-level structure."""

    def test_heading_and_paragraph(self):
        """Test a heading followed by a paragraph."""
        doc = build("# Hello\n\nWorld\n")
        heading, para = doc.children
        assert isinstance(heading, Heading)
        assert heading.level == 1
        assert heading.content == [Text(content="Hello")]
        assert isinstance(para, Paragraph)
        assert para.content == [Text(content="World")]

    def test_fenced_code_block(self):
        """Test that fenced blocks keep their info-string and content."""
        doc = build("```python title=x\nprint(1)\n```\n")
        block = doc.children[0]
        assert isinstance(block, CodeBlock)
        assert block.fenced
        assert block.language == "python"
        assert block.info == "python title=x"
        assert block.content == "print(1)\n"

    def test_indented_code_block(self):
        """Test that indented blocks are not fenced and have no language."""
        doc = build("Text\n\n    code line\n")
        block = doc.children[1]
        assert isinstance(block, CodeBlock)
        assert not block.fenced
        assert block.language is None
        assert block.content.rstrip("\n") == "code line"

    def test_mermaid_block_is_still_code_before_stages(self):
        """Test that the parser itself never produces diagram blocks."""
        doc = build("```mermaid\ngraph TD\n```\n")
        assert isinstance(doc.children[0], CodeBlock)
        assert not isinstance(doc.children[0], DiagramBlock)

    def test_tight_and_loose_lists(self):
        """Test list tightness."""
        tight = build("- a\n- b\n").children[0]
        loose = build("- a\n\n- b\n").children[0]
        assert isinstance(tight, List) and tight.tight
        assert isinstance(loose, List) and not loose.tight
        assert len(tight.items) == 2

    def test_ordered_list_start(self):
        """Test ordered list start numbers."""
        lst = build("3. three\n4. four\n").children[0]
        assert lst.ordered
        assert lst.start == 3

    def test_task_list_items(self):
        """Test task list checkbox states."""
        lst = build("- [x] done\n- [ ] todo\n- plain\n").children[0]
        statuses = [item.task_status for item in lst.items]
        assert statuses == ["checked", "unchecked", None]

    def test_table(self):
        """Test table header, body rows, and alignment."""
        table = build("| a | b |\n|:--|--:|\n| 1 | 2 |\n").children[0]
        assert isinstance(table, Table)
        header, row = table.rows
        assert header.is_header
        assert not row.is_header
        assert [cell.alignment for cell in header.cells] == ["left", "right"]
        assert row.cells[1].content == [Text(content="2")]

    def test_block_quote_and_rule(self):
        """Test block quotes and thematic breaks."""
        doc = build("> quoted\n\n---\n")
        assert isinstance(doc.children[0], BlockQuote)
        assert isinstance(doc.children[0].children[0], Paragraph)
        assert isinstance(doc.children[1], ThematicBreak)

    def test_source_is_normalized(self):
        """Test that the document keeps the normalized source."""
        doc = build("# A\r\n\r\nB\r")
        assert doc.source == "# A\n\nB\n"


@pytest.mark.unit
class TestInlines:
    """Tests for inline structure."""

    def test_formatting(self):
        """Test emphasis, strong, strikethrough and code spans."""
        para = build("*a* **b** ~~c~~ `d`\n").children[0]
        kinds = [type(node) for node in para.content if not isinstance(node, Text)]
        assert kinds == [Emphasis, Strong, Strikethrough, Code]

    def test_strikethrough_disabled(self):
        """Test that strikethrough can be turned off."""
        para = build("~~c~~\n", parse_strikethrough=False).children[0]
        assert not any(isinstance(node, Strikethrough) for node in para.content)

    def test_link(self):
        """Test link destination, title and content."""
        link = build('[text](https://example.com "Title")\n').children[0].content[0]
        assert isinstance(link, Link)
        assert link.url == "https://example.com"
        assert link.title == "Title"
        assert link.content == [Text(content="text")]

    def test_image_alt_text_from_children(self):
        """Test that image alt text is flattened from the description."""
        image = build("![a *b* c](img/pic.png)\n").children[0].content[0]
        assert isinstance(image, Image)
        assert image.alt_text == "a b c"
        assert image.title is None

    def test_breaks(self):
        """Test soft and hard line breaks."""
        para = build("one\ntwo  \nthree\n").children[0]
        breaks = [node for node in para.content if isinstance(node, LineBreak)]
        assert [b.soft for b in breaks] == [True, False]

    def test_entity_references_decoded_in_text(self):
        """Test that text holds characters, not entity references."""
        para = build("Tom &amp; Jerry &copy; &#65; &nosuch;\n").children[0]
        assert para.content == [Text(content="Tom & Jerry © A &nosuch;")]

    def test_entity_references_kept_in_code(self):
        """Test that code spans and code blocks keep references verbatim."""
        doc = build("`&amp;`\n\n```\n&copy;\n```\n")
        assert doc.children[0].content == [Code(content="&amp;")]
        assert doc.children[1].content == "&copy;\n"

    def test_image_alt_text_decoded(self):
        """Test that entity references in alt text are decoded."""
        image = build("![A &amp; B](x.png)\n").children[0].content[0]
        assert image.alt_text == "A & B"

    def test_emoji_shortcodes_expanded(self):
        """Test that known shortcodes become emoji and unknown ones stay."""
        para = build(":smile: and :+1: :nosuch:\n").children[0]
        assert para.content == [Text(content="\U0001f604 and \U0001f44d :nosuch:")]

    def test_emoji_shortcode_with_underscore(self):
        """Test a shortcode whose name contains an underscore."""
        para = build("so :heart_eyes: here\n").children[0]
        assert para.content == [Text(content="so \U0001f60d here")]

    def test_emoji_inside_emphasis_and_alt_text(self):
        """Test expansion in nested inlines and image descriptions."""
        para = build("*:tada:* ![:rocket:](r.png)\n").children[0]
        assert para.content[0] == Emphasis(content=[Text(content="\U0001f389")])
        assert para.content[-1].alt_text == "\U0001f680"

    def test_emoji_not_expanded_in_code(self):
        """Test that code spans and code blocks keep shortcodes literally."""
        doc = build("`:smile:`\n\n```\n:smile:\n```\n")
        assert doc.children[0].content == [Code(content=":smile:")]
        assert doc.children[1].content == ":smile:\n"

    def test_emoji_disabled(self):
        """Test that shortcodes are left alone when the option is off."""
        para = build(":smile: :+1:\n", parse_emoji=False).children[0]
        assert para.content == [Text(content=":smile: :+1:")]

    def test_adjacent_text_is_merged(self):
        """Test that adjacent text runs collapse into one node."""
        para = build("plain words here\n").children[0]
        assert para.content == [Text(content="plain words here")]


@pytest.mark.unit
class TestHeadingIds:
    """Tests for heading identifiers and attribute blocks."""

    def test_auto_ids_with_duplicates(self):
        """Test generated ids and numeric suffixes for duplicates."""
        doc = build("# Intro\n\n## Intro\n\n## Intro\n")
        assert [h.attributes["id"] for h in doc.children] == ["intro", "intro-1", "intro-2"]

    def test_auto_id_from_decoded_text(self):
        """Test that ids are built from decoded heading text."""
        heading = build("# Q &amp; A\n").children[0]
        assert heading.attributes["id"] == "q--a"

    def test_auto_id_drops_punctuation(self):
        """Test that punctuation is dropped from generated ids."""
        doc = build("# API Reference (v2.0)\n")
        assert doc.children[0].attributes["id"] == "api-reference-v20"

    def test_attribute_block(self):
        """Test explicit id, classes and key/value pairs."""
        heading = build("## Title {#custom .lead .wide data-x=1}\n").children[0]
        assert heading.attributes == {"id": "custom", "class": "lead wide", "data-x": "1"}
        assert heading.content == [Text(content="Title")]

    def test_explicit_id_reserved(self):
        """Test that generated ids never collide with explicit ones."""
        doc = build("# Other {#intro}\n\n# Intro\n")
        assert doc.children[1].attributes["id"] == "intro-1"

    def test_ids_disabled(self):
        """Test that auto ids can be switched off."""
        heading = build("# Hello\n", auto_heading_id=False).children[0]
        assert "id" not in heading.attributes

    def test_attribute_block_disabled(self):
        """Test that attribute syntax is left as text when disabled."""
        heading = build("# Hello {#x}\n", heading_attributes=False, auto_heading_id=False).children[0]
        assert heading.attributes == {}
        assert "{#x}" in heading.content[0].content


@pytest.mark.unit
class TestParserSetup:
    """Tests for parser construction and stage registration."""

    def test_wrong_options_type(self):
        """Test that renderer options are rejected."""
        with pytest.raises(InvalidOptionsError):
            MarkdownParser(HtmlRendererOptions())  # type: ignore[arg-type]

    def test_default_pipeline_installed(self):
        """Test that the built-in stages are installed by default."""
        assert MarkdownParser().pipeline.names() == ["embed-images", "extract-title", "reclassify-diagrams"]

    def test_normalize_line_endings(self):
        """Test CRLF and CR normalization."""
        assert normalize_line_endings("a\r\nb\rc\n") == "a\nb\nc\n"
