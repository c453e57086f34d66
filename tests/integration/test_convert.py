#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/integration/test_convert.py
"""End-to-end tests for the public conversion API."""

import io
from pathlib import Path

import pytest

from md2html import (
    ConversionContext,
    HtmlRendererOptions,
    InputReadError,
    MarkdownParserOptions,
    convert,
    convert_file,
    markdown_to_html,
    to_ast,
)
from md2html.ast import CodeBlock, DiagramBlock, find_first


@pytest.mark.integration
class TestConvert:
    """Tests for convert and markdown_to_html."""

    def test_fragment(self):
        """Test the minimal fragment output."""
        assert convert("# Hello\n\nWorld", standalone=False) == '<h1 id="hello">Hello</h1>\n<p>World</p>\n'

    def test_sample_document(self, sample_markdown: str):
        """Test a document touching every block kind."""
        html = convert(sample_markdown, standalone=False)

        for expected in (
            '<h1 id="sample-document">Sample Document</h1>\n',
            '<h2 id="lists">Lists</h2>\n',
            "<strong>sample document</strong>",
            "<em>italic text</em>",
            "<code>inline code</code>",
            "<ul>\n<li>Item 1</li>\n<li>Item 2</li>\n</ul>\n",
            "<ol>\n<li>First item</li>\n<li>Second item</li>\n</ol>\n",
            '<li><input checked="" disabled="" type="checkbox"> done</li>\n',
            '<li><input disabled="" type="checkbox"> todo</li>\n',
            "<blockquote>\n<p>Quoted text</p>\n</blockquote>\n",
            '<pre><code class="language-python">def hello_world():\n',
            '<pre class="mermaid">graph TD\n  A--&gt;B\n</pre>\n',
            '<th style="text-align: left">Left</th>\n',
            '<td style="text-align: right">1</td>\n',
            "<hr>\n",
        ):
            assert expected in html

    def test_standalone_page(self, sample_markdown: str):
        """Test that the page shell carries the extracted title and the mermaid script."""
        html = convert(sample_markdown)

        assert html.startswith("<!DOCTYPE html>\n")
        assert "<title>Sample Document</title>" in html
        assert "mermaid.initialize({ startOnLoad: true });" in html
        assert html.endswith("</body>\n</html>\n")

    def test_context_records_title(self):
        """Test that the caller's context receives the extracted title."""
        context = ConversionContext()
        convert("text\n\n## Found\n", context)
        assert context.title == "Found"

    def test_entity_references_escaped_once(self):
        """Test that entity references render as the characters they name."""
        html = convert("Tom &amp; Jerry &copy; `&amp;`\n", standalone=False)
        assert html == "<p>Tom &amp; Jerry © <code>&amp;amp;</code></p>\n"

    def test_title_is_plain_text(self):
        """Test that the extracted title holds decoded text and is escaped once in the page."""
        context = ConversionContext()
        html = convert("# A `b` ![c](d.png) &amp; e &copy;\n", context)

        assert context.title == "A b c & e ©"
        assert "<title>A b c &amp; e ©</title>" in html

    def test_title_from_formatted_heading(self):
        """Test that inline formatting is flattened into the title."""
        context = ConversionContext()
        html = convert("# Hello *World*\n\nBody\n", context)

        assert context.title == "Hello World"
        assert "<title>Hello World</title>" in html
        assert '<h1 id="hello-world">Hello <em>World</em></h1>' in html

    def test_diagrams_around_code_block(self):
        """Test that only the mermaid blocks are reclassified, in place and in order."""
        markdown = "```mermaid\ngraph TD\n```\n\n```python\nx = 1\n```\n\n```mermaid\nA-->B\n```\n"

        doc = to_ast(markdown)
        assert [type(node) for node in doc.children] == [DiagramBlock, CodeBlock, DiagramBlock]
        assert doc.children[0].lines == ["graph TD\n"]
        assert doc.children[2].lines == ["A-->B\n"]

        html = convert(markdown, standalone=False)
        assert html == (
            '<pre class="mermaid">graph TD\n</pre>\n'
            '<pre><code class="language-python">x = 1\n</code></pre>\n'
            '<pre class="mermaid">A--&gt;B\n</pre>\n'
        )

    def test_options_objects_and_overrides(self):
        """Test that keyword overrides apply on top of options objects."""
        html = convert(
            "# A\n\n~~b~~\n",
            parser_options=MarkdownParserOptions(parse_strikethrough=False),
            renderer_options=HtmlRendererOptions(standalone=True),
            standalone=False,
            auto_heading_id=False,
        )
        assert html == "<h1>A</h1>\n<p>~~b~~</p>\n"

    def test_unknown_keyword(self):
        """Test that unknown options are rejected."""
        with pytest.raises(TypeError, match="colour"):
            convert("x", colour="red")

    def test_markdown_to_html_diagrams_off(self):
        """Test the keyword wrapper with diagrams disabled."""
        html = markdown_to_html("```mermaid\nA\n```\n", diagrams=False, standalone=False)
        assert html == '<pre><code class="language-mermaid">A\n</code></pre>\n'

    def test_markdown_to_html_title(self):
        """Test that a given title beats the first heading."""
        html = markdown_to_html("# Heading\n", title="Given")
        assert "<title>Given</title>" in html

    def test_to_ast(self, sample_markdown: str):
        """Test that to_ast returns the transformed tree."""
        doc = to_ast(sample_markdown)

        assert isinstance(find_first(doc, "diagram_block"), DiagramBlock)
        assert find_first(doc, "code_block").language == "python"
        assert doc.metadata["title"] == "Sample Document"

    def test_to_ast_without_diagrams(self):
        """Test that the diagram stage honours the context toggle."""
        doc = to_ast("```mermaid\nA\n```\n", ConversionContext(diagrams=False))
        assert isinstance(doc.children[0], CodeBlock)


@pytest.mark.integration
class TestConvertFile:
    """Tests for convert_file."""

    def test_embeds_images_relative_to_source(self, temp_dir: Path, png_file: Path):
        """Test that images resolve against the markdown file's directory."""
        source = temp_dir / "doc.md"
        source.write_text("# Pic\n\n![dot](pixel.png)\n", encoding="utf-8")

        html = convert_file(source, context=ConversionContext(embed_images=True), standalone=False)

        assert '<img src="data:image/png;base64,' in html
        assert 'alt="dot"' in html

    def test_missing_image_is_not_fatal(self, temp_dir: Path):
        """Test that a missing image is reported and the conversion completes."""
        source = temp_dir / "doc.md"
        source.write_text("![gone](gone.png)\n", encoding="utf-8")
        context = ConversionContext(embed_images=True)

        html = convert_file(source, context=context, standalone=False)

        assert html == '<p><img src="gone.png" alt="gone"></p>\n'
        assert len(context.diagnostics) == 1

    def test_write_to_path(self, temp_dir: Path):
        """Test writing to an output path."""
        source = temp_dir / "doc.md"
        target = temp_dir / "doc.html"
        source.write_text("hi\n", encoding="utf-8")

        assert convert_file(source, target, standalone=False) is None
        assert target.read_text(encoding="utf-8") == "<p>hi</p>\n"

    def test_streams(self):
        """Test binary input and output streams."""
        output = io.BytesIO()
        convert_file(io.BytesIO("\ufeffcafé\n".encode("utf-8")), output, standalone=False)
        assert output.getvalue().decode("utf-8") == "<p>café</p>\n"

    def test_missing_source(self, temp_dir: Path):
        """Test that a missing input raises InputReadError."""
        with pytest.raises(InputReadError) as exc_info:
            convert_file(temp_dir / "missing.md")
        assert str(exc_info.value).startswith("read ")
