#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_pipeline.py
"""Unit tests for the stage pipeline."""

import logging

import pytest
from utils import document, fenced, paragraph

from md2html.ast import CodeBlock, DiagramBlock
from md2html.context import ConversionContext
from md2html.exceptions import TransformError
from md2html.parsers import MarkdownParser
from md2html.transforms import BaseTransform, TransformPipeline, default_pipeline


class RecordingTransform(BaseTransform):
    """Stage appending its name to a shared list."""

    def __init__(self, name, log):
        self.name = name
        self.log = log

    def transform(self, document, context):
        self.log.append(self.name)


class FailingTransform(BaseTransform):
    """Stage raising an unexpected error."""

    name = "failing"

    def transform(self, document, context):
        raise RuntimeError("broken stage")


@pytest.mark.unit
class TestTransformPipeline:
    """Tests for TransformPipeline ordering and execution."""

    def test_runs_in_priority_order(self):
        """Test that stages run by ascending priority regardless of registration order."""
        log = []
        pipeline = TransformPipeline()
        pipeline.add(RecordingTransform("late", log), priority=900)
        pipeline.add(RecordingTransform("early", log), priority=100)
        pipeline.add(RecordingTransform("middle", log), priority=500)

        pipeline.run(document(), ConversionContext())

        assert log == ["early", "middle", "late"]

    def test_ties_keep_registration_order(self):
        """Test that equal priorities run in the order they were added."""
        log = []
        pipeline = TransformPipeline()
        for name in ("a", "b", "c"):
            pipeline.add(RecordingTransform(name, log), priority=10)
        pipeline.run(document(), ConversionContext())
        assert log == ["a", "b", "c"]

    def test_duplicate_name_overwrites(self, caplog: pytest.LogCaptureFixture):
        """Test that re-registering a name replaces the stage with a warning."""
        log = []
        pipeline = TransformPipeline()
        pipeline.add(RecordingTransform("x", log), priority=1)
        with caplog.at_level(logging.WARNING, logger="md2html"):
            pipeline.add(RecordingTransform("x", log), priority=2)

        assert len(pipeline) == 1
        assert pipeline.stages[0].priority == 2
        assert "already registered" in caplog.text

    def test_remove(self):
        """Test removing stages by name."""
        pipeline = default_pipeline()
        pipeline.remove("extract-title")
        assert pipeline.names() == ["embed-images", "reclassify-diagrams"]
        with pytest.raises(KeyError):
            pipeline.remove("extract-title")

    def test_unexpected_error_wrapped(self):
        """Test that stage failures surface as TransformError."""
        pipeline = TransformPipeline()
        pipeline.add(FailingTransform())

        with pytest.raises(TransformError) as exc_info:
            pipeline.run(document(), ConversionContext())

        assert exc_info.value.transform_name == "failing"
        assert isinstance(exc_info.value.original_error, RuntimeError)

    def test_default_order(self):
        """Test the built-in stage order and priorities."""
        stages = default_pipeline().stages
        assert [(s.name, s.priority) for s in stages] == [
            ("embed-images", 900),
            ("extract-title", 910),
            ("reclassify-diagrams", 920),
        ]


@pytest.mark.unit
class TestParserStages:
    """Tests for stages registered on the parser."""

    def test_custom_stage_runs_before_builtins(self):
        """Test that a low-priority stage sees the tree before reclassification."""
        seen = []

        class Inspect(BaseTransform):
            name = "inspect"

            def transform(self, document, context):
                seen.append(type(document.children[0]))

        parser = MarkdownParser()
        parser.add_transform(Inspect(), priority=100)
        doc = parser.parse("```mermaid\nA\n```\n", ConversionContext())

        assert seen == [CodeBlock]
        assert isinstance(doc.children[0], DiagramBlock)

    def test_empty_pipeline_runs_nothing(self):
        """Test that an explicit empty pipeline disables every stage."""
        doc = MarkdownParser(pipeline=TransformPipeline()).parse("```mermaid\nA\n```\n")
        assert isinstance(doc.children[0], CodeBlock)

    def test_run_returns_document(self):
        """Test that run hands back the same document."""
        doc = document(paragraph("x"), fenced("A\n", "mermaid"))
        assert default_pipeline().run(doc, ConversionContext()) is doc
