"""Tests for schema dataclasses."""
from __future__ import annotations

import dataclasses

import pytest

from guide_index.schema import CodeSample, DocumentHandle, Fact, Paragraph, Section, SectionMatch, Table


class TestContentBlocks:
    def test_kinds(self):
        assert Paragraph(text="p").kind == "paragraph"
        assert CodeSample(language="c", text="int x;").kind == "code"
        assert Table(headers=("A",), rows=()).kind == "table"

    def test_blocks_are_immutable(self):
        block = Paragraph(text="p")
        with pytest.raises(dataclasses.FrozenInstanceError):
            block.text = "changed"  # type: ignore[misc]

    def test_equality_by_value(self):
        assert Table(headers=("A",), rows=(("1",),)) == Table(headers=("A",), rows=(("1",),))


class TestSection:
    def _tree(self) -> Section:
        leaf = Section(section_id="c", title="C", level=2, parent_id="a")
        a = Section(section_id="a", title="A", level=1, children=(leaf,), parent_id="root")
        b = Section(section_id="b", title="B", level=1, parent_id="root")
        return Section(section_id="root", title="", level=0, children=(a, b))

    def test_walk_is_pre_order(self):
        assert [s.section_id for s in self._tree().walk()] == ["root", "a", "c", "b"]

    def test_defaults(self):
        section = Section(section_id="s", title="S", level=1)
        assert section.blocks == ()
        assert section.children == ()
        assert section.parent_id is None

    def test_slots_prevent_arbitrary_attributes(self):
        section = Section(section_id="s", title="S", level=1)
        with pytest.raises((AttributeError, TypeError)):
            section.unexpected_field = "oops"  # type: ignore[attr-defined]


class TestFact:
    def test_instantiation(self, sample_facts):
        fact = sample_facts[0]
        assert fact.guide_id == "c"
        assert fact.category == "operator"
        assert fact.symbol == "&&"
        assert fact.source_section_id == "logical-operators"

    def test_fields_default_empty(self):
        fact = Fact(guide_id="g", category="term", symbol="x", description="", source_section_id="root")
        assert fact.fields == ()


class TestHandlesAndMatches:
    def test_document_handle(self):
        handle = DocumentHandle(guide_id="c", title="T", section_count=3, fact_count=2, code_sample_count=1)
        assert handle.section_count == 3

    def test_section_match(self):
        match = SectionMatch(guide_id="c", section_id="loops", title="Loops", score=1.5)
        assert match.score == 1.5
