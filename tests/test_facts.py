"""Tests for facts.py — categorisation and row-to-fact extraction."""
from __future__ import annotations

import pytest

from guide_index.facts import (
    FALLBACK_CATEGORY,
    classify_table,
    extract_facts,
    match_category,
    normalize_symbol,
)
from guide_index.parsing import parse_guide
from guide_index.schema import Table


def _table(first_header: str) -> Table:
    return Table(headers=(first_header, "Description"), rows=(("x", "y"),))


# ---------------------------------------------------------------------------
# match_category / classify_table
# ---------------------------------------------------------------------------

class TestMatchCategory:
    @pytest.mark.parametrize(
        "label, expected",
        [
            ("Operator", "operator"),
            ("Logical Operators", "operator"),
            ("Directive", "directive"),
            ("Preprocessor Directives", "directive"),
            ("Keyword", "keyword"),
            ("Case Statements", "keyword"),
            ("Type", "datatype"),
            ("Data Types", "datatype"),
            ("Description", None),
            ("Loops", None),
        ],
    )
    def test_labels(self, label, expected):
        assert match_category(label) == expected


class TestClassifyTable:
    def test_header_wins_over_section_title(self):
        assert classify_table(_table("Keyword"), ("Guide", "Operators")) == "keyword"

    def test_nearest_ancestor_title_used_when_header_is_ambiguous(self):
        lineage = ("Guide", "Data Types", "Number Literals")
        assert classify_table(_table("Literal"), lineage) == "datatype"

    def test_nearest_title_beats_further_ancestor(self):
        lineage = ("Data Types", "Logical Operators")
        assert classify_table(_table("Symbol"), lineage) == "operator"

    def test_fallback_category(self):
        assert classify_table(_table("Symbol"), ("Guide", "Misc")) == FALLBACK_CATEGORY


# ---------------------------------------------------------------------------
# normalize_symbol
# ---------------------------------------------------------------------------

class TestNormalizeSymbol:
    @pytest.mark.parametrize(
        "cell, expected",
        [
            ("`&&`", "&&"),
            ("  `case`  ", "case"),
            ("``  `define ``", "`define"),
            ("`{ }`", "{ }"),
            ("plain", "plain"),
            ("`define", "`define"),
            ("", ""),
        ],
    )
    def test_cells(self, cell, expected):
        assert normalize_symbol(cell) == expected


# ---------------------------------------------------------------------------
# extract_facts
# ---------------------------------------------------------------------------

class TestExtractFacts:
    def test_one_fact_per_row(self, small_guide):
        facts = extract_facts(parse_guide(small_guide), "g")
        assert [(f.category, f.symbol) for f in facts] == [
            ("operator", "+"),
            ("operator", "-"),
            ("keyword", "if"),
        ]

    def test_fact_fields(self, small_guide):
        fact = extract_facts(parse_guide(small_guide), "g")[0]
        assert fact.guide_id == "g"
        assert fact.description == "Addition"
        assert fact.source_section_id == "operators"
        assert fact.fields == (("Description", "Addition"),)

    def test_description_joins_non_empty_columns(self):
        text = "# Ops\n| Operator | Description | Example |\n|---|---|---|\n| `*` | Multiply | `a * b` |\n| `/` | | |\n"
        facts = extract_facts(parse_guide(text), "g")
        assert facts[0].description == "Multiply; `a * b`"
        assert facts[1].description == ""
        assert facts[1].fields == ()

    def test_rows_with_empty_symbol_are_skipped(self):
        text = "# Ops\n| Operator | Description |\n|---|---|\n|  | orphan |\n| `+` | Add |\n"
        facts = extract_facts(parse_guide(text), "g")
        assert [f.symbol for f in facts] == ["+"]

    def test_code_samples_are_not_fact_sources(self):
        text = "# Operators\n```\n| Operator | Description |\n|---|---|\n| `+` | Add |\n```\n"
        assert extract_facts(parse_guide(text), "g") == []

    def test_document_order_across_nested_sections(self):
        text = (
            "# Guide\n"
            "## Operators\n"
            "| Operator | D |\n|---|---|\n| a | 1 |\n"
            "### Logical Operators\n"
            "| Operator | D |\n|---|---|\n| b | 2 |\n"
            "## Keywords\n"
            "| Keyword | D |\n|---|---|\n| c | 3 |\n"
        )
        facts = extract_facts(parse_guide(text), "g")
        assert [f.symbol for f in facts] == ["a", "b", "c"]
        assert [f.source_section_id for f in facts] == ["operators", "logical-operators", "keywords"]

    def test_table_in_root_uses_header_or_fallback(self):
        facts = extract_facts(parse_guide("| Name | D |\n|---|---|\n| x | y |\n"), "g")
        assert facts[0].category == FALLBACK_CATEGORY
