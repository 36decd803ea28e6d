"""Shared pytest fixtures for guide_index unit tests."""
from __future__ import annotations

import pytest

from guide_index.index import DocumentIndex
from guide_index.samples import C_GUIDE_TEXT, VERILOG_GUIDE_TEXT
from guide_index.schema import Fact


@pytest.fixture()
def index() -> DocumentIndex:
    return DocumentIndex()


@pytest.fixture()
def loaded_index() -> DocumentIndex:
    """Index holding both sample guides, C first."""
    index = DocumentIndex()
    index.ingest(C_GUIDE_TEXT, "c")
    index.ingest(VERILOG_GUIDE_TEXT, "verilog")
    return index


@pytest.fixture()
def small_guide() -> str:
    return (
        "# Guide\n"
        "Intro text.\n"
        "\n"
        "## Operators\n"
        "| Operator | Description |\n"
        "|---|---|\n"
        "| `+` | Addition |\n"
        "| `-` | Subtraction |\n"
        "\n"
        "## Keywords\n"
        "| Keyword | Meaning |\n"
        "|---|---|\n"
        "| `if` | Conditional branch |\n"
    )


@pytest.fixture()
def sample_facts() -> list[Fact]:
    return [
        Fact(
            guide_id="c",
            category="operator",
            symbol="&&",
            description="Logical AND",
            source_section_id="logical-operators",
            fields=(("Description", "Logical AND"),),
        ),
        Fact(
            guide_id="verilog",
            category="keyword",
            symbol="case",
            description="Multi-way branch; no fall-through",
            source_section_id="case-statements",
            fields=(("Behaviour", "Multi-way branch"), ("Notes", "no fall-through")),
        ),
    ]
