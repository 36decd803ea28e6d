from __future__ import annotations

import re

from .schema import Fact, Section, Table

FALLBACK_CATEGORY = "term"

# Checked in order; the first pattern that matches names the category.
CATEGORY_PATTERNS: list[tuple[str, re.Pattern[str]]] = [
    ("operator", re.compile(r"\boperators?\b", re.IGNORECASE)),
    ("directive", re.compile(r"\b(directives?|preprocessor|macros?)\b", re.IGNORECASE)),
    ("keyword", re.compile(r"\b(keywords?|statements?)\b", re.IGNORECASE)),
    ("datatype", re.compile(r"\b(data\s*types?|datatypes?|types?)\b", re.IGNORECASE)),
]

_CODE_SPAN_RE = re.compile(r"^(`+)\s?(.*?)\s?\1$")


def match_category(label: str) -> str | None:
    """Return the fact category named by a table header or section title."""
    for category, pattern in CATEGORY_PATTERNS:
        if pattern.search(label):
            return category
    return None


def classify_table(table: Table, lineage: tuple[str, ...]) -> str:
    """Pick the category for every row of a table.

    Args:
        table: Table whose first column holds the symbols.
        lineage: Section titles from the root down to the owning section.

    Returns:
        Category named by the first header, else by the nearest titled
        ancestor, else the fallback category.
    """
    if table.headers:
        category = match_category(table.headers[0])
        if category:
            return category
    for title in reversed(lineage):
        category = match_category(title)
        if category:
            return category
    return FALLBACK_CATEGORY


def normalize_symbol(cell: str) -> str:
    """Strip whitespace and one enclosing code span from a symbol cell."""
    cell = cell.strip()
    code_span = _CODE_SPAN_RE.match(cell)
    if code_span and code_span.group(2).strip():
        return code_span.group(2).strip()
    return cell


def _table_facts(table: Table, guide_id: str, section_id: str, lineage: tuple[str, ...]) -> list[Fact]:
    category = classify_table(table, lineage)
    facts: list[Fact] = []
    for row in table.rows:
        if not row:
            continue
        symbol = normalize_symbol(row[0])
        if not symbol:
            continue
        fields = tuple((header, cell) for header, cell in zip(table.headers[1:], row[1:]) if cell)
        facts.append(
            Fact(
                guide_id=guide_id,
                category=category,
                symbol=symbol,
                description="; ".join(cell for _, cell in fields),
                source_section_id=section_id,
                fields=fields,
            )
        )
    return facts


def extract_facts(root: Section, guide_id: str) -> list[Fact]:
    """Scan every table in a section tree and return facts in document order.

    Code samples and paragraphs are not fact sources.

    Args:
        root: Root of a parsed guide.
        guide_id: Guide id stamped onto each fact.

    Returns:
        Facts ordered by the position of their source row in the guide.
    """
    facts: list[Fact] = []

    def _visit(section: Section, ancestry: tuple[str, ...]) -> None:
        lineage = (*ancestry, section.title) if section.title else ancestry
        for block in section.blocks:
            if isinstance(block, Table):
                facts.extend(_table_facts(block, guide_id, section.section_id, lineage))
        for child in section.children:
            _visit(child, lineage)

    _visit(root, ())
    return facts
