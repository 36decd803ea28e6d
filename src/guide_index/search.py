from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from rank_bm25 import BM25Okapi

from .schema import CodeSample, Paragraph, Section, SectionMatch, Table


@dataclass(slots=True)
class SectionSearchIndex:
    """BM25 index over one guide's sections with aligned lookup arrays."""

    bm25: BM25Okapi | None
    section_ids: list[str]
    titles: list[str]
    tokens: list[set[str]]


def _tokenize(text: str) -> list[str]:
    return text.lower().split()


def section_text(section: Section) -> str:
    """Flatten a section's own title and blocks into searchable text."""
    parts = [section.title]
    for block in section.blocks:
        if isinstance(block, Paragraph):
            parts.append(block.text)
        elif isinstance(block, CodeSample):
            parts.append(block.text)
        elif isinstance(block, Table):
            parts.append(" ".join(block.headers))
            parts.extend(" ".join(row) for row in block.rows)
    return " ".join(part for part in parts if part)


def build_section_index(root: Section) -> SectionSearchIndex:
    """Create a BM25 index with one corpus entry per section.

    Args:
        root: Root of a parsed guide.

    Returns:
        Search index; ``bm25`` is ``None`` when the guide has no text at all.
    """
    sections = list(root.walk())
    tokenized = [_tokenize(section_text(section)) for section in sections]
    bm25 = BM25Okapi(tokenized) if any(tokenized) else None
    return SectionSearchIndex(
        bm25=bm25,
        section_ids=[section.section_id for section in sections],
        titles=[section.title for section in sections],
        tokens=[set(tokens) for tokens in tokenized],
    )


def search_sections(index: SectionSearchIndex, guide_id: str, query: str, top_k: int = 5) -> list[SectionMatch]:
    """Rank sections against a keyword query.

    Only sections sharing at least one token with the query are returned.

    Args:
        index: Pre-built section index.
        guide_id: Guide id stamped onto each match.
        query: Free-text query.
        top_k: Maximum number of matches.

    Returns:
        Matches sorted by BM25 score, ties kept in document order.
    """
    query_tokens = _tokenize(query)
    if index.bm25 is None or not query_tokens or top_k <= 0:
        return []

    scores = index.bm25.get_scores(query_tokens)
    ranked = np.argsort(-scores, kind="stable")

    wanted = set(query_tokens)
    matches: list[SectionMatch] = []
    for idx in ranked:
        if not wanted & index.tokens[idx]:
            continue
        matches.append(
            SectionMatch(
                guide_id=guide_id,
                section_id=index.section_ids[idx],
                title=index.titles[idx],
                score=float(scores[idx]),
            )
        )
        if len(matches) == top_k:
            break
    return matches
