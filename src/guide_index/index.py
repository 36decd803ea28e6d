"""In-memory registry of parsed guides and the queries that run against it.

Each ingest builds a complete :class:`GuideSnapshot` (section tree, section
lookup, fact table and keyword index) before publishing it.  Publishing swaps
a single reference to a new read-only mapping, so readers never lock and
always see either the whole old guide or the whole new one.

Usage
-----
index = DocumentIndex()
index.ingest(C_GUIDE_TEXT, "c")
index.ingest(VERILOG_GUIDE_TEXT, "verilog")

index.find_facts("c", "operator", "&&")
index.cross_reference("case")
"""
from __future__ import annotations

import fnmatch
import logging
import threading
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .errors import NotFoundError
from .facts import extract_facts
from .parsing import ROOT_SECTION_ID, parse_guide
from .schema import CodeSample, DocumentHandle, Fact, Section, SectionMatch
from .search import SectionSearchIndex, build_section_index, search_sections

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GuideSnapshot:
    """Everything derived from one ingest of one guide."""

    handle: DocumentHandle
    root: Section
    sections: Mapping[str, Section]
    facts: tuple[Fact, ...]
    search_index: SectionSearchIndex


def build_snapshot(guide_text: str, guide_id: str) -> GuideSnapshot:
    """Parse guide text and derive every lookup table for it.

    Args:
        guide_text: Whole guide text.
        guide_id: Id stamped onto the handle and every fact.

    Returns:
        A complete, immutable snapshot ready to publish.

    Raises:
        UnbalancedStructureError: If the guide's structure is inconsistent.
    """
    root = parse_guide(guide_text)
    sections = {section.section_id: section for section in root.walk()}
    facts = tuple(extract_facts(root, guide_id))
    code_sample_count = sum(
        1 for section in sections.values() for block in section.blocks if isinstance(block, CodeSample)
    )
    handle = DocumentHandle(
        guide_id=guide_id,
        title=root.children[0].title if root.children else "",
        section_count=len(sections) - 1,
        fact_count=len(facts),
        code_sample_count=code_sample_count,
    )
    return GuideSnapshot(
        handle=handle,
        root=root,
        sections=MappingProxyType(sections),
        facts=facts,
        search_index=build_section_index(root),
    )


class DocumentIndex:
    """Registry of ingested guides keyed by guide id."""

    def __init__(self) -> None:
        self._guides: Mapping[str, GuideSnapshot] = MappingProxyType({})
        self._write_lock = threading.Lock()

    # ------------------------------------------------------------------
    # Ingestion
    # ------------------------------------------------------------------

    def ingest(self, guide_text: str, guide_id: str) -> DocumentHandle:
        """Parse a guide and publish it, replacing any guide with the same id.

        Args:
            guide_text: Whole guide text.
            guide_id: Registry key for the guide.

        Returns:
            Handle summarising the published guide.

        Raises:
            ValueError: If ``guide_id`` is empty.
            UnbalancedStructureError: If the guide's structure is inconsistent.
                The previously published guide, if any, stays in place.
        """
        if not guide_id:
            raise ValueError("guide_id must be a non-empty string")

        snapshot = build_snapshot(guide_text, guide_id)
        with self._write_lock:
            replaced = guide_id in self._guides
            updated = dict(self._guides)
            updated[guide_id] = snapshot
            self._guides = MappingProxyType(updated)

        logger.info(
            "%s guide %r: %d sections, %d facts",
            "Replaced" if replaced else "Ingested",
            guide_id,
            snapshot.handle.section_count,
            snapshot.handle.fact_count,
        )
        return snapshot.handle

    def remove(self, guide_id: str) -> None:
        """Drop a guide from the registry.

        Raises:
            NotFoundError: If ``guide_id`` is not registered.
        """
        with self._write_lock:
            if guide_id not in self._guides:
                raise NotFoundError(guide_id)
            updated = dict(self._guides)
            del updated[guide_id]
            self._guides = MappingProxyType(updated)
        logger.info("Removed guide %r", guide_id)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def _snapshot(self, guide_id: str) -> GuideSnapshot:
        snapshot = self._guides.get(guide_id)
        if snapshot is None:
            raise NotFoundError(guide_id)
        return snapshot

    def guide_ids(self) -> list[str]:
        """Return registered guide ids in first-ingest order."""
        return list(self._guides)

    def handle(self, guide_id: str) -> DocumentHandle:
        """Return the summary recorded when a guide was last ingested.

        Raises:
            NotFoundError: If ``guide_id`` is not registered.
        """
        return self._snapshot(guide_id).handle

    def get_section(self, guide_id: str, section_id: str) -> Section:
        """Return one section of a guide.

        Raises:
            NotFoundError: If the guide or the section does not exist.
        """
        section = self._snapshot(guide_id).sections.get(section_id)
        if section is None:
            raise NotFoundError(guide_id, section_id)
        return section

    def breadcrumbs(self, guide_id: str, section_id: str) -> list[Section]:
        """Return the path from the top-level ancestor down to a section.

        The root section is never part of the path.

        Raises:
            NotFoundError: If the guide or the section does not exist.
        """
        snapshot = self._snapshot(guide_id)
        if section_id not in snapshot.sections:
            raise NotFoundError(guide_id, section_id)

        path: list[Section] = []
        current: str | None = section_id
        while current is not None and current != ROOT_SECTION_ID:
            section = snapshot.sections[current]
            path.append(section)
            current = section.parent_id
        path.reverse()
        return path

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_facts(self, guide_id: str, category: str, symbol_pattern: str) -> list[Fact]:
        """Return facts of one category whose symbol matches a pattern.

        A fact matches when its symbol equals the pattern or matches it as a
        case-sensitive glob, so ``&&`` finds one operator and ``*`` lists every
        operator in the category.

        Args:
            guide_id: Guide to search.
            category: Fact category, e.g. ``operator`` or ``keyword``.
            symbol_pattern: Exact symbol or glob pattern.

        Returns:
            Matching facts in document order; empty when nothing matches.

        Raises:
            NotFoundError: If ``guide_id`` is not registered.
        """
        candidates = [fact for fact in self._snapshot(guide_id).facts if fact.category == category]
        return [
            fact
            for fact in candidates
            if fact.symbol == symbol_pattern or fnmatch.fnmatchcase(fact.symbol, symbol_pattern)
        ]

    def cross_reference(self, symbol: str) -> list[Fact]:
        """Return every fact with exactly this symbol across all guides.

        Guides are visited in first-ingest order and facts within a guide in
        document order, so overlapping vocabulary (``&&``, ``case``) shows up
        once per guide and category that defines it.
        """
        guides = self._guides
        return [fact for snapshot in guides.values() for fact in snapshot.facts if fact.symbol == symbol]

    def code_samples(self, guide_id: str, language: str | None = None) -> list[tuple[str, CodeSample]]:
        """Return ``(section_id, sample)`` pairs in document order.

        Args:
            guide_id: Guide to scan.
            language: Optional fence language tag, compared case-insensitively.

        Raises:
            NotFoundError: If ``guide_id`` is not registered.
        """
        wanted = language.casefold() if language is not None else None
        samples: list[tuple[str, CodeSample]] = []
        for section in self._snapshot(guide_id).root.walk():
            for block in section.blocks:
                if not isinstance(block, CodeSample):
                    continue
                if wanted is not None and block.language.casefold() != wanted:
                    continue
                samples.append((section.section_id, block))
        return samples

    def search(self, guide_id: str, query: str, top_k: int = 5) -> list[SectionMatch]:
        """Rank a guide's sections against a keyword query with BM25.

        Raises:
            NotFoundError: If ``guide_id`` is not registered.
        """
        snapshot = self._snapshot(guide_id)
        return search_sections(snapshot.search_index, guide_id, query, top_k=top_k)
