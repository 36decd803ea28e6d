from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Paragraph:
    """Run of prose lines joined into a single string."""

    text: str

    @property
    def kind(self) -> str:
        return "paragraph"


@dataclass(frozen=True, slots=True)
class CodeSample:
    """Fenced code sample kept verbatim for display."""

    language: str
    text: str

    @property
    def kind(self) -> str:
        return "code"


@dataclass(frozen=True, slots=True)
class Table:
    """Pipe table with a header row and zero or more body rows."""

    headers: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]

    @property
    def kind(self) -> str:
        return "table"


ContentBlock = Paragraph | CodeSample | Table


@dataclass(frozen=True, slots=True)
class Section:
    """Heading-delimited region of a guide with its nested child sections."""

    section_id: str
    title: str
    level: int
    blocks: tuple[ContentBlock, ...] = ()
    children: tuple[Section, ...] = ()
    parent_id: str | None = None

    def walk(self) -> Iterator[Section]:
        """Yield this section and every descendant in document order."""
        yield self
        for child in self.children:
            yield from child.walk()


@dataclass(frozen=True, slots=True)
class Fact:
    """Normalized table row extracted from a guide section."""

    guide_id: str
    category: str
    symbol: str
    description: str
    source_section_id: str
    fields: tuple[tuple[str, str], ...] = ()


@dataclass(frozen=True, slots=True)
class DocumentHandle:
    """Summary of a successfully ingested guide."""

    guide_id: str
    title: str
    section_count: int
    fact_count: int
    code_sample_count: int


@dataclass(frozen=True, slots=True)
class SectionMatch:
    """Keyword search hit pointing at one section of a guide."""

    guide_id: str
    section_id: str
    title: str
    score: float
