"""In-memory reference index over structured study guides."""

from .errors import GuideIndexError, NotFoundError, ParseError, UnbalancedStructureError
from .index import DocumentIndex
from .schema import CodeSample, DocumentHandle, Fact, Paragraph, Section, SectionMatch, Table

__all__ = [
    "DocumentIndex",
    "Section",
    "Paragraph",
    "CodeSample",
    "Table",
    "Fact",
    "DocumentHandle",
    "SectionMatch",
    "GuideIndexError",
    "ParseError",
    "UnbalancedStructureError",
    "NotFoundError",
]
