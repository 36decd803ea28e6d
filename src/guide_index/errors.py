"""Exception types raised by the guide index.

Ingest failures derive from :class:`ParseError`; lookups against unknown
guide or section ids raise :class:`NotFoundError`. Both share the
:class:`GuideIndexError` base so callers can catch everything the index
raises in one place.
"""
from __future__ import annotations


class GuideIndexError(Exception):
    """Base class for every error raised by this package."""


class ParseError(GuideIndexError):
    """Guide text could not be turned into a section tree."""


class UnbalancedStructureError(ParseError):
    """Heading depth or code fence structure is inconsistent.

    Attributes:
        line_number: 1-based line where the problem was detected.
        level: Normalized level of the offending heading, if any.
        parent_level: Level of the section the heading would attach to.
    """

    def __init__(
        self,
        message: str,
        line_number: int,
        level: int | None = None,
        parent_level: int | None = None,
    ) -> None:
        super().__init__(f"line {line_number}: {message}")
        self.line_number = line_number
        self.level = level
        self.parent_level = parent_level


class NotFoundError(GuideIndexError, KeyError):
    """Unknown guide id or section id."""

    def __init__(self, guide_id: str, section_id: str | None = None) -> None:
        if section_id is None:
            message = f"Guide '{guide_id}' not found."
        else:
            message = f"Section '{section_id}' not found in guide '{guide_id}'."
        super().__init__(message)
        self.guide_id = guide_id
        self.section_id = section_id

    def __str__(self) -> str:
        return str(self.args[0])
