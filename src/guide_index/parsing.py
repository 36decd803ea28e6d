"""Tolerant line-based parser that turns guide text into a section tree.

Recognised structure:

- Heading    : up to three spaces, 1-6 ``#`` characters, whitespace, then the
               title.  Optional closing ``#`` runs are dropped.  ``#include``
               and more deeply indented ``#`` lines are not headings.
- Code fence : three or more backticks or tildes.  The fence closes on a line
               holding the same character at least as many times.  Nothing
               inside a fence is interpreted.
- Table      : a ``|`` line immediately followed by a separator row such as
               ``|---|:---:|``; every following ``|`` line is a body row.
- Paragraph  : any other run of non-blank lines, joined with single spaces.

A heading nests under the nearest open section with a shallower ``#`` depth.
When no open section is shallower it starts a new top-level section (level 1),
whatever its depth.  A nested heading may be at most one ``#`` deeper than its
parent; deeper jumps raise :class:`UnbalancedStructureError`.
"""
from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass, field

from .errors import UnbalancedStructureError
from .schema import CodeSample, ContentBlock, Paragraph, Section, Table

ROOT_SECTION_ID = "root"

_HEADING_RE = re.compile(r"^ {0,3}(#{1,6})[ \t]+(.+?)(?:[ \t]+#+)?[ \t]*$")
_FENCE_OPEN_RE = re.compile(r"^(`{3,}|~{3,})[ \t]*([^`\s]*)")
_FENCE_CLOSE_RE = re.compile(r"^(`{3,}|~{3,})[ \t]*$")
_TABLE_SEPARATOR_RE = re.compile(r"^\|[\s:|-]*-[\s:|-]*$")
_UNESCAPED_PIPE_RE = re.compile(r"(?<!\\)\|")


@dataclass(slots=True)
class _Heading:
    line_number: int
    depth: int
    title: str


@dataclass(slots=True)
class _OpenSection:
    section_id: str
    title: str
    level: int
    parent_id: str | None
    depth: int = 0
    blocks: list[ContentBlock] = field(default_factory=list)
    children: list[_OpenSection] = field(default_factory=list)

    def freeze(self) -> Section:
        return Section(
            section_id=self.section_id,
            title=self.title,
            level=self.level,
            blocks=tuple(self.blocks),
            children=tuple(child.freeze() for child in self.children),
            parent_id=self.parent_id,
        )


def _slugify(text: str, max_len: int = 60) -> str:
    """Turn a heading title into an ASCII identifier."""
    text = unicodedata.normalize("NFKD", text)
    text = text.encode("ascii", "ignore").decode("ascii")
    text = re.sub(r"[^\w\s-]", "", text).strip().lower()
    text = re.sub(r"[\s_]+", "-", text)
    text = re.sub(r"-{2,}", "-", text)
    return text[:max_len].strip("-") or "section"


def _unique_id(title: str, used_ids: set[str]) -> str:
    base = _slugify(title)
    candidate = base
    suffix = 2
    while candidate in used_ids:
        candidate = f"{base}-{suffix}"
        suffix += 1
    used_ids.add(candidate)
    return candidate


def _split_row(line: str) -> list[str]:
    body = line.strip()
    if body.startswith("|"):
        body = body[1:]
    if body.endswith("|") and not body.endswith("\\|"):
        body = body[:-1]
    return [cell.strip().replace("\\|", "|") for cell in _UNESCAPED_PIPE_RE.split(body)]


def _fit_row(cells: list[str], width: int) -> tuple[str, ...]:
    if len(cells) < width:
        cells = cells + [""] * (width - len(cells))
    return tuple(cells[:width])


def _tokenize(guide_text: str) -> list[_Heading | ContentBlock]:
    """Split guide text into headings and content blocks in document order."""
    lines = guide_text.splitlines()
    events: list[_Heading | ContentBlock] = []
    paragraph: list[str] = []

    def _flush_paragraph() -> None:
        if paragraph:
            events.append(Paragraph(text=" ".join(paragraph)))
            paragraph.clear()

    index = 0
    while index < len(lines):
        stripped = lines[index].strip()

        fence = _FENCE_OPEN_RE.match(stripped)
        if fence:
            _flush_paragraph()
            opened_at = index + 1
            marker = fence.group(1)
            body: list[str] = []
            index += 1
            while index < len(lines):
                closing = _FENCE_CLOSE_RE.match(lines[index].strip())
                if closing and closing.group(1)[0] == marker[0] and len(closing.group(1)) >= len(marker):
                    break
                body.append(lines[index])
                index += 1
            else:
                raise UnbalancedStructureError("code fence is never closed", line_number=opened_at)
            events.append(CodeSample(language=fence.group(2), text="\n".join(body)))
            index += 1
            continue

        heading = _HEADING_RE.match(lines[index].rstrip())
        if heading:
            _flush_paragraph()
            events.append(
                _Heading(
                    line_number=index + 1,
                    depth=len(heading.group(1)),
                    title=heading.group(2).strip(),
                )
            )
            index += 1
            continue

        if (
            stripped.startswith("|")
            and index + 1 < len(lines)
            and _TABLE_SEPARATOR_RE.match(lines[index + 1].strip())
        ):
            _flush_paragraph()
            headers = _split_row(stripped)
            rows: list[tuple[str, ...]] = []
            index += 2
            while index < len(lines) and lines[index].strip().startswith("|"):
                rows.append(_fit_row(_split_row(lines[index]), len(headers)))
                index += 1
            events.append(Table(headers=tuple(headers), rows=tuple(rows)))
            continue

        if stripped:
            paragraph.append(stripped)
        else:
            _flush_paragraph()
        index += 1

    _flush_paragraph()
    return events


def parse_guide(guide_text: str) -> Section:
    """Parse guide text into an immutable section tree.

    Args:
        guide_text: Whole guide as heading-delimited text.

    Returns:
        Root section (id ``root``, level 0) owning every top-level section.

    Raises:
        UnbalancedStructureError: If a heading skips a level or a code fence
            is left open.
    """
    root = _OpenSection(section_id=ROOT_SECTION_ID, title="", level=0, parent_id=None)
    stack = [root]
    used_ids = {ROOT_SECTION_ID}

    for event in _tokenize(guide_text):
        if not isinstance(event, _Heading):
            stack[-1].blocks.append(event)
            continue

        # The root accepts a heading of any depth; it sets the baseline for its subtree.
        while len(stack) > 1 and stack[-1].depth >= event.depth:
            stack.pop()
        parent = stack[-1]
        if parent is not root and event.depth > parent.depth + 1:
            level = parent.level + event.depth - parent.depth
            raise UnbalancedStructureError(
                f"heading '{event.title}' opens at level {level} directly under level {parent.level}",
                line_number=event.line_number,
                level=level,
                parent_level=parent.level,
            )
        section = _OpenSection(
            section_id=_unique_id(event.title, used_ids),
            title=event.title,
            level=parent.level + 1,
            parent_id=parent.section_id,
            depth=event.depth,
        )
        parent.children.append(section)
        stack.append(section)

    return root.freeze()
