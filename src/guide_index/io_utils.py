from __future__ import annotations

from dataclasses import asdict
import json
import logging
from pathlib import Path

from .index import DocumentIndex
from .schema import DocumentHandle, Fact

logger = logging.getLogger(__name__)


def _load_jsonl(path: str | Path) -> list[dict]:
    records: list[dict] = []
    with Path(path).open("r", encoding="utf-8") as file_handle:
        for line in file_handle:
            if line.strip():
                records.append(json.loads(line))
    return records


def load_guide_text(path: str | Path) -> str:
    return Path(path).read_text(encoding="utf-8")


def ingest_path(index: DocumentIndex, path: str | Path, guide_id: str | None = None) -> DocumentHandle:
    """Read one guide file and ingest it; the guide id defaults to the file stem."""
    source = Path(path)
    return index.ingest(load_guide_text(source), guide_id or source.stem)


def ingest_directory(index: DocumentIndex, directory: str | Path, suffix: str = ".md") -> list[DocumentHandle]:
    """Ingest every guide file in a directory in sorted file-name order.

    Args:
        index: Index receiving the guides.
        directory: Folder containing guide files.
        suffix: File suffix selecting guide files.

    Returns:
        One handle per ingested file.
    """
    paths = sorted(path for path in Path(directory).iterdir() if path.is_file() and path.suffix == suffix)
    logger.debug("Found %d guide files in %s", len(paths), directory)
    return [ingest_path(index, path) for path in paths]


def save_facts(facts: list[Fact], path: str | Path) -> None:
    destination = Path(path)
    destination.parent.mkdir(parents=True, exist_ok=True)

    with destination.open("w", encoding="utf-8") as file_handle:
        for fact in facts:
            file_handle.write(json.dumps(asdict(fact)) + "\n")


def load_facts(path: str | Path) -> list[Fact]:
    facts: list[Fact] = []
    for record in _load_jsonl(path):
        record["fields"] = tuple(tuple(pair) for pair in record.get("fields", ()))
        facts.append(Fact(**record))
    return facts
