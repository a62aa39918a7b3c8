"""Loading and ordering project records from the gallery document."""

import json
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from .models import ProjectRecord
from .utils import DataLoadError, parse_date

ERROR_MESSAGE = "Error loading data."
EMPTY_MESSAGE = "No projects found."


class LoadResult(BaseModel):
    """Sorted records, or the terminal message shown instead of a gallery."""
    records: list[ProjectRecord] = Field(default_factory=list)
    message: str | None = None

    @property
    def ok(self) -> bool:
        return self.message is None


def read_document(path: Path) -> dict[str, Any]:
    """Read the year-keyed JSON document."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DataLoadError(f"{path}: {e}") from e
    if not isinstance(data, dict):
        raise DataLoadError(f"{path}: expected an object keyed by year, got {type(data).__name__}")
    return data


def flatten_document(document: dict[str, Any]) -> list[ProjectRecord]:
    """Flatten {year: [record, ...]} into records tagged with their year."""
    records = []
    for year, entries in document.items():
        if not isinstance(entries, list):
            continue
        for entry in entries:
            if not isinstance(entry, dict):
                continue
            records.append(ProjectRecord.model_validate({**entry, "Year": str(year)}))
    return records


def sort_records(records: list[ProjectRecord]) -> list[ProjectRecord]:
    """Sort newest first; undated records follow in their original order."""

    def key(record: ProjectRecord) -> tuple[int, int]:
        parsed = parse_date(record.date)
        if parsed is None:
            return (1, 0)
        return (0, -parsed.toordinal())

    return sorted(records, key=key)


def load_records(path: Path, log: Callable[[str], None] = print) -> LoadResult:
    """Load, flatten and sort records, falling back to a display message on failure."""
    try:
        document = read_document(path)
    except DataLoadError as e:
        print(f"Error loading data: {e}", file=sys.stderr)
        return LoadResult(message=ERROR_MESSAGE)

    records = sort_records(flatten_document(document))
    if not records:
        log(f"  No projects found in {path}")
        return LoadResult(message=EMPTY_MESSAGE)

    groups = sum(1 for entries in document.values() if isinstance(entries, list))
    log(f"  Loaded {len(records)} records from {groups} groups")
    return LoadResult(records=records)
