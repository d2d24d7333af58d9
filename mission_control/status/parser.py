"""Parser for the MISSION_CONTROL.md status document.

The document is a set of ``## `` sections, each holding a pipe table::

    ## 🔥 IN PROGRESS
    | Task | Started | Status | Notes |
    |------|---------|--------|-------|
    | GSuite integration | 2026-01-28 | Blocked | Needs OAuth |

Sections are recognised by heading text, ignoring any leading emoji.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from mission_control.config import mission_control_path
from mission_control.status.models import (
    BacklogTask,
    BlockedTask,
    CompletedTask,
    InProgressTask,
    MissionControlData,
)

_LAST_UPDATED_RE = re.compile(r"\*Last updated: (.+)\*")
_SECTION_SPLIT_RE = re.compile(r"^## ", re.MULTILINE)
_LEADING_SYMBOLS_RE = re.compile(r"^[^A-Za-z]+")

# Heading prefix -> (field on MissionControlData, row type, column names)
_SECTIONS: dict[str, tuple[str, Callable[..., Any], list[str]]] = {
    "IN PROGRESS": ("in_progress", InProgressTask, ["task", "started", "status", "notes"]),
    "BACKLOG": ("backlog", BacklogTask, ["task", "priority", "notes"]),
    "COMPLETED": ("completed", CompletedTask, ["task", "completed", "outcome"]),
    "BLOCKED": ("blocked", BlockedTask, ["task", "blocker", "need"]),
}


def _iso_now(now: datetime | None = None) -> str:
    """Render *now* (default: current UTC time) like ``2026-01-28T07:45:00.000Z``."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def section_kind(heading: str) -> str | None:
    """Return the section key for a heading line, or None if unrecognised.

    Leading symbols are dropped so ``🔥 IN PROGRESS`` and ``IN PROGRESS``
    both match. The comparison itself is case-sensitive.
    """
    text = _LEADING_SYMBOLS_RE.sub("", heading)
    for prefix in _SECTIONS:
        if text.startswith(prefix):
            return prefix
    return None


def parse_table_rows(section: str, headers: list[str]) -> list[dict[str, str]]:
    """Extract pipe-table rows from *section* as dicts keyed by *headers*.

    Divider rows (containing ``---``) and the header row are skipped. Cells
    missing from short rows default to an empty string.
    """
    lines = [
        line for line in section.splitlines() if line.startswith("|") and "---" not in line
    ]

    rows: list[dict[str, str]] = []
    for line in lines[1:]:
        cells = [cell.strip() for cell in line.split("|")[1:-1]]
        rows.append(
            {header: cells[i] if i < len(cells) else "" for i, header in enumerate(headers)}
        )
    return rows


def parse_mission_control(content: str, now: datetime | None = None) -> MissionControlData:
    """Parse the full text of a Mission Control document.

    Args:
        content: Raw markdown.
        now: Clock used when the document has no ``*Last updated: ...*`` line.

    Returns:
        The parsed document. Missing sections yield empty lists.
    """
    match = _LAST_UPDATED_RE.search(content)
    data = MissionControlData(last_updated=match.group(1) if match else _iso_now(now))

    for section in _SECTION_SPLIT_RE.split(content):
        heading = section.split("\n", 1)[0]
        kind = section_kind(heading)
        if kind is None:
            continue
        field_name, row_type, headers = _SECTIONS[kind]
        setattr(data, field_name, [row_type(**row) for row in parse_table_rows(section, headers)])

    return data


def load_mission_control(path: Path | None = None) -> MissionControlData:
    """Read and parse the status document.

    Defaults to ``MISSION_CONTROL.md`` in the working directory. Invalid UTF-8
    bytes decode to U+FFFD rather than failing. ``OSError``
    from the read is left for the caller to handle.
    """
    path = path or mission_control_path()
    return parse_mission_control(path.read_text(encoding="utf-8", errors="replace"))
