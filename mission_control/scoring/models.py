"""Data models for freedom score calculation and reporting."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ScoreMetrics:
    """Raw weekly inputs the score is derived from."""

    runway_months: float = 0.0
    hours_worked: float = 45.0
    sleep_avg: float = 7.0
    ai_prs_merged: float = 0.0
    automation_hours: float = 0.0


@dataclass
class ScoreResult:
    """Computed dimension scores, each 0-100."""

    overall: int
    financial: int
    time: int
    health: int
    systems: int
    trend: int = 0


@dataclass
class ScoreRecord:
    """A stored freedom score as read back from the ``freedom_scores`` table."""

    overall: float
    financial: float
    time: float
    health: float
    systems: float
    trend: float = 0
    id: str | int | None = None
    user_id: str | None = None
    created_at: str | None = None
    runway_months: float | None = None
    hours_worked: float | None = None
    sleep_avg: float | None = None
    ai_prs_merged: float | None = None
    automation_hours: float | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> ScoreRecord:
        """Build a record from a Supabase row, ignoring unknown columns."""
        known = cls.__dataclass_fields__
        return cls(**{k: v for k, v in row.items() if k in known})


@dataclass
class CompletedTaskRecord:
    """A task completed inside the reporting window."""

    title: str
    outcome: str | None = None
    id: str | int | None = None


@dataclass
class Report:
    """Weekly interpretation of the most recent score."""

    score: ScoreRecord
    previous_score: ScoreRecord | None
    label: str
    wins: list[str] = field(default_factory=list)
    focus_areas: list[str] = field(default_factory=list)
