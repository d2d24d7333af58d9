"""Weekly freedom score report: label, wins and focus areas.

Both the label ladder and the focus-area rules are ordered tables so each
rule can be tested on its own and the evaluation order is explicit.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from mission_control.scoring.models import CompletedTaskRecord, Report, ScoreRecord
from mission_control.scoring.rounding import round_int


class ScoreNotFoundError(LookupError):
    """Raised when a report is requested before any score exists."""


# (inclusive lower bound, label), highest first
SCORE_LABELS: tuple[tuple[float, str], ...] = (
    (90, "Fully Free"),
    (70, "Building Freedom"),
    (50, "Surviving"),
    (30, "Chaos Zone"),
)
FALLBACK_LABEL = "Emergency"

DEFAULT_FOCUS_AREA = "Keep up the great momentum!"


@dataclass(frozen=True)
class FocusRule:
    """Emit ``message(score)`` when ``score.<dimension>`` is below ``threshold``."""

    dimension: str
    threshold: float
    message: Callable[[ScoreRecord], str]

    def applies(self, score: ScoreRecord) -> bool:
        return float(getattr(score, self.dimension)) < self.threshold


def _hours_message(score: ScoreRecord) -> str:
    excess_hours = round_int((100 - score.time) / 5)
    return f"Reduce hours worked by {excess_hours} this week"


def _sleep_message(score: ScoreRecord) -> str:
    sleep_gap = round_int((8 - (score.health / 100 * 8)) * 10) / 10
    return f"Add {sleep_gap:g} hours of sleep per night"


FOCUS_RULES: tuple[FocusRule, ...] = (
    FocusRule("time", 70, _hours_message),
    FocusRule("health", 70, _sleep_message),
    FocusRule("systems", 50, lambda _: "Look for one more automation opportunity"),
    FocusRule("financial", 50, lambda _: "Focus on revenue-generating activities"),
)


def score_label(overall: float) -> str:
    """Map an overall score to its label; boundaries belong to the higher bracket."""
    for threshold, label in SCORE_LABELS:
        if overall >= threshold:
            return label
    return FALLBACK_LABEL


def focus_areas(score: ScoreRecord) -> list[str]:
    """Recommendations for underperforming dimensions, never empty."""
    areas = [rule.message(score) for rule in FOCUS_RULES if rule.applies(score)]
    return areas or [DEFAULT_FOCUS_AREA]


def collect_wins(tasks: Iterable[CompletedTaskRecord]) -> list[str]:
    """Outcome (or title when there is none) of each completed task.

    *tasks* arrive already windowed and capped by the caller; order is kept.
    """
    wins = [task.outcome or task.title for task in tasks]
    return [w for w in wins if w]


def build_report(
    current: ScoreRecord | None,
    previous: ScoreRecord | None,
    completed_tasks: Iterable[CompletedTaskRecord] = (),
) -> Report:
    """Interpret *current* against *previous* and this week's completed tasks.

    Raises:
        ScoreNotFoundError: If there is no current score.
    """
    if current is None:
        raise ScoreNotFoundError("No freedom score calculated yet")

    return Report(
        score=current,
        previous_score=previous,
        label=score_label(current.overall),
        wins=collect_wins(completed_tasks),
        focus_areas=focus_areas(current),
    )
