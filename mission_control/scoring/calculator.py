"""Freedom score calculation from weekly metrics.

Weights:

- Financial (runway): 40%
- Time (work/life balance): 30%
- Health (sleep): 20%
- Systems (automation): 10%
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from mission_control.scoring.models import ScoreMetrics, ScoreResult
from mission_control.scoring.rounding import round_int

WEIGHTS: dict[str, float] = {
    "financial": 0.40,
    "time": 0.30,
    "health": 0.20,
    "systems": 0.10,
}

OPTIMAL_WEEKLY_HOURS = 40
DEFAULT_HOURS_WORKED = 45
DEFAULT_SLEEP_AVG = 7


def calculate_freedom_score(metrics: ScoreMetrics) -> ScoreResult:
    """Compute dimension scores and the weighted overall score.

    Trend is always 0 here; see :func:`with_trend`.
    """
    # 12 months of runway = 100
    financial = min(100.0, metrics.runway_months / 12 * 100)
    # lose 5 points per hour away from a 40-hour week
    time = max(0.0, 100 - abs(metrics.hours_worked - OPTIMAL_WEEKLY_HOURS) * 5)
    # 8 hours of sleep = 100
    health = min(100.0, metrics.sleep_avg / 8 * 100)
    systems = min(100.0, metrics.ai_prs_merged * 10 + metrics.automation_hours * 2)

    overall = (
        financial * WEIGHTS["financial"]
        + time * WEIGHTS["time"]
        + health * WEIGHTS["health"]
        + systems * WEIGHTS["systems"]
    )

    return ScoreResult(
        overall=round_int(overall),
        financial=round_int(financial),
        time=round_int(time),
        health=round_int(health),
        systems=round_int(systems),
    )


def with_trend(result: ScoreResult, previous_overall: float | None) -> ScoreResult:
    """Return *result* with trend set against the previous overall score."""
    if previous_overall is None:
        return result
    return replace(result, trend=round_int(result.overall - previous_overall))


def resolve_metrics(
    overrides: dict[str, Any], profile: dict[str, Any] | None = None
) -> ScoreMetrics:
    """Merge request overrides with profile fallbacks and fixed defaults.

    Args:
        overrides: Metric values supplied by the caller; ``None`` means unset.
        profile: The user's profile row (``current_runway``, ``sleep_target``).
    """
    profile = profile or {}

    def pick(key: str, *fallbacks: Any) -> float:
        for value in (overrides.get(key), *fallbacks):
            if value is not None:
                return float(value)
        return 0.0

    return ScoreMetrics(
        runway_months=pick("runway_months", profile.get("current_runway"), 0),
        hours_worked=pick("hours_worked", DEFAULT_HOURS_WORKED),
        sleep_avg=pick("sleep_avg", profile.get("sleep_target"), DEFAULT_SLEEP_AVG),
        ai_prs_merged=pick("ai_prs_merged", 0),
        automation_hours=pick("automation_hours", 0),
    )
