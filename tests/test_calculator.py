"""Tests for freedom score calculation."""

from __future__ import annotations

from mission_control.scoring.calculator import (
    calculate_freedom_score,
    resolve_metrics,
    with_trend,
)
from mission_control.scoring.models import ScoreMetrics, ScoreResult


class TestCalculateFreedomScore:
    def test_ideal_week(self) -> None:
        result = calculate_freedom_score(
            ScoreMetrics(
                runway_months=12,
                hours_worked=40,
                sleep_avg=8,
                ai_prs_merged=10,
                automation_hours=0,
            )
        )
        assert result == ScoreResult(
            overall=100, financial=100, time=100, health=100, systems=100, trend=0
        )

    def test_weighted_overall(self) -> None:
        # financial 50, time 75, health 87.5, systems 30
        # 20 + 22.5 + 17.5 + 3 = 63
        result = calculate_freedom_score(
            ScoreMetrics(
                runway_months=6,
                hours_worked=45,
                sleep_avg=7,
                ai_prs_merged=2,
                automation_hours=5,
            )
        )
        assert result.financial == 50
        assert result.time == 75
        assert result.health == 88
        assert result.systems == 30
        assert result.overall == 63

    def test_caps_and_floors(self) -> None:
        result = calculate_freedom_score(
            ScoreMetrics(
                runway_months=36,
                hours_worked=80,
                sleep_avg=10,
                ai_prs_merged=50,
                automation_hours=50,
            )
        )
        assert result.financial == 100
        assert result.time == 0
        assert result.health == 100
        assert result.systems == 100

    def test_health_capped_above_eight_hours_sleep(self) -> None:
        # 9 / 8 * 100 = 112.5 would otherwise inflate health and overall
        result = calculate_freedom_score(
            ScoreMetrics(runway_months=12, hours_worked=40, sleep_avg=9, ai_prs_merged=10)
        )
        assert result.health == 100
        assert result.overall == 100

    def test_underworking_also_penalised(self) -> None:
        result = calculate_freedom_score(ScoreMetrics(hours_worked=30))
        assert result.time == 50


class TestWithTrend:
    def test_no_previous(self) -> None:
        result = ScoreResult(overall=60, financial=0, time=0, health=0, systems=0)
        assert with_trend(result, None).trend == 0

    def test_against_previous(self) -> None:
        result = ScoreResult(overall=60, financial=0, time=0, health=0, systems=0)
        assert with_trend(result, 72).trend == -12
        assert result.trend == 0


class TestResolveMetrics:
    def test_defaults_without_profile(self) -> None:
        assert resolve_metrics({}) == ScoreMetrics(
            runway_months=0,
            hours_worked=45,
            sleep_avg=7,
            ai_prs_merged=0,
            automation_hours=0,
        )

    def test_profile_fallbacks(self) -> None:
        metrics = resolve_metrics({}, {"current_runway": 9, "sleep_target": 7.5})
        assert metrics.runway_months == 9
        assert metrics.sleep_avg == 7.5

    def test_overrides_win(self) -> None:
        metrics = resolve_metrics(
            {"runway_months": 3, "sleep_avg": None, "hours_worked": 50},
            {"current_runway": 9, "sleep_target": 6},
        )
        assert metrics.runway_months == 3
        assert metrics.sleep_avg == 6
        assert metrics.hours_worked == 50

    def test_null_profile_values_use_defaults(self) -> None:
        metrics = resolve_metrics({}, {"current_runway": None, "sleep_target": None})
        assert metrics.runway_months == 0
        assert metrics.sleep_avg == 7
