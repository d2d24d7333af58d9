"""Supabase storage helpers for freedom scores, tasks and profiles."""

from __future__ import annotations

from datetime import datetime
from typing import Any, cast

from supabase import Client, create_client

from mission_control.config import settings
from mission_control.scoring.models import (
    CompletedTaskRecord,
    ScoreMetrics,
    ScoreRecord,
    ScoreResult,
)


def get_supabase_client() -> Client:
    """Create and return a Supabase client from settings."""
    return create_client(settings.supabase_url, settings.supabase_key)


def _rows(result: Any) -> list[dict[str, Any]]:
    # Supabase .data is typed as JSON (broad union); cast to concrete type.
    return cast(list[dict[str, Any]], result.data or [])


def fetch_recent_scores(client: Client, user_id: str, limit: int) -> list[ScoreRecord]:
    """Return up to *limit* scores for *user_id*, newest first."""
    result = (
        client.table("freedom_scores")
        .select("*")
        .eq("user_id", user_id)
        .order("created_at", desc=True)
        .limit(limit)
        .execute()
    )
    return [ScoreRecord.from_row(row) for row in _rows(result)]


def fetch_completed_since(
    client: Client, user_id: str, since: datetime, limit: int
) -> list[CompletedTaskRecord]:
    """Return tasks completed at or after *since*, most recent first."""
    result = (
        client.table("tasks")
        .select("id,title,outcome")
        .eq("user_id", user_id)
        .eq("status", "COMPLETED")
        .gte("completed_at", since.isoformat())
        .order("completed_at", desc=True)
        .limit(limit)
        .execute()
    )
    return [
        CompletedTaskRecord(title=row.get("title") or "", outcome=row.get("outcome"), id=row.get("id"))
        for row in _rows(result)
    ]


def fetch_profile(client: Client, user_id: str) -> dict[str, Any] | None:
    """Return the user's profile metrics row, or None if the user is unknown."""
    result = (
        client.table("users")
        .select("current_runway,sleep_target,deep_work_hours")
        .eq("id", user_id)
        .execute()
    )
    rows = _rows(result)
    return rows[0] if rows else None


def store_score(
    client: Client, user_id: str, score: ScoreResult, metrics: ScoreMetrics
) -> ScoreRecord:
    """Insert a computed score with the metrics it came from and return the stored row."""
    result = (
        client.table("freedom_scores")
        .insert(
            {
                "user_id": user_id,
                "overall": score.overall,
                "financial": score.financial,
                "time": score.time,
                "health": score.health,
                "systems": score.systems,
                "trend": score.trend,
                "runway_months": metrics.runway_months,
                "hours_worked": metrics.hours_worked,
                "sleep_avg": metrics.sleep_avg,
                "ai_prs_merged": metrics.ai_prs_merged,
                "automation_hours": metrics.automation_hours,
            }
        )
        .execute()
    )
    return ScoreRecord.from_row(_rows(result)[0])
