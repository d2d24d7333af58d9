"""Freedom score endpoints: current score, history, weekly report, calculation."""

from __future__ import annotations

import logging
from dataclasses import asdict
from datetime import datetime, timedelta, timezone
from typing import Annotated

from fastapi import APIRouter, Body, Depends, HTTPException

from mission_control.api.deps import get_user_id
from mission_control.api.models import CalculateRequest, FreedomScoreResponse, ReportResponse
from mission_control.config import settings
from mission_control.scoring.calculator import calculate_freedom_score, resolve_metrics, with_trend
from mission_control.scoring.models import ScoreRecord
from mission_control.scoring.report import ScoreNotFoundError, build_report
from mission_control.storage import (
    fetch_completed_since,
    fetch_profile,
    fetch_recent_scores,
    get_supabase_client,
    store_score,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/freedom-score")

NO_SCORE_DETAIL = "No freedom score calculated yet"

UserId = Annotated[str, Depends(get_user_id)]


def _score_response(score: ScoreRecord) -> FreedomScoreResponse:
    return FreedomScoreResponse.model_validate(asdict(score))


@router.get("", response_model=FreedomScoreResponse)
async def get_current_score(user_id: UserId) -> FreedomScoreResponse:
    """Return the most recent score for the caller."""
    try:
        scores = fetch_recent_scores(get_supabase_client(), user_id, limit=1)
    except Exception as exc:
        logger.exception("Error fetching freedom score for user %s", user_id)
        raise HTTPException(status_code=500, detail="Failed to fetch freedom score") from exc

    if not scores:
        raise HTTPException(status_code=404, detail=NO_SCORE_DETAIL)
    return _score_response(scores[0])


@router.get("/history", response_model=list[FreedomScoreResponse])
async def get_history(user_id: UserId) -> list[FreedomScoreResponse]:
    """Return the caller's recent scores (12 weeks by default), newest first."""
    try:
        scores = fetch_recent_scores(get_supabase_client(), user_id, limit=settings.history_limit)
    except Exception as exc:
        logger.exception("Error fetching freedom score history for user %s", user_id)
        raise HTTPException(status_code=500, detail="Failed to fetch history") from exc

    return [_score_response(s) for s in scores]


@router.get("/report", response_model=ReportResponse)
async def get_report(user_id: UserId) -> ReportResponse:
    """Interpret the latest score: label, this week's wins, and focus areas."""
    since = datetime.now(timezone.utc) - timedelta(days=settings.wins_window_days)
    try:
        client = get_supabase_client()
        scores = fetch_recent_scores(client, user_id, limit=2)
        wins = fetch_completed_since(client, user_id, since, limit=settings.wins_limit)
    except Exception as exc:
        logger.exception("Error generating freedom score report for user %s", user_id)
        raise HTTPException(status_code=500, detail="Failed to generate report") from exc

    current = scores[0] if scores else None
    previous = scores[1] if len(scores) > 1 else None

    try:
        report = build_report(current, previous, wins)
    except ScoreNotFoundError as exc:
        raise HTTPException(status_code=404, detail=NO_SCORE_DETAIL) from exc

    return ReportResponse(
        score=_score_response(report.score),
        previous_score=_score_response(report.previous_score) if report.previous_score else None,
        label=report.label,
        wins=report.wins,
        focus_areas=report.focus_areas,
    )


@router.post("/calculate", response_model=FreedomScoreResponse)
async def calculate_score(
    user_id: UserId,
    body: Annotated[CalculateRequest | None, Body()] = None,
) -> FreedomScoreResponse:
    """Calculate and store a new score.

    Metrics missing from the body fall back to the caller's profile
    (runway, sleep target) and then to fixed defaults.
    """
    overrides = body.model_dump() if body else {}
    try:
        client = get_supabase_client()
        profile = fetch_profile(client, user_id)
        if profile is None:
            raise HTTPException(status_code=404, detail="Profile not found")

        metrics = resolve_metrics(overrides, profile)
        previous = fetch_recent_scores(client, user_id, limit=1)
        result = with_trend(
            calculate_freedom_score(metrics),
            previous[0].overall if previous else None,
        )
        stored = store_score(client, user_id, result, metrics)
    except HTTPException:
        raise
    except Exception as exc:
        logger.exception("Error calculating freedom score for user %s", user_id)
        raise HTTPException(status_code=500, detail="Failed to calculate freedom score") from exc

    logger.info("Stored freedom score %d (trend %+d) for user %s", result.overall, result.trend, user_id)
    return _score_response(stored)
