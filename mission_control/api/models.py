"""Pydantic request/response schemas for the Mission Control API.

Responses are serialised with camelCase keys (``lastUpdated``,
``focusAreas``); requests accept either camelCase or snake_case.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class InProgressTaskResponse(ApiModel):
    task: str
    started: str
    status: str
    notes: str


class BacklogTaskResponse(ApiModel):
    task: str
    priority: str
    notes: str


class CompletedTaskResponse(ApiModel):
    task: str
    completed: str
    outcome: str


class BlockedTaskResponse(ApiModel):
    task: str
    blocker: str
    need: str


class MissionControlResponse(ApiModel):
    """Response body for the /api/mission-control endpoint."""

    last_updated: str
    in_progress: list[InProgressTaskResponse] = []
    backlog: list[BacklogTaskResponse] = []
    completed: list[CompletedTaskResponse] = []
    blocked: list[BlockedTaskResponse] = []


class FreedomScoreResponse(ApiModel):
    """A stored freedom score."""

    id: str | int | None = None
    user_id: str | None = None
    overall: float
    financial: float
    time: float
    health: float
    systems: float
    trend: float = 0
    created_at: str | None = None
    runway_months: float | None = None
    hours_worked: float | None = None
    sleep_avg: float | None = None
    ai_prs_merged: float | None = None
    automation_hours: float | None = None


class ReportResponse(ApiModel):
    """Response body for the /api/freedom-score/report endpoint."""

    score: FreedomScoreResponse
    previous_score: FreedomScoreResponse | None = None
    label: str
    wins: list[str]
    focus_areas: list[str]


class CalculateRequest(ApiModel):
    """Optional metric overrides for /api/freedom-score/calculate.

    Unset fields fall back to the user's profile, then to fixed defaults.
    """

    runway_months: float | None = None
    hours_worked: float | None = None
    sleep_avg: float | None = None
    ai_prs_merged: float | None = None
    automation_hours: float | None = None
