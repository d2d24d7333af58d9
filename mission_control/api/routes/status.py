"""Status endpoint: the parsed MISSION_CONTROL.md task ledger."""

from __future__ import annotations

import logging
from dataclasses import asdict

from fastapi import APIRouter, HTTPException

from mission_control.api.models import MissionControlResponse
from mission_control.status.parser import load_mission_control

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/api/mission-control", response_model=MissionControlResponse)
async def get_mission_control() -> MissionControlResponse:
    """Return every task table in the status document.

    The file is re-read on each request so edits show up immediately.
    """
    try:
        data = load_mission_control()
    except OSError as exc:
        logger.exception("Failed to read mission control document")
        raise HTTPException(
            status_code=500, detail="Failed to parse mission control data"
        ) from exc

    return MissionControlResponse.model_validate(asdict(data))
