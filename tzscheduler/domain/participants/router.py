"""Participant router - FastAPI endpoints for schedule participants"""

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from ...auth import CurrentUser, get_current_user
from ...database import get_db
from ...shared.responses import success
from .schemas import ParticipantResponse
from .service import ParticipantService

router = APIRouter(prefix="/schedules/{schedule_id}/participants", tags=["Participants"])


def get_participant_service(db: Session = Depends(get_db)) -> ParticipantService:
    """Dependency injection for ParticipantService"""
    return ParticipantService(db)


@router.get("")
async def list_participants(
    schedule_id: str,
    current_user: Optional[CurrentUser] = Depends(get_current_user),
    service: ParticipantService = Depends(get_participant_service),
):
    participants = service.list_for_schedule(schedule_id, current_user)
    return success({"participants": [ParticipantResponse.model_validate(p) for p in participants]})


@router.put("")
async def upsert_participant(
    schedule_id: str,
    payload: dict[str, Any] = Body(...),
    current_user: Optional[CurrentUser] = Depends(get_current_user),
    service: ParticipantService = Depends(get_participant_service),
):
    """Create a participant, or update one in place when the body carries its id"""
    participants = service.upsert_participant({**payload, "scheduleId": schedule_id}, current_user)
    return success({"participants": [ParticipantResponse.model_validate(p) for p in participants]})


@router.delete("/{participant_id}")
async def delete_participant(
    schedule_id: str,
    participant_id: str,
    current_user: Optional[CurrentUser] = Depends(get_current_user),
    service: ParticipantService = Depends(get_participant_service),
):
    service.delete_participant(
        {"scheduleId": schedule_id, "participantId": participant_id}, current_user
    )
    return success()
