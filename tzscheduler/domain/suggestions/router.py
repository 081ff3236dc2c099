"""Suggestion router - FastAPI endpoints for suggested meeting windows"""

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.orm import Session

from ...auth import CurrentUser, get_current_user
from ...database import get_db
from ...shared.responses import success
from .schemas import SuggestionResponse
from .service import SuggestionService

router = APIRouter(prefix="/schedules/{schedule_id}/suggestions", tags=["Suggestions"])


def get_suggestion_service(db: Session = Depends(get_db)) -> SuggestionService:
    """Dependency injection for SuggestionService"""
    return SuggestionService(db)


@router.get("")
async def list_suggestions(
    schedule_id: str,
    current_user: Optional[CurrentUser] = Depends(get_current_user),
    service: SuggestionService = Depends(get_suggestion_service),
):
    suggestions = service.list_for_schedule(schedule_id, current_user)
    return success({"suggestions": [SuggestionResponse.model_validate(s) for s in suggestions]})


@router.put("")
async def upsert_suggestion(
    schedule_id: str,
    payload: dict[str, Any] = Body(...),
    current_user: Optional[CurrentUser] = Depends(get_current_user),
    service: SuggestionService = Depends(get_suggestion_service),
):
    """Store a suggested window supplied by the caller; returns every suggestion of the schedule"""
    suggestions = service.upsert_suggestion({**payload, "scheduleId": schedule_id}, current_user)
    return success({"suggestions": [SuggestionResponse.model_validate(s) for s in suggestions]})


@router.delete("/{suggestion_id}")
async def delete_suggestion(
    schedule_id: str,
    suggestion_id: str,
    current_user: Optional[CurrentUser] = Depends(get_current_user),
    service: SuggestionService = Depends(get_suggestion_service),
):
    service.delete_suggestion({"scheduleId": schedule_id, "suggestionId": suggestion_id}, current_user)
    return success()
