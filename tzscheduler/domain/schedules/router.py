"""Schedule router - FastAPI endpoints for schedule operations"""

import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query, status
from sqlalchemy.orm import Session

from ...auth import CurrentUser, get_current_user
from ...config import DEFAULT_PAGE_SIZE
from ...database import get_db
from ...shared.responses import success
from ..participants.schemas import ParticipantResponse
from ..suggestions.schemas import SuggestionResponse
from .schemas import ScheduleResponse
from .service import ScheduleService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/schedules", tags=["Schedules"])


def get_schedule_service(db: Session = Depends(get_db)) -> ScheduleService:
    """Dependency injection for ScheduleService"""
    return ScheduleService(db)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_schedule(
    payload: dict[str, Any] = Body(...),
    current_user: Optional[CurrentUser] = Depends(get_current_user),
    service: ScheduleService = Depends(get_schedule_service),
):
    """Create a new schedule owned by the caller"""
    schedule = service.create_schedule(payload, current_user)
    return success({"schedule": ScheduleResponse.model_validate(schedule)})


@router.get("")
async def list_my_schedules(
    page: int = Query(1),
    pageSize: int = Query(DEFAULT_PAGE_SIZE),
    current_user: Optional[CurrentUser] = Depends(get_current_user),
    service: ScheduleService = Depends(get_schedule_service),
):
    """List the caller's schedules, one page at a time"""
    result = service.list_my_schedules({"page": page, "pageSize": pageSize}, current_user)
    result["items"] = [ScheduleResponse.model_validate(s) for s in result["items"]]
    return success(result)


@router.get("/{schedule_id}")
async def get_schedule_with_details(
    schedule_id: str,
    current_user: Optional[CurrentUser] = Depends(get_current_user),
    service: ScheduleService = Depends(get_schedule_service),
):
    """Get a schedule with its participants and suggestions"""
    details = service.get_schedule_with_details({"id": schedule_id}, current_user)
    return success(
        {
            "schedule": ScheduleResponse.model_validate(details["schedule"]),
            "participants": [ParticipantResponse.model_validate(p) for p in details["participants"]],
            "suggestions": [SuggestionResponse.model_validate(s) for s in details["suggestions"]],
        }
    )


@router.patch("/{schedule_id}")
async def update_schedule(
    schedule_id: str,
    payload: dict[str, Any] = Body(...),
    current_user: Optional[CurrentUser] = Depends(get_current_user),
    service: ScheduleService = Depends(get_schedule_service),
):
    """Update the provided fields of a schedule"""
    schedule = service.update_schedule({**payload, "id": schedule_id}, current_user)
    return success({"schedule": ScheduleResponse.model_validate(schedule)})


@router.delete("/{schedule_id}")
async def delete_schedule(
    schedule_id: str,
    current_user: Optional[CurrentUser] = Depends(get_current_user),
    service: ScheduleService = Depends(get_schedule_service),
):
    """Delete a schedule together with its participants and suggestions"""
    service.delete_schedule({"id": schedule_id}, current_user)
    return success()
