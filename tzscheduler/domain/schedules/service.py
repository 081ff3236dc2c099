"""Schedule service - Ownership guard, schedule lifecycle and cascade delete"""

import logging
from datetime import datetime, timedelta
from typing import Any, Mapping, Optional, Union

from sqlalchemy.orm import Session

from ...auth import CurrentUser, require_user
from ...database import transaction
from ...exceptions import NotFoundError
from ...models import Schedule, generate_id, utcnow
from ...shared.validators import parse_input
from ..participants.repository import ParticipantRepository
from ..suggestions.repository import SuggestionRepository
from .repository import ScheduleRepository
from .schemas import ScheduleCreate, ScheduleListQuery, ScheduleLookup, ScheduleUpdate

logger = logging.getLogger(__name__)

Payload = Optional[Mapping[str, Any]]


def next_timestamp(previous: Optional[datetime]) -> datetime:
    """Current time, nudged forward so it is strictly after ``previous``"""
    now = utcnow()
    if previous is not None and now <= previous:
        return previous + timedelta(microseconds=1)
    return now


class ScheduleService:
    """Service layer for schedule business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = ScheduleRepository(db)
        self.participants = ParticipantRepository(db)
        self.suggestions = SuggestionRepository(db)

    # ------------------------------------------------------------------
    # Shared by every operation on an existing schedule or its children
    # ------------------------------------------------------------------

    def get_owned_schedule(self, schedule_id: str, user: CurrentUser) -> Schedule:
        """
        The single authorization checkpoint.

        A missing schedule and one owned by somebody else raise the same
        ``NotFoundError`` so callers cannot probe for existence.
        """
        schedule = self.repo.get_owned(schedule_id, user.id)
        if not schedule:
            logger.warning(f"⚠️ Schedule {schedule_id} not found for user {user.id}")
            raise NotFoundError("Schedule not found.")
        return schedule

    def touch(self, schedule: Schedule) -> None:
        """Refresh the parent's updated_at after a child mutation"""
        self.repo.touch(schedule.id, next_timestamp(schedule.updated_at))

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def create_schedule(self, data: Union[ScheduleCreate, Payload], user: Optional[CurrentUser]) -> Schedule:
        """Create a new schedule owned by the caller"""
        user = require_user(user)
        data = parse_input(ScheduleCreate, data)

        now = utcnow()
        with transaction(self.db):
            schedule = self.repo.insert(
                id=generate_id(),
                owner_user_id=user.id,
                name=data.name,
                description=data.description,
                base_time_zone=data.baseTimeZone,
                duration_minutes=data.durationMinutes,
                created_at=now,
                updated_at=now,
            )

        logger.info(f"📅 Created schedule {schedule.id} for user {user.id}")
        return schedule

    def update_schedule(self, data: Union[ScheduleUpdate, Payload], user: Optional[CurrentUser]) -> Schedule:
        """Apply only the provided fields; owner and identity never change"""
        user = require_user(user)
        data = parse_input(ScheduleUpdate, data)

        with transaction(self.db):
            schedule = self.get_owned_schedule(data.id, user)

            updates = data.changes()
            updates["updated_at"] = next_timestamp(schedule.updated_at)
            self.repo.update_owned(data.id, user.id, updates)

            # Re-read under the same owner filter; a concurrent delete surfaces as NOT_FOUND
            updated = self.get_owned_schedule(data.id, user)

        logger.info(f"✏️ Updated schedule {data.id} fields: {sorted(updates)}")
        return updated

    def delete_schedule(self, data: Union[ScheduleLookup, Payload], user: Optional[CurrentUser]) -> None:
        """
        Delete a schedule and everything under it.

        Suggestions go first, then participants, then the schedule row itself,
        all in one unit of work.
        """
        user = require_user(user)
        data = parse_input(ScheduleLookup, data)

        with transaction(self.db):
            self.get_owned_schedule(data.id, user)
            suggestions_deleted = self.suggestions.delete_for_schedule(data.id)
            participants_deleted = self.participants.delete_for_schedule(data.id)
            self.repo.delete_owned(data.id, user.id)

        logger.info(
            f"🗑️ Deleted schedule {data.id} "
            f"({participants_deleted} participants, {suggestions_deleted} suggestions)"
        )

    def list_my_schedules(
        self, data: Union[ScheduleListQuery, Payload], user: Optional[CurrentUser]
    ) -> dict:
        """One page of the caller's schedules, oldest first, plus the total count"""
        user = require_user(user)
        query = parse_input(ScheduleListQuery, data)

        items = self.repo.list_owned(user.id, query.offset, query.pageSize)
        total = self.repo.count_owned(user.id)

        return {
            "items": items,
            "total": total,
            "page": query.page,
            "pageSize": query.pageSize,
        }

    def get_schedule_with_details(
        self, data: Union[ScheduleLookup, Payload], user: Optional[CurrentUser]
    ) -> dict:
        """Schedule together with all of its participants and suggestions"""
        user = require_user(user)
        data = parse_input(ScheduleLookup, data)

        schedule = self.get_owned_schedule(data.id, user)
        # Independent reads; the session is not shared across threads so they run in turn
        participants = self.participants.list_for_schedule(schedule.id)
        suggestions = self.suggestions.list_for_schedule(schedule.id)

        return {
            "schedule": schedule,
            "participants": participants,
            "suggestions": suggestions,
        }
