"""
Child upsert engine shared by participants and suggestions.

Every mutation follows the same path: resolve the caller, validate the
input, check the caller owns the parent schedule, create or update the
child under that parent, refresh the parent's updated_at, and hand back
the full child list for the schedule.
"""

import logging
from abc import abstractmethod
from typing import Any, Generic, Mapping, Optional, Type, TypeVar, Union

from pydantic import BaseModel
from sqlalchemy.orm import Session

from ..auth import CurrentUser, require_user
from ..database import transaction
from ..exceptions import NotFoundError
from ..models import generate_id, utcnow
from ..repository import ChildRepository
from ..shared.validators import parse_input
from .schedules.service import ScheduleService

logger = logging.getLogger(__name__)

ChildType = TypeVar("ChildType")


class ChildUpsert(BaseModel):
    """Fields every child upsert carries; subclasses add their own columns"""

    id: Optional[str] = None
    scheduleId: str

    @abstractmethod
    def create_values(self) -> dict[str, Any]:
        """Column values for a brand-new row"""

    @abstractmethod
    def update_values(self) -> dict[str, Any]:
        """Column values to overwrite on an existing row"""


class ChildDelete(BaseModel):
    scheduleId: str

    @property
    @abstractmethod
    def child_id(self) -> str:
        """Id of the child row being deleted"""


class ChildService(Generic[ChildType]):
    """Upsert/delete/list for one child type of a schedule"""

    repository_class: Type[ChildRepository]
    upsert_schema: Type[ChildUpsert]
    delete_schema: Type[ChildDelete]
    label = "child"
    not_found_message = "Child not found for this schedule."

    def __init__(self, db: Session):
        self.db = db
        self.repo = self.repository_class(db)
        self.schedules = ScheduleService(db)

    def list_for_schedule(self, schedule_id: str, user: Optional[CurrentUser]) -> list[ChildType]:
        user = require_user(user)
        schedule = self.schedules.get_owned_schedule(schedule_id, user)
        return self.repo.list_for_schedule(schedule.id)

    def upsert(
        self, data: Union[ChildUpsert, Mapping[str, Any], None], user: Optional[CurrentUser]
    ) -> list[ChildType]:
        """
        Create when ``id`` is absent, update in place when it names a child
        of this schedule; anything else is NOT_FOUND.
        """
        user = require_user(user)
        data = parse_input(self.upsert_schema, data)

        with transaction(self.db):
            schedule = self.schedules.get_owned_schedule(data.scheduleId, user)

            if data.id:
                existing = self.repo.get_under_schedule(data.id, schedule.id)
                if not existing:
                    logger.warning(f"⚠️ {self.label} {data.id} not found under schedule {schedule.id}")
                    raise NotFoundError(self.not_found_message)
                self.repo.update_under_schedule(data.id, schedule.id, data.update_values())
                logger.info(f"✏️ Updated {self.label} {data.id} in schedule {schedule.id}")
            else:
                child = self.repo.insert(
                    id=generate_id(),
                    schedule_id=schedule.id,
                    created_at=utcnow(),
                    **data.create_values(),
                )
                logger.info(f"➕ Created {self.label} {child.id} in schedule {schedule.id}")

            self.schedules.touch(schedule)
            children = self.repo.list_for_schedule(schedule.id)

        return children

    def delete(self, data: Union[ChildDelete, Mapping[str, Any], None], user: Optional[CurrentUser]) -> None:
        user = require_user(user)
        data = parse_input(self.delete_schema, data)

        with transaction(self.db):
            schedule = self.schedules.get_owned_schedule(data.scheduleId, user)

            if not self.repo.get_under_schedule(data.child_id, schedule.id):
                logger.warning(f"⚠️ {self.label} {data.child_id} not found under schedule {schedule.id}")
                raise NotFoundError(self.not_found_message)

            self.repo.delete_under_schedule(data.child_id, schedule.id)
            self.schedules.touch(schedule)

        logger.info(f"🗑️ Deleted {self.label} {data.child_id} from schedule {data.scheduleId}")
