"""Schedule repository - Database operations for schedules"""

from datetime import datetime
from typing import Optional

from ...models import Schedule
from ...repository import SqlRepository


class ScheduleRepository(SqlRepository[Schedule]):
    """Repository for schedule database operations; every read is owner-scoped"""

    model = Schedule

    def get_owned(self, schedule_id: str, owner_user_id: str) -> Optional[Schedule]:
        """Get a schedule only if it belongs to the owner"""
        return self.find_one(id=schedule_id, owner_user_id=owner_user_id)

    def list_owned(self, owner_user_id: str, offset: int, limit: int) -> list[Schedule]:
        return self.paginate(offset, limit, owner_user_id=owner_user_id)

    def count_owned(self, owner_user_id: str) -> int:
        return self.count(owner_user_id=owner_user_id)

    def update_owned(self, schedule_id: str, owner_user_id: str, values: dict) -> int:
        return self.update_where(values, id=schedule_id, owner_user_id=owner_user_id)

    def delete_owned(self, schedule_id: str, owner_user_id: str) -> int:
        return self.delete_where(id=schedule_id, owner_user_id=owner_user_id)

    def touch(self, schedule_id: str, updated_at: datetime) -> int:
        """Set only updated_at, with no ownership filter"""
        return self.update_where({"updated_at": updated_at}, id=schedule_id)
