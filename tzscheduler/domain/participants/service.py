"""Participant service - Child upsert engine bound to schedule participants"""

from ...models import ScheduleParticipant
from ..children import ChildService
from .repository import ParticipantRepository
from .schemas import ParticipantDelete, ParticipantUpsert


class ParticipantService(ChildService[ScheduleParticipant]):
    """Service layer for participant business logic"""

    repository_class = ParticipantRepository
    upsert_schema = ParticipantUpsert
    delete_schema = ParticipantDelete
    label = "participant"
    not_found_message = "Participant not found for this schedule."

    def upsert_participant(self, data, user) -> list[ScheduleParticipant]:
        return self.upsert(data, user)

    def delete_participant(self, data, user) -> None:
        self.delete(data, user)
