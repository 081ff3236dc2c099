"""Participant repository - Database operations for schedule participants"""

from ...models import ScheduleParticipant
from ...repository import ChildRepository


class ParticipantRepository(ChildRepository[ScheduleParticipant]):
    model = ScheduleParticipant
