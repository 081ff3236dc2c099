"""Participant domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from ...shared.validators import as_utc, validate_non_empty
from ..children import ChildDelete, ChildUpsert


class ParticipantUpsert(ChildUpsert):
    """Create a participant (no id) or update one in place (id given)"""

    name: str
    timeZone: str
    availabilityJson: Optional[str] = None

    @field_validator("id", mode="before")
    @classmethod
    def blank_id_means_new(cls, v):
        return v or None

    @field_validator("scheduleId")
    @classmethod
    def validate_schedule_id(cls, v):
        return validate_non_empty(v, "scheduleId")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return validate_non_empty(v, "name")

    @field_validator("timeZone")
    @classmethod
    def validate_time_zone(cls, v):
        return validate_non_empty(v, "timeZone")

    def create_values(self) -> dict:
        return {
            "name": self.name,
            "time_zone": self.timeZone,
            "availability_json": self.availabilityJson,
        }

    def update_values(self) -> dict:
        updates = {"name": self.name, "time_zone": self.timeZone}
        if self.availabilityJson is not None:
            updates["availability_json"] = self.availabilityJson
        return updates


class ParticipantDelete(ChildDelete):
    participantId: str

    @field_validator("scheduleId", "participantId")
    @classmethod
    def validate_ids(cls, v, info):
        return validate_non_empty(v, info.field_name)

    @property
    def child_id(self) -> str:
        return self.participantId


class ParticipantResponse(BaseModel):
    """Schema for participant response"""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    scheduleId: str = Field(validation_alias="schedule_id")
    name: str
    timeZone: str = Field(validation_alias="time_zone")
    availabilityJson: Optional[str] = Field(None, validation_alias="availability_json")
    createdAt: datetime = Field(validation_alias="created_at")

    @field_serializer("createdAt")
    def serialize_utc(self, value: datetime) -> datetime:
        return as_utc(value)
