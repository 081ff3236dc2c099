"""Suggestion domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from ...shared.validators import (
    as_utc,
    to_naive_utc,
    validate_before,
    validate_in_range,
    validate_non_empty,
)
from ..children import ChildDelete, ChildUpsert

MIN_SCORE = 0
MAX_SCORE = 100


class SuggestionUpsert(ChildUpsert):
    """Create a suggested window (no id) or update one in place (id given)"""

    suggestedStartUtc: datetime
    suggestedEndUtc: datetime
    participantsJson: Optional[str] = None
    score: Optional[int] = Field(None, strict=True)
    notes: Optional[str] = None

    @field_validator("id", mode="before")
    @classmethod
    def blank_id_means_new(cls, v):
        return v or None

    @field_validator("scheduleId")
    @classmethod
    def validate_schedule_id(cls, v):
        return validate_non_empty(v, "scheduleId")

    @field_validator("suggestedStartUtc")
    @classmethod
    def normalize_start(cls, v):
        return to_naive_utc(v)

    @field_validator("suggestedEndUtc")
    @classmethod
    def end_after_start(cls, v, info):
        v = to_naive_utc(v)
        validate_before(
            info.data.get("suggestedStartUtc"), v, "Suggested end time must be after the start time."
        )
        return v

    @field_validator("score")
    @classmethod
    def validate_score(cls, v):
        return validate_in_range(v, MIN_SCORE, MAX_SCORE, "score")

    def create_values(self) -> dict:
        return {
            "suggested_start_utc": self.suggestedStartUtc,
            "suggested_end_utc": self.suggestedEndUtc,
            "participants_json": self.participantsJson,
            "score": self.score,
            "notes": self.notes,
        }

    def update_values(self) -> dict:
        updates = {
            "suggested_start_utc": self.suggestedStartUtc,
            "suggested_end_utc": self.suggestedEndUtc,
        }
        optional = {
            "participants_json": self.participantsJson,
            "score": self.score,
            "notes": self.notes,
        }
        updates.update({column: value for column, value in optional.items() if value is not None})
        return updates


class SuggestionDelete(ChildDelete):
    suggestionId: str

    @field_validator("scheduleId", "suggestionId")
    @classmethod
    def validate_ids(cls, v, info):
        return validate_non_empty(v, info.field_name)

    @property
    def child_id(self) -> str:
        return self.suggestionId


class SuggestionResponse(BaseModel):
    """Schema for suggestion response"""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    scheduleId: str = Field(validation_alias="schedule_id")
    suggestedStartUtc: datetime = Field(validation_alias="suggested_start_utc")
    suggestedEndUtc: datetime = Field(validation_alias="suggested_end_utc")
    participantsJson: Optional[str] = Field(None, validation_alias="participants_json")
    score: Optional[int] = None
    notes: Optional[str] = None
    createdAt: datetime = Field(validation_alias="created_at")

    @field_serializer("suggestedStartUtc", "suggestedEndUtc", "createdAt")
    def serialize_utc(self, value: datetime) -> datetime:
        return as_utc(value)
