"""Schedule domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator

from ...config import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from ...shared.validators import as_utc, validate_in_range, validate_non_empty, validate_positive_int


class ScheduleCreate(BaseModel):
    """Schema for creating a new schedule"""

    name: str
    description: Optional[str] = None
    baseTimeZone: Optional[str] = None
    durationMinutes: Optional[int] = Field(None, strict=True)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return validate_non_empty(v, "name")

    @field_validator("baseTimeZone")
    @classmethod
    def validate_base_time_zone(cls, v):
        return validate_non_empty(v, "baseTimeZone")

    @field_validator("durationMinutes")
    @classmethod
    def validate_duration(cls, v):
        return validate_positive_int(v, "durationMinutes")


class ScheduleUpdate(BaseModel):
    """Schema for updating an existing schedule; at least one field besides id"""

    id: str
    name: Optional[str] = None
    description: Optional[str] = None
    baseTimeZone: Optional[str] = None
    durationMinutes: Optional[int] = Field(None, strict=True)

    @field_validator("id")
    @classmethod
    def validate_id(cls, v):
        return validate_non_empty(v, "id")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return validate_non_empty(v, "name")

    @field_validator("baseTimeZone")
    @classmethod
    def validate_base_time_zone(cls, v):
        return validate_non_empty(v, "baseTimeZone")

    @field_validator("durationMinutes")
    @classmethod
    def validate_duration(cls, v):
        return validate_positive_int(v, "durationMinutes")

    @model_validator(mode="after")
    def require_any_field(self):
        if all(
            value is None
            for value in (self.name, self.description, self.baseTimeZone, self.durationMinutes)
        ):
            raise ValueError("At least one field must be provided to update the schedule.")
        return self

    def changes(self) -> dict:
        """Column values for the fields the caller actually provided"""
        mapping = {
            "name": self.name,
            "description": self.description,
            "base_time_zone": self.baseTimeZone,
            "duration_minutes": self.durationMinutes,
        }
        return {column: value for column, value in mapping.items() if value is not None}


class ScheduleLookup(BaseModel):
    """Schema for operations addressing one schedule by id"""

    id: str

    @field_validator("id")
    @classmethod
    def validate_id(cls, v):
        return validate_non_empty(v, "id")


class ScheduleListQuery(BaseModel):
    """Pagination input for listMySchedules"""

    page: int = 1
    pageSize: int = DEFAULT_PAGE_SIZE

    @field_validator("page")
    @classmethod
    def validate_page(cls, v):
        return validate_positive_int(v, "page")

    @field_validator("pageSize")
    @classmethod
    def validate_page_size(cls, v):
        return validate_in_range(v, 1, MAX_PAGE_SIZE, "pageSize")

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.pageSize


class ScheduleResponse(BaseModel):
    """Schema for schedule response"""

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: str
    ownerUserId: str = Field(validation_alias="owner_user_id")
    name: str
    description: Optional[str] = None
    baseTimeZone: Optional[str] = Field(None, validation_alias="base_time_zone")
    durationMinutes: Optional[int] = Field(None, validation_alias="duration_minutes")
    createdAt: datetime = Field(validation_alias="created_at")
    updatedAt: datetime = Field(validation_alias="updated_at")

    @field_serializer("createdAt", "updatedAt")
    def serialize_utc(self, value: datetime) -> datetime:
        return as_utc(value)
