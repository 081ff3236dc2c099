"""
Schedule aggregate models: a schedule owns its participants and suggestions
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text

from .database import Base


def generate_id():
    """Generate a unique opaque identifier for a new row"""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    """Current time as naive UTC, the form every timestamp column stores"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Schedule(Base):
    """Owner-scoped container for a meeting-coordination effort"""

    __tablename__ = "schedules"

    id = Column(String(36), primary_key=True, default=generate_id)
    owner_user_id = Column(String(255), nullable=False, index=True)  # Never changes after create

    name = Column(String(255), nullable=False)  # "Team sync", "Client meeting"
    description = Column(Text, nullable=True)

    base_time_zone = Column(String(64), nullable=True)  # Default zone, e.g. "Asia/Dubai"
    duration_minutes = Column(Integer, nullable=True)  # Typical meeting duration

    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)


class ScheduleParticipant(Base):
    """A person's home time zone and availability attached to one schedule"""

    __tablename__ = "schedule_participants"

    id = Column(String(36), primary_key=True, default=generate_id)
    schedule_id = Column(String(36), ForeignKey("schedules.id"), nullable=False, index=True)

    name = Column(String(255), nullable=False)  # "Karthik", "Astra", "Client"
    time_zone = Column(String(64), nullable=False)  # IANA tz, e.g. "America/New_York"
    availability_json = Column(Text, nullable=True)  # Serialized weekly availability model

    created_at = Column(DateTime, default=utcnow, nullable=False)


class ScheduleSuggestion(Base):
    """A candidate meeting window with coverage and score metadata"""

    __tablename__ = "schedule_suggestions"

    id = Column(String(36), primary_key=True, default=generate_id)
    schedule_id = Column(String(36), ForeignKey("schedules.id"), nullable=False, index=True)

    suggested_start_utc = Column(DateTime, nullable=False)
    suggested_end_utc = Column(DateTime, nullable=False)

    participants_json = Column(Text, nullable=True)  # Who can attend, e.g. map of participant -> bool
    score = Column(Integer, nullable=True)  # 0-100 suitability score
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime, default=utcnow, nullable=False)

