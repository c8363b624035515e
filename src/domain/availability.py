"""Staff Availability Domain Entities

Date-specific overrides and recurring weekly patterns consulted by the
availability resolver chain.
"""

from datetime import date, datetime, time
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import CheckConstraint, Date, Index, Text, UniqueConstraint
from src.domain.base import BaseModel, UTCDateTime, generate_uuid, utc_now


class OverrideSource(str, Enum):
    """Origin of a date override row"""
    MANUAL = "manual"        # Entered by staff or an admin
    TIME_OFF = "time_off"    # Materialized by an approved time-off request


class PhotographerAvailability(BaseModel, table=True):
    """
    Date-specific availability override

    Domain Rules:
    - At most one manual row per (staff_id, on_date), enforced by a partial
      unique index over manual rows
    - Time-off rows carry the id of the request that created them, so reverting
      the approval removes exactly those rows
    - A null window means the whole day
    """

    __tablename__ = "photographer_availability"
    __table_args__ = (
        UniqueConstraint('staff_id', 'date', 'time_off_id', name='uq_availability_staff_date_time_off'),
    )

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    staff_id: str = Field(index=True)
    on_date: date = Field(
        sa_column=Column("date", Date, nullable=False, index=True),
        description="Calendar date the override applies to"
    )

    available_from: Optional[time] = Field(default=None)
    available_to: Optional[time] = Field(default=None)
    is_available: bool = Field(default=True)
    max_jobs_override: Optional[int] = Field(default=None)

    notes: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))

    source: OverrideSource = Field(default=OverrideSource.MANUAL)
    time_off_id: Optional[str] = Field(default=None, index=True)

    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)


Index(
    "uq_availability_manual_per_day",
    PhotographerAvailability.staff_id,
    PhotographerAvailability.on_date,
    unique=True,
    sqlite_where=PhotographerAvailability.source == OverrideSource.MANUAL,
    postgresql_where=PhotographerAvailability.source == OverrideSource.MANUAL,
)


class WeeklySchedule(BaseModel, table=True):
    """Recurring availability for one day of the week (0 = Sunday ... 6 = Saturday)"""

    __tablename__ = "photographer_weekly_schedule"
    __table_args__ = (
        UniqueConstraint('staff_id', 'day_of_week', name='uq_weekly_schedule_staff_day'),
        CheckConstraint('day_of_week >= 0 AND day_of_week <= 6', name='day_of_week_range'),
    )

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    staff_id: str = Field(index=True)
    day_of_week: int
    available_from: time = Field(default=time(8, 0))
    available_to: time = Field(default=time(18, 0))
    is_available: bool = Field(default=True)
    max_jobs: int = Field(default=4)

    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)


def day_of_week(on_date: date) -> int:
    """Calendar weekday with Sunday as 0"""
    return (on_date.weekday() + 1) % 7
