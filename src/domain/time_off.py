"""Staff Time Off Domain Entity

Approval is side-effecting: it consumes leave days and blocks the calendar.
Allowed transitions live in ALLOWED_TRANSITIONS.
"""

from datetime import date, datetime
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import CheckConstraint, Text
from src.domain.base import BaseModel, UTCDateTime, generate_uuid, utc_now


class TimeOffReason(str, Enum):
    VACATION = "vacation"
    SICK = "sick"
    PERSONAL = "personal"
    TRAINING = "training"
    EQUIPMENT_MAINTENANCE = "equipment_maintenance"
    FAMILY_EMERGENCY = "family_emergency"
    OTHER = "other"


class TimeOffStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    CANCELLED = "cancelled"


ALLOWED_TRANSITIONS = {
    TimeOffStatus.PENDING: {TimeOffStatus.APPROVED, TimeOffStatus.REJECTED, TimeOffStatus.CANCELLED},
    TimeOffStatus.APPROVED: {TimeOffStatus.CANCELLED, TimeOffStatus.REJECTED},
    TimeOffStatus.REJECTED: set(),
    TimeOffStatus.CANCELLED: set(),
}


class StaffTimeOff(BaseModel, table=True):
    __tablename__ = "staff_time_off"
    __table_args__ = (
        CheckConstraint('end_date >= start_date', name='time_off_valid_range'),
    )

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    staff_id: str = Field(index=True)

    start_date: date = Field(index=True)
    end_date: date = Field(index=True)

    reason: TimeOffReason
    reason_details: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))

    status: TimeOffStatus = Field(default=TimeOffStatus.PENDING, index=True)
    requested_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
    reviewed_at: Optional[datetime] = Field(default=None, sa_type=UTCDateTime)
    reviewed_by: Optional[str] = Field(default=None)
    review_notes: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))

    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)

    @property
    def day_count(self) -> int:
        return (self.end_date - self.start_date).days + 1

    def can_transition_to(self, new_status: TimeOffStatus) -> bool:
        return new_status in ALLOWED_TRANSITIONS.get(self.status, set())
