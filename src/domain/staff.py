"""Staff Domain Entity

Internal worker (photographer, editor, QC reviewer). Leave counters are
mutated only by time-off transitions.
"""

from datetime import datetime, time
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import CheckConstraint, String
from src.domain.base import BaseModel, UTCDateTime, generate_uuid, utc_now


class Staff(BaseModel, table=True):
    __tablename__ = "staff"
    __table_args__ = (
        CheckConstraint('vacation_days_used >= 0', name='vacation_days_used_non_negative'),
        CheckConstraint('sick_days_used >= 0', name='sick_days_used_non_negative'),
    )

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    name: str = Field(sa_column=Column(String(255), nullable=False))
    email: Optional[str] = Field(default=None)
    team_role: str = Field(default="photographer")
    is_active: bool = Field(default=True)
    max_daily_jobs: int = Field(default=4)

    default_start_time: time = Field(default=time(8, 0))
    default_end_time: time = Field(default=time(18, 0))
    timezone: str = Field(default="America/New_York")

    vacation_days_total: int = Field(default=15)
    vacation_days_used: int = Field(default=0)
    sick_days_total: int = Field(default=5)
    sick_days_used: int = Field(default=0)

    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
