"""Data Transfer Objects for Availability Use Cases"""

from datetime import date, datetime, time
from typing import Optional
from pydantic import BaseModel, Field, model_validator
from src.domain.time_off import TimeOffReason, TimeOffStatus


class IsStaffAvailableQueryDTO(BaseModel):
    staff_id: str
    on_date: date
    at_time: Optional[time] = Field(default=None, description="Optional time of day; whole day when omitted")


class AvailabilityResponseDTO(BaseModel):
    """
    Response DTO for IsStaffAvailable

    decided_by names the resolver layer that produced the answer
    (time_off, date_override, weekly_schedule, default_weekday).
    """

    staff_id: str
    on_date: date
    at_time: Optional[time] = None
    available: bool
    decided_by: str


class RequestTimeOffCommandDTO(BaseModel):
    staff_id: str
    start_date: date
    end_date: date
    reason: TimeOffReason
    reason_details: Optional[str] = None

    class Config:
        json_schema_extra = {
            "example": {
                "staff_id": "0e8f5d0c-7f3e-4b55-9a7a-3c1d2b4e5f60",
                "start_date": "2026-03-09",
                "end_date": "2026-03-11",
                "reason": "vacation",
                "reason_details": "Family trip"
            }
        }


class TransitionTimeOffCommandDTO(BaseModel):
    time_off_id: str
    new_status: TimeOffStatus
    reviewed_by: Optional[str] = None
    review_notes: Optional[str] = None


class TimeOffResponseDTO(BaseModel):
    id: str
    staff_id: str
    start_date: date
    end_date: date
    day_count: int
    reason: str
    status: str
    requested_at: datetime
    reviewed_at: Optional[datetime] = None
    reviewed_by: Optional[str] = None
    review_notes: Optional[str] = None


class TimeOffTransitionResponseDTO(TimeOffResponseDTO):
    previous_status: str
    vacation_days_used: int
    sick_days_used: int
    blocks_added: int = 0
    blocks_removed: int = 0


class SetAvailabilityOverrideCommandDTO(BaseModel):
    staff_id: str
    on_date: date
    is_available: bool
    available_from: Optional[time] = None
    available_to: Optional[time] = None
    max_jobs_override: Optional[int] = Field(default=None, ge=0)
    notes: Optional[str] = None

    @model_validator(mode="after")
    def check_window(self):
        if (self.available_from is None) != (self.available_to is None):
            raise ValueError("available_from and available_to must be given together")
        if self.available_from is not None and self.available_from > self.available_to:
            raise ValueError("available_from must not be after available_to")
        return self


class OverrideResponseDTO(BaseModel):
    id: str
    staff_id: str
    on_date: date
    is_available: bool
    available_from: Optional[time] = None
    available_to: Optional[time] = None
    max_jobs_override: Optional[int] = None
    notes: Optional[str] = None
    source: str


class SetWeeklyScheduleCommandDTO(BaseModel):
    staff_id: str
    day_of_week: int = Field(..., ge=0, le=6, description="0 = Sunday ... 6 = Saturday")
    available_from: time = time(8, 0)
    available_to: time = time(18, 0)
    is_available: bool = True
    max_jobs: int = Field(default=4, ge=0)

    @model_validator(mode="after")
    def check_window(self):
        if self.available_from > self.available_to:
            raise ValueError("available_from must not be after available_to")
        return self


class WeeklyScheduleResponseDTO(BaseModel):
    id: str
    staff_id: str
    day_of_week: int
    available_from: time
    available_to: time
    is_available: bool
    max_jobs: int


class StaffAvailabilitySummaryDTO(BaseModel):
    staff_id: str
    name: str
    team_role: str
    is_active: bool
    max_daily_jobs: int
    default_start_time: time
    default_end_time: time
    timezone: str
    vacation_days_total: int
    vacation_days_used: int
    vacation_days_remaining: int
    sick_days_total: int
    sick_days_used: int
    sick_days_remaining: int
    pending_time_off_requests: int
    upcoming_approved_time_off: int
