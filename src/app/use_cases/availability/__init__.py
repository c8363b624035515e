"""Staff availability and time-off use cases"""
from .is_staff_available import IsStaffAvailable
from .request_time_off import RequestTimeOff
from .transition_time_off import TransitionTimeOff
from .set_availability_override import SetAvailabilityOverride
from .set_weekly_schedule import SetWeeklySchedule
from .get_staff_availability_summary import GetStaffAvailabilitySummary
from .resolvers import (
    AvailabilityResolver,
    ApprovedTimeOffResolver,
    DateOverrideResolver,
    WeeklyScheduleResolver,
    DefaultWeekdayResolver,
)
from .dtos import (
    IsStaffAvailableQueryDTO,
    AvailabilityResponseDTO,
    RequestTimeOffCommandDTO,
    TransitionTimeOffCommandDTO,
    TimeOffResponseDTO,
    TimeOffTransitionResponseDTO,
    SetAvailabilityOverrideCommandDTO,
    OverrideResponseDTO,
    SetWeeklyScheduleCommandDTO,
    WeeklyScheduleResponseDTO,
    StaffAvailabilitySummaryDTO,
)

__all__ = [
    "IsStaffAvailable",
    "RequestTimeOff",
    "TransitionTimeOff",
    "SetAvailabilityOverride",
    "SetWeeklySchedule",
    "GetStaffAvailabilitySummary",
    "AvailabilityResolver",
    "ApprovedTimeOffResolver",
    "DateOverrideResolver",
    "WeeklyScheduleResolver",
    "DefaultWeekdayResolver",
    "IsStaffAvailableQueryDTO",
    "AvailabilityResponseDTO",
    "RequestTimeOffCommandDTO",
    "TransitionTimeOffCommandDTO",
    "TimeOffResponseDTO",
    "TimeOffTransitionResponseDTO",
    "SetAvailabilityOverrideCommandDTO",
    "OverrideResponseDTO",
    "SetWeeklyScheduleCommandDTO",
    "WeeklyScheduleResponseDTO",
    "StaffAvailabilitySummaryDTO",
]
