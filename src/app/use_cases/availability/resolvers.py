"""Availability resolver chain

Each resolver answers True, False, or None (no opinion). IsStaffAvailable
asks them in order and the first non-None answer wins.
"""

from abc import ABC, abstractmethod
from datetime import date, time
from typing import Optional
from src.app.repositories.availability_repository import AvailabilityRepository
from src.app.repositories.time_off_repository import TimeOffRepository
from src.domain.availability import day_of_week


def within_window(at_time: Optional[time], start: Optional[time], end: Optional[time]) -> bool:
    """Inclusive window check; no time or no window means the whole day"""
    if at_time is None or start is None or end is None:
        return True
    return start <= at_time <= end


class AvailabilityResolver(ABC):
    layer: str = ""

    @abstractmethod
    async def resolve(self, staff_id: str, on_date: date, at_time: Optional[time] = None) -> Optional[bool]:
        pass


class ApprovedTimeOffResolver(AvailabilityResolver):
    layer = "time_off"

    def __init__(self, time_off_repo: TimeOffRepository):
        self.time_off_repo = time_off_repo

    async def resolve(self, staff_id: str, on_date: date, at_time: Optional[time] = None) -> Optional[bool]:
        if await self.time_off_repo.has_approved_covering(staff_id, on_date):
            return False
        return None


class DateOverrideResolver(AvailabilityResolver):
    """
    Date-specific overrides

    Any unavailable row for the date wins. Otherwise the staff member is
    available if the time falls inside any available row's window.
    """

    layer = "date_override"

    def __init__(self, availability_repo: AvailabilityRepository):
        self.availability_repo = availability_repo

    async def resolve(self, staff_id: str, on_date: date, at_time: Optional[time] = None) -> Optional[bool]:
        overrides = await self.availability_repo.get_overrides(staff_id, on_date)
        if not overrides:
            return None
        if any(not o.is_available for o in overrides):
            return False
        return any(within_window(at_time, o.available_from, o.available_to) for o in overrides)


class WeeklyScheduleResolver(AvailabilityResolver):
    layer = "weekly_schedule"

    def __init__(self, availability_repo: AvailabilityRepository):
        self.availability_repo = availability_repo

    async def resolve(self, staff_id: str, on_date: date, at_time: Optional[time] = None) -> Optional[bool]:
        schedule = await self.availability_repo.get_weekly(staff_id, day_of_week(on_date))
        if schedule is None:
            return None
        if not schedule.is_available:
            return False
        return within_window(at_time, schedule.available_from, schedule.available_to)


class DefaultWeekdayResolver(AvailabilityResolver):
    """Monday to Friday available, weekends not"""

    layer = "default_weekday"

    async def resolve(self, staff_id: str, on_date: date, at_time: Optional[time] = None) -> Optional[bool]:
        return 1 <= day_of_week(on_date) <= 5
