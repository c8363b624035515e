"""Availability Repository Interface

Date overrides and weekly schedule rows for staff members.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional
from src.domain.availability import PhotographerAvailability, WeeklySchedule


class AvailabilityRepository(ABC):
    @abstractmethod
    async def get_overrides(self, staff_id: str, on_date: date) -> List[PhotographerAvailability]:
        """All override rows (manual and time-off) for a staff member on a date"""
        pass

    @abstractmethod
    async def get_manual_override(self, staff_id: str, on_date: date) -> Optional[PhotographerAvailability]:
        pass

    @abstractmethod
    async def save_override(self, override: PhotographerAvailability) -> PhotographerAvailability:
        pass

    @abstractmethod
    async def add_time_off_blocks(self, blocks: List[PhotographerAvailability]) -> None:
        pass

    @abstractmethod
    async def delete_time_off_blocks(self, time_off_id: str) -> int:
        """
        Delete override rows materialized by a time-off request

        Args:
            time_off_id: The request whose rows should be removed

        Returns:
            Number of rows deleted
        """
        pass

    @abstractmethod
    async def get_weekly(self, staff_id: str, day_of_week: int) -> Optional[WeeklySchedule]:
        pass

    @abstractmethod
    async def save_weekly(self, schedule: WeeklySchedule) -> WeeklySchedule:
        pass
