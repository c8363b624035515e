"""Staff Time Off Repository Interface"""

from abc import ABC, abstractmethod
from datetime import date
from typing import Optional
from src.domain.time_off import StaffTimeOff, TimeOffStatus


class TimeOffRepository(ABC):
    @abstractmethod
    async def create(self, request: StaffTimeOff) -> StaffTimeOff:
        pass

    @abstractmethod
    async def get_by_id(self, time_off_id: str, for_update: bool = False) -> Optional[StaffTimeOff]:
        pass

    @abstractmethod
    async def save(self, request: StaffTimeOff) -> StaffTimeOff:
        pass

    @abstractmethod
    async def has_approved_covering(self, staff_id: str, on_date: date) -> bool:
        """True if an approved request for the staff member spans on_date"""
        pass

    @abstractmethod
    async def count_by_status(self, staff_id: str, status: TimeOffStatus) -> int:
        pass

    @abstractmethod
    async def count_upcoming_approved(self, staff_id: str, from_date: date) -> int:
        pass
