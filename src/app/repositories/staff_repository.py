"""Staff Repository Interface"""

from abc import ABC, abstractmethod
from typing import Optional
from src.domain.staff import Staff


class StaffRepository(ABC):
    @abstractmethod
    async def get_by_id(self, staff_id: str, for_update: bool = False) -> Optional[Staff]:
        """
        Retrieve staff member by ID

        Args:
            staff_id: Staff identifier
            for_update: If True, lock the row with SELECT FOR UPDATE

        Returns:
            Staff if found, None otherwise
        """
        pass

    @abstractmethod
    async def create(self, staff: Staff) -> Staff:
        pass

    @abstractmethod
    async def save(self, staff: Staff) -> Staff:
        pass
