"""Listing Repository Interface"""

from abc import ABC, abstractmethod
from typing import Optional
from src.domain.listing import Listing


class ListingRepository(ABC):
    @abstractmethod
    async def create(self, listing: Listing) -> Listing:
        """
        Insert a listing and return it with server-assigned fields populated

        Must not commit; the caller's unit of work owns the transaction.
        """
        pass

    @abstractmethod
    async def get_by_id(self, listing_id: str) -> Optional[Listing]:
        pass

    @abstractmethod
    async def count_by_agent(self, agent_id: str) -> int:
        pass
