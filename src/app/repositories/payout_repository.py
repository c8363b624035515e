"""Payout Repository Interface

Bulk inserts for the three payout batches of an order.
"""

from abc import ABC, abstractmethod
from typing import Dict, List
from src.domain.payout import StaffPayout, PartnerPayout, CompanyPoolAllocation


class PayoutRepository(ABC):
    @abstractmethod
    async def add_staff_payouts(self, payouts: List[StaffPayout]) -> None:
        pass

    @abstractmethod
    async def add_partner_payouts(self, payouts: List[PartnerPayout]) -> None:
        pass

    @abstractmethod
    async def add_pool_allocations(self, allocations: List[CompanyPoolAllocation]) -> None:
        pass

    @abstractmethod
    async def count_for_order(self, order_id: str) -> Dict[str, int]:
        """
        Count payout rows per batch for an order

        Returns:
            Mapping with keys "staff", "partner" and "pool"
        """
        pass
