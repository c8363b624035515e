"""Order Repository Interface"""

from abc import ABC, abstractmethod
from typing import Optional
from src.domain.order import Order


class OrderRepository(ABC):
    @abstractmethod
    async def create(self, order: Order) -> Order:
        """
        Insert an order and return it with server-assigned fields populated

        Must not commit; the caller's unit of work owns the transaction.
        """
        pass

    @abstractmethod
    async def get_by_id(self, order_id: str) -> Optional[Order]:
        pass
