"""Low Balance Notification Repository Interface"""

from abc import ABC, abstractmethod
from src.domain.low_balance_notification import LowBalanceNotification


class LowBalanceNotificationRepository(ABC):
    @abstractmethod
    async def create(self, notification: LowBalanceNotification) -> LowBalanceNotification:
        pass

    @abstractmethod
    async def count_by_agent(self, agent_id: str) -> int:
        pass
