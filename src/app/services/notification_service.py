from abc import ABC, abstractmethod
from src.domain.low_balance_notification import LowBalanceNotification


class NotificationService(ABC):
    """Delivers low-balance alerts after the ledger transaction commits"""

    @abstractmethod
    async def send_low_balance_alert(self, notification: LowBalanceNotification) -> bool:
        """Returns True when the alert reached its channel"""
        pass
