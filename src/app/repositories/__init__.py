from .agent_repository import AgentRepository
from .credit_transaction_repository import CreditTransactionRepository
from .low_balance_notification_repository import LowBalanceNotificationRepository
from .payout_idempotency_repository import PayoutIdempotencyRepository
from .payout_repository import PayoutRepository
from .listing_repository import ListingRepository
from .order_repository import OrderRepository
from .staff_repository import StaffRepository
from .availability_repository import AvailabilityRepository
from .time_off_repository import TimeOffRepository

__all__ = [
    "AgentRepository",
    "CreditTransactionRepository",
    "LowBalanceNotificationRepository",
    "PayoutIdempotencyRepository",
    "PayoutRepository",
    "ListingRepository",
    "OrderRepository",
    "StaffRepository",
    "AvailabilityRepository",
    "TimeOffRepository",
]
