from .agent_repository import SqlAlchemyAgentRepository
from .credit_transaction_repository import SqlAlchemyCreditTransactionRepository
from .low_balance_notification_repository import SqlAlchemyLowBalanceNotificationRepository
from .payout_idempotency_repository import SqlAlchemyPayoutIdempotencyRepository
from .payout_repository import SqlAlchemyPayoutRepository
from .listing_repository import SqlAlchemyListingRepository
from .order_repository import SqlAlchemyOrderRepository
from .staff_repository import SqlAlchemyStaffRepository
from .availability_repository import SqlAlchemyAvailabilityRepository
from .time_off_repository import SqlAlchemyTimeOffRepository

__all__ = [
    "SqlAlchemyAgentRepository",
    "SqlAlchemyCreditTransactionRepository",
    "SqlAlchemyLowBalanceNotificationRepository",
    "SqlAlchemyPayoutIdempotencyRepository",
    "SqlAlchemyPayoutRepository",
    "SqlAlchemyListingRepository",
    "SqlAlchemyOrderRepository",
    "SqlAlchemyStaffRepository",
    "SqlAlchemyAvailabilityRepository",
    "SqlAlchemyTimeOffRepository",
]
