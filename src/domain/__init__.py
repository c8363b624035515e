from .base import BaseModel, generate_uuid
from .agent import Agent
from .credit_transaction import CreditTransaction, TransactionType
from .low_balance_notification import LowBalanceNotification
from .payout_idempotency import PayoutIdempotency, PayoutLockStatus
from .payout import (
    StaffPayout,
    PartnerPayout,
    CompanyPoolAllocation,
    PayoutStatus,
    PoolType,
    PoolStatus,
    StaffRole,
)
from .listing import Listing, ListingStatus
from .order import Order, OrderStatus, PaymentStatus, ServiceType
from .staff import Staff
from .availability import PhotographerAvailability, WeeklySchedule, OverrideSource, day_of_week
from .time_off import StaffTimeOff, TimeOffReason, TimeOffStatus

__all__ = [
    "BaseModel",
    "generate_uuid",
    "Agent",
    "CreditTransaction",
    "TransactionType",
    "LowBalanceNotification",
    "PayoutIdempotency",
    "PayoutLockStatus",
    "StaffPayout",
    "PartnerPayout",
    "CompanyPoolAllocation",
    "PayoutStatus",
    "PoolType",
    "PoolStatus",
    "StaffRole",
    "Listing",
    "ListingStatus",
    "Order",
    "OrderStatus",
    "PaymentStatus",
    "ServiceType",
    "Staff",
    "PhotographerAvailability",
    "WeeklySchedule",
    "OverrideSource",
    "day_of_week",
    "StaffTimeOff",
    "TimeOffReason",
    "TimeOffStatus",
]
