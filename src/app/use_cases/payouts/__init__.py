"""Payout idempotency use cases"""
from .acquire_payout_lock import AcquirePayoutLock
from .complete_payouts import CompletePayouts
from .dtos import (
    AcquirePayoutLockCommandDTO,
    PayoutLockResponseDTO,
    StaffPayoutLineDTO,
    PartnerPayoutLineDTO,
    PoolAllocationLineDTO,
    CompletePayoutsCommandDTO,
    CompletePayoutsResponseDTO,
)

__all__ = [
    "AcquirePayoutLock",
    "CompletePayouts",
    "AcquirePayoutLockCommandDTO",
    "PayoutLockResponseDTO",
    "StaffPayoutLineDTO",
    "PartnerPayoutLineDTO",
    "PoolAllocationLineDTO",
    "CompletePayoutsCommandDTO",
    "CompletePayoutsResponseDTO",
]
