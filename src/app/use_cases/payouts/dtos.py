"""Data Transfer Objects for Payout Use Cases"""

from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field
from src.domain.payout import PayoutStatus, PoolStatus, PoolType, StaffRole


class AcquirePayoutLockCommandDTO(BaseModel):
    idempotency_key: str = Field(..., min_length=1, description="Caller-supplied idempotency key")
    order_id: str = Field(..., min_length=1)


class PayoutLockResponseDTO(BaseModel):
    """
    Response DTO for AcquirePayoutLock

    acquired is False when a record already existed for the key; existing_status
    then carries its state and the caller must not run payout logic.
    """

    idempotency_key: str
    order_id: str
    acquired: bool
    existing_status: Optional[str] = None


class StaffPayoutLineDTO(BaseModel):
    recipient_id: str = Field(..., description="Staff member receiving the payout")
    amount_cents: int = Field(..., ge=0)
    role: StaffRole = StaffRole.PHOTOGRAPHER
    payout_percent: Optional[Decimal] = None
    status: PayoutStatus = PayoutStatus.PENDING


class PartnerPayoutLineDTO(BaseModel):
    recipient_id: str = Field(..., description="Partner receiving the payout")
    amount_cents: int = Field(..., ge=0)
    staff_id: Optional[str] = Field(default=None, description="Photographer who did the job")
    payout_percent: Optional[Decimal] = None
    status: PayoutStatus = PayoutStatus.PENDING


class PoolAllocationLineDTO(BaseModel):
    pool_type: PoolType = Field(..., description="Company pool receiving the allocation")
    amount_cents: int = Field(..., ge=0)
    percent: Optional[Decimal] = None
    status: PoolStatus = PoolStatus.AVAILABLE


class CompletePayoutsCommandDTO(BaseModel):
    """
    Command DTO for applying the payout batches of an order

    Used as input to CompletePayouts use case. Requires a prior
    AcquirePayoutLock with the same idempotency_key.
    """

    idempotency_key: str = Field(..., min_length=1)
    order_id: str = Field(..., min_length=1)
    staff_payouts: List[StaffPayoutLineDTO] = Field(default_factory=list)
    partner_payouts: List[PartnerPayoutLineDTO] = Field(default_factory=list)
    company_pool_allocations: List[PoolAllocationLineDTO] = Field(default_factory=list)

    class Config:
        json_schema_extra = {
            "example": {
                "idempotency_key": "payout:order_123",
                "order_id": "order_123",
                "staff_payouts": [
                    {"recipient_id": "staff_1", "amount_cents": 12000, "role": "photographer", "payout_percent": "40.00"}
                ],
                "partner_payouts": [
                    {"recipient_id": "partner_1", "amount_cents": 3000, "staff_id": "staff_1"}
                ],
                "company_pool_allocations": [
                    {"pool_type": "qc_fund", "amount_cents": 1500, "percent": "5.00"}
                ],
            }
        }


class CompletePayoutsResponseDTO(BaseModel):
    idempotency_key: str
    order_id: str
    success: bool
    already_completed: bool = False
    status: str
    staff_payout_count: int = 0
    partner_payout_count: int = 0
    pool_allocation_count: int = 0
    message: str
