"""Payout Idempotency Domain Entity

Persisted state machine that guards payout application for an order.
One record per caller-supplied idempotency key.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import String, Text
from src.domain.base import BaseModel, UTCDateTime, generate_uuid, utc_now


class PayoutLockStatus(str, Enum):
    """Payout idempotency states"""
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


class PayoutIdempotency(BaseModel, table=True):
    """
    Payout Idempotency - at-most-once guard for payout batches

    Domain Rules:
    - idempotency_key is unique (acts as a cross-request mutex)
    - Transitions: processing -> completed | failed
    - completed and failed are terminal; a failed key is never retried
    """

    __tablename__ = "payout_idempotency"

    id: str = Field(default_factory=generate_uuid, primary_key=True)

    idempotency_key: str = Field(
        sa_column=Column(String(255), nullable=False, unique=True),
        description="Caller-supplied idempotency key"
    )

    order_id: str = Field(index=True, description="Order whose payouts this key guards")

    status: PayoutLockStatus = Field(default=PayoutLockStatus.PROCESSING)

    error_message: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
    )

    staff_payout_count: int = Field(default=0)
    partner_payout_count: int = Field(default=0)
    pool_allocation_count: int = Field(default=0)

    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
    completed_at: Optional[datetime] = Field(default=None, sa_type=UTCDateTime)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
