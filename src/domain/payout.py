"""Payout Domain Entities

Money owed for a completed order: staff payouts, partner payouts and
company pool allocations. Rows are written only by CompletePayouts.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import CheckConstraint, Numeric
from src.domain.base import BaseModel, UTCDateTime, generate_uuid, utc_now


class PayoutStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"
    REVERSED = "reversed"


class StaffRole(str, Enum):
    PHOTOGRAPHER = "photographer"
    VIDEOGRAPHER = "videographer"
    EDITOR = "editor"
    DRONE_OPERATOR = "drone_operator"


class PoolType(str, Enum):
    VIDEO_EDITOR = "video_editor"
    QC_FUND = "qc_fund"
    OPERATING = "operating"


class PoolStatus(str, Enum):
    AVAILABLE = "available"
    ALLOCATED = "allocated"
    PAID = "paid"


class StaffPayout(BaseModel, table=True):
    __tablename__ = "staff_payouts"
    __table_args__ = (
        CheckConstraint('payout_amount_cents >= 0', name='staff_payout_amount_non_negative'),
    )

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    staff_id: str = Field(index=True)
    order_id: str = Field(index=True)
    role: StaffRole = Field(default=StaffRole.PHOTOGRAPHER)
    payout_amount_cents: int
    payout_percent: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(5, 2), nullable=True),
    )
    status: PayoutStatus = Field(default=PayoutStatus.PENDING)
    idempotency_key: str = Field(index=True)
    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)


class PartnerPayout(BaseModel, table=True):
    __tablename__ = "partner_payouts"
    __table_args__ = (
        CheckConstraint('payout_amount_cents >= 0', name='partner_payout_amount_non_negative'),
    )

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    partner_id: str = Field(index=True)
    order_id: str = Field(index=True)
    staff_id: Optional[str] = Field(default=None, description="Photographer who did the job")
    payout_amount_cents: int
    payout_percent: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(5, 2), nullable=True),
    )
    status: PayoutStatus = Field(default=PayoutStatus.PENDING)
    idempotency_key: str = Field(index=True)
    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)


class CompanyPoolAllocation(BaseModel, table=True):
    __tablename__ = "company_pool"
    __table_args__ = (
        CheckConstraint('amount_cents >= 0', name='company_pool_amount_non_negative'),
    )

    id: str = Field(default_factory=generate_uuid, primary_key=True)
    order_id: str = Field(index=True)
    pool_type: PoolType
    amount_cents: int
    percent: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(5, 2), nullable=True),
    )
    status: PoolStatus = Field(default=PoolStatus.AVAILABLE)
    idempotency_key: str = Field(index=True)
    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
