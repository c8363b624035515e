"""Credit Transaction Domain Entity

Immutable append-only audit trail of all credit mutations.
Each transaction records the signed amount and the balance snapshot after it.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import ForeignKey, Numeric, String, Text
from src.domain.base import BaseModel, UTCDateTime, generate_uuid, utc_now


class TransactionType(str, Enum):
    """Credit transaction types"""
    PURCHASE = "purchase"        # Credits bought with a package
    USAGE = "usage"              # Credits spent on an order
    REFUND = "refund"            # Credits returned to the agent
    ADJUSTMENT = "adjustment"    # Manual staff adjustment (either sign)
    BONUS = "bonus"              # Promotional credits
    EXPIRY = "expiry"            # Credits removed on expiry


POSITIVE_TYPES = frozenset({TransactionType.PURCHASE, TransactionType.REFUND, TransactionType.BONUS})
NEGATIVE_TYPES = frozenset({TransactionType.USAGE, TransactionType.EXPIRY})


class CreditTransaction(BaseModel, table=True):
    """
    Credit Transaction - Immutable audit trail of credit mutations

    Domain Rules:
    - Transactions are immutable (append-only)
    - amount is signed: positive adds credits, negative deducts
    - balance_after is the agent balance immediately after this row was applied
    - idempotency_key is optional but unique when present
    """

    __tablename__ = "credit_transactions"
    __table_args__ = (
        Index('ix_credit_transactions_agent_created', 'agent_id', 'created_at'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Transaction identifier (UUID)"
    )

    agent_id: str = Field(
        sa_column=Column(String, ForeignKey("agents.id", ondelete="CASCADE"), nullable=False, index=True),
        description="Agent whose balance changed"
    )

    type: TransactionType = Field(
        description="Transaction type (purchase, usage, refund, adjustment, bonus, expiry)"
    )

    amount: Decimal = Field(
        sa_column=Column(Numeric(10, 2), nullable=False),
        description="Signed credit amount"
    )

    balance_after: Decimal = Field(
        sa_column=Column(Numeric(10, 2), nullable=False),
        description="Balance snapshot after this transaction"
    )

    description: Optional[str] = Field(
        default=None,
        sa_column=Column(Text, nullable=True),
    )

    # Purchase linkage
    package_id: Optional[str] = Field(default=None)
    stripe_payment_intent_id: Optional[str] = Field(default=None)

    # Usage linkage
    order_id: Optional[str] = Field(default=None, index=True)
    service_type: Optional[str] = Field(default=None)

    # Staff adjustments
    adjusted_by: Optional[str] = Field(default=None)
    adjustment_reason: Optional[str] = Field(default=None)

    idempotency_key: Optional[str] = Field(
        default=None,
        sa_column=Column(String(255), nullable=True, unique=True),
        description="Optional caller key; replays return the original row"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_type=UTCDateTime,
        description="Transaction timestamp (immutable)"
    )
