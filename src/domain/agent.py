"""Agent Domain Entity

A real-estate agent who pays for services with prepaid credits.
The credit balance is only mutated through ledger operations.
"""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import CheckConstraint, Numeric, String
from src.domain.base import BaseModel, UTCDateTime, generate_uuid, utc_now


class Agent(BaseModel, table=True):
    """
    Agent - Paying customer holding a prepaid credit balance

    Domain Rules:
    - credit_balance must be non-negative
    - credit_balance changes only through CreditTransactions
    - At most one low-balance notification per cooldown window,
      tracked by low_balance_notification_sent_at
    """

    __tablename__ = "agents"
    __table_args__ = (
        CheckConstraint('credit_balance >= 0', name='credit_balance_non_negative'),
    )

    id: str = Field(
        default_factory=generate_uuid,
        primary_key=True,
        description="Agent identifier (UUID)"
    )

    name: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Display name"
    )

    email: Optional[str] = Field(
        default=None,
        sa_column=Column(String(255), nullable=True, unique=True),
        description="Contact email"
    )

    credit_balance: Decimal = Field(
        default=Decimal("0.00"),
        sa_column=Column(Numeric(10, 2), nullable=False, default=0),
        description="Current credit balance (must be >= 0)"
    )

    credit_low_balance_threshold: Decimal = Field(
        default=Decimal("50.00"),
        sa_column=Column(Numeric(10, 2), nullable=False, default=50),
        description="Balance at or below which a low-balance notification is raised"
    )

    low_balance_notification_sent_at: Optional[datetime] = Field(
        default=None,
        sa_type=UTCDateTime,
        description="When the last low-balance notification was claimed"
    )

    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)

    updated_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
