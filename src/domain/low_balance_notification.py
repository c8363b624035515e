"""Low Balance Notification Domain Entity"""

from datetime import datetime
from decimal import Decimal
from sqlmodel import Field, Column
from sqlalchemy import ForeignKey, Numeric, String
from src.domain.base import BaseModel, UTCDateTime, generate_uuid, utc_now


class LowBalanceNotification(BaseModel, table=True):
    """
    Record of a low-balance alert raised for an agent.

    At most one is created per agent per cooldown window; the claim is made
    on Agent.low_balance_notification_sent_at before this row is written.
    """

    __tablename__ = "low_balance_notifications"

    id: str = Field(default_factory=generate_uuid, primary_key=True)

    agent_id: str = Field(
        sa_column=Column(String, ForeignKey("agents.id", ondelete="CASCADE"), nullable=False, index=True)
    )

    balance_at_notification: Decimal = Field(
        sa_column=Column(Numeric(10, 2), nullable=False)
    )

    notification_type: str = Field(default="low_balance")

    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
