"""Listing Domain Entity

Property record backing an order. Created together with its Order.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import Numeric, String
from src.domain.base import BaseModel, UTCDateTime, generate_uuid, utc_now


class ListingStatus(str, Enum):
    ACTIVE = "active"
    PENDING = "pending"
    SOLD = "sold"
    EXPIRED = "expired"
    WITHDRAWN = "withdrawn"


class Listing(BaseModel, table=True):
    __tablename__ = "listings"

    id: str = Field(default_factory=generate_uuid, primary_key=True)

    agent_id: str = Field(index=True)

    address: str = Field(sa_column=Column(String(255), nullable=False))
    city: Optional[str] = Field(default=None)
    state: Optional[str] = Field(default="FL")
    zip: Optional[str] = Field(default=None)
    beds: Optional[int] = Field(default=None)
    baths: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(3, 1), nullable=True),
    )
    sqft: Optional[int] = Field(default=None)
    price: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(12, 2), nullable=True),
    )

    status: ListingStatus = Field(default=ListingStatus.PENDING)
    ops_status: str = Field(default="pending")
    is_rush: bool = Field(default=False)

    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
