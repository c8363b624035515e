"""Order Domain Entity

Every order references exactly one Listing, created in the same transaction.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Optional
from sqlmodel import Field, Column
from sqlalchemy import JSON, CheckConstraint, ForeignKey, Numeric, String
from src.domain.base import BaseModel, UTCDateTime, generate_uuid, utc_now


class ServiceType(str, Enum):
    LISTING = "listing"
    RETAINER = "retainer"


class OrderStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    CONFIRMED = "confirmed"
    SCHEDULED = "scheduled"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"
    REFUNDED = "refunded"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    REFUNDED = "refunded"
    CANCELLED = "cancelled"


class Order(BaseModel, table=True):
    """
    Order - A booked media package for a listing

    Domain Rules:
    - listing_id is required and points at the listing created with the order
    - Money is stored in integer cents; total_cents must be non-negative
    """

    __tablename__ = "orders"
    __table_args__ = (
        CheckConstraint('subtotal_cents >= 0', name='order_subtotal_non_negative'),
        CheckConstraint('total_cents >= 0', name='order_total_non_negative'),
    )

    id: str = Field(default_factory=generate_uuid, primary_key=True)

    agent_id: str = Field(index=True)

    listing_id: str = Field(
        sa_column=Column(String, ForeignKey("listings.id"), nullable=False, index=True)
    )

    # Service details
    service_type: ServiceType = Field(default=ServiceType.LISTING)
    package_key: str
    package_name: str
    sqft_tier: Optional[str] = Field(default=None)
    services: List[Dict[str, Any]] = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
    )

    # Pricing
    subtotal_cents: int
    discount_cents: int = Field(default=0)
    tax_cents: int = Field(default=0)
    total_cents: int

    # Property copy
    property_address: Optional[str] = Field(default=None)
    property_city: Optional[str] = Field(default=None)
    property_state: Optional[str] = Field(default="FL")
    property_zip: Optional[str] = Field(default=None)
    property_sqft: Optional[int] = Field(default=None)
    property_beds: Optional[int] = Field(default=None)
    property_baths: Optional[Decimal] = Field(
        default=None,
        sa_column=Column(Numeric(3, 1), nullable=True),
    )

    # Contact
    contact_name: str
    contact_email: str
    contact_phone: Optional[str] = Field(default=None)

    scheduled_at: Optional[datetime] = Field(default=None, sa_type=UTCDateTime)
    special_instructions: Optional[str] = Field(default=None)

    status: OrderStatus = Field(default=OrderStatus.PENDING)
    payment_status: PaymentStatus = Field(default=PaymentStatus.PENDING)

    created_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=UTCDateTime)
