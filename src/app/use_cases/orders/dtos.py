"""Data Transfer Objects for Order Use Cases"""

from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, model_validator
from src.domain.order import ServiceType


class PropertyDetailsDTO(BaseModel):
    address: str = Field(..., min_length=1, max_length=255)
    city: Optional[str] = None
    state: Optional[str] = "FL"
    zip: Optional[str] = None
    sqft: Optional[int] = Field(default=None, ge=0)
    beds: Optional[int] = Field(default=None, ge=0)
    baths: Optional[Decimal] = Field(default=None, ge=0)
    price: Optional[Decimal] = Field(default=None, ge=0)


class ServiceSelectionDTO(BaseModel):
    service_type: ServiceType = ServiceType.LISTING
    package_key: str = Field(..., min_length=1)
    package_name: str = Field(..., min_length=1)
    sqft_tier: Optional[str] = None
    services: List[Dict[str, Any]] = Field(default_factory=list)
    is_rush: bool = False


class PricingDTO(BaseModel):
    subtotal_cents: int = Field(..., ge=0)
    discount_cents: int = Field(default=0, ge=0)
    tax_cents: int = Field(default=0, ge=0)
    total_cents: int = Field(..., ge=0)


class ContactInfoDTO(BaseModel):
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    phone: Optional[str] = None
    scheduled_at: Optional[datetime] = None
    special_instructions: Optional[str] = None


class CreateOrderAndListingCommandDTO(BaseModel):
    """
    Command DTO for creating an order together with its listing

    Used as input to CreateOrderAndListing use case.
    """

    agent_id: str = Field(..., description="Agent placing the order")
    property: PropertyDetailsDTO
    service: ServiceSelectionDTO
    pricing: PricingDTO
    contact: ContactInfoDTO

    @model_validator(mode="after")
    def check_total(self):
        if self.pricing.discount_cents > self.pricing.subtotal_cents:
            raise ValueError("discount_cents cannot exceed subtotal_cents")
        return self

    class Config:
        json_schema_extra = {
            "example": {
                "agent_id": "5b1c3f7e-3c2a-4e0e-9d51-1f4a7c1f0a11",
                "property": {"address": "123 Palm Ave", "city": "Orlando", "zip": "32801", "sqft": 2100, "beds": 3, "baths": "2.5"},
                "service": {"package_key": "signature", "package_name": "Signature", "sqft_tier": "2001-3500", "services": [{"id": "photos", "name": "HDR Photos"}]},
                "pricing": {"subtotal_cents": 44900, "discount_cents": 0, "tax_cents": 0, "total_cents": 44900},
                "contact": {"name": "Jane Agent", "email": "jane@example.com", "phone": "407-555-0100"},
            }
        }


class ListingDTO(BaseModel):
    id: str
    agent_id: str
    address: str
    city: Optional[str]
    state: Optional[str]
    zip: Optional[str]
    status: str
    ops_status: str
    is_rush: bool
    created_at: datetime


class OrderDTO(BaseModel):
    id: str
    agent_id: str
    listing_id: str
    service_type: str
    package_key: str
    package_name: str
    total_cents: int
    status: str
    payment_status: str
    created_at: datetime


class CreateOrderAndListingResponseDTO(BaseModel):
    order: OrderDTO
    listing: ListingDTO
