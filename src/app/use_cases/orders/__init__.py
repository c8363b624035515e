"""Order use cases"""
from .create_order_and_listing import CreateOrderAndListing
from .dtos import (
    CreateOrderAndListingCommandDTO,
    CreateOrderAndListingResponseDTO,
    PropertyDetailsDTO,
    ServiceSelectionDTO,
    PricingDTO,
    ContactInfoDTO,
    OrderDTO,
    ListingDTO,
)

__all__ = [
    "CreateOrderAndListing",
    "CreateOrderAndListingCommandDTO",
    "CreateOrderAndListingResponseDTO",
    "PropertyDetailsDTO",
    "ServiceSelectionDTO",
    "PricingDTO",
    "ContactInfoDTO",
    "OrderDTO",
    "ListingDTO",
]
