"""Unit tests for CreateOrderAndListing use case"""

import pytest
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.orders.create_order_and_listing import CreateOrderAndListing
from src.app.use_cases.orders.dtos import (
    CreateOrderAndListingCommandDTO,
    PropertyDetailsDTO,
    ServiceSelectionDTO,
    PricingDTO,
    ContactInfoDTO,
)
from src.domain.agent import Agent
from src.domain.listing import ListingStatus


@pytest.fixture
def mock_agent_repo():
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=Agent(id="agent_1", name="Jane Agent"))
    return repo


@pytest.fixture
def mock_listing_repo():
    repo = MagicMock()
    repo.create = AsyncMock(side_effect=lambda listing: listing)
    return repo


@pytest.fixture
def mock_order_repo():
    repo = MagicMock()
    repo.create = AsyncMock(side_effect=lambda order: order)
    return repo


@pytest.fixture
def use_case(mock_uow, mock_agent_repo, mock_listing_repo, mock_order_repo):
    return CreateOrderAndListing(
        uow=mock_uow,
        agent_repo=mock_agent_repo,
        listing_repo=mock_listing_repo,
        order_repo=mock_order_repo,
    )


@pytest.fixture
def command():
    return CreateOrderAndListingCommandDTO(
        agent_id="agent_1",
        property=PropertyDetailsDTO(address="123 Palm Ave", city="Orlando", zip="32801", sqft=2100, beds=3, baths=Decimal("2.5")),
        service=ServiceSelectionDTO(
            package_key="signature",
            package_name="Signature",
            sqft_tier="2001-3500",
            services=[{"id": "photos", "name": "HDR Photos"}],
        ),
        pricing=PricingDTO(subtotal_cents=44900, total_cents=44900),
        contact=ContactInfoDTO(name="Jane Agent", email="jane@example.com"),
    )


@pytest.mark.asyncio
class TestCreateOrderAndListing:
    async def test_creates_linked_pair(self, use_case, mock_uow, mock_listing_repo, mock_order_repo, command):
        result = await use_case.execute(command)

        assert result.is_ok()
        listing = mock_listing_repo.create.call_args[0][0]
        order = mock_order_repo.create.call_args[0][0]
        assert order.listing_id == listing.id
        assert listing.status == ListingStatus.PENDING
        assert order.property_address == "123 Palm Ave"
        assert order.services == [{"id": "photos", "name": "HDR Photos"}]
        assert result.value.order.listing_id == result.value.listing.id
        assert result.value.order.status == "pending"
        assert result.value.order.payment_status == "pending"
        mock_uow.commit.assert_called_once()

    async def test_agent_not_found(self, use_case, mock_uow, mock_agent_repo, mock_listing_repo, command):
        mock_agent_repo.get_by_id = AsyncMock(return_value=None)

        result = await use_case.execute(command)

        assert result.is_err()
        assert result.error.code == "AGENT_NOT_FOUND"
        mock_listing_repo.create.assert_not_called()
        mock_uow.commit.assert_not_called()

    async def test_order_failure_rolls_back_listing(self, use_case, mock_uow, mock_order_repo, command):
        mock_order_repo.create = AsyncMock(side_effect=RuntimeError("order insert failed"))

        result = await use_case.execute(command)

        assert result.is_err()
        assert result.error.code == "ORDER_CREATION_FAILED"
        mock_uow.rollback.assert_called()
        mock_uow.commit.assert_not_called()


class TestCreateOrderCommandValidation:
    def test_discount_cannot_exceed_subtotal(self):
        with pytest.raises(ValueError):
            CreateOrderAndListingCommandDTO(
                agent_id="agent_1",
                property=PropertyDetailsDTO(address="1 Main St"),
                service=ServiceSelectionDTO(package_key="essentials", package_name="Essentials"),
                pricing=PricingDTO(subtotal_cents=1000, discount_cents=2000, total_cents=0),
                contact=ContactInfoDTO(name="A", email="a@example.com"),
            )
