"""Integration tests for CreateOrderAndListing"""

import pytest
from sqlalchemy import func
from sqlmodel import select

from src.adapter.repositories import (
    SqlAlchemyAgentRepository,
    SqlAlchemyListingRepository,
    SqlAlchemyOrderRepository,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.orders import (
    CreateOrderAndListing,
    CreateOrderAndListingCommandDTO,
    PropertyDetailsDTO,
    ServiceSelectionDTO,
    PricingDTO,
    ContactInfoDTO,
)
from src.domain.listing import Listing
from src.domain.order import Order
from tests.integration.helpers import seed_agent


class ExplodingOrderRepository(SqlAlchemyOrderRepository):
    """Fails after the listing has already been flushed"""

    async def create(self, order: Order) -> Order:
        raise RuntimeError("order insert failed")


def use_case(session, order_repo=None) -> CreateOrderAndListing:
    return CreateOrderAndListing(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyAgentRepository(session),
        SqlAlchemyListingRepository(session),
        order_repo or SqlAlchemyOrderRepository(session),
    )


def command(**pricing) -> CreateOrderAndListingCommandDTO:
    return CreateOrderAndListingCommandDTO(
        agent_id="agent_1",
        property=PropertyDetailsDTO(address="123 Palm Ave", city="Orlando", zip="32801", sqft=2100, beds=3),
        service=ServiceSelectionDTO(
            package_key="signature",
            package_name="Signature",
            services=[{"id": "photos", "name": "HDR Photos"}, {"id": "drone", "name": "Drone"}],
        ),
        pricing=PricingDTO(**(pricing or {"subtotal_cents": 44900, "total_cents": 44900})),
        contact=ContactInfoDTO(name="Jane Agent", email="jane@example.com"),
    )


async def row_count(session_factory, model) -> int:
    async with session_factory() as session:
        return (await session.execute(select(func.count()).select_from(model))).scalar_one()


@pytest.mark.asyncio
class TestOrderListingPairing:
    async def test_creates_both_rows(self, db_session, session_factory):
        await seed_agent(db_session)

        result = await use_case(db_session).execute(command())

        assert result.is_ok()
        async with session_factory() as session:
            order = await SqlAlchemyOrderRepository(session).get_by_id(result.value.order.id)
            listing = await SqlAlchemyListingRepository(session).get_by_id(result.value.listing.id)
        assert order.listing_id == listing.id
        assert order.services[1]["id"] == "drone"
        assert listing.agent_id == "agent_1"
        assert result.value.listing.status == "pending"

    async def test_forced_failure_leaves_no_orphan_listing(self, db_session, session_factory):
        await seed_agent(db_session)

        result = await use_case(db_session, ExplodingOrderRepository(db_session)).execute(command())

        assert result.is_err()
        assert result.error.code == "ORDER_CREATION_FAILED"
        assert await row_count(session_factory, Listing) == 0
        assert await row_count(session_factory, Order) == 0

    async def test_database_rejection_leaves_no_orphan_listing(self, db_session, session_factory):
        await seed_agent(db_session)
        bad = command()
        # Bypass DTO validation so the CHECK constraint on orders fails
        bad.pricing = PricingDTO.model_construct(subtotal_cents=100, discount_cents=0, tax_cents=0, total_cents=-1)

        result = await use_case(db_session).execute(bad)

        assert result.is_err()
        assert await row_count(session_factory, Listing) == 0

    async def test_unknown_agent(self, db_session, session_factory):
        result = await use_case(db_session).execute(command())

        assert result.error.code == "AGENT_NOT_FOUND"
        assert await row_count(session_factory, Listing) == 0
