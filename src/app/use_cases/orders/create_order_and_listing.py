"""CreateOrderAndListing Use Case

Creates the Listing and the Order that references it in one unit of work,
so neither row can exist without the other.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.agent_repository import AgentRepository
from src.app.repositories.listing_repository import ListingRepository
from src.app.repositories.order_repository import OrderRepository
from src.domain.listing import Listing, ListingStatus
from src.domain.order import Order
from .dtos import (
    CreateOrderAndListingCommandDTO,
    CreateOrderAndListingResponseDTO,
    ListingDTO,
    OrderDTO,
)

logger = logging.getLogger(__name__)


class CreateOrderAndListing:
    """
    Use Case: Create an order and its listing atomically

    Business Rules:
    1. The agent must exist
    2. Listing is inserted first (status pending), then the order pointing at it
    3. Any failure rolls back both rows
    """

    def __init__(
        self,
        uow: UnitOfWork,
        agent_repo: AgentRepository,
        listing_repo: ListingRepository,
        order_repo: OrderRepository,
    ):
        self.uow = uow
        self.agent_repo = agent_repo
        self.listing_repo = listing_repo
        self.order_repo = order_repo

    async def execute(
        self, command: CreateOrderAndListingCommandDTO
    ) -> Result[CreateOrderAndListingResponseDTO]:
        prop = command.property
        service = command.service
        pricing = command.pricing
        contact = command.contact

        try:
            agent = await self.agent_repo.get_by_id(command.agent_id)
            if not agent:
                await self.uow.rollback()
                return Return.err(
                    Error(
                        code="AGENT_NOT_FOUND",
                        message=f"Agent not found: {command.agent_id}",
                    )
                )

            listing = await self.listing_repo.create(
                Listing(
                    agent_id=agent.id,
                    address=prop.address,
                    city=prop.city,
                    state=prop.state,
                    zip=prop.zip,
                    beds=prop.beds,
                    baths=prop.baths,
                    sqft=prop.sqft,
                    price=prop.price,
                    status=ListingStatus.PENDING,
                    is_rush=service.is_rush,
                )
            )

            order = await self.order_repo.create(
                Order(
                    agent_id=agent.id,
                    listing_id=listing.id,
                    service_type=service.service_type,
                    package_key=service.package_key,
                    package_name=service.package_name,
                    sqft_tier=service.sqft_tier,
                    services=service.services,
                    subtotal_cents=pricing.subtotal_cents,
                    discount_cents=pricing.discount_cents,
                    tax_cents=pricing.tax_cents,
                    total_cents=pricing.total_cents,
                    property_address=prop.address,
                    property_city=prop.city,
                    property_state=prop.state,
                    property_zip=prop.zip,
                    property_sqft=prop.sqft,
                    property_beds=prop.beds,
                    property_baths=prop.baths,
                    contact_name=contact.name,
                    contact_email=contact.email,
                    contact_phone=contact.phone,
                    scheduled_at=contact.scheduled_at,
                    special_instructions=contact.special_instructions,
                )
            )

            await self.uow.commit()

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to create order for agent {command.agent_id}: {e}")
            return Return.err(
                Error(
                    code="ORDER_CREATION_FAILED",
                    message="Failed to create order and listing",
                    reason=str(e),
                )
            )

        logger.info(f"Order {order.id} created with listing {listing.id} for agent {agent.id}")

        return Return.ok(
            CreateOrderAndListingResponseDTO(
                order=OrderDTO(
                    id=order.id,
                    agent_id=order.agent_id,
                    listing_id=order.listing_id,
                    service_type=order.service_type.value,
                    package_key=order.package_key,
                    package_name=order.package_name,
                    total_cents=order.total_cents,
                    status=order.status.value,
                    payment_status=order.payment_status.value,
                    created_at=order.created_at,
                ),
                listing=ListingDTO(
                    id=listing.id,
                    agent_id=listing.agent_id,
                    address=listing.address,
                    city=listing.city,
                    state=listing.state,
                    zip=listing.zip,
                    status=listing.status.value,
                    ops_status=listing.ops_status,
                    is_rush=listing.is_rush,
                    created_at=listing.created_at,
                ),
            )
        )
