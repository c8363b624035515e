"""Orders API Routes"""

from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.error import ClientError
from src.app.use_cases.orders import (
    CreateOrderAndListing,
    CreateOrderAndListingCommandDTO,
    CreateOrderAndListingResponseDTO,
)
from src.adapter.repositories import (
    SqlAlchemyAgentRepository,
    SqlAlchemyListingRepository,
    SqlAlchemyOrderRepository,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session

router = APIRouter(prefix="/orders", tags=["Orders"])


@router.post("", response_model=CreateOrderAndListingResponseDTO, status_code=status.HTTP_201_CREATED)
async def create_order(
    request: CreateOrderAndListingCommandDTO,
    session: AsyncSession = Depends(get_session),
):
    """
    Create an order and its listing in one transaction.

    Either both rows exist afterwards or neither does.
    """
    use_case = CreateOrderAndListing(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyAgentRepository(session),
        SqlAlchemyListingRepository(session),
        SqlAlchemyOrderRepository(session),
    )
    result = await use_case.execute(request)

    if result.is_err():
        raise ClientError(result.error)

    return result.value
