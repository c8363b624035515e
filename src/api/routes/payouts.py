"""Payouts API Routes

Idempotent payout completion: acquire the lock, then complete.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.error import ClientError
from src.app.use_cases.payouts import (
    AcquirePayoutLock,
    CompletePayouts,
    AcquirePayoutLockCommandDTO,
    PayoutLockResponseDTO,
    CompletePayoutsCommandDTO,
    CompletePayoutsResponseDTO,
)
from src.adapter.repositories import (
    SqlAlchemyPayoutIdempotencyRepository,
    SqlAlchemyPayoutRepository,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session

router = APIRouter(prefix="/payouts", tags=["Payouts"])


@router.post("/lock", response_model=PayoutLockResponseDTO, status_code=status.HTTP_200_OK)
async def acquire_payout_lock(
    request: AcquirePayoutLockCommandDTO,
    session: AsyncSession = Depends(get_session),
):
    """
    Claim the idempotency key for an order's payouts.

    `acquired=false` means another caller already holds (or finished) the
    key; `existing_status` tells which, and payout logic must not run.
    """
    use_case = AcquirePayoutLock(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyPayoutIdempotencyRepository(session),
    )
    result = await use_case.execute(request)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.post(
    "/complete",
    response_model=CompletePayoutsResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={
        404: {"description": "Lock not acquired for this key"},
        409: {"description": "Key previously failed or belongs to another order"},
    }
)
async def complete_payouts(
    request: CompletePayoutsCommandDTO,
    session: AsyncSession = Depends(get_session),
):
    use_case = CompletePayouts(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyPayoutIdempotencyRepository(session),
        SqlAlchemyPayoutRepository(session),
    )
    result = await use_case.execute(request)

    if result.is_err():
        raise ClientError(result.error)

    return result.value
