"""Credits API Routes

FastAPI routes for the agent credit ledger.
"""

from datetime import timedelta
from decimal import Decimal
from fastapi import APIRouter, Depends, Query, status
from pydantic import ValidationError
from sqlmodel.ext.asyncio.session import AsyncSession

from libs.result import Error
from src.api.error import ClientError
from src.api.schemas.credits_request import ApplyCreditRequestSchema, DeductForOrderRequestSchema
from src.app.services.notification_service import NotificationService
from src.app.use_cases.credits import (
    ApplyCreditDelta,
    DeductCreditsForOrder,
    CheckSufficientCredits,
    GetCreditBalance,
    ListCreditTransactions,
    ApplyCreditDeltaCommandDTO,
    DeductCreditsForOrderCommandDTO,
    CreditDeltaResponseDTO,
    BalanceResponseDTO,
    SufficientCreditsResponseDTO,
    ListTransactionsResponseDTO,
)
from src.adapter.repositories import (
    SqlAlchemyAgentRepository,
    SqlAlchemyCreditTransactionRepository,
    SqlAlchemyLowBalanceNotificationRepository,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session, get_notification_service, get_notification_cooldown

router = APIRouter(prefix="/credits", tags=["Credits"])


def _apply_use_case(
    session: AsyncSession, notification_service: NotificationService, cooldown: timedelta
) -> ApplyCreditDelta:
    return ApplyCreditDelta(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyAgentRepository(session),
        SqlAlchemyCreditTransactionRepository(session),
        SqlAlchemyLowBalanceNotificationRepository(session),
        notification_service=notification_service,
        notification_cooldown=cooldown,
    )


@router.post(
    "/apply",
    response_model=CreditDeltaResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={
        402: {
            "description": "Insufficient credits",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "INSUFFICIENT_CREDITS",
                            "message": "Insufficient credits. Required: 75.00, Available: 20.00"
                        }
                    }
                }
            }
        },
        404: {"description": "Agent not found"},
    }
)
async def apply_credit_delta(
    request: ApplyCreditRequestSchema,
    session: AsyncSession = Depends(get_session),
    notification_service: NotificationService = Depends(get_notification_service),
    cooldown: timedelta = Depends(get_notification_cooldown),
):
    """
    Apply a signed credit amount to an agent balance.

    Purchases, refunds and bonuses must be positive; usage and expiry must be
    negative; adjustments may be either. A deduction that would take the
    balance below zero returns 402 and changes nothing. Repeating a request
    with the same `idempotency_key` returns the original transaction.
    """
    try:
        command = ApplyCreditDeltaCommandDTO(**request.model_dump())
    except ValidationError as e:
        raise ClientError(Error(code="VALIDATION_ERROR", message="Invalid credit delta", reason=str(e)))

    result = await _apply_use_case(session, notification_service, cooldown).execute(command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.post(
    "/deduct-for-order",
    response_model=CreditDeltaResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def deduct_credits_for_order(
    request: DeductForOrderRequestSchema,
    session: AsyncSession = Depends(get_session),
    notification_service: NotificationService = Depends(get_notification_service),
    cooldown: timedelta = Depends(get_notification_cooldown),
):
    """Pay for an order with credits (usage transaction linked to the order)."""
    try:
        command = DeductCreditsForOrderCommandDTO(**request.model_dump())
    except ValidationError as e:
        raise ClientError(Error(code="VALIDATION_ERROR", message="Invalid order deduction", reason=str(e)))

    use_case = DeductCreditsForOrder(_apply_use_case(session, notification_service, cooldown))
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get("/{agent_id}/balance", response_model=BalanceResponseDTO)
async def get_balance(agent_id: str, session: AsyncSession = Depends(get_session)):
    result = await GetCreditBalance(SqlAlchemyAgentRepository(session)).execute(agent_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get("/{agent_id}/sufficient", response_model=SufficientCreditsResponseDTO)
async def check_sufficient_credits(
    agent_id: str,
    required: Decimal = Query(..., ge=0),
    session: AsyncSession = Depends(get_session),
):
    """Advisory check; the deduction itself is what enforces the balance."""
    result = await CheckSufficientCredits(SqlAlchemyAgentRepository(session)).execute(agent_id, required)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get("/{agent_id}/transactions", response_model=ListTransactionsResponseDTO)
async def list_transactions(
    agent_id: str,
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    session: AsyncSession = Depends(get_session),
):
    use_case = ListCreditTransactions(
        SqlAlchemyAgentRepository(session),
        SqlAlchemyCreditTransactionRepository(session),
    )
    result = await use_case.execute(agent_id, limit=limit, offset=offset)

    if result.is_err():
        raise ClientError(result.error)

    return result.value
