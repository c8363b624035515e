"""AcquirePayoutLock Use Case

Claims an idempotency key before any payout side effects are attempted.
"""

import logging
from sqlalchemy.exc import IntegrityError
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.payout_idempotency_repository import PayoutIdempotencyRepository
from src.domain.payout_idempotency import PayoutIdempotency, PayoutLockStatus
from .dtos import AcquirePayoutLockCommandDTO, PayoutLockResponseDTO

logger = logging.getLogger(__name__)


class AcquirePayoutLock:
    """
    Use Case: Acquire the payout idempotency lock for an order

    Business Rules:
    1. No record for the key: create one in PROCESSING, acquired=True
    2. Record exists: acquired=False with its current status
    3. Two concurrent acquirers: the unique key lets exactly one insert win;
       the loser re-reads and reports the winner's status
    """

    def __init__(self, uow: UnitOfWork, idempotency_repo: PayoutIdempotencyRepository):
        self.uow = uow
        self.idempotency_repo = idempotency_repo

    async def execute(self, command: AcquirePayoutLockCommandDTO) -> Result[PayoutLockResponseDTO]:
        existing = await self.idempotency_repo.get_by_key(command.idempotency_key)
        if existing:
            return Return.ok(self._not_acquired(command, existing))

        try:
            await self.idempotency_repo.create(
                PayoutIdempotency(
                    idempotency_key=command.idempotency_key,
                    order_id=command.order_id,
                    status=PayoutLockStatus.PROCESSING,
                )
            )
            await self.uow.commit()
        except IntegrityError:
            await self.uow.rollback()
            existing = await self.idempotency_repo.get_by_key(command.idempotency_key)
            if existing:
                return Return.ok(self._not_acquired(command, existing))
            return Return.err(
                Error(
                    code="LOCK_ACQUIRE_FAILED",
                    message=f"Failed to acquire payout lock for key {command.idempotency_key}",
                )
            )
        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to acquire payout lock {command.idempotency_key}: {e}")
            return Return.err(
                Error(
                    code="LOCK_ACQUIRE_FAILED",
                    message=f"Failed to acquire payout lock for key {command.idempotency_key}",
                    reason=str(e),
                )
            )

        logger.info(f"Payout lock acquired: key={command.idempotency_key}, order={command.order_id}")
        return Return.ok(
            PayoutLockResponseDTO(
                idempotency_key=command.idempotency_key,
                order_id=command.order_id,
                acquired=True,
                existing_status=None,
            )
        )

    def _not_acquired(
        self, command: AcquirePayoutLockCommandDTO, existing: PayoutIdempotency
    ) -> PayoutLockResponseDTO:
        logger.info(
            f"Payout lock already held: key={command.idempotency_key}, status={existing.status.value}"
        )
        return PayoutLockResponseDTO(
            idempotency_key=command.idempotency_key,
            order_id=existing.order_id,
            acquired=False,
            existing_status=existing.status.value,
        )
