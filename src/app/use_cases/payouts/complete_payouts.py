"""CompletePayouts Use Case

Applies the staff, partner and company pool batches for an order exactly
once per idempotency key.
"""

import logging
from datetime import datetime, timezone
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.payout_idempotency_repository import PayoutIdempotencyRepository
from src.app.repositories.payout_repository import PayoutRepository
from src.domain.payout import StaffPayout, PartnerPayout, CompanyPoolAllocation
from src.domain.payout_idempotency import PayoutIdempotency, PayoutLockStatus
from .dtos import CompletePayoutsCommandDTO, CompletePayoutsResponseDTO

logger = logging.getLogger(__name__)


class CompletePayouts:
    """
    Use Case: Insert payout batches guarded by an idempotency record

    Business Rules:
    1. LOCK_NOT_FOUND if AcquirePayoutLock was never called for the key
    2. ORDER_MISMATCH if the key guards a different order
    3. Already COMPLETED: success without inserting anything
    4. FAILED: PREVIOUSLY_FAILED, never retried automatically
    5. Otherwise all three batches and the COMPLETED state commit together;
       on any error every insert rolls back and the record is marked FAILED
       in a separate transaction
    """

    def __init__(
        self,
        uow: UnitOfWork,
        idempotency_repo: PayoutIdempotencyRepository,
        payout_repo: PayoutRepository,
    ):
        self.uow = uow
        self.idempotency_repo = idempotency_repo
        self.payout_repo = payout_repo

    async def execute(self, command: CompletePayoutsCommandDTO) -> Result[CompletePayoutsResponseDTO]:
        """
        Execute payout completion

        Args:
            command: CompletePayoutsCommandDTO with the key, order and batches

        Returns:
            Result[CompletePayoutsResponseDTO]: Success (possibly already_completed) or error

        Errors:
            LOCK_NOT_FOUND, ORDER_MISMATCH, PREVIOUSLY_FAILED, TRANSACTION_FAILURE
        """
        record = await self.idempotency_repo.get_by_key(command.idempotency_key, for_update=True)

        # Rollback expires loaded rows, so every early answer is built first
        if not record:
            result = Return.err(
                Error(
                    code="LOCK_NOT_FOUND",
                    message=f"No payout lock acquired for key {command.idempotency_key}",
                    reason="AcquirePayoutLock must be called before CompletePayouts",
                )
            )
        elif record.order_id != command.order_id:
            result = Return.err(
                Error(
                    code="ORDER_MISMATCH",
                    message=f"Key {command.idempotency_key} guards order {record.order_id}, not {command.order_id}",
                )
            )
        elif record.status == PayoutLockStatus.COMPLETED:
            logger.info(f"Payouts already completed for key {command.idempotency_key}")
            result = Return.ok(self._to_response_dto(record, already_completed=True, message="Payouts already completed"))
        elif record.status == PayoutLockStatus.FAILED:
            result = Return.err(
                Error(
                    code="PREVIOUSLY_FAILED",
                    message=f"Payout for key {command.idempotency_key} previously failed; use a new idempotency key to retry",
                    reason=record.error_message,
                )
            )
        else:
            result = None

        if result is not None:
            await self.uow.rollback()
            return result

        try:
            staff_payouts = [
                StaffPayout(
                    staff_id=line.recipient_id,
                    order_id=command.order_id,
                    role=line.role,
                    payout_amount_cents=line.amount_cents,
                    payout_percent=line.payout_percent,
                    status=line.status,
                    idempotency_key=command.idempotency_key,
                )
                for line in command.staff_payouts
            ]
            partner_payouts = [
                PartnerPayout(
                    partner_id=line.recipient_id,
                    order_id=command.order_id,
                    staff_id=line.staff_id,
                    payout_amount_cents=line.amount_cents,
                    payout_percent=line.payout_percent,
                    status=line.status,
                    idempotency_key=command.idempotency_key,
                )
                for line in command.partner_payouts
            ]
            allocations = [
                CompanyPoolAllocation(
                    order_id=command.order_id,
                    pool_type=line.pool_type,
                    amount_cents=line.amount_cents,
                    percent=line.percent,
                    status=line.status,
                    idempotency_key=command.idempotency_key,
                )
                for line in command.company_pool_allocations
            ]

            if staff_payouts:
                await self.payout_repo.add_staff_payouts(staff_payouts)
            if partner_payouts:
                await self.payout_repo.add_partner_payouts(partner_payouts)
            if allocations:
                await self.payout_repo.add_pool_allocations(allocations)

            record.status = PayoutLockStatus.COMPLETED
            record.error_message = None
            record.staff_payout_count = len(staff_payouts)
            record.partner_payout_count = len(partner_payouts)
            record.pool_allocation_count = len(allocations)
            record.completed_at = datetime.now(timezone.utc)
            await self.idempotency_repo.save(record)

            await self.uow.commit()

        except Exception as e:
            await self.uow.rollback()
            logger.warning(f"Payout batch failed for key {command.idempotency_key}: {e}")
            await self._mark_failed(command.idempotency_key, str(e))
            return Return.err(
                Error(
                    code="TRANSACTION_FAILURE",
                    message=f"Failed to apply payouts for order {command.order_id}",
                    reason=str(e),
                )
            )

        logger.info(
            f"Payouts completed for order {command.order_id}: "
            f"staff={record.staff_payout_count}, partner={record.partner_payout_count}, "
            f"pool={record.pool_allocation_count}"
        )
        return Return.ok(self._to_response_dto(record, already_completed=False, message="Payouts completed"))

    async def _mark_failed(self, idempotency_key: str, error_message: str) -> None:
        """Persist the FAILED state after the payout inserts were rolled back"""
        try:
            record = await self.idempotency_repo.get_by_key(idempotency_key, for_update=True)
            if record:
                record.status = PayoutLockStatus.FAILED
                record.error_message = error_message
                await self.idempotency_repo.save(record)
                await self.uow.commit()
        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Could not mark payout key {idempotency_key} as failed: {e}")

    def _to_response_dto(
        self, record: PayoutIdempotency, already_completed: bool, message: str
    ) -> CompletePayoutsResponseDTO:
        return CompletePayoutsResponseDTO(
            idempotency_key=record.idempotency_key,
            order_id=record.order_id,
            success=True,
            already_completed=already_completed,
            status=record.status.value,
            staff_payout_count=record.staff_payout_count,
            partner_payout_count=record.partner_payout_count,
            pool_allocation_count=record.pool_allocation_count,
            message=message,
        )
