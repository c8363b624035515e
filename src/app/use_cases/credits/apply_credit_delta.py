"""ApplyCreditDelta Use Case

Applies a signed credit amount to an agent's balance and appends the
matching ledger row in one unit of work. Deductions that leave the balance
at or below the agent's threshold raise at most one low-balance
notification per cooldown window.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional
from sqlalchemy.exc import IntegrityError
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.notification_service import NotificationService
from src.app.repositories.agent_repository import AgentRepository
from src.app.repositories.credit_transaction_repository import CreditTransactionRepository
from src.app.repositories.low_balance_notification_repository import LowBalanceNotificationRepository
from src.domain.credit_transaction import CreditTransaction
from src.domain.low_balance_notification import LowBalanceNotification
from .dtos import ApplyCreditDeltaCommandDTO, CreditDeltaResponseDTO

logger = logging.getLogger(__name__)

DEFAULT_NOTIFICATION_COOLDOWN = timedelta(hours=24)


class ApplyCreditDelta:
    """
    Use Case: Apply a signed credit delta to an agent balance

    Business Rules:
    1. Idempotency: a known idempotency_key returns the original transaction;
       reusing it for a different agent, type or amount is IDEMPOTENCY_KEY_MISMATCH
    2. Non-negative balance: a deduction that would go below zero fails with
       INSUFFICIENT_CREDITS and mutates nothing
    3. Atomic updates: balance and ledger row commit together
    4. Serialization: agent row locked (SELECT FOR UPDATE) and balance written
       by a guarded UPDATE ... RETURNING
    5. Low balance: after a deduction at or below the threshold, claim the
       notification slot with a compare-and-set on the agent row; only the
       claimant records a notification

    Flow:
    1. Check idempotency (return existing if found)
    2. Lock agent row
    3. Guarded balance update (returns new balance)
    4. Append ledger row with balance_after snapshot
    5. Claim + record low-balance notification if needed
    6. Commit
    7. Dispatch notification (outside the transaction)
    """

    def __init__(
        self,
        uow: UnitOfWork,
        agent_repo: AgentRepository,
        transaction_repo: CreditTransactionRepository,
        notification_repo: LowBalanceNotificationRepository,
        notification_service: Optional[NotificationService] = None,
        notification_cooldown: timedelta = DEFAULT_NOTIFICATION_COOLDOWN,
    ):
        self.uow = uow
        self.agent_repo = agent_repo
        self.transaction_repo = transaction_repo
        self.notification_repo = notification_repo
        self.notification_service = notification_service
        self.notification_cooldown = notification_cooldown

    async def execute(self, command: ApplyCreditDeltaCommandDTO) -> Result[CreditDeltaResponseDTO]:
        """
        Execute credit delta

        Args:
            command: ApplyCreditDeltaCommandDTO with agent_id, signed amount and type

        Returns:
            Result[CreditDeltaResponseDTO]: Success with the new balance or error

        Errors:
            AGENT_NOT_FOUND: No agent with that id
            INSUFFICIENT_CREDITS: Deduction would drive the balance negative
            IDEMPOTENCY_KEY_MISMATCH: Key already used for a different delta
            APPLY_CREDIT_FAILED: Unexpected persistence failure
        """
        notification: Optional[LowBalanceNotification] = None

        try:
            # Step 1: Idempotent replay
            if command.idempotency_key:
                existing = await self.transaction_repo.get_by_idempotency_key(
                    command.idempotency_key
                )
                if existing:
                    return self._replay(existing, command)

            # Step 2: Lock agent row
            agent = await self.agent_repo.get_by_id(command.agent_id, for_update=True)

            if not agent:
                await self.uow.rollback()
                return Return.err(
                    Error(
                        code="AGENT_NOT_FOUND",
                        message=f"Agent not found: {command.agent_id}",
                    )
                )

            agent_id = agent.id
            available = agent.credit_balance
            threshold = agent.credit_low_balance_threshold

            # Step 3: Guarded balance update
            balance_after = await self.agent_repo.apply_balance_delta(agent_id, command.amount)

            if balance_after is None:
                await self.uow.rollback()
                logger.warning(
                    f"Insufficient credits for agent {agent_id}: "
                    f"requested={command.amount}, available={available}"
                )
                return Return.err(
                    Error(
                        code="INSUFFICIENT_CREDITS",
                        message=f"Insufficient credits. Required: {-command.amount}, Available: {available}",
                        reason=f"balance={available}, delta={command.amount}",
                    )
                )

            # Step 4: Ledger row with balance snapshot
            transaction = CreditTransaction(
                agent_id=agent_id,
                type=command.type,
                amount=command.amount,
                balance_after=balance_after,
                description=command.description,
                package_id=command.package_id,
                stripe_payment_intent_id=command.stripe_payment_intent_id,
                order_id=command.order_id,
                service_type=command.service_type,
                adjusted_by=command.adjusted_by,
                adjustment_reason=command.adjustment_reason,
                idempotency_key=command.idempotency_key,
            )
            created_transaction = await self.transaction_repo.create(transaction)

            # Step 5: Low-balance notification
            if command.amount < 0 and threshold is not None and balance_after <= threshold:
                now = datetime.now(timezone.utc)
                claimed = await self.agent_repo.claim_low_balance_notification(
                    agent_id, now, self.notification_cooldown
                )
                if claimed:
                    notification = await self.notification_repo.create(
                        LowBalanceNotification(
                            agent_id=agent_id,
                            balance_at_notification=balance_after,
                            created_at=now,
                        )
                    )

            # Step 6: Commit
            await self.uow.commit()

        except IntegrityError as e:
            await self.uow.rollback()
            # Concurrent replay of the same idempotency key
            if command.idempotency_key:
                existing = await self.transaction_repo.get_by_idempotency_key(
                    command.idempotency_key
                )
                if existing:
                    return self._replay(existing, command)
            return self._failed(e)

        except Exception as e:
            await self.uow.rollback()
            return self._failed(e)

        logger.info(
            f"Applied {command.type.value} of {command.amount} to agent {created_transaction.agent_id}, "
            f"balance_after={created_transaction.balance_after}"
        )

        # Step 7: Dispatch outside the transaction
        if notification is not None:
            await self._dispatch(notification)

        return Return.ok(
            self._to_response_dto(
                created_transaction,
                notification_id=notification.id if notification else None,
            )
        )

    def _replay(self, existing: CreditTransaction, command: ApplyCreditDeltaCommandDTO) -> Result:
        if (
            existing.agent_id != command.agent_id
            or existing.type != command.type
            or existing.amount != command.amount
        ):
            logger.warning(
                f"Idempotency key {command.idempotency_key} reused for a different delta "
                f"(original agent={existing.agent_id}, amount={existing.amount})"
            )
            return Return.err(
                Error(
                    code="IDEMPOTENCY_KEY_MISMATCH",
                    message=f"Idempotency key {command.idempotency_key} was used for a different credit delta",
                    reason=f"original agent={existing.agent_id}, type={existing.type.value}, amount={existing.amount}",
                )
            )
        return Return.ok(self._to_response_dto(existing))

    async def _dispatch(self, notification: LowBalanceNotification) -> None:
        if self.notification_service is None:
            return
        try:
            await self.notification_service.send_low_balance_alert(notification)
        except Exception as e:
            logger.error(f"Failed to dispatch low balance notification {notification.id}: {e}")

    def _failed(self, e: Exception) -> Result:
        logger.error(f"Failed to apply credit delta: {e}")
        return Return.err(
            Error(
                code="APPLY_CREDIT_FAILED",
                message="Failed to apply credit delta",
                reason=str(e),
            )
        )

    def _to_response_dto(
        self, transaction: CreditTransaction, notification_id: Optional[str] = None
    ) -> CreditDeltaResponseDTO:
        return CreditDeltaResponseDTO(
            transaction_id=transaction.id,
            agent_id=transaction.agent_id,
            type=transaction.type.value,
            amount=transaction.amount,
            balance_after=transaction.balance_after,
            description=transaction.description,
            order_id=transaction.order_id,
            idempotency_key=transaction.idempotency_key,
            low_balance_notification_id=notification_id,
            created_at=transaction.created_at,
        )
