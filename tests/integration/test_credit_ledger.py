"""Integration tests for the credit ledger against a real database

Tests cover:
- Balance and ledger row commit together
- Insufficient credits mutate nothing
- Concurrent deductions never overdraw and keep the chain intact
- Low-balance notification dedup under concurrency
- Idempotent replay and key reuse
"""

import asyncio
import pytest
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from sqlalchemy import func
from sqlmodel import select

from src.adapter.repositories import SqlAlchemyAgentRepository, SqlAlchemyCreditTransactionRepository
from src.app.use_cases.credits import ApplyCreditDeltaCommandDTO, ReconcileLedger
from src.domain.agent import Agent
from src.domain.credit_transaction import CreditTransaction, TransactionType
from src.domain.low_balance_notification import LowBalanceNotification
from tests.integration.helpers import apply_credit_delta, seed_agent


def usage(amount: str, **kwargs) -> ApplyCreditDeltaCommandDTO:
    return ApplyCreditDeltaCommandDTO(
        agent_id="agent_1", amount=Decimal(amount), type=TransactionType.USAGE, **kwargs
    )


async def count(session, model, **filters) -> int:
    stmt = select(func.count()).select_from(model)
    for field, value in filters.items():
        stmt = stmt.where(getattr(model, field) == value)
    return (await session.execute(stmt)).scalar_one()


async def fresh_agent(session_factory, agent_id: str = "agent_1") -> Agent:
    async with session_factory() as session:
        return await SqlAlchemyAgentRepository(session).get_by_id(agent_id)


async def reconcile(session_factory):
    async with session_factory() as session:
        return await ReconcileLedger(
            SqlAlchemyAgentRepository(session), SqlAlchemyCreditTransactionRepository(session)
        ).execute()


@pytest.mark.asyncio
class TestLedgerAtomicity:
    async def test_deduction_and_purchase(self, db_session, session_factory):
        await seed_agent(db_session, balance="100")

        first = await apply_credit_delta(db_session).execute(usage("-30", order_id="order_1"))
        second = await apply_credit_delta(db_session).execute(
            ApplyCreditDeltaCommandDTO(agent_id="agent_1", amount=Decimal("50"), type=TransactionType.PURCHASE)
        )

        assert first.is_ok() and second.is_ok()
        assert first.value.balance_after == Decimal("70")
        assert second.value.balance_after == Decimal("120")

        agent = await fresh_agent(session_factory)
        assert agent.credit_balance == Decimal("120")
        async with session_factory() as session:
            assert await count(session, CreditTransaction, agent_id="agent_1") == 2

    async def test_insufficient_credits_leave_state_untouched(self, db_session, session_factory):
        await seed_agent(db_session, balance="20")

        result = await apply_credit_delta(db_session).execute(usage("-75"))

        assert result.is_err()
        assert result.error.code == "INSUFFICIENT_CREDITS"
        agent = await fresh_agent(session_factory)
        assert agent.credit_balance == Decimal("20")
        async with session_factory() as session:
            assert await count(session, CreditTransaction) == 0

    async def test_exact_balance_can_be_spent(self, db_session, session_factory):
        await seed_agent(db_session, balance="40", threshold="0")

        result = await apply_credit_delta(db_session).execute(usage("-40"))

        assert result.is_ok()
        assert result.value.balance_after == Decimal("0")


@pytest.mark.asyncio
class TestLedgerConcurrency:
    async def test_concurrent_deductions_never_overdraw(self, db_session, session_factory):
        """
        Given: Balance 100
        When: 5 callers each deduct 30 at the same time
        Then: Exactly 3 succeed, balance 10, ledger chain reconciles
        """
        await seed_agent(db_session, balance="100", threshold="0")

        async def deduct(i):
            async with session_factory() as session:
                return await apply_credit_delta(session).execute(usage("-30", order_id=f"order_{i}"))

        results = await asyncio.gather(*(deduct(i) for i in range(5)))

        succeeded = [r for r in results if r.is_ok()]
        rejected = [r for r in results if r.is_err()]
        assert len(succeeded) == 3
        assert all(r.error.code == "INSUFFICIENT_CREDITS" for r in rejected)
        assert sorted(r.value.balance_after for r in succeeded) == [Decimal("10"), Decimal("40"), Decimal("70")]

        agent = await fresh_agent(session_factory)
        assert agent.credit_balance == Decimal("10")

        report = await reconcile(session_factory)
        assert report.is_ok()
        assert report.value.discrepancies_found == 0


@pytest.mark.asyncio
class TestLowBalanceNotificationDedup:
    async def test_ten_concurrent_crossings_notify_once(self, db_session, session_factory):
        await seed_agent(db_session, balance="50", threshold="50")

        async def deduct(i):
            async with session_factory() as session:
                return await apply_credit_delta(session).execute(usage("-5", order_id=f"order_{i}"))

        results = await asyncio.gather(*(deduct(i) for i in range(10)))

        assert all(r.is_ok() for r in results)
        assert sum(1 for r in results if r.value.low_balance_notification_id) == 1
        async with session_factory() as session:
            assert await count(session, LowBalanceNotification, agent_id="agent_1") == 1
        agent = await fresh_agent(session_factory)
        assert agent.credit_balance == Decimal("0")
        assert agent.low_balance_notification_sent_at is not None

    async def test_notifies_again_after_cooldown(self, db_session, session_factory):
        agent = await seed_agent(db_session, balance="40", threshold="50")
        agent.low_balance_notification_sent_at = datetime.now(timezone.utc) - timedelta(hours=25)
        db_session.add(agent)
        await db_session.commit()

        result = await apply_credit_delta(db_session).execute(usage("-5"))

        assert result.value.low_balance_notification_id is not None

    async def test_no_notification_within_cooldown(self, db_session, session_factory):
        agent = await seed_agent(db_session, balance="40", threshold="50")
        agent.low_balance_notification_sent_at = datetime.now(timezone.utc) - timedelta(hours=2)
        db_session.add(agent)
        await db_session.commit()

        result = await apply_credit_delta(db_session).execute(usage("-5"))

        assert result.is_ok()
        assert result.value.low_balance_notification_id is None
        async with session_factory() as session:
            assert await count(session, LowBalanceNotification) == 0


@pytest.mark.asyncio
class TestIdempotentReplay:
    async def test_same_key_applies_once(self, db_session, session_factory):
        await seed_agent(db_session, balance="100", threshold="0")

        first = await apply_credit_delta(db_session).execute(usage("-25", idempotency_key="order_1:usage"))
        second = await apply_credit_delta(db_session).execute(usage("-25", idempotency_key="order_1:usage"))

        assert first.value.transaction_id == second.value.transaction_id
        agent = await fresh_agent(session_factory)
        assert agent.credit_balance == Decimal("75")
        async with session_factory() as session:
            assert await count(session, CreditTransaction) == 1

    async def test_key_reused_for_other_agent_is_rejected(self, db_session, session_factory):
        await seed_agent(db_session, balance="100", threshold="0", agent_id="agent_1")
        await seed_agent(db_session, balance="100", threshold="0", agent_id="agent_2")

        first = await apply_credit_delta(db_session).execute(usage("-10", idempotency_key="shared"))
        second = await apply_credit_delta(db_session).execute(
            ApplyCreditDeltaCommandDTO(
                agent_id="agent_2", amount=Decimal("-30"), type=TransactionType.USAGE, idempotency_key="shared"
            )
        )

        assert first.is_ok()
        assert second.is_err()
        assert second.error.code == "IDEMPOTENCY_KEY_MISMATCH"
        agent_2 = await fresh_agent(session_factory, "agent_2")
        assert agent_2.credit_balance == Decimal("100")
