"""SQLAlchemy implementation of AgentRepository

Balance mutations use a single guarded UPDATE ... RETURNING so the
non-negative check and the write happen in one statement.
"""

from datetime import datetime, timedelta
from decimal import Decimal
from typing import List, Optional
from sqlalchemy import or_, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.domain.base import utc_now
from src.app.repositories.agent_repository import AgentRepository
from src.domain.agent import Agent


class SqlAlchemyAgentRepository(AgentRepository):
    """
    SQLAlchemy implementation of AgentRepository

    Features:
    - Pessimistic locking via SELECT FOR UPDATE
    - Guarded atomic balance updates
    - Compare-and-set low-balance notification claim
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, agent_id: str, for_update: bool = False) -> Optional[Agent]:
        """
        Retrieve agent by ID with optional row-level locking

        Args:
            agent_id: Agent identifier
            for_update: If True, locks the row with SELECT FOR UPDATE

        Returns:
            Agent if found, None otherwise
        """
        stmt = (
            select(Agent)
            .where(Agent.id == agent_id)
            .execution_options(populate_existing=True)
        )

        if for_update:
            stmt = stmt.with_for_update()

        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, agent: Agent) -> Agent:
        self.session.add(agent)
        await self.session.flush()
        await self.session.refresh(agent)
        return agent

    async def apply_balance_delta(self, agent_id: str, amount: Decimal) -> Optional[Decimal]:
        """
        Apply a signed delta to credit_balance unless it would go negative

        Args:
            agent_id: Agent identifier
            amount: Signed delta

        Returns:
            New balance, or None when the row did not match (missing agent or
            insufficient balance)

        Note:
            Should be called within a transaction with the agent already locked
        """
        stmt = (
            update(Agent)
            .where(Agent.id == agent_id)
            .where(Agent.credit_balance + amount >= 0)
            .values(
                credit_balance=Agent.credit_balance + amount,
                updated_at=utc_now(),
            )
            .returning(Agent.credit_balance)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def claim_low_balance_notification(
        self, agent_id: str, now: datetime, cooldown: timedelta
    ) -> bool:
        cutoff = now - cooldown
        stmt = (
            update(Agent)
            .where(Agent.id == agent_id)
            .where(
                or_(
                    Agent.low_balance_notification_sent_at.is_(None),
                    Agent.low_balance_notification_sent_at < cutoff,
                )
            )
            .values(low_balance_notification_sent_at=now)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1

    async def get_all(self) -> List[Agent]:
        result = await self.session.execute(select(Agent).order_by(Agent.created_at))
        return list(result.scalars().all())
