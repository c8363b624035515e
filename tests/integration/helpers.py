"""Builders shared by integration tests"""

from datetime import timedelta
from decimal import Decimal

from src.adapter.repositories import (
    SqlAlchemyAgentRepository,
    SqlAlchemyCreditTransactionRepository,
    SqlAlchemyLowBalanceNotificationRepository,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.credits import ApplyCreditDelta
from src.domain.agent import Agent
from src.domain.staff import Staff


def apply_credit_delta(session, notification_service=None, cooldown=timedelta(hours=24)) -> ApplyCreditDelta:
    return ApplyCreditDelta(
        uow=SqlAlchemyUnitOfWork(session),
        agent_repo=SqlAlchemyAgentRepository(session),
        transaction_repo=SqlAlchemyCreditTransactionRepository(session),
        notification_repo=SqlAlchemyLowBalanceNotificationRepository(session),
        notification_service=notification_service,
        notification_cooldown=cooldown,
    )


async def seed_agent(session, balance: str = "100", threshold: str = "50", agent_id: str = "agent_1") -> Agent:
    agent = Agent(
        id=agent_id,
        name="Jane Agent",
        email=f"{agent_id}@example.com",
        credit_balance=Decimal(balance),
        credit_low_balance_threshold=Decimal(threshold),
    )
    session.add(agent)
    await session.commit()
    return agent


async def seed_staff(session, staff_id: str = "staff_1") -> Staff:
    staff = Staff(id=staff_id, name="Sam Shooter", email=f"{staff_id}@example.com")
    session.add(staff)
    await session.commit()
    return staff
