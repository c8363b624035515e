"""SQLAlchemy implementation of LowBalanceNotificationRepository"""

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.low_balance_notification_repository import LowBalanceNotificationRepository
from src.domain.low_balance_notification import LowBalanceNotification


class SqlAlchemyLowBalanceNotificationRepository(LowBalanceNotificationRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, notification: LowBalanceNotification) -> LowBalanceNotification:
        self.session.add(notification)
        await self.session.flush()
        await self.session.refresh(notification)
        return notification

    async def count_by_agent(self, agent_id: str) -> int:
        stmt = select(func.count()).select_from(LowBalanceNotification).where(
            LowBalanceNotification.agent_id == agent_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
