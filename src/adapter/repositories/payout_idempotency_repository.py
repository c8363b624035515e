"""SQLAlchemy implementation of PayoutIdempotencyRepository"""

from typing import Optional
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.domain.base import utc_now
from src.app.repositories.payout_idempotency_repository import PayoutIdempotencyRepository
from src.domain.payout_idempotency import PayoutIdempotency


class SqlAlchemyPayoutIdempotencyRepository(PayoutIdempotencyRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_key(self, idempotency_key: str, for_update: bool = False) -> Optional[PayoutIdempotency]:
        stmt = (
            select(PayoutIdempotency)
            .where(PayoutIdempotency.idempotency_key == idempotency_key)
            .execution_options(populate_existing=True)
        )

        if for_update:
            stmt = stmt.with_for_update()

        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, record: PayoutIdempotency) -> PayoutIdempotency:
        """
        Insert a new record

        Raises:
            IntegrityError: If the key is already taken (concurrent acquire)
        """
        self.session.add(record)
        await self.session.flush()
        await self.session.refresh(record)
        return record

    async def save(self, record: PayoutIdempotency) -> PayoutIdempotency:
        record.updated_at = utc_now()
        self.session.add(record)
        await self.session.flush()
        return record
