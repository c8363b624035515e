"""SQLAlchemy implementation of PayoutRepository"""

from typing import Dict, List
from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.payout_repository import PayoutRepository
from src.domain.payout import StaffPayout, PartnerPayout, CompanyPoolAllocation


class SqlAlchemyPayoutRepository(PayoutRepository):
    """
    Inserts payout batches without committing.

    Each add_* call flushes, so constraint violations surface inside the
    caller's unit of work where they can be rolled back together.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def add_staff_payouts(self, payouts: List[StaffPayout]) -> None:
        self.session.add_all(payouts)
        await self.session.flush()

    async def add_partner_payouts(self, payouts: List[PartnerPayout]) -> None:
        self.session.add_all(payouts)
        await self.session.flush()

    async def add_pool_allocations(self, allocations: List[CompanyPoolAllocation]) -> None:
        self.session.add_all(allocations)
        await self.session.flush()

    async def count_for_order(self, order_id: str) -> Dict[str, int]:
        counts = {}
        for name, model in (
            ("staff", StaffPayout),
            ("partner", PartnerPayout),
            ("pool", CompanyPoolAllocation),
        ):
            stmt = select(func.count()).select_from(model).where(model.order_id == order_id)
            result = await self.session.execute(stmt)
            counts[name] = result.scalar_one()
        return counts
