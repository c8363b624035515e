"""SQLAlchemy implementation of TimeOffRepository"""

from datetime import date
from typing import Optional
from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.domain.base import utc_now
from src.app.repositories.time_off_repository import TimeOffRepository
from src.domain.time_off import StaffTimeOff, TimeOffStatus


class SqlAlchemyTimeOffRepository(TimeOffRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, request: StaffTimeOff) -> StaffTimeOff:
        self.session.add(request)
        await self.session.flush()
        await self.session.refresh(request)
        return request

    async def get_by_id(self, time_off_id: str, for_update: bool = False) -> Optional[StaffTimeOff]:
        stmt = (
            select(StaffTimeOff)
            .where(StaffTimeOff.id == time_off_id)
            .execution_options(populate_existing=True)
        )

        if for_update:
            stmt = stmt.with_for_update()

        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def save(self, request: StaffTimeOff) -> StaffTimeOff:
        request.updated_at = utc_now()
        self.session.add(request)
        await self.session.flush()
        return request

    async def has_approved_covering(self, staff_id: str, on_date: date) -> bool:
        stmt = select(func.count()).select_from(StaffTimeOff).where(
            StaffTimeOff.staff_id == staff_id,
            StaffTimeOff.status == TimeOffStatus.APPROVED,
            StaffTimeOff.start_date <= on_date,
            StaffTimeOff.end_date >= on_date,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one() > 0

    async def count_by_status(self, staff_id: str, status: TimeOffStatus) -> int:
        stmt = select(func.count()).select_from(StaffTimeOff).where(
            StaffTimeOff.staff_id == staff_id,
            StaffTimeOff.status == status,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def count_upcoming_approved(self, staff_id: str, from_date: date) -> int:
        stmt = select(func.count()).select_from(StaffTimeOff).where(
            StaffTimeOff.staff_id == staff_id,
            StaffTimeOff.status == TimeOffStatus.APPROVED,
            StaffTimeOff.start_date >= from_date,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
