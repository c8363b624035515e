"""SQLAlchemy implementation of StaffRepository"""

from typing import Optional
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.domain.base import utc_now
from src.app.repositories.staff_repository import StaffRepository
from src.domain.staff import Staff


class SqlAlchemyStaffRepository(StaffRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, staff_id: str, for_update: bool = False) -> Optional[Staff]:
        stmt = (
            select(Staff)
            .where(Staff.id == staff_id)
            .execution_options(populate_existing=True)
        )

        if for_update:
            stmt = stmt.with_for_update()

        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, staff: Staff) -> Staff:
        self.session.add(staff)
        await self.session.flush()
        await self.session.refresh(staff)
        return staff

    async def save(self, staff: Staff) -> Staff:
        staff.updated_at = utc_now()
        self.session.add(staff)
        await self.session.flush()
        return staff
