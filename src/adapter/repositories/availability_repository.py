"""SQLAlchemy implementation of AvailabilityRepository"""

from datetime import date
from typing import List, Optional
from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.domain.base import utc_now
from src.app.repositories.availability_repository import AvailabilityRepository
from src.domain.availability import OverrideSource, PhotographerAvailability, WeeklySchedule


class SqlAlchemyAvailabilityRepository(AvailabilityRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_overrides(self, staff_id: str, on_date: date) -> List[PhotographerAvailability]:
        stmt = select(PhotographerAvailability).where(
            PhotographerAvailability.staff_id == staff_id,
            PhotographerAvailability.on_date == on_date,
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_manual_override(self, staff_id: str, on_date: date) -> Optional[PhotographerAvailability]:
        stmt = select(PhotographerAvailability).where(
            PhotographerAvailability.staff_id == staff_id,
            PhotographerAvailability.on_date == on_date,
            PhotographerAvailability.source == OverrideSource.MANUAL,
        )
        result = await self.session.execute(stmt)
        return result.scalars().first()

    async def save_override(self, override: PhotographerAvailability) -> PhotographerAvailability:
        override.updated_at = utc_now()
        self.session.add(override)
        await self.session.flush()
        await self.session.refresh(override)
        return override

    async def add_time_off_blocks(self, blocks: List[PhotographerAvailability]) -> None:
        self.session.add_all(blocks)
        await self.session.flush()

    async def delete_time_off_blocks(self, time_off_id: str) -> int:
        stmt = (
            delete(PhotographerAvailability)
            .where(PhotographerAvailability.time_off_id == time_off_id)
            .where(PhotographerAvailability.source == OverrideSource.TIME_OFF)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount

    async def get_weekly(self, staff_id: str, day_of_week: int) -> Optional[WeeklySchedule]:
        stmt = select(WeeklySchedule).where(
            WeeklySchedule.staff_id == staff_id,
            WeeklySchedule.day_of_week == day_of_week,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def save_weekly(self, schedule: WeeklySchedule) -> WeeklySchedule:
        schedule.updated_at = utc_now()
        self.session.add(schedule)
        await self.session.flush()
        await self.session.refresh(schedule)
        return schedule
