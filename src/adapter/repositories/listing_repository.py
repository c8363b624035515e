"""SQLAlchemy implementation of ListingRepository"""

from typing import Optional
from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.listing_repository import ListingRepository
from src.domain.listing import Listing


class SqlAlchemyListingRepository(ListingRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, listing: Listing) -> Listing:
        self.session.add(listing)
        await self.session.flush()
        await self.session.refresh(listing)
        return listing

    async def get_by_id(self, listing_id: str) -> Optional[Listing]:
        result = await self.session.execute(select(Listing).where(Listing.id == listing_id))
        return result.scalar_one_or_none()

    async def count_by_agent(self, agent_id: str) -> int:
        stmt = select(func.count()).select_from(Listing).where(Listing.agent_id == agent_id)
        result = await self.session.execute(stmt)
        return result.scalar_one()
