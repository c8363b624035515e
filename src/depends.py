from datetime import timedelta
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.notification_service import create_notification_service
from src.app.services.notification_service import NotificationService

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_session() -> AsyncSession:
    async with AsyncSessionLocal() as session:
        yield session


def get_notification_service() -> NotificationService:
    return create_notification_service(ApplicationConfig.LOW_BALANCE_NOTIFICATION_WEBHOOK)


def get_notification_cooldown() -> timedelta:
    return timedelta(hours=float(ApplicationConfig.LOW_BALANCE_NOTIFICATION_COOLDOWN_HOURS))
