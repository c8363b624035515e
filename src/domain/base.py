"""Shared base for domain entities"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import DateTime
from sqlmodel import SQLModel

# Timestamps are stored and produced timezone-aware (UTC)
UTCDateTime = DateTime(timezone=True)


def generate_uuid() -> str:
    return str(uuid.uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class BaseModel(SQLModel):
    pass
