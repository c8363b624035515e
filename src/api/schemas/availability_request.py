"""Request schemas for Availability API"""

from typing import Optional
from pydantic import BaseModel
from src.domain.time_off import TimeOffStatus


class TimeOffTransitionRequestSchema(BaseModel):
    """Body of POST /availability/time-off/{time_off_id}/transition"""

    new_status: TimeOffStatus
    reviewed_by: Optional[str] = None
    review_notes: Optional[str] = None
