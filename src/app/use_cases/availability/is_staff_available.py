"""IsStaffAvailable Use Case"""

import logging
from typing import List, Optional
from libs.result import Result, Return, Error
from src.app.repositories.availability_repository import AvailabilityRepository
from src.app.repositories.staff_repository import StaffRepository
from src.app.repositories.time_off_repository import TimeOffRepository
from .dtos import IsStaffAvailableQueryDTO, AvailabilityResponseDTO
from .resolvers import (
    AvailabilityResolver,
    ApprovedTimeOffResolver,
    DateOverrideResolver,
    WeeklyScheduleResolver,
    DefaultWeekdayResolver,
)

logger = logging.getLogger(__name__)


class IsStaffAvailable:
    """
    Use Case: Decide whether a staff member can work on a date (and time)

    Layers, highest priority first:
    1. Approved time off covering the date: unavailable
    2. Date override
    3. Weekly schedule
    4. Default: Monday to Friday
    """

    def __init__(
        self,
        staff_repo: StaffRepository,
        time_off_repo: TimeOffRepository,
        availability_repo: AvailabilityRepository,
        resolvers: Optional[List[AvailabilityResolver]] = None,
    ):
        self.staff_repo = staff_repo
        self.resolvers = resolvers or [
            ApprovedTimeOffResolver(time_off_repo),
            DateOverrideResolver(availability_repo),
            WeeklyScheduleResolver(availability_repo),
            DefaultWeekdayResolver(),
        ]

    async def execute(self, query: IsStaffAvailableQueryDTO) -> Result[AvailabilityResponseDTO]:
        try:
            staff = await self.staff_repo.get_by_id(query.staff_id)
            if not staff:
                return Return.err(
                    Error(
                        code="STAFF_NOT_FOUND",
                        message=f"Staff member not found: {query.staff_id}",
                    )
                )

            for resolver in self.resolvers:
                answer = await resolver.resolve(query.staff_id, query.on_date, query.at_time)
                if answer is not None:
                    return Return.ok(
                        AvailabilityResponseDTO(
                            staff_id=query.staff_id,
                            on_date=query.on_date,
                            at_time=query.at_time,
                            available=answer,
                            decided_by=resolver.layer,
                        )
                    )

            return Return.ok(
                AvailabilityResponseDTO(
                    staff_id=query.staff_id,
                    on_date=query.on_date,
                    at_time=query.at_time,
                    available=False,
                    decided_by="none",
                )
            )

        except Exception as e:
            logger.error(f"Failed to resolve availability for staff {query.staff_id}: {e}")
            return Return.err(
                Error(
                    code="AVAILABILITY_CHECK_FAILED",
                    message="Failed to resolve availability",
                    reason=str(e),
                )
            )
