"""GetStaffAvailabilitySummary Use Case

Leave balances and request counts for one staff member.
"""

import logging
from datetime import date
from typing import Optional
from libs.result import Result, Return, Error
from src.app.repositories.staff_repository import StaffRepository
from src.app.repositories.time_off_repository import TimeOffRepository
from src.domain.time_off import TimeOffStatus
from .dtos import StaffAvailabilitySummaryDTO

logger = logging.getLogger(__name__)


class GetStaffAvailabilitySummary:
    def __init__(self, staff_repo: StaffRepository, time_off_repo: TimeOffRepository):
        self.staff_repo = staff_repo
        self.time_off_repo = time_off_repo

    async def execute(self, staff_id: str, today: Optional[date] = None) -> Result[StaffAvailabilitySummaryDTO]:
        today = today or date.today()
        try:
            staff = await self.staff_repo.get_by_id(staff_id)
            if not staff:
                return Return.err(
                    Error(
                        code="STAFF_NOT_FOUND",
                        message=f"Staff member not found: {staff_id}",
                    )
                )

            pending = await self.time_off_repo.count_by_status(staff_id, TimeOffStatus.PENDING)
            upcoming = await self.time_off_repo.count_upcoming_approved(staff_id, today)

            return Return.ok(
                StaffAvailabilitySummaryDTO(
                    staff_id=staff.id,
                    name=staff.name,
                    team_role=staff.team_role,
                    is_active=staff.is_active,
                    max_daily_jobs=staff.max_daily_jobs,
                    default_start_time=staff.default_start_time,
                    default_end_time=staff.default_end_time,
                    timezone=staff.timezone,
                    vacation_days_total=staff.vacation_days_total,
                    vacation_days_used=staff.vacation_days_used,
                    vacation_days_remaining=staff.vacation_days_total - staff.vacation_days_used,
                    sick_days_total=staff.sick_days_total,
                    sick_days_used=staff.sick_days_used,
                    sick_days_remaining=staff.sick_days_total - staff.sick_days_used,
                    pending_time_off_requests=pending,
                    upcoming_approved_time_off=upcoming,
                )
            )

        except Exception as e:
            logger.error(f"Failed to build availability summary for staff {staff_id}: {e}")
            return Return.err(
                Error(
                    code="SUMMARY_FAILED",
                    message="Failed to build availability summary",
                    reason=str(e),
                )
            )
