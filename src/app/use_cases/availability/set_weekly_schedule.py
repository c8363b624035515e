"""SetWeeklySchedule Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.availability_repository import AvailabilityRepository
from src.app.repositories.staff_repository import StaffRepository
from src.domain.availability import WeeklySchedule
from .dtos import SetWeeklyScheduleCommandDTO, WeeklyScheduleResponseDTO

logger = logging.getLogger(__name__)


class SetWeeklySchedule:
    def __init__(self, uow: UnitOfWork, staff_repo: StaffRepository, availability_repo: AvailabilityRepository):
        self.uow = uow
        self.staff_repo = staff_repo
        self.availability_repo = availability_repo

    async def execute(self, command: SetWeeklyScheduleCommandDTO) -> Result[WeeklyScheduleResponseDTO]:
        try:
            staff = await self.staff_repo.get_by_id(command.staff_id)
            if not staff:
                await self.uow.rollback()
                return Return.err(
                    Error(
                        code="STAFF_NOT_FOUND",
                        message=f"Staff member not found: {command.staff_id}",
                    )
                )

            schedule = await self.availability_repo.get_weekly(command.staff_id, command.day_of_week)
            if schedule is None:
                schedule = WeeklySchedule(staff_id=command.staff_id, day_of_week=command.day_of_week)

            schedule.available_from = command.available_from
            schedule.available_to = command.available_to
            schedule.is_available = command.is_available
            schedule.max_jobs = command.max_jobs

            schedule = await self.availability_repo.save_weekly(schedule)
            await self.uow.commit()

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to set weekly schedule for staff {command.staff_id}: {e}")
            return Return.err(
                Error(
                    code="SCHEDULE_UPDATE_FAILED",
                    message="Failed to set weekly schedule",
                    reason=str(e),
                )
            )

        return Return.ok(
            WeeklyScheduleResponseDTO(
                id=schedule.id,
                staff_id=schedule.staff_id,
                day_of_week=schedule.day_of_week,
                available_from=schedule.available_from,
                available_to=schedule.available_to,
                is_available=schedule.is_available,
                max_jobs=schedule.max_jobs,
            )
        )
