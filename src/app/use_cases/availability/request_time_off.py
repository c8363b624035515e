"""RequestTimeOff Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.staff_repository import StaffRepository
from src.app.repositories.time_off_repository import TimeOffRepository
from src.domain.time_off import StaffTimeOff, TimeOffStatus
from .dtos import RequestTimeOffCommandDTO, TimeOffResponseDTO

logger = logging.getLogger(__name__)


def to_time_off_dto(request: StaffTimeOff) -> TimeOffResponseDTO:
    return TimeOffResponseDTO(
        id=request.id,
        staff_id=request.staff_id,
        start_date=request.start_date,
        end_date=request.end_date,
        day_count=request.day_count,
        reason=request.reason.value,
        status=request.status.value,
        requested_at=request.requested_at,
        reviewed_at=request.reviewed_at,
        reviewed_by=request.reviewed_by,
        review_notes=request.review_notes,
    )


class RequestTimeOff:
    """Use Case: File a pending time-off request. Nothing is blocked until approval."""

    def __init__(self, uow: UnitOfWork, staff_repo: StaffRepository, time_off_repo: TimeOffRepository):
        self.uow = uow
        self.staff_repo = staff_repo
        self.time_off_repo = time_off_repo

    async def execute(self, command: RequestTimeOffCommandDTO) -> Result[TimeOffResponseDTO]:
        if command.end_date < command.start_date:
            return Return.err(
                Error(
                    code="INVALID_DATE_RANGE",
                    message=f"end_date {command.end_date} is before start_date {command.start_date}",
                )
            )

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

            request = await self.time_off_repo.create(
                StaffTimeOff(
                    staff_id=command.staff_id,
                    start_date=command.start_date,
                    end_date=command.end_date,
                    reason=command.reason,
                    reason_details=command.reason_details,
                    status=TimeOffStatus.PENDING,
                )
            )
            await self.uow.commit()

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to create time-off request for staff {command.staff_id}: {e}")
            return Return.err(
                Error(
                    code="TIME_OFF_REQUEST_FAILED",
                    message="Failed to create time-off request",
                    reason=str(e),
                )
            )

        logger.info(
            f"Time off requested: id={request.id}, staff={request.staff_id}, "
            f"{request.start_date}..{request.end_date} ({request.reason.value})"
        )
        return Return.ok(to_time_off_dto(request))
