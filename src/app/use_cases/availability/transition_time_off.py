"""TransitionTimeOff Use Case

Moves a time-off request through its approval state machine and keeps the
staff leave counters and calendar blocks in step with it.
"""

import logging
from datetime import datetime, timedelta, timezone
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.availability_repository import AvailabilityRepository
from src.app.repositories.staff_repository import StaffRepository
from src.app.repositories.time_off_repository import TimeOffRepository
from src.domain.availability import OverrideSource, PhotographerAvailability
from src.domain.staff import Staff
from src.domain.time_off import StaffTimeOff, TimeOffReason, TimeOffStatus
from .dtos import TransitionTimeOffCommandDTO, TimeOffTransitionResponseDTO

logger = logging.getLogger(__name__)


class TransitionTimeOff:
    """
    Use Case: Approve, reject or cancel a time-off request

    Business Rules:
    1. pending -> approved | rejected | cancelled; approved -> cancelled | rejected
    2. Entering approved: vacation/sick counter += day_count and one
       unavailable override row per day, tagged with the request id
    3. Leaving approved: counter -= day_count (floored at 0) and only the
       rows tagged with the request id are deleted; manual overrides stay
    4. Status, counters and rows commit together
    """

    def __init__(
        self,
        uow: UnitOfWork,
        staff_repo: StaffRepository,
        time_off_repo: TimeOffRepository,
        availability_repo: AvailabilityRepository,
    ):
        self.uow = uow
        self.staff_repo = staff_repo
        self.time_off_repo = time_off_repo
        self.availability_repo = availability_repo

    async def execute(self, command: TransitionTimeOffCommandDTO) -> Result[TimeOffTransitionResponseDTO]:
        try:
            request = await self.time_off_repo.get_by_id(command.time_off_id, for_update=True)
            if not request:
                await self.uow.rollback()
                return Return.err(
                    Error(
                        code="TIME_OFF_NOT_FOUND",
                        message=f"Time-off request not found: {command.time_off_id}",
                    )
                )

            previous_status = request.status
            if not request.can_transition_to(command.new_status):
                await self.uow.rollback()
                return Return.err(
                    Error(
                        code="INVALID_TRANSITION",
                        message=f"Cannot move time-off request from {previous_status.value} to {command.new_status.value}",
                    )
                )

            staff_id = request.staff_id
            staff = await self.staff_repo.get_by_id(staff_id, for_update=True)
            if not staff:
                await self.uow.rollback()
                return Return.err(
                    Error(
                        code="STAFF_NOT_FOUND",
                        message=f"Staff member not found: {staff_id}",
                    )
                )

            blocks_added = 0
            blocks_removed = 0

            if command.new_status == TimeOffStatus.APPROVED:
                self._adjust_counters(staff, request, request.day_count)
                blocks = self._build_blocks(request)
                await self.availability_repo.add_time_off_blocks(blocks)
                blocks_added = len(blocks)
            elif previous_status == TimeOffStatus.APPROVED:
                self._adjust_counters(staff, request, -request.day_count)
                blocks_removed = await self.availability_repo.delete_time_off_blocks(request.id)

            request.status = command.new_status
            request.reviewed_at = datetime.now(timezone.utc)
            if command.reviewed_by is not None:
                request.reviewed_by = command.reviewed_by
            if command.review_notes is not None:
                request.review_notes = command.review_notes

            await self.staff_repo.save(staff)
            await self.time_off_repo.save(request)
            await self.uow.commit()

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to transition time-off request {command.time_off_id}: {e}")
            return Return.err(
                Error(
                    code="TIME_OFF_TRANSITION_FAILED",
                    message="Failed to transition time-off request",
                    reason=str(e),
                )
            )

        logger.info(
            f"Time off {request.id}: {previous_status.value} -> {request.status.value} "
            f"(added={blocks_added}, removed={blocks_removed})"
        )

        return Return.ok(
            TimeOffTransitionResponseDTO(
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
                previous_status=previous_status.value,
                vacation_days_used=staff.vacation_days_used,
                sick_days_used=staff.sick_days_used,
                blocks_added=blocks_added,
                blocks_removed=blocks_removed,
            )
        )

    def _adjust_counters(self, staff: Staff, request: StaffTimeOff, delta: int) -> None:
        # Only vacation and sick leave are counted
        if request.reason == TimeOffReason.VACATION:
            staff.vacation_days_used = max(0, staff.vacation_days_used + delta)
        elif request.reason == TimeOffReason.SICK:
            staff.sick_days_used = max(0, staff.sick_days_used + delta)

    def _build_blocks(self, request: StaffTimeOff):
        return [
            PhotographerAvailability(
                staff_id=request.staff_id,
                on_date=request.start_date + timedelta(days=offset),
                is_available=False,
                notes=f"Time off: {request.reason.value}",
                source=OverrideSource.TIME_OFF,
                time_off_id=request.id,
            )
            for offset in range(request.day_count)
        ]
