"""SetAvailabilityOverride Use Case"""

import logging
from sqlalchemy.exc import IntegrityError
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.availability_repository import AvailabilityRepository
from src.app.repositories.staff_repository import StaffRepository
from src.domain.availability import OverrideSource, PhotographerAvailability
from .dtos import SetAvailabilityOverrideCommandDTO, OverrideResponseDTO

logger = logging.getLogger(__name__)


class SetAvailabilityOverride:
    """
    Use Case: Create or replace the manual override for one date

    Time-off rows for the same date are left alone. When two callers create
    the first manual row concurrently, the loser of the unique index retries
    as an update of the winner's row.
    """

    def __init__(self, uow: UnitOfWork, staff_repo: StaffRepository, availability_repo: AvailabilityRepository):
        self.uow = uow
        self.staff_repo = staff_repo
        self.availability_repo = availability_repo

    async def execute(self, command: SetAvailabilityOverrideCommandDTO) -> Result[OverrideResponseDTO]:
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

            try:
                override = await self._upsert(command)
            except IntegrityError:
                await self.uow.rollback()
                override = await self._upsert(command)

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to set override for staff {command.staff_id} on {command.on_date}: {e}")
            return Return.err(
                Error(
                    code="OVERRIDE_UPDATE_FAILED",
                    message="Failed to set availability override",
                    reason=str(e),
                )
            )

        logger.info(
            f"Override set: staff={override.staff_id}, date={override.on_date}, available={override.is_available}"
        )
        return Return.ok(
            OverrideResponseDTO(
                id=override.id,
                staff_id=override.staff_id,
                on_date=override.on_date,
                is_available=override.is_available,
                available_from=override.available_from,
                available_to=override.available_to,
                max_jobs_override=override.max_jobs_override,
                notes=override.notes,
                source=override.source.value,
            )
        )

    async def _upsert(self, command: SetAvailabilityOverrideCommandDTO) -> PhotographerAvailability:
        override = await self.availability_repo.get_manual_override(command.staff_id, command.on_date)
        if override is None:
            override = PhotographerAvailability(
                staff_id=command.staff_id,
                on_date=command.on_date,
                source=OverrideSource.MANUAL,
            )

        override.is_available = command.is_available
        override.available_from = command.available_from
        override.available_to = command.available_to
        override.max_jobs_override = command.max_jobs_override
        override.notes = command.notes

        override = await self.availability_repo.save_override(override)
        await self.uow.commit()
        return override
