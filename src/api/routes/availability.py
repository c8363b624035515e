"""Availability API Routes

Staff availability checks, time-off workflow and overrides.
"""

from datetime import date, time
from typing import Optional
from fastapi import APIRouter, Depends, Query, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.error import ClientError
from src.api.schemas.availability_request import TimeOffTransitionRequestSchema
from src.app.use_cases.availability import (
    IsStaffAvailable,
    RequestTimeOff,
    TransitionTimeOff,
    SetAvailabilityOverride,
    SetWeeklySchedule,
    GetStaffAvailabilitySummary,
    IsStaffAvailableQueryDTO,
    AvailabilityResponseDTO,
    RequestTimeOffCommandDTO,
    TimeOffResponseDTO,
    TransitionTimeOffCommandDTO,
    TimeOffTransitionResponseDTO,
    SetAvailabilityOverrideCommandDTO,
    OverrideResponseDTO,
    SetWeeklyScheduleCommandDTO,
    WeeklyScheduleResponseDTO,
    StaffAvailabilitySummaryDTO,
)
from src.adapter.repositories import (
    SqlAlchemyAvailabilityRepository,
    SqlAlchemyStaffRepository,
    SqlAlchemyTimeOffRepository,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session

router = APIRouter(prefix="/availability", tags=["Availability"])


@router.post("/time-off", response_model=TimeOffResponseDTO, status_code=status.HTTP_201_CREATED)
async def request_time_off(
    request: RequestTimeOffCommandDTO,
    session: AsyncSession = Depends(get_session),
):
    use_case = RequestTimeOff(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyStaffRepository(session),
        SqlAlchemyTimeOffRepository(session),
    )
    result = await use_case.execute(request)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.post("/time-off/{time_off_id}/transition", response_model=TimeOffTransitionResponseDTO)
async def transition_time_off(
    time_off_id: str,
    request: TimeOffTransitionRequestSchema,
    session: AsyncSession = Depends(get_session),
):
    """
    Approve, reject or cancel a time-off request.

    Approval consumes leave days and blocks the calendar; leaving the
    approved state gives both back. Disallowed moves return 409.
    """
    command = TransitionTimeOffCommandDTO(
        time_off_id=time_off_id,
        new_status=request.new_status,
        reviewed_by=request.reviewed_by,
        review_notes=request.review_notes,
    )
    use_case = TransitionTimeOff(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyStaffRepository(session),
        SqlAlchemyTimeOffRepository(session),
        SqlAlchemyAvailabilityRepository(session),
    )
    result = await use_case.execute(command)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.put("/overrides", response_model=OverrideResponseDTO)
async def set_override(
    request: SetAvailabilityOverrideCommandDTO,
    session: AsyncSession = Depends(get_session),
):
    use_case = SetAvailabilityOverride(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyStaffRepository(session),
        SqlAlchemyAvailabilityRepository(session),
    )
    result = await use_case.execute(request)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.put("/weekly", response_model=WeeklyScheduleResponseDTO)
async def set_weekly_schedule(
    request: SetWeeklyScheduleCommandDTO,
    session: AsyncSession = Depends(get_session),
):
    use_case = SetWeeklySchedule(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyStaffRepository(session),
        SqlAlchemyAvailabilityRepository(session),
    )
    result = await use_case.execute(request)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get("/{staff_id}/summary", response_model=StaffAvailabilitySummaryDTO)
async def get_summary(staff_id: str, session: AsyncSession = Depends(get_session)):
    use_case = GetStaffAvailabilitySummary(
        SqlAlchemyStaffRepository(session),
        SqlAlchemyTimeOffRepository(session),
    )
    result = await use_case.execute(staff_id)

    if result.is_err():
        raise ClientError(result.error)

    return result.value


@router.get("/{staff_id}", response_model=AvailabilityResponseDTO)
async def is_staff_available(
    staff_id: str,
    on_date: date = Query(..., alias="date"),
    at_time: Optional[time] = Query(None, alias="time"),
    session: AsyncSession = Depends(get_session),
):
    """
    Resolve availability for a date and optional time of day.

    `decided_by` names the layer that answered: time_off, date_override,
    weekly_schedule or default_weekday.
    """
    use_case = IsStaffAvailable(
        SqlAlchemyStaffRepository(session),
        SqlAlchemyTimeOffRepository(session),
        SqlAlchemyAvailabilityRepository(session),
    )
    result = await use_case.execute(IsStaffAvailableQueryDTO(staff_id=staff_id, on_date=on_date, at_time=at_time))

    if result.is_err():
        raise ClientError(result.error)

    return result.value
