"""Integration tests for availability layering and time-off reversal"""

import pytest
from datetime import date, time
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlmodel import select

from src.adapter.repositories import (
    SqlAlchemyAvailabilityRepository,
    SqlAlchemyStaffRepository,
    SqlAlchemyTimeOffRepository,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.availability import (
    IsStaffAvailable,
    RequestTimeOff,
    TransitionTimeOff,
    SetAvailabilityOverride,
    SetWeeklySchedule,
    IsStaffAvailableQueryDTO,
    RequestTimeOffCommandDTO,
    TransitionTimeOffCommandDTO,
    SetAvailabilityOverrideCommandDTO,
    SetWeeklyScheduleCommandDTO,
)
from src.domain.availability import OverrideSource, PhotographerAvailability
from src.domain.time_off import StaffTimeOff, TimeOffReason, TimeOffStatus
from tests.integration.helpers import seed_staff

TUESDAY = date(2026, 3, 10)
WEDNESDAY = date(2026, 3, 11)
SATURDAY = date(2026, 3, 14)


def uow_and_repos(session):
    return (
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyStaffRepository(session),
        SqlAlchemyTimeOffRepository(session),
        SqlAlchemyAvailabilityRepository(session),
    )


async def is_available(session, on_date, at_time=None):
    _, staff_repo, time_off_repo, availability_repo = uow_and_repos(session)
    result = await IsStaffAvailable(staff_repo, time_off_repo, availability_repo).execute(
        IsStaffAvailableQueryDTO(staff_id="staff_1", on_date=on_date, at_time=at_time)
    )
    return result.value


async def request_and_transition(session, start, end, reason, status):
    uow, staff_repo, time_off_repo, availability_repo = uow_and_repos(session)
    created = await RequestTimeOff(uow, staff_repo, time_off_repo).execute(
        RequestTimeOffCommandDTO(staff_id="staff_1", start_date=start, end_date=end, reason=reason)
    )
    result = await TransitionTimeOff(uow, staff_repo, time_off_repo, availability_repo).execute(
        TransitionTimeOffCommandDTO(time_off_id=created.value.id, new_status=status, reviewed_by="admin_1")
    )
    return created.value.id, result


async def override_rows(session_factory, **filters):
    async with session_factory() as session:
        stmt = select(func.count()).select_from(PhotographerAvailability)
        for field, value in filters.items():
            stmt = stmt.where(getattr(PhotographerAvailability, field) == value)
        return (await session.execute(stmt)).scalar_one()


@pytest.mark.asyncio
class TestAvailabilityLayering:
    async def test_layers_in_priority_order(self, db_session):
        """
        Given: Saturdays unavailable weekly and an approved time off on a Tuesday
        Then: Tuesday -> time_off, Saturday -> weekly_schedule, Wednesday -> default
        """
        await seed_staff(db_session)
        uow, staff_repo, _, availability_repo = uow_and_repos(db_session)
        await SetWeeklySchedule(uow, staff_repo, availability_repo).execute(
            SetWeeklyScheduleCommandDTO(staff_id="staff_1", day_of_week=6, is_available=False)
        )
        _, approval = await request_and_transition(
            db_session, TUESDAY, TUESDAY, TimeOffReason.PERSONAL, TimeOffStatus.APPROVED
        )
        assert approval.is_ok()

        tuesday = await is_available(db_session, TUESDAY)
        saturday = await is_available(db_session, SATURDAY)
        wednesday = await is_available(db_session, WEDNESDAY)

        assert (tuesday.available, tuesday.decided_by) == (False, "time_off")
        assert (saturday.available, saturday.decided_by) == (False, "weekly_schedule")
        assert (wednesday.available, wednesday.decided_by) == (True, "default_weekday")

    async def test_override_window_beats_weekly_pattern(self, db_session):
        await seed_staff(db_session)
        uow, staff_repo, _, availability_repo = uow_and_repos(db_session)
        await SetWeeklySchedule(uow, staff_repo, availability_repo).execute(
            SetWeeklyScheduleCommandDTO(staff_id="staff_1", day_of_week=6, is_available=False)
        )
        await SetAvailabilityOverride(uow, staff_repo, availability_repo).execute(
            SetAvailabilityOverrideCommandDTO(
                staff_id="staff_1",
                on_date=SATURDAY,
                is_available=True,
                available_from=time(10, 0),
                available_to=time(14, 0),
            )
        )

        inside = await is_available(db_session, SATURDAY, time(14, 0))
        outside = await is_available(db_session, SATURDAY, time(15, 0))

        assert (inside.available, inside.decided_by) == (True, "date_override")
        assert (outside.available, outside.decided_by) == (False, "date_override")


@pytest.mark.asyncio
class TestTimeOffReversal:
    async def test_cancel_restores_days_and_keeps_manual_override(self, db_session, session_factory):
        """
        Given: A manual override inside a 3-day vacation
        When: The vacation is approved and then cancelled
        Then: days_used goes +3 then -3, exactly the 3 tagged rows come and go,
              the manual row survives
        """
        await seed_staff(db_session)
        uow, staff_repo, time_off_repo, availability_repo = uow_and_repos(db_session)
        await SetAvailabilityOverride(uow, staff_repo, availability_repo).execute(
            SetAvailabilityOverrideCommandDTO(
                staff_id="staff_1", on_date=WEDNESDAY, is_available=True, notes="Client shoot"
            )
        )

        time_off_id, approval = await request_and_transition(
            db_session, date(2026, 3, 9), date(2026, 3, 11), TimeOffReason.VACATION, TimeOffStatus.APPROVED
        )
        assert approval.is_ok()
        assert approval.value.vacation_days_used == 3
        assert await override_rows(session_factory, time_off_id=time_off_id) == 3
        assert (await is_available(db_session, WEDNESDAY)).available is False

        cancel = await TransitionTimeOff(uow, staff_repo, time_off_repo, availability_repo).execute(
            TransitionTimeOffCommandDTO(time_off_id=time_off_id, new_status=TimeOffStatus.CANCELLED)
        )

        assert cancel.is_ok()
        assert cancel.value.blocks_removed == 3
        assert cancel.value.vacation_days_used == 0
        assert await override_rows(session_factory, time_off_id=time_off_id) == 0
        assert await override_rows(session_factory, source=OverrideSource.MANUAL) == 1

        async with session_factory() as session:
            staff = await SqlAlchemyStaffRepository(session).get_by_id("staff_1")
        assert staff.vacation_days_used == 0

        wednesday = await is_available(db_session, WEDNESDAY)
        assert (wednesday.available, wednesday.decided_by) == (True, "date_override")

    async def test_cancelled_request_cannot_be_approved(self, db_session):
        await seed_staff(db_session)
        time_off_id, _ = await request_and_transition(
            db_session, TUESDAY, TUESDAY, TimeOffReason.SICK, TimeOffStatus.CANCELLED
        )
        uow, staff_repo, time_off_repo, availability_repo = uow_and_repos(db_session)

        result = await TransitionTimeOff(uow, staff_repo, time_off_repo, availability_repo).execute(
            TransitionTimeOffCommandDTO(time_off_id=time_off_id, new_status=TimeOffStatus.APPROVED)
        )

        assert result.error.code == "INVALID_TRANSITION"

    async def test_reject_after_approval_reverses_sick_leave(self, db_session, session_factory):
        await seed_staff(db_session)
        time_off_id, approval = await request_and_transition(
            db_session, date(2026, 3, 9), date(2026, 3, 10), TimeOffReason.SICK, TimeOffStatus.APPROVED
        )
        assert approval.value.sick_days_used == 2
        uow, staff_repo, time_off_repo, availability_repo = uow_and_repos(db_session)

        rejection = await TransitionTimeOff(uow, staff_repo, time_off_repo, availability_repo).execute(
            TransitionTimeOffCommandDTO(
                time_off_id=time_off_id, new_status=TimeOffStatus.REJECTED, review_notes="No cover available"
            )
        )

        assert rejection.is_ok()
        assert rejection.value.previous_status == TimeOffStatus.APPROVED.value
        assert rejection.value.blocks_removed == 2
        assert rejection.value.sick_days_used == 0
        assert await override_rows(session_factory, time_off_id=time_off_id) == 0
        assert (await is_available(db_session, TUESDAY)).decided_by == "default_weekday"

    async def test_request_for_removed_staff_member(self, db_session, session_factory):
        db_session.add(
            StaffTimeOff(
                id="to_orphan",
                staff_id="ghost",
                start_date=TUESDAY,
                end_date=TUESDAY,
                reason=TimeOffReason.VACATION,
            )
        )
        await db_session.commit()
        uow, staff_repo, time_off_repo, availability_repo = uow_and_repos(db_session)

        result = await TransitionTimeOff(uow, staff_repo, time_off_repo, availability_repo).execute(
            TransitionTimeOffCommandDTO(time_off_id="to_orphan", new_status=TimeOffStatus.APPROVED)
        )

        assert result.is_err()
        assert result.error.code == "STAFF_NOT_FOUND"
        assert "ghost" in result.error.message
        async with session_factory() as session:
            request = await SqlAlchemyTimeOffRepository(session).get_by_id("to_orphan")
        assert request.status == TimeOffStatus.PENDING
        assert await override_rows(session_factory) == 0


@pytest.mark.asyncio
class TestManualOverrideUniqueness:
    async def test_second_manual_row_for_same_day_rejected(self, db_session):
        db_session.add(PhotographerAvailability(staff_id="staff_1", on_date=SATURDAY, source=OverrideSource.MANUAL))
        await db_session.commit()

        db_session.add(PhotographerAvailability(staff_id="staff_1", on_date=SATURDAY, source=OverrideSource.MANUAL))
        with pytest.raises(IntegrityError):
            await db_session.commit()
        await db_session.rollback()

    async def test_time_off_rows_may_share_the_day(self, db_session, session_factory):
        db_session.add_all(
            [
                PhotographerAvailability(staff_id="staff_1", on_date=SATURDAY, source=OverrideSource.MANUAL),
                PhotographerAvailability(
                    staff_id="staff_1",
                    on_date=SATURDAY,
                    is_available=False,
                    source=OverrideSource.TIME_OFF,
                    time_off_id="to_1",
                ),
            ]
        )
        await db_session.commit()

        assert await override_rows(session_factory, on_date=SATURDAY) == 2

    async def test_repeated_overrides_keep_one_row(self, db_session, session_factory):
        await seed_staff(db_session)
        uow, staff_repo, _, availability_repo = uow_and_repos(db_session)

        for available in (True, False):
            result = await SetAvailabilityOverride(uow, staff_repo, availability_repo).execute(
                SetAvailabilityOverrideCommandDTO(staff_id="staff_1", on_date=SATURDAY, is_available=available)
            )
            assert result.is_ok()

        assert await override_rows(session_factory, source=OverrideSource.MANUAL) == 1
