"""Unit tests for the availability resolver chain"""

import pytest
from datetime import date, time
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.availability.resolvers import (
    ApprovedTimeOffResolver,
    DateOverrideResolver,
    WeeklyScheduleResolver,
    DefaultWeekdayResolver,
    within_window,
)
from src.domain.availability import OverrideSource, PhotographerAvailability, WeeklySchedule

MONDAY = date(2026, 3, 9)
SATURDAY = date(2026, 3, 14)


def override(is_available=True, start=None, end=None, source=OverrideSource.MANUAL):
    return PhotographerAvailability(
        staff_id="staff_1",
        on_date=MONDAY,
        is_available=is_available,
        available_from=start,
        available_to=end,
        source=source,
    )


class TestWithinWindow:
    def test_boundaries_inclusive(self):
        assert within_window(time(9, 0), time(9, 0), time(17, 0))
        assert within_window(time(17, 0), time(9, 0), time(17, 0))
        assert not within_window(time(17, 1), time(9, 0), time(17, 0))

    def test_missing_time_or_window_means_whole_day(self):
        assert within_window(None, time(9, 0), time(17, 0))
        assert within_window(time(3, 0), None, None)


@pytest.mark.asyncio
class TestApprovedTimeOffResolver:
    async def test_covered_date_is_unavailable(self):
        repo = MagicMock()
        repo.has_approved_covering = AsyncMock(return_value=True)

        assert await ApprovedTimeOffResolver(repo).resolve("staff_1", MONDAY) is False

    async def test_no_opinion_otherwise(self):
        repo = MagicMock()
        repo.has_approved_covering = AsyncMock(return_value=False)

        assert await ApprovedTimeOffResolver(repo).resolve("staff_1", MONDAY) is None


@pytest.mark.asyncio
class TestDateOverrideResolver:
    async def test_no_rows_no_opinion(self):
        repo = MagicMock()
        repo.get_overrides = AsyncMock(return_value=[])

        assert await DateOverrideResolver(repo).resolve("staff_1", SATURDAY) is None

    async def test_available_override_with_window(self):
        repo = MagicMock()
        repo.get_overrides = AsyncMock(return_value=[override(True, time(10, 0), time(14, 0))])
        resolver = DateOverrideResolver(repo)

        assert await resolver.resolve("staff_1", MONDAY, time(12, 0)) is True
        assert await resolver.resolve("staff_1", MONDAY, time(15, 0)) is False
        assert await resolver.resolve("staff_1", MONDAY) is True

    async def test_unavailable_row_wins(self):
        repo = MagicMock()
        repo.get_overrides = AsyncMock(
            return_value=[override(True), override(False, source=OverrideSource.TIME_OFF)]
        )

        assert await DateOverrideResolver(repo).resolve("staff_1", MONDAY, time(12, 0)) is False


@pytest.mark.asyncio
class TestWeeklyScheduleResolver:
    async def test_uses_sunday_zero_day_numbers(self):
        repo = MagicMock()
        repo.get_weekly = AsyncMock(return_value=None)

        await WeeklyScheduleResolver(repo).resolve("staff_1", SATURDAY)

        repo.get_weekly.assert_called_once_with("staff_1", 6)

    async def test_window_applies(self):
        repo = MagicMock()
        repo.get_weekly = AsyncMock(
            return_value=WeeklySchedule(
                staff_id="staff_1", day_of_week=1, available_from=time(8, 0), available_to=time(12, 0)
            )
        )
        resolver = WeeklyScheduleResolver(repo)

        assert await resolver.resolve("staff_1", MONDAY, time(8, 0)) is True
        assert await resolver.resolve("staff_1", MONDAY, time(13, 0)) is False

    async def test_unavailable_day(self):
        repo = MagicMock()
        repo.get_weekly = AsyncMock(
            return_value=WeeklySchedule(staff_id="staff_1", day_of_week=1, is_available=False)
        )

        assert await WeeklyScheduleResolver(repo).resolve("staff_1", MONDAY) is False


@pytest.mark.asyncio
class TestDefaultWeekdayResolver:
    async def test_weekdays_only(self):
        resolver = DefaultWeekdayResolver()

        assert await resolver.resolve("staff_1", MONDAY) is True
        assert await resolver.resolve("staff_1", date(2026, 3, 13)) is True
        assert await resolver.resolve("staff_1", SATURDAY) is False
        assert await resolver.resolve("staff_1", date(2026, 3, 15)) is False
