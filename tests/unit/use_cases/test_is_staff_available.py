"""Unit tests for IsStaffAvailable use case"""

import pytest
from datetime import date, time
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.availability.is_staff_available import IsStaffAvailable
from src.app.use_cases.availability.dtos import IsStaffAvailableQueryDTO
from src.domain.staff import Staff

MONDAY = date(2026, 3, 9)
SATURDAY = date(2026, 3, 14)


@pytest.fixture
def mock_staff_repo():
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=Staff(id="staff_1", name="Sam Shooter"))
    return repo


@pytest.fixture
def mock_time_off_repo():
    repo = MagicMock()
    repo.has_approved_covering = AsyncMock(return_value=False)
    return repo


@pytest.fixture
def mock_availability_repo():
    repo = MagicMock()
    repo.get_overrides = AsyncMock(return_value=[])
    repo.get_weekly = AsyncMock(return_value=None)
    return repo


@pytest.fixture
def use_case(mock_staff_repo, mock_time_off_repo, mock_availability_repo):
    return IsStaffAvailable(mock_staff_repo, mock_time_off_repo, mock_availability_repo)


@pytest.mark.asyncio
class TestIsStaffAvailable:
    async def test_falls_through_to_weekday_default(self, use_case):
        result = await use_case.execute(IsStaffAvailableQueryDTO(staff_id="staff_1", on_date=MONDAY))

        assert result.is_ok()
        assert result.value.available is True
        assert result.value.decided_by == "default_weekday"

    async def test_weekend_default_unavailable(self, use_case):
        result = await use_case.execute(IsStaffAvailableQueryDTO(staff_id="staff_1", on_date=SATURDAY))

        assert result.value.available is False
        assert result.value.decided_by == "default_weekday"

    async def test_time_off_short_circuits(self, use_case, mock_time_off_repo, mock_availability_repo):
        mock_time_off_repo.has_approved_covering = AsyncMock(return_value=True)

        result = await use_case.execute(
            IsStaffAvailableQueryDTO(staff_id="staff_1", on_date=MONDAY, at_time=time(10, 0))
        )

        assert result.value.available is False
        assert result.value.decided_by == "time_off"
        mock_availability_repo.get_overrides.assert_not_called()

    async def test_staff_not_found(self, use_case, mock_staff_repo):
        mock_staff_repo.get_by_id = AsyncMock(return_value=None)

        result = await use_case.execute(IsStaffAvailableQueryDTO(staff_id="ghost", on_date=MONDAY))

        assert result.is_err()
        assert result.error.code == "STAFF_NOT_FOUND"

    async def test_custom_resolvers(self, mock_staff_repo):
        silent = MagicMock(layer="silent")
        silent.resolve = AsyncMock(return_value=None)

        result = await IsStaffAvailable(
            mock_staff_repo, MagicMock(), MagicMock(), resolvers=[silent]
        ).execute(IsStaffAvailableQueryDTO(staff_id="staff_1", on_date=MONDAY))

        assert result.value.available is False
        assert result.value.decided_by == "none"
