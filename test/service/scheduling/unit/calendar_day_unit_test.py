import calendar
from datetime import date

import pytest

from src.platform.exception.exceptions import DomainError
from src.service.scheduling.domain.value_object.calendar_day import get_calendar_days


SUNDAY = 6


@pytest.mark.unit
class TestGetCalendarDays:
    @pytest.mark.parametrize('year', [2023, 2024, 2025, 2026, 2100])
    @pytest.mark.parametrize('month', list(range(1, 13)))
    def test_grid_is_complete_and_sunday_aligned(self, month: int, year: int):
        days = get_calendar_days(month, year)

        assert len(days) % 7 == 0
        assert days[0].date.weekday() == SUNDAY

        current = [day.date for day in days if day.is_current_month]
        days_in_month = calendar.monthrange(year, month)[1]
        assert current == [date(year, month, d) for d in range(1, days_in_month + 1)]

    def test_grid_has_no_padding_week_beyond_the_month(self):
        # June 2025 starts on Sunday and ends on Monday: 30 days -> 5 weeks
        days = get_calendar_days(6, 2025)

        assert len(days) == 35
        assert days[0].date == date(2025, 6, 1)
        assert days[-1].date == date(2025, 7, 5)
        assert not days[-1].is_current_month

    def test_leading_cells_come_from_previous_month(self):
        # March 2024 starts on a Friday
        days = get_calendar_days(3, 2024)

        assert [day.day for day in days[:5]] == [25, 26, 27, 28, 29]
        assert not any(day.is_current_month for day in days[:5])

    @pytest.mark.parametrize('month', [0, 13, -1])
    def test_invalid_month(self, month: int):
        with pytest.raises(DomainError):
            get_calendar_days(month, 2025)
