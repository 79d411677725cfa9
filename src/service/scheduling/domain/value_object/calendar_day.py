import calendar
from datetime import date, timedelta
from typing import List

import attrs

from src.platform.exception.exceptions import DomainError


DAYS_PER_WEEK = 7


@attrs.define(frozen=True)
class CalendarDay:
    date: date
    is_current_month: bool

    @property
    def day(self) -> int:
        return self.date.day


def get_calendar_days(month: int, year: int) -> List[CalendarDay]:
    """
    Month grid for the show calendar, weeks starting on Sunday.

    Leading cells are the trailing days of the previous month and trailing cells
    the leading days of the next month, so the grid length is a multiple of 7.
    """
    if not 1 <= month <= 12:
        raise DomainError(f'Invalid month: {month}')

    first_day = date(year, month, 1)
    days_in_month = calendar.monthrange(year, month)[1]
    # date.weekday(): Monday=0 .. Sunday=6
    leading = (first_day.weekday() + 1) % DAYS_PER_WEEK
    total_cells = -(-(leading + days_in_month) // DAYS_PER_WEEK) * DAYS_PER_WEEK

    grid_start = first_day - timedelta(days=leading)
    days = []
    for offset in range(total_cells):
        current = grid_start + timedelta(days=offset)
        days.append(
            CalendarDay(
                date=current,
                is_current_month=current.month == month and current.year == year,
            )
        )
    return days
