from typing import List

import attrs

from src.service.scheduling.domain.aggregate.show_schedule_aggregate import ShowScheduleAggregate
from src.service.scheduling.domain.value_object.calendar_day import CalendarDay, get_calendar_days
from src.service.scheduling.domain.value_object.show import Show


@attrs.define(frozen=True)
class CalendarCell:
    day: CalendarDay
    shows: tuple[Show, ...] = ()


class GetShowCalendarUseCase:
    @classmethod
    def depends(cls) -> 'GetShowCalendarUseCase':
        return cls()

    def get_month(
        self, *, month: int, year: int, schedule: ShowScheduleAggregate
    ) -> List[CalendarCell]:
        by_date: dict = {}
        for show in schedule.sorted_shows():
            by_date.setdefault(show.date, []).append(show)
        return [
            CalendarCell(day=day, shows=tuple(by_date.get(day.date, ())))
            for day in get_calendar_days(month, year)
        ]
