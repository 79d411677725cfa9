from datetime import date
from typing import List

from src.platform.logging.loguru_io import Logger
from src.service.scheduling.domain.aggregate.show_schedule_aggregate import ShowScheduleAggregate
from src.service.scheduling.domain.value_object.show import Show


class EditShowScheduleUseCase:
    """
    In-editor show changes. Nothing is sent upstream here; the edited schedule
    is persisted by SaveEventScheduleUseCase when the organizer submits.
    """

    @classmethod
    def depends(cls) -> 'EditShowScheduleUseCase':
        return cls()

    @Logger.io
    def add_show(
        self, *, schedule: ShowScheduleAggregate, date: str, start_time: str, end_time: str
    ) -> Show:
        return schedule.add_show(date=date, start_time=start_time, end_time=end_time)

    @Logger.io
    def edit_show(
        self,
        *,
        schedule: ShowScheduleAggregate,
        show_id: str,
        date: str,
        start_time: str,
        end_time: str,
    ) -> Show:
        return schedule.edit_show(show_id, date=date, start_time=start_time, end_time=end_time)

    @Logger.io
    def remove_show(
        self, *, schedule: ShowScheduleAggregate, show_id: str, confirmed: bool
    ) -> Show:
        removed = schedule.remove_show(show_id, confirmed=confirmed)
        Logger.base.info(f'[EDIT_SCHEDULE] Removed show {show_id} on {removed.date.isoformat()}')
        return removed

    @Logger.io
    def duplicate_show(
        self, *, schedule: ShowScheduleAggregate, show_id: str, target_dates: List[date]
    ) -> List[Show]:
        duplicates = schedule.duplicate_show(show_id, target_dates)
        Logger.base.info(f'[EDIT_SCHEDULE] Duplicated show {show_id} to {len(duplicates)} date(s)')
        return duplicates

    def duplicate_targets(
        self, *, schedule: ShowScheduleAggregate, show_id: str, candidate_dates: List[date]
    ) -> List[date]:
        return schedule.duplicate_targets(show_id, candidate_dates)
