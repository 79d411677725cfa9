"""
Show Schedule Aggregate - the discrete shows of one event

[Business Invariants]
- show_id is unique within the schedule and never changes on edit
- Every show starts before it ends (same-day shows only)
- A show is never duplicated onto its own date
- Removing a show requires an explicit confirmation
- The event's overall window is derived from the shows, never edited directly
"""

from datetime import date, datetime
import random
from typing import Any, Iterable, List, Optional

import attrs

from src.platform.exception.exceptions import ConfirmationRequiredError, DomainError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.scheduling.domain.value_object.event_date_range import (
    EventDateRange,
    compute_event_date_range,
)
from src.service.scheduling.domain.value_object.show import (
    Show,
    generate_show_id,
    parse_show_date,
    parse_show_time,
    validate_show_times,
)


def _parse_slot(*, date_value: str, start_time: str, end_time: str) -> tuple:
    if not (date_value and date_value.strip()):
        raise DomainError('Show date is required')
    if not (start_time and start_time.strip()) or not (end_time and end_time.strip()):
        raise DomainError('Show start time and end time are required')

    show_date = parse_show_date(date_value)
    start = parse_show_time(start_time)
    end = parse_show_time(end_time)
    validate_show_times(start, end)
    return show_date, start, end


def _ensure_unique_show_ids(shows: Iterable[Show]) -> None:
    seen = set()
    for show in shows:
        if show.show_id in seen:
            raise DomainError(f'Duplicate show id: {show.show_id}')
        seen.add(show.show_id)


@attrs.define
class ShowScheduleAggregate:
    event_id: Optional[str] = None
    shows: List[Show] = attrs.field(factory=list)
    _rng: random.Random = attrs.field(factory=random.Random, repr=False, eq=False)

    @classmethod
    def from_wire(
        cls, *, event_id: Optional[str], shows: Iterable[dict[str, Any]]
    ) -> 'ShowScheduleAggregate':
        parsed = [Show.from_wire(item) for item in shows]
        _ensure_unique_show_ids(parsed)
        return cls(event_id=event_id, shows=parsed)

    @classmethod
    def from_editor(
        cls, *, event_id: Optional[str], shows: Iterable[dict[str, Any]]
    ) -> 'ShowScheduleAggregate':
        """Rebuild a schedule sent back by the editor; every show must pass the time policy."""
        schedule = cls.from_wire(event_id=event_id, shows=shows)
        for show in schedule.shows:
            validate_show_times(show.start_time, show.end_time)
        return schedule

    def to_wire(self) -> list[dict[str, str]]:
        return [show.to_wire() for show in self.shows]

    def get_show(self, show_id: str) -> Show:
        for show in self.shows:
            if show.show_id == show_id:
                return show
        raise NotFoundError(f'Show {show_id} not found')

    def _new_show_id(self, now: Optional[datetime]) -> str:
        existing = {show.show_id for show in self.shows}
        while (show_id := generate_show_id(now=now, rng=self._rng)) in existing:
            continue
        return show_id

    @Logger.io
    def add_show(
        self, *, date: str, start_time: str, end_time: str, now: Optional[datetime] = None
    ) -> Show:
        show_date, start, end = _parse_slot(
            date_value=date, start_time=start_time, end_time=end_time
        )
        show = Show(
            show_id=self._new_show_id(now),
            date=show_date,
            start_time=start,
            end_time=end,
        )
        self.shows.append(show)
        return show

    @Logger.io
    def edit_show(self, show_id: str, *, date: str, start_time: str, end_time: str) -> Show:
        current = self.get_show(show_id)
        show_date, start, end = _parse_slot(
            date_value=date, start_time=start_time, end_time=end_time
        )
        updated = attrs.evolve(current, date=show_date, start_time=start, end_time=end)
        self.shows = [updated if show.show_id == show_id else show for show in self.shows]
        return updated

    @Logger.io
    def remove_show(self, show_id: str, *, confirmed: bool) -> Show:
        show = self.get_show(show_id)
        if not confirmed:
            raise ConfirmationRequiredError(
                f'Deleting show on {show.date.isoformat()} cannot be undone; confirm to proceed'
            )
        self.shows = [item for item in self.shows if item.show_id != show_id]
        return show

    def duplicate_targets(self, show_id: str, candidate_dates: Iterable[date]) -> List[date]:
        """Dates the show may be copied to: the candidates minus the show's own date."""
        origin = self.get_show(show_id)
        targets: List[date] = []
        for candidate in candidate_dates:
            if candidate != origin.date and candidate not in targets:
                targets.append(candidate)
        return targets

    @Logger.io
    def duplicate_show(
        self, show_id: str, target_dates: Iterable[date], *, now: Optional[datetime] = None
    ) -> List[Show]:
        origin = self.get_show(show_id)
        requested = list(target_dates)
        if not requested:
            raise DomainError('Select at least one date to duplicate the show to')
        if origin.date in requested:
            raise DomainError('A show cannot be duplicated onto its own date')

        duplicates = []
        for target in self.duplicate_targets(show_id, requested):
            duplicate = Show(
                show_id=self._new_show_id(now),
                date=target,
                start_time=origin.start_time,
                end_time=origin.end_time,
            )
            self.shows.append(duplicate)
            duplicates.append(duplicate)
        return duplicates

    def date_range(self) -> EventDateRange:
        return compute_event_date_range(self.shows)

    def sorted_shows(self) -> List[Show]:
        return sorted(self.shows, key=lambda show: (show.starts_at, show.show_id))
