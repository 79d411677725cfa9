from datetime import datetime
from typing import Iterable, Optional

import attrs

from src.service.scheduling.domain.value_object.show import Show


@attrs.define(frozen=True)
class EventDateRange:
    """Overall window of an event; both ends are None while no show exists."""

    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None

    @property
    def is_unset(self) -> bool:
        return self.start_date is None


def compute_event_date_range(shows: Iterable[Show]) -> EventDateRange:
    shows = list(shows)
    if not shows:
        return EventDateRange()
    return EventDateRange(
        start_date=min(show.starts_at for show in shows),
        end_date=max(show.ends_at for show in shows),
    )
