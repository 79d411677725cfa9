from datetime import date, datetime, time
import random

import pytest

from src.service.scheduling.domain.value_object.event_date_range import (
    EventDateRange,
    compute_event_date_range,
)
from src.service.scheduling.domain.value_object.show import Show


def _show(day: int, start: str, end: str) -> Show:
    return Show(
        show_id=f'SHOW-{day}-{start.replace(":", "")}',
        date=date(2025, 6, day),
        start_time=time.fromisoformat(start),
        end_time=time.fromisoformat(end),
    )


@pytest.mark.unit
class TestComputeEventDateRange:
    def test_empty_shows_leave_both_ends_unset(self):
        date_range = compute_event_date_range([])

        assert date_range == EventDateRange(start_date=None, end_date=None)
        assert date_range.is_unset

    def test_single_show(self):
        date_range = compute_event_date_range([_show(1, '10:00', '11:00')])

        assert date_range.start_date == datetime(2025, 6, 1, 10, 0)
        assert date_range.end_date == datetime(2025, 6, 1, 11, 0)

    def test_earliest_start_and_latest_end_across_shows(self):
        shows = [
            _show(8, '09:00', '17:00'),
            _show(1, '14:00', '15:00'),
            _show(1, '10:00', '11:00'),
            _show(15, '10:00', '11:00'),
        ]

        date_range = compute_event_date_range(shows)

        assert date_range.start_date == datetime(2025, 6, 1, 10, 0)
        assert date_range.end_date == datetime(2025, 6, 15, 11, 0)

    def test_matches_direct_comparison_for_random_schedules(self):
        rng = random.Random(7)
        for _ in range(50):
            shows = []
            for _ in range(rng.randint(1, 8)):
                start_hour = rng.randint(0, 22)
                end_hour = rng.randint(start_hour + 1, 23)
                shows.append(_show(rng.randint(1, 30), f'{start_hour:02d}:00', f'{end_hour:02d}:00'))

            date_range = compute_event_date_range(shows)

            assert date_range.start_date <= date_range.end_date
            assert date_range.start_date == min(
                datetime.combine(s.date, s.start_time) for s in shows
            )
            assert date_range.end_date == max(datetime.combine(s.date, s.end_time) for s in shows)
