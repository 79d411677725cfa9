from datetime import date, datetime, time
import random
import string
from typing import Any, Optional

import attrs

from src.platform.exception.exceptions import DomainError


SHOW_ID_PREFIX = 'SHOW'
_SHOW_ID_ALPHABET = string.ascii_lowercase + string.digits


def generate_show_id(*, now: Optional[datetime] = None, rng: Optional[random.Random] = None) -> str:
    """SHOW-<epoch millis>-<6 random base36 chars>"""
    now = now or datetime.now()
    rng = rng or random.Random()
    suffix = ''.join(rng.choices(_SHOW_ID_ALPHABET, k=6))
    return f'{SHOW_ID_PREFIX}-{int(now.timestamp() * 1000)}-{suffix}'


def parse_show_date(value: str) -> date:
    # Upstream may hand back a full ISO timestamp for the date field
    try:
        return date.fromisoformat(value.strip()[:10])
    except ValueError:
        raise DomainError(f'Invalid show date: {value}')


def parse_show_time(value: str) -> time:
    try:
        return time.fromisoformat(value.strip()[:5])
    except ValueError:
        raise DomainError(f'Invalid show time: {value}')


def validate_show_times(start_time: time, end_time: time) -> None:
    # Overnight shows are not supported: a show must end on the day it starts
    if start_time >= end_time:
        raise DomainError('Show end time must be after its start time')


@attrs.define(frozen=True)
class Show:
    show_id: str
    date: date
    start_time: time
    end_time: time

    @property
    def starts_at(self) -> datetime:
        return datetime.combine(self.date, self.start_time)

    @property
    def ends_at(self) -> datetime:
        return datetime.combine(self.date, self.end_time)

    @classmethod
    def from_wire(cls, data: dict[str, Any]) -> 'Show':
        return cls(
            show_id=str(data['showId']),
            date=parse_show_date(str(data['date'])),
            start_time=parse_show_time(str(data['startTime'])),
            end_time=parse_show_time(str(data['endTime'])),
        )

    def to_wire(self) -> dict[str, str]:
        return {
            'showId': self.show_id,
            'date': self.date.isoformat(),
            'startTime': self.start_time.strftime('%H:%M'),
            'endTime': self.end_time.strftime('%H:%M'),
        }
