from datetime import datetime
from typing import List, Optional

import attrs

from src.service.scheduling.domain.enum.event_status import EventStatus


def _validate_non_empty_string(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise ValueError(f'Event {attribute.name} cannot be empty')


def _validate_non_negative(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if value < 0:
        raise ValueError(f'Event {attribute.name} cannot be negative')


@attrs.define
class EventEntity:
    """Organizer-side view of an event; start/end dates are derived from its shows."""

    name: str = attrs.field(validator=_validate_non_empty_string)
    capacity: int = attrs.field(validator=_validate_non_negative)
    price: float = attrs.field(validator=_validate_non_negative)
    description: str = ''
    venue: str = ''
    status: EventStatus = EventStatus.DRAFT
    tags: List[str] = attrs.field(factory=list)
    features: List[str] = attrs.field(factory=list)
    staff_assigned: List[str] = attrs.field(factory=list)
    tickets_sold: int = 0
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    id: Optional[str] = None

    @property
    def available_seats(self) -> int:
        return max(self.capacity - self.tickets_sold, 0)
