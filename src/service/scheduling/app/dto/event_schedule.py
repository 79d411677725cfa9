import attrs

from src.service.scheduling.domain.aggregate.show_schedule_aggregate import ShowScheduleAggregate
from src.service.scheduling.domain.entity.event_entity import EventEntity


@attrs.define
class EventSchedule:
    """An event together with the show schedule it owns."""

    event: EventEntity
    schedule: ShowScheduleAggregate
