"""
Event Command Repository Interface (Scheduling)

Writes organizer event forms to the upstream admin API.
"""

from abc import ABC, abstractmethod

from src.service.scheduling.domain.aggregate.show_schedule_aggregate import ShowScheduleAggregate
from src.service.scheduling.domain.entity.event_entity import EventEntity
from src.service.shared_kernel.domain.value_object.auth_session import AuthSession


class IEventCommandRepo(ABC):
    @abstractmethod
    async def create_event(
        self, *, session: AuthSession, event: EventEntity, schedule: ShowScheduleAggregate
    ) -> None:
        """
        Create event with its shows (POST /admin/events, multipart form)

        Args:
            session: Caller's auth session
            event: Event form values, start_date/end_date already derived from the shows
            schedule: Shows sent as a JSON string field
        """
        pass

    @abstractmethod
    async def update_event(
        self,
        *,
        session: AuthSession,
        event_id: str,
        event: EventEntity,
        schedule: ShowScheduleAggregate,
    ) -> None:
        """Update event with its shows (PUT /admin/events/:id, multipart form)"""
        pass
