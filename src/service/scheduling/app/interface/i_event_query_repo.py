from abc import ABC, abstractmethod

from src.service.scheduling.app.dto.event_schedule import EventSchedule
from src.service.shared_kernel.domain.value_object.auth_session import AuthSession


class IEventQueryRepo(ABC):
    @abstractmethod
    async def get_event_schedule(self, *, session: AuthSession, event_id: str) -> EventSchedule:
        """
        Load an event and its shows (GET /admin/events/:id)

        Raises:
            NotFoundError: If the event does not exist upstream
        """
        pass
