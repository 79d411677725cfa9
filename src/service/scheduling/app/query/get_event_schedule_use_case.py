from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.scheduling.app.dto.event_schedule import EventSchedule
from src.service.scheduling.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.shared_kernel.domain.value_object.auth_session import AuthSession


class GetEventScheduleUseCase:
    def __init__(self, *, event_query_repo: IEventQueryRepo) -> None:
        self.event_query_repo = event_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        event_query_repo: IEventQueryRepo = Depends(Provide[Container.event_query_repo]),
    ) -> Self:
        return cls(event_query_repo=event_query_repo)

    @Logger.io
    async def get_schedule(self, *, session: AuthSession, event_id: str) -> EventSchedule:
        """Load event with shows; the event window is re-derived from the shows."""
        Logger.base.info(f'[GET_SCHEDULE] Loading event {event_id}')
        event_schedule = await self.event_query_repo.get_event_schedule(
            session=session, event_id=event_id
        )
        date_range = event_schedule.schedule.date_range()
        event_schedule.event.start_date = date_range.start_date
        event_schedule.event.end_date = date_range.end_date
        Logger.base.info(
            f'[GET_SCHEDULE] Event {event_id} has {len(event_schedule.schedule.shows)} show(s)'
        )
        return event_schedule
