from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.scheduling.app.dto.event_schedule import EventSchedule
from src.service.scheduling.app.interface.i_event_command_repo import IEventCommandRepo
from src.service.scheduling.domain.aggregate.show_schedule_aggregate import ShowScheduleAggregate
from src.service.scheduling.domain.entity.event_entity import EventEntity
from src.service.shared_kernel.domain.value_object.auth_session import AuthSession


class SaveEventScheduleUseCase:
    """
    Submit an organizer event form together with its shows.

    startDate/endDate are recomputed from the shows on every submit; with no
    shows both stay unset (None) for create and edit alike.
    """

    def __init__(self, *, event_command_repo: IEventCommandRepo) -> None:
        self.event_command_repo = event_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        event_command_repo: IEventCommandRepo = Depends(Provide[Container.event_command_repo]),
    ) -> Self:
        return cls(event_command_repo=event_command_repo)

    @staticmethod
    def _with_derived_window(event: EventEntity, schedule: ShowScheduleAggregate) -> EventEntity:
        date_range = schedule.date_range()
        event.start_date = date_range.start_date
        event.end_date = date_range.end_date
        return event

    @Logger.io
    async def create_event(
        self, *, session: AuthSession, event: EventEntity, schedule: ShowScheduleAggregate
    ) -> EventSchedule:
        event = self._with_derived_window(event, schedule)
        await self.event_command_repo.create_event(session=session, event=event, schedule=schedule)
        Logger.base.info(
            f'[SAVE_SCHEDULE] Created event "{event.name}" with {len(schedule.shows)} show(s)'
        )
        return EventSchedule(event=event, schedule=schedule)

    @Logger.io
    async def update_event(
        self,
        *,
        session: AuthSession,
        event_id: str,
        event: EventEntity,
        schedule: ShowScheduleAggregate,
    ) -> EventSchedule:
        event = self._with_derived_window(event, schedule)
        event.id = event_id
        schedule.event_id = event_id
        await self.event_command_repo.update_event(
            session=session, event_id=event_id, event=event, schedule=schedule
        )
        Logger.base.info(
            f'[SAVE_SCHEDULE] Updated event {event_id} with {len(schedule.shows)} show(s)'
        )
        return EventSchedule(event=event, schedule=schedule)
