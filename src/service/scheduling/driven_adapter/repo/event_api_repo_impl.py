from datetime import datetime, timezone
from typing import List, Optional

import orjson
from pydantic import ValidationError

from src.platform.exception.exceptions import UpstreamApiError
from src.platform.http.upstream_api_client import UpstreamApiClient
from src.platform.logging.loguru_io import Logger
from src.service.scheduling.app.dto.event_schedule import EventSchedule
from src.service.scheduling.app.interface.i_event_command_repo import IEventCommandRepo
from src.service.scheduling.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.scheduling.domain.aggregate.show_schedule_aggregate import ShowScheduleAggregate
from src.service.scheduling.domain.entity.event_entity import EventEntity
from src.service.scheduling.driven_adapter.repo.event_upstream_schema import UpstreamEventEnvelope
from src.service.shared_kernel.domain.value_object.auth_session import AuthSession


def _iso_utc(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat().replace('+00:00', 'Z')


def build_event_form_fields(
    event: EventEntity, schedule: ShowScheduleAggregate
) -> List[tuple[str, str]]:
    """Multipart fields for POST/PUT /admin/events; empty values are omitted."""
    fields: List[tuple[str, str]] = [
        ('name', event.name),
        ('capacity', str(event.capacity)),
        ('price', str(event.price)),
        ('status', event.status.value),
        ('shows', orjson.dumps(schedule.to_wire()).decode()),
    ]
    if event.description:
        fields.append(('description', event.description))
    if event.venue:
        fields.append(('venue', event.venue))
    if event.tags:
        fields.append(('tags', ','.join(event.tags)))
    if event.features:
        fields.append(('features', ','.join(event.features)))
    fields.extend(('staffAssigned', staff_id) for staff_id in event.staff_assigned)
    if start_date := _iso_utc(event.start_date):
        fields.append(('startDate', start_date))
    if end_date := _iso_utc(event.end_date):
        fields.append(('endDate', end_date))
    return fields


class EventApiRepoImpl(IEventQueryRepo, IEventCommandRepo):
    def __init__(self, *, client: UpstreamApiClient) -> None:
        self.client = client

    @Logger.io
    async def get_event_schedule(self, *, session: AuthSession, event_id: str) -> EventSchedule:
        body = await self.client.get(f'/admin/events/{event_id}', session=session)
        try:
            upstream_event = UpstreamEventEnvelope.model_validate(body).event
        except ValidationError as e:
            raise UpstreamApiError(f'Unexpected event payload for {event_id}') from e

        event = EventEntity(
            id=upstream_event.id,
            name=upstream_event.name,
            description=upstream_event.description,
            venue=upstream_event.venue,
            capacity=upstream_event.capacity,
            price=upstream_event.price,
            status=upstream_event.status,
            tags=upstream_event.tags,
            features=upstream_event.features,
            staff_assigned=upstream_event.staff_assigned,
            tickets_sold=upstream_event.tickets_sold,
            start_date=upstream_event.start_date,
            end_date=upstream_event.end_date,
        )
        schedule = ShowScheduleAggregate.from_wire(
            event_id=upstream_event.id,
            shows=[show.model_dump(by_alias=True) for show in upstream_event.shows],
        )
        return EventSchedule(event=event, schedule=schedule)

    @Logger.io
    async def create_event(
        self, *, session: AuthSession, event: EventEntity, schedule: ShowScheduleAggregate
    ) -> None:
        await self.client.post_multipart(
            '/admin/events', session=session, fields=build_event_form_fields(event, schedule)
        )

    @Logger.io
    async def update_event(
        self,
        *,
        session: AuthSession,
        event_id: str,
        event: EventEntity,
        schedule: ShowScheduleAggregate,
    ) -> None:
        await self.client.put_multipart(
            f'/admin/events/{event_id}',
            session=session,
            fields=build_event_form_fields(event, schedule),
        )
