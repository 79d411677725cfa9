from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from src.service.scheduling.app.dto.event_schedule import EventSchedule
from src.service.scheduling.app.query.get_show_calendar_use_case import CalendarCell
from src.service.scheduling.domain.aggregate.show_schedule_aggregate import ShowScheduleAggregate
from src.service.scheduling.domain.entity.event_entity import EventEntity
from src.service.scheduling.domain.enum.event_status import EventStatus
from src.service.scheduling.domain.value_object.show import Show


class ShowSchema(BaseModel):
    show_id: str
    date: date
    start_time: str
    end_time: str

    @classmethod
    def from_show(cls, show: Show) -> 'ShowSchema':
        return cls(
            show_id=show.show_id,
            date=show.date,
            start_time=show.start_time.strftime('%H:%M'),
            end_time=show.end_time.strftime('%H:%M'),
        )

    def to_wire(self) -> dict[str, str]:
        return {
            'showId': self.show_id,
            'date': self.date.isoformat(),
            'startTime': self.start_time,
            'endTime': self.end_time,
        }


class ShowSlotRequest(BaseModel):
    date: str
    start_time: str
    end_time: str

    class Config:
        json_schema_extra = {
            'example': {'date': '2025-06-01', 'start_time': '10:00', 'end_time': '11:00'}
        }


class ScheduleRequest(BaseModel):
    """The editor's current shows; every edit returns the new list."""

    shows: List[ShowSchema] = []

    def to_schedule(self, event_id: Optional[str] = None) -> ShowScheduleAggregate:
        return ShowScheduleAggregate.from_editor(
            event_id=event_id, shows=[show.to_wire() for show in self.shows]
        )


class AddShowRequest(ScheduleRequest):
    show: ShowSlotRequest


class EditShowRequest(ScheduleRequest):
    show: ShowSlotRequest


class RemoveShowRequest(ScheduleRequest):
    confirmed: bool = False


class DuplicateShowRequest(ScheduleRequest):
    target_dates: List[date]

    class Config:
        json_schema_extra = {
            'example': {
                'shows': [
                    {
                        'show_id': 'SHOW-1748772000000-a1b2c3',
                        'date': '2025-06-01',
                        'start_time': '10:00',
                        'end_time': '11:00',
                    }
                ],
                'target_dates': ['2025-06-08', '2025-06-15'],
            }
        }


class DuplicateTargetsRequest(ScheduleRequest):
    candidate_dates: List[date]


class CalendarRequest(ScheduleRequest):
    month: int = Field(ge=1, le=12)
    year: int = Field(ge=1)


class ScheduleResponse(BaseModel):
    shows: List[ShowSchema]
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    affected: List[ShowSchema] = []

    @classmethod
    def from_schedule(
        cls, schedule: ShowScheduleAggregate, affected: Optional[List[Show]] = None
    ) -> 'ScheduleResponse':
        date_range = schedule.date_range()
        return cls(
            shows=[ShowSchema.from_show(show) for show in schedule.sorted_shows()],
            start_date=date_range.start_date,
            end_date=date_range.end_date,
            affected=[ShowSchema.from_show(show) for show in affected or []],
        )


class DuplicateTargetsResponse(BaseModel):
    target_dates: List[date]


class CalendarCellResponse(BaseModel):
    date: date
    day: int
    is_current_month: bool
    shows: List[ShowSchema]

    @classmethod
    def from_cell(cls, cell: CalendarCell) -> 'CalendarCellResponse':
        return cls(
            date=cell.day.date,
            day=cell.day.day,
            is_current_month=cell.day.is_current_month,
            shows=[ShowSchema.from_show(show) for show in cell.shows],
        )


class EventFormRequest(ScheduleRequest):
    name: str
    capacity: int = Field(ge=0)
    price: float = Field(ge=0)
    description: str = ''
    venue: str = ''
    status: EventStatus = EventStatus.DRAFT
    tags: List[str] = []
    features: List[str] = []
    staff_assigned: List[str] = []

    class Config:
        json_schema_extra = {
            'example': {
                'name': 'Science Night',
                'capacity': 200,
                'price': 100,
                'venue': 'Main Hall',
                'status': 'draft',
                'tags': ['science', 'family'],
                'shows': [
                    {
                        'show_id': 'SHOW-1748772000000-a1b2c3',
                        'date': '2025-06-01',
                        'start_time': '10:00',
                        'end_time': '11:00',
                    }
                ],
            }
        }

    def to_event(self) -> EventEntity:
        return EventEntity(
            name=self.name,
            capacity=self.capacity,
            price=self.price,
            description=self.description,
            venue=self.venue,
            status=self.status,
            tags=[tag.strip() for tag in self.tags if tag.strip()],
            features=[feature.strip() for feature in self.features if feature.strip()],
            staff_assigned=self.staff_assigned,
        )


class EventScheduleResponse(BaseModel):
    id: Optional[str]
    name: str
    description: str
    venue: str
    capacity: int
    price: float
    status: EventStatus
    tags: List[str]
    features: List[str]
    staff_assigned: List[str]
    tickets_sold: int
    available_seats: int
    start_date: Optional[datetime]
    end_date: Optional[datetime]
    shows: List[ShowSchema]

    @classmethod
    def from_event_schedule(cls, event_schedule: EventSchedule) -> 'EventScheduleResponse':
        event = event_schedule.event
        return cls(
            id=event.id,
            name=event.name,
            description=event.description,
            venue=event.venue,
            capacity=event.capacity,
            price=event.price,
            status=event.status,
            tags=event.tags,
            features=event.features,
            staff_assigned=event.staff_assigned,
            tickets_sold=event.tickets_sold,
            available_seats=event.available_seats,
            start_date=event.start_date,
            end_date=event.end_date,
            shows=[ShowSchema.from_show(show) for show in event_schedule.schedule.sorted_shows()],
        )
