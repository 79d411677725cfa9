from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, Field

from src.service.entry_pass.app.dto.booking_confirmation import BookingConfirmation, EventSelection
from src.service.entry_pass.app.dto.entry_pass_view import EntryPassView
from src.service.entry_pass.domain.booking_quota import available_seats, max_bookable
from src.service.entry_pass.domain.enum.pass_state import PassState
from src.service.verification.domain.value_object.qr_payload import qr_code_display


class EntryPassResponse(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'state': 'valid',
                'head_count': 2,
                'expires_at': '2025-07-01T00:00:00Z',
                'has_valid_pass': True,
                'is_expired': False,
                'no_pass': False,
                'max_bookable': 2,
            }
        },
    }

    state: PassState
    head_count: int = 0
    expires_at: Optional[datetime] = None
    has_valid_pass: bool
    is_expired: bool
    no_pass: bool
    max_bookable: Optional[int] = None

    @classmethod
    def from_view(
        cls, view: EntryPassView, seats_available: Optional[int] = None
    ) -> 'EntryPassResponse':
        entry_pass = view.entry_pass
        return cls(
            state=view.state,
            head_count=entry_pass.head_count if entry_pass else 0,
            expires_at=entry_pass.expires_at if entry_pass else None,
            has_valid_pass=view.has_valid_pass,
            is_expired=view.is_expired,
            no_pass=view.no_pass,
            max_bookable=(
                max_bookable(entry_pass, seats_available) if seats_available is not None else None
            ),
        )


class PurchaseRequest(BaseModel):
    head_count: int = Field(ge=1)

    class Config:
        json_schema_extra = {'example': {'head_count': 2}}


class PurchaseQuoteResponse(BaseModel):
    head_count: int
    amount: int


class BookShowRequest(BaseModel):
    event_id: str
    show_id: str
    head_count: int
    available_seats: int = Field(ge=0)

    class Config:
        json_schema_extra = {
            'example': {
                'event_id': '665f1c2e9b1d4a0012345678',
                'show_id': 'SHOW-1748772000000-a1b2c3',
                'head_count': 2,
                'available_seats': 5,
            }
        }


class EventSelectionSchema(BaseModel):
    event_id: str
    price: float = Field(ge=0)
    capacity: int = Field(ge=0)
    tickets_sold: int = Field(default=0, ge=0)

    def to_selection(self) -> EventSelection:
        return EventSelection(
            event_id=self.event_id,
            price=self.price,
            capacity=self.capacity,
            tickets_sold=self.tickets_sold,
        )


class BookEventsRequest(BaseModel):
    events: List[EventSelectionSchema]
    quantity: int

    def to_selections(self) -> List[EventSelection]:
        return [event.to_selection() for event in self.events]


class EventQuoteLine(BaseModel):
    event_id: str
    subtotal: float
    available_seats: int


class EventsQuoteResponse(BaseModel):
    quantity: int
    total: float
    lines: List[EventQuoteLine]


class BookingResponse(BaseModel):
    ticket_id: Optional[str] = None
    qr_code: Any
    qr_display: str  # image: qr_value is a data URL, render: encode qr_value as a QR code
    qr_value: str

    @classmethod
    def from_confirmation(cls, confirmation: BookingConfirmation) -> 'BookingResponse':
        display, value = qr_code_display(confirmation.qr_code)
        return cls(
            ticket_id=confirmation.ticket_id,
            qr_code=confirmation.qr_code,
            qr_display=display,
            qr_value=value,
        )


def build_events_quote(events: List[EventSelection], quantity: int) -> List[EventQuoteLine]:
    return [
        EventQuoteLine(
            event_id=event.event_id,
            subtotal=event.price * quantity,
            available_seats=available_seats(
                capacity=event.capacity, tickets_sold=event.tickets_sold
            ),
        )
        for event in events
    ]
