from typing import List

from pydantic import ValidationError

from src.platform.exception.exceptions import UpstreamApiError
from src.platform.http.upstream_api_client import UpstreamApiClient
from src.platform.logging.loguru_io import Logger
from src.service.entry_pass.app.dto.booking_confirmation import BookingConfirmation
from src.service.entry_pass.app.interface.i_booking_gateway import IBookingGateway
from src.service.entry_pass.driven_adapter.gateway.entry_pass_upstream_schema import (
    UpstreamBookingEnvelope,
    UpstreamEventsBookingEnvelope,
)
from src.service.shared_kernel.domain.value_object.auth_session import AuthSession


class BookingApiGatewayImpl(IBookingGateway):
    def __init__(self, *, client: UpstreamApiClient) -> None:
        self.client = client

    @Logger.io
    async def book_show(
        self, *, session: AuthSession, event_id: str, show_id: str, head_count: int
    ) -> BookingConfirmation:
        body = await self.client.post(
            '/tickets/book',
            session=session,
            json={'eventId': event_id, 'showId': show_id, 'headCount': head_count},
        )
        try:
            ticket = UpstreamBookingEnvelope.model_validate(body).ticket
        except ValidationError as e:
            raise UpstreamApiError('Booking response did not include a ticket') from e
        return BookingConfirmation(qr_code=ticket.qr_code, ticket_id=ticket.id)

    @Logger.io
    async def book_events(
        self, *, session: AuthSession, event_ids: List[str], quantity: int
    ) -> BookingConfirmation:
        body = await self.client.post(
            '/tickets/book', session=session, json={'events': event_ids, 'quantity': quantity}
        )
        try:
            ticket = UpstreamEventsBookingEnvelope.model_validate(body).booked_ticket()
        except ValidationError as e:
            raise UpstreamApiError('Booking response did not include a QR code') from e
        if ticket is None:
            raise UpstreamApiError('Booking response did not include a QR code')
        return BookingConfirmation(qr_code=ticket.qr_code, ticket_id=ticket.id)
