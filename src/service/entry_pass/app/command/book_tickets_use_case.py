from typing import List, Self, Sequence

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.ticketing_metrics import metrics
from src.service.entry_pass.app.dto.booking_confirmation import (
    BookingConfirmation,
    EventSelection,
)
from src.service.entry_pass.app.interface.i_booking_gateway import IBookingGateway
from src.service.entry_pass.app.interface.i_entry_pass_gateway import IEntryPassGateway
from src.service.entry_pass.app.interface.i_payment_simulator import IPaymentSimulator
from src.service.entry_pass.domain.booking_quota import (
    validate_booking_quantity,
    validate_event_seats,
)
from src.service.shared_kernel.domain.value_object.auth_session import AuthSession


def quote_events(events: Sequence[EventSelection], quantity: int) -> float:
    return sum(event.price * quantity for event in events)


class BookTicketsUseCase:
    """
    Ticket booking gated by the entry pass quota.

    The quantity is only capped against the last fetched snapshot; seats and
    head count are decremented by the server, never here.
    """

    def __init__(
        self,
        *,
        entry_pass_gateway: IEntryPassGateway,
        booking_gateway: IBookingGateway,
        payment_simulator: IPaymentSimulator,
    ) -> None:
        self.entry_pass_gateway = entry_pass_gateway
        self.booking_gateway = booking_gateway
        self.payment_simulator = payment_simulator
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        entry_pass_gateway: IEntryPassGateway = Depends(Provide[Container.entry_pass_gateway]),
        booking_gateway: IBookingGateway = Depends(Provide[Container.booking_gateway]),
        payment_simulator: IPaymentSimulator = Depends(Provide[Container.payment_simulator]),
    ) -> Self:
        return cls(
            entry_pass_gateway=entry_pass_gateway,
            booking_gateway=booking_gateway,
            payment_simulator=payment_simulator,
        )

    @Logger.io
    async def book_show(
        self,
        *,
        session: AuthSession,
        event_id: str,
        show_id: str,
        head_count: int,
        available_seats: int,
    ) -> BookingConfirmation:
        with self.tracer.start_as_current_span(
            'use_case.book_show',
            attributes={
                'event.id': event_id,
                'show.id': show_id,
                'booking.head_count': head_count,
            },
        ):
            entry_pass = await self.entry_pass_gateway.fetch_current_pass(session=session)
            try:
                validate_booking_quantity(
                    quantity=head_count, entry_pass=entry_pass, seats_available=available_seats
                )
            except DomainError:
                metrics.record_booking(flow='show', result='rejected')
                raise

            try:
                confirmation = await self.booking_gateway.book_show(
                    session=session, event_id=event_id, show_id=show_id, head_count=head_count
                )
            except Exception:
                metrics.record_booking(flow='show', result='error')
                raise

            metrics.record_booking(flow='show', result='success')
            Logger.base.info(
                f'[BOOKING] Booked {head_count} head(s) for event {event_id} show {show_id}'
            )
            return confirmation

    @Logger.io
    async def book_events(
        self, *, session: AuthSession, events: List[EventSelection], quantity: int
    ) -> BookingConfirmation:
        if not events:
            raise DomainError('Please select at least one event.')
        if quantity < 1:
            raise DomainError('Please enter a valid quantity.')
        try:
            for event in events:
                validate_event_seats(
                    event_id=event.event_id,
                    quantity=quantity,
                    capacity=event.capacity,
                    tickets_sold=event.tickets_sold,
                )
        except DomainError:
            metrics.record_booking(flow='events', result='rejected')
            raise

        event_ids = [event.event_id for event in events]
        with self.tracer.start_as_current_span(
            'use_case.book_events',
            attributes={'booking.event_count': len(event_ids), 'booking.quantity': quantity},
        ):
            try:
                await self.payment_simulator.authorize(amount=quote_events(events, quantity))
                confirmation = await self.booking_gateway.book_events(
                    session=session, event_ids=event_ids, quantity=quantity
                )
            except Exception:
                metrics.record_booking(flow='events', result='error')
                raise

            metrics.record_booking(flow='events', result='success')
            Logger.base.info(
                f'[BOOKING] Booked {quantity} ticket(s) across {len(event_ids)} event(s)'
            )
            return confirmation
