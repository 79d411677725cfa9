"""
Unit tests for BookTicketsUseCase

Quota checks run against the fetched pass before anything is sent to the
booking endpoint.
"""

from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock

import pytest

from src.platform.exception.exceptions import DomainError, QuotaExceededError
from src.service.entry_pass.app.command.book_tickets_use_case import (
    BookTicketsUseCase,
    quote_events,
)
from src.service.entry_pass.app.dto.booking_confirmation import (
    BookingConfirmation,
    EventSelection,
    SimulatedPayment,
)
from src.service.entry_pass.domain.entity.entry_pass_entity import EntryPass


@pytest.fixture
def mock_entry_pass_gateway() -> AsyncMock:
    gateway = AsyncMock()
    gateway.fetch_current_pass.return_value = EntryPass(
        head_count=2, expires_at=datetime.now(timezone.utc) + timedelta(days=30)
    )
    return gateway


@pytest.fixture
def mock_booking_gateway() -> AsyncMock:
    gateway = AsyncMock()
    confirmation = BookingConfirmation(qr_code='ticket-1|event-1', ticket_id='ticket-1')
    gateway.book_show.return_value = confirmation
    gateway.book_events.return_value = confirmation
    return gateway


@pytest.fixture
def mock_payment_simulator() -> AsyncMock:
    simulator = AsyncMock()
    simulator.authorize.return_value = SimulatedPayment(
        payment_id='SIMULATED_PAYMENT_ID_1', amount=0
    )
    return simulator


@pytest.fixture
def use_case(mock_entry_pass_gateway, mock_booking_gateway, mock_payment_simulator):
    return BookTicketsUseCase(
        entry_pass_gateway=mock_entry_pass_gateway,
        booking_gateway=mock_booking_gateway,
        payment_simulator=mock_payment_simulator,
    )


@pytest.fixture
def events() -> list[EventSelection]:
    return [
        EventSelection(event_id='event-1', price=100, capacity=50, tickets_sold=10),
        EventSelection(event_id='event-2', price=250, capacity=20, tickets_sold=15),
    ]


@pytest.mark.unit
class TestBookShow:
    @pytest.mark.asyncio
    async def test_quantity_within_quota_is_booked(
        self, use_case, mock_booking_gateway, customer_session
    ):
        # Act
        confirmation = await use_case.book_show(
            session=customer_session,
            event_id='event-1',
            show_id='SHOW-1',
            head_count=2,
            available_seats=5,
        )

        # Assert
        assert confirmation.ticket_id == 'ticket-1'
        mock_booking_gateway.book_show.assert_awaited_once_with(
            session=customer_session, event_id='event-1', show_id='SHOW-1', head_count=2
        )

    @pytest.mark.asyncio
    async def test_quantity_above_quota_is_rejected_without_booking(
        self, use_case, mock_booking_gateway, customer_session
    ):
        with pytest.raises(QuotaExceededError) as exc_info:
            await use_case.book_show(
                session=customer_session,
                event_id='event-1',
                show_id='SHOW-1',
                head_count=3,
                available_seats=5,
            )

        assert exc_info.value.max_bookable == 2
        mock_booking_gateway.book_show.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_no_pass_disables_booking(
        self, use_case, mock_entry_pass_gateway, mock_booking_gateway, customer_session
    ):
        # Arrange
        mock_entry_pass_gateway.fetch_current_pass.return_value = None

        # Act & Assert
        with pytest.raises(DomainError, match='entry pass is required'):
            await use_case.book_show(
                session=customer_session,
                event_id='event-1',
                show_id='SHOW-1',
                head_count=1,
                available_seats=5,
            )
        mock_booking_gateway.book_show.assert_not_awaited()


@pytest.mark.unit
class TestBookEvents:
    def test_quote_is_price_times_quantity_summed(self, events):
        assert quote_events(events, 2) == 700

    @pytest.mark.asyncio
    async def test_pays_quoted_total_then_books(
        self, use_case, mock_booking_gateway, mock_payment_simulator, customer_session, events
    ):
        # Act
        await use_case.book_events(session=customer_session, events=events, quantity=3)

        # Assert
        mock_payment_simulator.authorize.assert_awaited_once_with(amount=1050)
        mock_booking_gateway.book_events.assert_awaited_once_with(
            session=customer_session, event_ids=['event-1', 'event-2'], quantity=3
        )

    @pytest.mark.asyncio
    async def test_empty_selection_is_rejected(
        self, use_case, mock_payment_simulator, customer_session
    ):
        with pytest.raises(DomainError, match='at least one event'):
            await use_case.book_events(session=customer_session, events=[], quantity=1)

        mock_payment_simulator.authorize.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_non_positive_quantity_is_rejected(
        self, use_case, mock_booking_gateway, customer_session, events
    ):
        with pytest.raises(DomainError, match='valid quantity'):
            await use_case.book_events(session=customer_session, events=events, quantity=0)

        mock_booking_gateway.book_events.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_sold_out_event_is_rejected_before_payment(
        self, use_case, mock_booking_gateway, mock_payment_simulator, customer_session, events
    ):
        # Arrange
        sold_out = EventSelection(event_id='event-3', price=80, capacity=5, tickets_sold=5)

        # Act & Assert
        with pytest.raises(QuotaExceededError, match='event event-3') as exc_info:
            await use_case.book_events(
                session=customer_session, events=[*events, sold_out], quantity=3
            )
        assert exc_info.value.max_bookable == 0
        mock_payment_simulator.authorize.assert_not_awaited()
        mock_booking_gateway.book_events.assert_not_awaited()
