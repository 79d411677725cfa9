from typing import Any, Optional

import attrs


@attrs.define(frozen=True)
class BookingConfirmation:
    """Server answer to a booking; the QR code is whatever the server issued."""

    qr_code: Any
    ticket_id: Optional[str] = None


@attrs.define(frozen=True)
class SimulatedPayment:
    payment_id: str
    amount: float
    transaction_info: dict = attrs.field(factory=lambda: {'method': 'simulated'})


@attrs.define(frozen=True)
class EventSelection:
    """One event picked on the multi-event booking page."""

    event_id: str
    price: float
    capacity: int
    tickets_sold: int = 0
