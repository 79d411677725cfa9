"""
Booking quota rules.

The client only caps the requested quantity with the last fetched pass and seat
snapshot; the real check happens on the server when the booking is submitted.
"""

from typing import Optional

from src.platform.exception.exceptions import DomainError, QuotaExceededError
from src.service.entry_pass.domain.entity.entry_pass_entity import EntryPass


def available_seats(*, capacity: int, tickets_sold: int) -> int:
    return max(capacity - tickets_sold, 0)


def max_bookable(entry_pass: Optional[EntryPass], seats_available: int) -> int:
    head_count = entry_pass.head_count if entry_pass else 0
    return max(min(head_count, seats_available), 0)


def validate_booking_quantity(
    *, quantity: int, entry_pass: Optional[EntryPass], seats_available: int
) -> int:
    if entry_pass is None:
        raise DomainError('An entry pass is required before booking tickets')
    if quantity < 1:
        raise DomainError('Please enter a valid quantity.')

    limit = max_bookable(entry_pass, seats_available)
    if quantity > limit:
        if entry_pass.head_count < seats_available:
            reason = f'your entry pass has {entry_pass.head_count} head(s) remaining'
        else:
            reason = f'only {seats_available} seat(s) are available for this show'
        raise QuotaExceededError(
            f'Cannot book {quantity} ticket(s): {reason}', max_bookable=limit
        )
    return quantity


def validate_event_seats(
    *, event_id: str, quantity: int, capacity: int, tickets_sold: int
) -> int:
    seats = available_seats(capacity=capacity, tickets_sold=tickets_sold)
    if quantity > seats:
        raise QuotaExceededError(
            f'Cannot book {quantity} ticket(s) for event {event_id}: '
            f'only {seats} seat(s) are available',
            max_bookable=seats,
        )
    return quantity
