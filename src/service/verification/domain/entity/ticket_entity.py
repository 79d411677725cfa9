"""
Ticket as seen by the venue scanner.

[Business Invariants]
- A ticket only ever moves forward to attended; the scanner never reverts it
- Once attended, can_be_marked_attended is False
- status registered with can_verify False means "not assigned to this event"
"""

from datetime import datetime
from typing import Optional

import attrs

from src.service.verification.domain.enum.ticket_status import TicketDisposition, TicketStatus


@attrs.define(frozen=True)
class TicketDetail:
    """Enrichment fields served by the per-ticket detail endpoint."""

    head_count: Optional[int] = None
    total_amount: Optional[float] = None
    payment_status: Optional[str] = None
    purchase_date: Optional[datetime] = None
    status: Optional[TicketStatus] = None
    verified_at: Optional[datetime] = None


@attrs.define(frozen=True)
class Ticket:
    ticket_id: str
    ticket_number: str
    event_id: str
    status: TicketStatus
    head_count: Optional[int] = None
    total_amount: Optional[float] = None
    payment_status: Optional[str] = None
    verified_at: Optional[datetime] = None
    can_be_marked_attended: bool = False
    can_verify: bool = False
    is_event_active: bool = False
    purchase_date: Optional[datetime] = None

    @property
    def needs_enrichment(self) -> bool:
        return self.head_count is None or self.total_amount is None or self.payment_status is None

    @property
    def disposition(self) -> TicketDisposition:
        if self.status == TicketStatus.ATTENDED:
            return TicketDisposition.ATTENDED
        if self.status == TicketStatus.REGISTERED and not self.can_verify:
            return TicketDisposition.NOT_ASSIGNED
        if self.status == TicketStatus.USED:
            return TicketDisposition.USED
        if self.status == TicketStatus.EXPIRED:
            return TicketDisposition.EXPIRED
        if self.status == TicketStatus.CANCELLED:
            return TicketDisposition.CANCELLED
        if self.can_be_marked_attended:
            return TicketDisposition.ATTENDABLE
        return TicketDisposition.INACTIVE

    def enrich(self, detail: TicketDetail) -> 'Ticket':
        """Fill missing enrichment fields; values already present are kept."""
        return attrs.evolve(
            self,
            head_count=self.head_count if self.head_count is not None else detail.head_count,
            total_amount=(
                self.total_amount if self.total_amount is not None else detail.total_amount
            ),
            payment_status=self.payment_status or detail.payment_status,
            purchase_date=self.purchase_date or detail.purchase_date,
        )

    def mark_attended(self, verified_at: datetime) -> 'Ticket':
        return attrs.evolve(
            self,
            status=TicketStatus.ATTENDED,
            verified_at=verified_at,
            can_be_marked_attended=False,
        )

    def reconcile(self, detail: TicketDetail, fallback_verified_at: datetime) -> 'Ticket':
        """Apply the server's view after another scanner already admitted the ticket."""
        return attrs.evolve(
            self.enrich(detail),
            status=detail.status or TicketStatus.ATTENDED,
            verified_at=detail.verified_at or fallback_verified_at,
            can_be_marked_attended=False,
        )
