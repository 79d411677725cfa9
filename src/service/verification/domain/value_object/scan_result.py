from typing import Optional

import attrs

from src.platform.exception.exceptions import NotFoundError
from src.service.verification.domain.entity.ticket_entity import Ticket
from src.service.verification.domain.enum.scan_status import ScanCue, ScanStatus


VERIFY_SUCCESS_MESSAGE = 'Ticket verified successfully'
VERIFY_FALLBACK_MESSAGE = 'Failed to verify ticket'
MARK_ATTENDED_MESSAGE = 'Ticket has been marked as used'
ALREADY_ATTENDED_MESSAGE = 'Ticket was already marked as used at another gate'


@attrs.define(frozen=True)
class ScanUser:
    id: Optional[str] = None
    name: str = ''
    email: str = ''


@attrs.define(frozen=True)
class ScanResult:
    """Outcome of one scan/verify cycle. Replaced, never mutated."""

    status: ScanStatus
    message: str = ''
    cue: Optional[ScanCue] = None
    user: Optional[ScanUser] = None
    tickets: tuple[Ticket, ...] = attrs.field(default=(), converter=tuple)

    @classmethod
    def success(cls, *, user: Optional[ScanUser], tickets, message: str) -> 'ScanResult':
        return cls(
            status=ScanStatus.SUCCESS,
            user=user,
            tickets=tickets,
            message=message,
            cue=ScanCue.SUCCESS,
        )

    @classmethod
    def error(cls, message: str) -> 'ScanResult':
        return cls(status=ScanStatus.ERROR, message=message, cue=ScanCue.ALERT)

    def get_ticket(self, ticket_id: str) -> Ticket:
        for ticket in self.tickets:
            if ticket.ticket_id == ticket_id:
                return ticket
        raise NotFoundError(f'Ticket {ticket_id} is not part of the current scan result')

    def with_ticket(self, updated: Ticket) -> 'ScanResult':
        return attrs.evolve(
            self,
            tickets=tuple(
                updated if ticket.ticket_id == updated.ticket_id else ticket
                for ticket in self.tickets
            ),
        )
