from src.service.verification.domain.entity.ticket_entity import Ticket
from src.service.verification.domain.enum.ticket_status import TicketDisposition


_MESSAGES = {
    TicketDisposition.ATTENDABLE: 'Valid ticket',
    TicketDisposition.ATTENDED: 'Ticket already attended',
    TicketDisposition.NOT_ASSIGNED: 'Ticket not assigned to this event',
    TicketDisposition.USED: 'Ticket already used',
    TicketDisposition.EXPIRED: 'Ticket expired',
    TicketDisposition.CANCELLED: 'Ticket cancelled',
    TicketDisposition.INACTIVE: 'Ticket cannot be used',
}


def describe_ticket(ticket: Ticket) -> str:
    return _MESSAGES[ticket.disposition]
