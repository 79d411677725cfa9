from enum import StrEnum


class TicketStatus(StrEnum):
    PENDING = 'pending'
    ACTIVE = 'active'
    REGISTERED = 'registered'
    USED = 'used'
    ATTENDED = 'attended'
    CANCELLED = 'cancelled'
    EXPIRED = 'expired'


class TicketDisposition(StrEnum):
    """How a scanned ticket is presented to staff for the selected event."""

    ATTENDABLE = 'attendable'
    ATTENDED = 'attended'
    NOT_ASSIGNED = 'not_assigned'  # informational, not an error
    USED = 'used'
    EXPIRED = 'expired'
    CANCELLED = 'cancelled'
    INACTIVE = 'inactive'
