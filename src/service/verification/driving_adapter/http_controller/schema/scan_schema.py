from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel

from src.service.verification.app.dto.scan_dto import MarkAttendedOutcome
from src.service.verification.domain.entity.scan_session_entity import ScanSession
from src.service.verification.domain.entity.ticket_entity import Ticket
from src.service.verification.domain.enum.scan_status import ScanCue, ScanStatus
from src.service.verification.domain.enum.ticket_status import TicketDisposition, TicketStatus
from src.service.verification.domain.value_object.scan_result import ScanResult, ScanUser
from src.service.verification.domain.value_object.ticket_message import describe_ticket


class SelectEventRequest(BaseModel):
    event_id: str


class VerifyRequest(BaseModel):
    qr_data: Any

    class Config:
        json_schema_extra = {
            'examples': [
                {'qr_data': 'TICKET-7F3A9C'},
                {'qr_data': '{"ticketId": "6660a1", "eventId": "665f1c"}'},
                {'qr_data': {'ticketId': '6660a1', 'eventId': '665f1c'}},
            ]
        }


class ScanUserResponse(BaseModel):
    id: Optional[str] = None
    name: str
    email: str

    @classmethod
    def from_user(cls, user: ScanUser) -> 'ScanUserResponse':
        return cls(id=user.id, name=user.name, email=user.email)


class TicketResponse(BaseModel):
    ticket_id: str
    ticket_number: str
    event_id: str
    status: TicketStatus
    head_count: Optional[int] = None
    total_amount: Optional[float] = None
    payment_status: Optional[str] = None
    purchase_date: Optional[datetime] = None
    verified_at: Optional[datetime] = None
    can_be_marked_attended: bool
    can_verify: bool
    is_event_active: bool
    disposition: TicketDisposition
    status_message: str

    @classmethod
    def from_ticket(cls, ticket: Ticket) -> 'TicketResponse':
        return cls(
            ticket_id=ticket.ticket_id,
            ticket_number=ticket.ticket_number,
            event_id=ticket.event_id,
            status=ticket.status,
            head_count=ticket.head_count,
            total_amount=ticket.total_amount,
            payment_status=ticket.payment_status,
            purchase_date=ticket.purchase_date,
            verified_at=ticket.verified_at,
            can_be_marked_attended=ticket.can_be_marked_attended,
            can_verify=ticket.can_verify,
            is_event_active=ticket.is_event_active,
            disposition=ticket.disposition,
            status_message=describe_ticket(ticket),
        )


class ScanResultResponse(BaseModel):
    status: ScanStatus
    message: str
    cue: Optional[ScanCue] = None
    sound: Optional[str] = None
    pulse: bool = False
    user: Optional[ScanUserResponse] = None
    tickets: List[TicketResponse] = []

    @classmethod
    def from_result(cls, result: ScanResult) -> 'ScanResultResponse':
        return cls(
            status=result.status,
            message=result.message,
            cue=result.cue,
            sound=result.cue.sound_path if result.cue else None,
            pulse=result.status == ScanStatus.SUCCESS,
            user=ScanUserResponse.from_user(result.user) if result.user else None,
            tickets=[TicketResponse.from_ticket(ticket) for ticket in result.tickets],
        )


class ScanSessionResponse(BaseModel):
    session_id: str
    selected_event_id: Optional[str] = None
    status: ScanStatus
    result: Optional[ScanResultResponse] = None

    @classmethod
    def from_session(cls, scan_session: ScanSession, session_id: str) -> 'ScanSessionResponse':
        return cls(
            session_id=session_id,
            selected_event_id=scan_session.selected_event_id,
            status=scan_session.status,
            result=ScanResultResponse.from_result(scan_session.result)
            if scan_session.result
            else None,
        )


class MarkAttendedResponse(BaseModel):
    """The mark itself carries its own message, cue and pulse; `result` is the updated scan."""

    ticket: TicketResponse
    already_attended: bool
    message: str
    cue: ScanCue
    sound: str
    pulse: bool = True
    result: ScanResultResponse

    @classmethod
    def from_outcome(cls, outcome: MarkAttendedOutcome) -> 'MarkAttendedResponse':
        return cls(
            ticket=TicketResponse.from_ticket(outcome.ticket),
            already_attended=outcome.already_attended,
            message=outcome.message,
            cue=outcome.cue,
            sound=outcome.cue.sound_path,
            result=ScanResultResponse.from_result(outcome.result),
        )
