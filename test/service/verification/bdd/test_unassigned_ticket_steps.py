import asyncio
from typing import Any
from unittest.mock import AsyncMock

import pytest
from pytest_bdd import given, parsers, scenarios, then, when

from src.platform.exception.exceptions import DomainError
from src.service.verification.app.command.mark_attended_use_case import MarkAttendedUseCase
from src.service.verification.app.command.verify_ticket_use_case import VerifyTicketUseCase
from src.service.verification.app.dto.scan_dto import VerifiedScan
from src.service.verification.domain.entity.ticket_entity import Ticket
from src.service.verification.domain.enum.scan_status import ScanCue, ScanStatus
from src.service.verification.domain.enum.ticket_status import TicketDisposition, TicketStatus
from src.service.verification.domain.value_object.scan_result import ScanUser
from src.service.verification.domain.value_object.ticket_message import describe_ticket
from src.service.verification.driven_adapter.state.in_memory_scan_session_store import (
    InMemoryScanSessionStore,
)


scenarios('unassigned_ticket.feature')

SCAN_SESSION_ID = 'gate-1'


@pytest.fixture
def scan_state() -> dict[str, Any]:
    return {}


@pytest.fixture
def ticket_gateway() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def store() -> InMemoryScanSessionStore:
    return InMemoryScanSessionStore()


@given(parsers.parse('I am scanning for event "{event_id}"'))
def scanning_for_event(ticket_gateway, store, event_id: str):
    VerifyTicketUseCase(ticket_gateway=ticket_gateway, scan_session_store=store).select_event(
        scan_session_id=SCAN_SESSION_ID, event_id=event_id
    )


@given(
    parsers.parse(
        'the server knows a registered ticket "{ticket_number}" that cannot be verified for this event'
    )
)
def registered_elsewhere(ticket_gateway, ticket_number: str):
    ticket_gateway.verify.return_value = VerifiedScan(
        user=ScanUser(id='user-1', name='Ada', email='ada@example.com'),
        tickets=[
            Ticket(
                ticket_id='ticket-42',
                ticket_number=ticket_number,
                event_id='event-2',
                status=TicketStatus.REGISTERED,
                head_count=1,
                total_amount=100,
                payment_status='paid',
                can_verify=False,
                can_be_marked_attended=False,
            )
        ],
    )


@when('I scan the ticket code')
def scan(ticket_gateway, store, scan_state, staff_session):
    use_case = VerifyTicketUseCase(ticket_gateway=ticket_gateway, scan_session_store=store)
    scan_state['result'] = asyncio.run(
        use_case.verify(session=staff_session, scan_session_id=SCAN_SESSION_ID, qr_data='t-42|e-2')
    )


@then('the scan succeeds with the success cue')
def scan_succeeds(scan_state):
    assert scan_state['result'].status == ScanStatus.SUCCESS
    assert scan_state['result'].cue == ScanCue.SUCCESS


@then(parsers.parse('the ticket is shown as "{message}"'))
def shown_as(scan_state, message: str):
    ticket = scan_state['result'].get_ticket('ticket-42')
    assert ticket.disposition == TicketDisposition.NOT_ASSIGNED
    assert describe_ticket(ticket) == message


@then('the ticket cannot be marked attended')
def cannot_be_marked(scan_state):
    assert scan_state['result'].get_ticket('ticket-42').can_be_marked_attended is False


@then('marking it attended is refused without contacting the server')
def marking_refused(ticket_gateway, store, staff_session):
    use_case = MarkAttendedUseCase(ticket_gateway=ticket_gateway, scan_session_store=store)
    with pytest.raises(DomainError):
        asyncio.run(
            use_case.mark_attended(
                session=staff_session, scan_session_id=SCAN_SESSION_ID, ticket_id='ticket-42'
            )
        )
    ticket_gateway.mark_attended.assert_not_awaited()
