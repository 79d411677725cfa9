from datetime import datetime, timezone

import pytest

from src.service.verification.domain.entity.ticket_entity import Ticket, TicketDetail
from src.service.verification.domain.enum.ticket_status import TicketDisposition, TicketStatus
from src.service.verification.domain.value_object.ticket_message import describe_ticket


def _ticket(**overrides) -> Ticket:
    fields = {
        'ticket_id': 'ticket-1',
        'ticket_number': 'TKT-0001',
        'event_id': 'event-1',
        'status': TicketStatus.ACTIVE,
        'can_verify': True,
        'can_be_marked_attended': True,
        'is_event_active': True,
    }
    fields.update(overrides)
    return Ticket(**fields)


@pytest.mark.unit
class TestTicketDisposition:
    @pytest.mark.parametrize(
        'overrides,disposition,message',
        [
            ({}, TicketDisposition.ATTENDABLE, 'Valid ticket'),
            (
                {'status': TicketStatus.ATTENDED, 'can_be_marked_attended': False},
                TicketDisposition.ATTENDED,
                'Ticket already attended',
            ),
            (
                {'status': TicketStatus.REGISTERED, 'can_verify': False},
                TicketDisposition.NOT_ASSIGNED,
                'Ticket not assigned to this event',
            ),
            ({'status': TicketStatus.USED}, TicketDisposition.USED, 'Ticket already used'),
            ({'status': TicketStatus.EXPIRED}, TicketDisposition.EXPIRED, 'Ticket expired'),
            ({'status': TicketStatus.CANCELLED}, TicketDisposition.CANCELLED, 'Ticket cancelled'),
            (
                {'can_be_marked_attended': False},
                TicketDisposition.INACTIVE,
                'Ticket cannot be used',
            ),
        ],
    )
    def test_disposition_and_message(self, overrides, disposition, message):
        ticket = _ticket(**overrides)

        assert ticket.disposition == disposition
        assert describe_ticket(ticket) == message

    def test_registered_ticket_that_can_verify_is_attendable(self):
        ticket = _ticket(status=TicketStatus.REGISTERED, can_verify=True)

        assert ticket.disposition == TicketDisposition.ATTENDABLE


@pytest.mark.unit
class TestTicketEnrichment:
    def test_needs_enrichment_when_any_detail_missing(self):
        assert _ticket().needs_enrichment
        assert _ticket(head_count=2, total_amount=200).needs_enrichment
        assert not _ticket(head_count=2, total_amount=200, payment_status='paid').needs_enrichment

    def test_enrich_fills_only_missing_fields(self):
        ticket = _ticket(head_count=3)
        detail = TicketDetail(head_count=9, total_amount=300, payment_status='paid')

        enriched = ticket.enrich(detail)

        assert enriched.head_count == 3
        assert enriched.total_amount == 300
        assert enriched.payment_status == 'paid'
        assert not enriched.needs_enrichment

    def test_mark_attended_moves_forward_only(self):
        verified_at = datetime(2025, 6, 1, 10, 5, tzinfo=timezone.utc)

        attended = _ticket().mark_attended(verified_at)

        assert attended.status == TicketStatus.ATTENDED
        assert attended.verified_at == verified_at
        assert attended.can_be_marked_attended is False
        assert attended.disposition == TicketDisposition.ATTENDED

    def test_reconcile_prefers_server_state(self):
        server_time = datetime(2025, 6, 1, 9, 59, tzinfo=timezone.utc)
        local_time = datetime(2025, 6, 1, 10, 5, tzinfo=timezone.utc)
        detail = TicketDetail(
            status=TicketStatus.ATTENDED, verified_at=server_time, head_count=2
        )

        reconciled = _ticket().reconcile(detail, local_time)

        assert reconciled.status == TicketStatus.ATTENDED
        assert reconciled.verified_at == server_time
        assert reconciled.head_count == 2
        assert reconciled.can_be_marked_attended is False

    def test_reconcile_falls_back_to_local_time(self):
        local_time = datetime(2025, 6, 1, 10, 5, tzinfo=timezone.utc)

        reconciled = _ticket().reconcile(TicketDetail(), local_time)

        assert reconciled.status == TicketStatus.ATTENDED
        assert reconciled.verified_at == local_time
