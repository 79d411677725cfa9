from datetime import datetime, timezone
from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.exception.exceptions import ConflictError, DomainError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.ticketing_metrics import metrics
from src.service.shared_kernel.domain.value_object.auth_session import AuthSession
from src.service.verification.app.dto.scan_dto import MarkAttendedOutcome
from src.service.verification.app.interface.i_scan_session_store import IScanSessionStore
from src.service.verification.app.interface.i_ticket_gateway import ITicketGateway
from src.service.verification.domain.enum.scan_status import ScanStatus


class MarkAttendedUseCase:
    """
    Mark one ticket of the current scan result as attended.

    The session's result is replaced by a new ScanResult with the ticket
    merged as attended, unless a newer scan took its place meanwhile. If
    another scanner got there first (409), the ticket is re-read and the
    server's state is merged instead of failing.
    """

    def __init__(
        self, *, ticket_gateway: ITicketGateway, scan_session_store: IScanSessionStore
    ) -> None:
        self.ticket_gateway = ticket_gateway
        self.scan_session_store = scan_session_store
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        ticket_gateway: ITicketGateway = Depends(Provide[Container.ticket_gateway]),
        scan_session_store: IScanSessionStore = Depends(Provide[Container.scan_session_store]),
    ) -> Self:
        return cls(ticket_gateway=ticket_gateway, scan_session_store=scan_session_store)

    @Logger.io
    async def mark_attended(
        self,
        *,
        session: AuthSession,
        scan_session_id: str,
        ticket_id: str,
        now: Optional[datetime] = None,
    ) -> MarkAttendedOutcome:
        scan_session = self.scan_session_store.get(scan_session_id)
        result = scan_session.result
        if scan_session.status != ScanStatus.SUCCESS or result is None:
            raise DomainError('No verified scan result to update')

        ticket = result.get_ticket(ticket_id)
        if not ticket.can_be_marked_attended:
            raise DomainError(f'Ticket {ticket.ticket_number} cannot be marked attended')

        event_id = scan_session.selected_event_id or ticket.event_id
        now = now or datetime.now(timezone.utc)

        with self.tracer.start_as_current_span(
            'use_case.mark_attended',
            attributes={'event.id': event_id, 'ticket.id': ticket_id},
        ):
            already_attended = False
            try:
                await self.ticket_gateway.mark_attended(
                    session=session, ticket_id=ticket_id, event_id=event_id
                )
                updated = ticket.mark_attended(now)
            except ConflictError:
                Logger.base.info(
                    f'[MARK_ATTENDED] Ticket {ticket_id} already admitted elsewhere, reloading'
                )
                detail = await self.ticket_gateway.get_ticket_detail(
                    session=session, ticket_id=ticket_id
                )
                updated = ticket.reconcile(detail, now)
                already_attended = True
            except Exception:
                metrics.record_mark_attended(event_id=event_id, result='error')
                raise

            new_result = result.with_ticket(updated)
            # A newer scan may have replaced the result while upstream answered
            if scan_session.result is result:
                scan_session.replace_result(new_result)
            else:
                Logger.base.info(
                    f'[MARK_ATTENDED] Session {scan_session_id} moved on, keeping its newer result'
                )
            metrics.record_mark_attended(
                event_id=event_id, result='already_attended' if already_attended else 'marked'
            )
            Logger.base.info(f'[MARK_ATTENDED] Ticket {ticket_id} attended for event {event_id}')
            return MarkAttendedOutcome(
                result=new_result, ticket=updated, already_attended=already_attended
            )
