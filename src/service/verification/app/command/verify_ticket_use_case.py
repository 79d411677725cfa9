import time
from typing import Any, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.ticketing_metrics import metrics
from src.service.shared_kernel.domain.value_object.auth_session import AuthSession
from src.service.verification.app.interface.i_scan_session_store import IScanSessionStore
from src.service.verification.app.interface.i_ticket_gateway import ITicketGateway
from src.service.verification.domain.entity.scan_session_entity import ScanSession
from src.service.verification.domain.entity.ticket_entity import Ticket
from src.service.verification.domain.enum.scan_status import ScanStatus
from src.service.verification.domain.value_object.qr_payload import QrPayload
from src.service.verification.domain.value_object.scan_result import (
    VERIFY_FALLBACK_MESSAGE,
    VERIFY_SUCCESS_MESSAGE,
    ScanResult,
)


class VerifyTicketUseCase:
    """
    Verify Ticket Use Case - one scan cycle of a staff scanner

    Flow:
    1. Normalise the scanned code and move the session to scanning
       (an event must already be selected)
    2. Resolve the code against the selected event upstream
    3. Fetch details for tickets missing head count, amount or payment status;
       a failed detail fetch keeps the ticket as it is
    4. Finish the cycle in success or error
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
    def select_event(self, *, scan_session_id: str, event_id: str) -> ScanSession:
        scan_session = self.scan_session_store.get_or_create(scan_session_id)
        scan_session.select_event(event_id)
        Logger.base.info(f'[SCAN] Session {scan_session_id} scanning for event {event_id}')
        return scan_session

    @Logger.io
    async def verify(
        self, *, session: AuthSession, scan_session_id: str, qr_data: Any
    ) -> ScanResult:
        qr_payload = QrPayload(qr_data)
        scan_session = self.scan_session_store.get_or_create(scan_session_id)
        event_id = scan_session.begin_scan()
        started_at = time.perf_counter()

        try:
            with self.tracer.start_as_current_span(
                'use_case.verify_ticket',
                attributes={'event.id': event_id, 'scan.structured': qr_payload.is_structured},
            ):
                return await self._run_scan(
                    session=session,
                    scan_session=scan_session,
                    qr_payload=qr_payload,
                    event_id=event_id,
                    started_at=started_at,
                )
        except BaseException:
            # Cancellation included; a session never stays in scanning
            if scan_session.status == ScanStatus.SCANNING:
                scan_session.fail(VERIFY_FALLBACK_MESSAGE)
                metrics.record_scan(
                    event_id=event_id, result='error', duration=time.perf_counter() - started_at
                )
            raise

    async def _run_scan(
        self,
        *,
        session: AuthSession,
        scan_session: ScanSession,
        qr_payload: QrPayload,
        event_id: str,
        started_at: float,
    ) -> ScanResult:
        try:
            verified = await self.ticket_gateway.verify(
                session=session, qr_payload=qr_payload, event_id=event_id
            )
        except CustomBaseError as e:
            Logger.base.info(f'[SCAN] Verification rejected for event {event_id}: {e.message}')
            metrics.record_scan(
                event_id=event_id, result='error', duration=time.perf_counter() - started_at
            )
            return scan_session.fail(e.message or VERIFY_FALLBACK_MESSAGE)

        tickets = [await self._enrich(session=session, ticket=t) for t in verified.tickets]
        result = scan_session.complete(
            ScanResult.success(user=verified.user, tickets=tickets, message=VERIFY_SUCCESS_MESSAGE)
        )
        metrics.record_scan(
            event_id=event_id, result='success', duration=time.perf_counter() - started_at
        )
        Logger.base.info(f'[SCAN] Verified {len(tickets)} ticket(s) for event {event_id}')
        return result

    async def _enrich(self, *, session: AuthSession, ticket: Ticket) -> Ticket:
        if not ticket.needs_enrichment:
            return ticket
        try:
            detail = await self.ticket_gateway.get_ticket_detail(
                session=session, ticket_id=ticket.ticket_id
            )
        except CustomBaseError as e:
            Logger.base.warning(
                f'[SCAN] Could not load details for ticket {ticket.ticket_id}: {e.message}'
            )
            return ticket
        return ticket.enrich(detail)
