from fastapi import APIRouter, Depends, status
from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.service.shared_kernel.domain.value_object.auth_session import AuthSession
from src.service.shared_kernel.driving_adapter.http_controller.auth_dependency import (
    require_staff,
)
from src.service.verification.app.command.close_scan_session_use_case import (
    CloseScanSessionUseCase,
)
from src.service.verification.app.command.mark_attended_use_case import MarkAttendedUseCase
from src.service.verification.app.command.verify_ticket_use_case import VerifyTicketUseCase
from src.service.verification.app.query.get_scan_session_use_case import GetScanSessionUseCase
from src.service.verification.driving_adapter.http_controller.schema.scan_schema import (
    MarkAttendedResponse,
    ScanResultResponse,
    ScanSessionResponse,
    SelectEventRequest,
    VerifyRequest,
)


router = APIRouter()
tracer = trace.get_tracer(__name__)


def scoped_session_id(session: AuthSession, scan_session_id: str) -> str:
    """Scanner sessions are namespaced per staff member."""
    return f'{session.user_id or "anonymous"}:{scan_session_id}'


@router.get('/sessions/{scan_session_id}')
@Logger.io
async def get_scan_session(
    scan_session_id: str,
    session: AuthSession = Depends(require_staff),
    use_case: GetScanSessionUseCase = Depends(GetScanSessionUseCase.depends),
) -> ScanSessionResponse:
    scan_session = use_case.get(scan_session_id=scoped_session_id(session, scan_session_id))
    return ScanSessionResponse.from_session(scan_session, scan_session_id)


@router.delete('/sessions/{scan_session_id}', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
async def close_scan_session(
    scan_session_id: str,
    session: AuthSession = Depends(require_staff),
    use_case: CloseScanSessionUseCase = Depends(CloseScanSessionUseCase.depends),
) -> None:
    use_case.close(scan_session_id=scoped_session_id(session, scan_session_id))


@router.put('/sessions/{scan_session_id}/event')
@Logger.io
async def select_event(
    scan_session_id: str,
    request: SelectEventRequest,
    session: AuthSession = Depends(require_staff),
    use_case: VerifyTicketUseCase = Depends(VerifyTicketUseCase.depends),
) -> ScanSessionResponse:
    scan_session = use_case.select_event(
        scan_session_id=scoped_session_id(session, scan_session_id), event_id=request.event_id
    )
    return ScanSessionResponse.from_session(scan_session, scan_session_id)


@router.post('/sessions/{scan_session_id}/verify')
@Logger.io
async def verify_ticket(
    scan_session_id: str,
    request: VerifyRequest,
    session: AuthSession = Depends(require_staff),
    use_case: VerifyTicketUseCase = Depends(VerifyTicketUseCase.depends),
) -> ScanResultResponse:
    with tracer.start_as_current_span('controller.verify_ticket') as span:
        span.set_attribute('scan_session.id', scan_session_id)
        result = await use_case.verify(
            session=session,
            scan_session_id=scoped_session_id(session, scan_session_id),
            qr_data=request.qr_data,
        )
        span.set_attribute('scan.status', result.status.value)
        return ScanResultResponse.from_result(result)


@router.post('/sessions/{scan_session_id}/tickets/{ticket_id}/attended')
@Logger.io
async def mark_ticket_attended(
    scan_session_id: str,
    ticket_id: str,
    session: AuthSession = Depends(require_staff),
    use_case: MarkAttendedUseCase = Depends(MarkAttendedUseCase.depends),
) -> MarkAttendedResponse:
    outcome = await use_case.mark_attended(
        session=session,
        scan_session_id=scoped_session_id(session, scan_session_id),
        ticket_id=ticket_id,
    )
    return MarkAttendedResponse.from_outcome(outcome)
