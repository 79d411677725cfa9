from pydantic import ValidationError

from src.platform.exception.exceptions import UpstreamApiError
from src.platform.http.upstream_api_client import UpstreamApiClient
from src.platform.logging.loguru_io import Logger
from src.service.shared_kernel.domain.value_object.auth_session import AuthSession
from src.service.verification.app.dto.scan_dto import VerifiedScan
from src.service.verification.app.interface.i_ticket_gateway import ITicketGateway
from src.service.verification.domain.entity.ticket_entity import Ticket, TicketDetail
from src.service.verification.domain.value_object.qr_payload import QrPayload
from src.service.verification.domain.value_object.scan_result import (
    VERIFY_FALLBACK_MESSAGE,
    ScanUser,
)
from src.service.verification.driven_adapter.gateway.ticket_upstream_schema import (
    UpstreamTicket,
    UpstreamTicketDetailEnvelope,
    UpstreamVerifyResponse,
)


def _to_ticket(upstream_ticket: UpstreamTicket) -> Ticket:
    return Ticket(**upstream_ticket.model_dump())


class TicketApiGatewayImpl(ITicketGateway):
    def __init__(self, *, client: UpstreamApiClient) -> None:
        self.client = client

    @Logger.io
    async def verify(
        self, *, session: AuthSession, qr_payload: QrPayload, event_id: str
    ) -> VerifiedScan:
        body = await self.client.post(
            '/tickets/verify',
            session=session,
            json={'qrData': qr_payload.value, 'eventId': event_id},
            fallback_message=VERIFY_FALLBACK_MESSAGE,
        )
        try:
            response = UpstreamVerifyResponse.model_validate(body)
        except ValidationError as e:
            raise UpstreamApiError(VERIFY_FALLBACK_MESSAGE) from e

        user = ScanUser(**response.user.model_dump()) if response.user else None
        return VerifiedScan(user=user, tickets=[_to_ticket(t) for t in response.tickets])

    @Logger.io
    async def get_ticket_detail(self, *, session: AuthSession, ticket_id: str) -> TicketDetail:
        body = await self.client.get(f'/tickets/{ticket_id}', session=session)
        try:
            detail = UpstreamTicketDetailEnvelope.model_validate(body).ticket
        except ValidationError as e:
            raise UpstreamApiError(f'Unexpected ticket payload for {ticket_id}') from e
        return TicketDetail(**detail.model_dump())

    @Logger.io
    async def mark_attended(self, *, session: AuthSession, ticket_id: str, event_id: str) -> None:
        await self.client.post(
            '/tickets/mark-attended',
            session=session,
            json={'ticketId': ticket_id, 'eventId': event_id},
        )
