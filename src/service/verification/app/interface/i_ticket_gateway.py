"""
Ticket Gateway Interface (Verification)

Venue-side ticket calls against the upstream API.
"""

from abc import ABC, abstractmethod

from src.service.shared_kernel.domain.value_object.auth_session import AuthSession
from src.service.verification.app.dto.scan_dto import VerifiedScan
from src.service.verification.domain.entity.ticket_entity import TicketDetail
from src.service.verification.domain.value_object.qr_payload import QrPayload


class ITicketGateway(ABC):
    @abstractmethod
    async def verify(
        self, *, session: AuthSession, qr_payload: QrPayload, event_id: str
    ) -> VerifiedScan:
        """
        Resolve a scanned code against an event (POST /tickets/verify)

        Args:
            session: Staff auth session
            qr_payload: Normalised scan value, sent as qrData
            event_id: Currently selected event

        Returns:
            Purchaser and tickets

        Raises:
            CustomBaseError: Code rejected; message is the server's or the scanner fallback
        """
        pass

    @abstractmethod
    async def get_ticket_detail(self, *, session: AuthSession, ticket_id: str) -> TicketDetail:
        """Per-ticket detail (GET /tickets/:ticketId)"""
        pass

    @abstractmethod
    async def mark_attended(self, *, session: AuthSession, ticket_id: str, event_id: str) -> None:
        """
        Admit a ticket holder (POST /tickets/mark-attended)

        Raises:
            ConflictError: Ticket was already marked attended elsewhere
        """
        pass
