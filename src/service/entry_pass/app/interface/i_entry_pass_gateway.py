"""
Entry Pass Gateway Interface

Reads and replaces the caller's entry pass on the upstream API.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.service.entry_pass.app.dto.booking_confirmation import SimulatedPayment
from src.service.entry_pass.domain.entity.entry_pass_entity import EntryPass
from src.service.shared_kernel.domain.value_object.auth_session import AuthSession


class IEntryPassGateway(ABC):
    @abstractmethod
    async def fetch_current_pass(self, *, session: AuthSession) -> Optional[EntryPass]:
        """
        Fetch caller's entry pass (GET /entrypass/me)

        Args:
            session: Caller's auth session

        Returns:
            The pass, or None when the caller has none (404 or empty record)
        """
        pass

    @abstractmethod
    async def purchase(
        self, *, session: AuthSession, head_count: int, payment: SimulatedPayment
    ) -> EntryPass:
        """
        Purchase head count (POST /entrypass/purchase)

        Returns:
            The replacement pass returned by the server

        Raises:
            UpstreamApiError: Purchase rejected, nothing changed
        """
        pass
