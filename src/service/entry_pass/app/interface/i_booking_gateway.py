from abc import ABC, abstractmethod
from typing import List

from src.service.entry_pass.app.dto.booking_confirmation import BookingConfirmation
from src.service.shared_kernel.domain.value_object.auth_session import AuthSession


class IBookingGateway(ABC):
    @abstractmethod
    async def book_show(
        self, *, session: AuthSession, event_id: str, show_id: str, head_count: int
    ) -> BookingConfirmation:
        """Book one show against the entry pass (POST /tickets/book)"""
        pass

    @abstractmethod
    async def book_events(
        self, *, session: AuthSession, event_ids: List[str], quantity: int
    ) -> BookingConfirmation:
        """Book several events at once (POST /tickets/book with events[])"""
        pass
