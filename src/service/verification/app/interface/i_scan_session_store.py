from abc import ABC, abstractmethod

from src.service.verification.domain.entity.scan_session_entity import ScanSession


class IScanSessionStore(ABC):
    @abstractmethod
    def get_or_create(self, session_id: str) -> ScanSession:
        """Bounded: creating a session may evict the least recently used one."""
        pass

    @abstractmethod
    def get(self, session_id: str) -> ScanSession:
        """
        Raises:
            NotFoundError: Unknown scan session
        """
        pass

    @abstractmethod
    def discard(self, session_id: str) -> None:
        pass
