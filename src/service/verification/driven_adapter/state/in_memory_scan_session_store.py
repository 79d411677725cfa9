from collections import OrderedDict

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.verification.app.interface.i_scan_session_store import IScanSessionStore
from src.service.verification.domain.entity.scan_session_entity import ScanSession


DEFAULT_MAX_SESSIONS = 1000


class InMemoryScanSessionStore(IScanSessionStore):
    """
    Scan sessions held in process memory, keyed by scanner session id.

    Nothing is persisted: a restart drops every session and the scanner
    starts again from what the server reports. The store holds at most
    ``max_sessions`` entries; the least recently used one is evicted first.
    """

    def __init__(self, *, max_sessions: int = DEFAULT_MAX_SESSIONS) -> None:
        if max_sessions <= 0:
            raise ValueError('max_sessions must be positive')
        self.max_sessions = max_sessions
        self._sessions: OrderedDict[str, ScanSession] = OrderedDict()

    def get_or_create(self, session_id: str) -> ScanSession:
        if session_id in self._sessions:
            self._sessions.move_to_end(session_id)
            return self._sessions[session_id]

        self._sessions[session_id] = ScanSession(session_id=session_id)
        while len(self._sessions) > self.max_sessions:
            evicted, _ = self._sessions.popitem(last=False)
            Logger.base.info(f'[SCAN] Evicted idle scan session {evicted}')
        return self._sessions[session_id]

    def get(self, session_id: str) -> ScanSession:
        try:
            scan_session = self._sessions[session_id]
        except KeyError:
            raise NotFoundError(f'Scan session {session_id} not found')
        self._sessions.move_to_end(session_id)
        return scan_session

    def discard(self, session_id: str) -> None:
        self._sessions.pop(session_id, None)
