from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.verification.app.interface.i_scan_session_store import IScanSessionStore


class CloseScanSessionUseCase:
    def __init__(self, *, scan_session_store: IScanSessionStore) -> None:
        self.scan_session_store = scan_session_store

    @classmethod
    @inject
    def depends(
        cls,
        scan_session_store: IScanSessionStore = Depends(Provide[Container.scan_session_store]),
    ) -> Self:
        return cls(scan_session_store=scan_session_store)

    @Logger.io
    def close(self, *, scan_session_id: str) -> None:
        self.scan_session_store.discard(scan_session_id)
        Logger.base.info(f'[SCAN] Closed scan session {scan_session_id}')
