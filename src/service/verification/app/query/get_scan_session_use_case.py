from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.service.verification.app.interface.i_scan_session_store import IScanSessionStore
from src.service.verification.domain.entity.scan_session_entity import ScanSession


class GetScanSessionUseCase:
    def __init__(self, *, scan_session_store: IScanSessionStore) -> None:
        self.scan_session_store = scan_session_store

    @classmethod
    @inject
    def depends(
        cls,
        scan_session_store: IScanSessionStore = Depends(Provide[Container.scan_session_store]),
    ) -> Self:
        return cls(scan_session_store=scan_session_store)

    def get(self, *, scan_session_id: str) -> ScanSession:
        return self.scan_session_store.get(scan_session_id)
