"""
Scan Session - one staff scanner's state machine

idle -> scanning -> {success, error}; success and error end the cycle and the
next scan goes back to scanning. Scanning needs a selected event.
"""

from typing import Optional

import attrs

from src.platform.exception.exceptions import DomainError
from src.service.verification.domain.enum.scan_status import ScanStatus
from src.service.verification.domain.value_object.scan_result import ScanResult


@attrs.define
class ScanSession:
    session_id: str
    selected_event_id: Optional[str] = None
    status: ScanStatus = ScanStatus.IDLE
    result: Optional[ScanResult] = None

    def select_event(self, event_id: str) -> None:
        if not event_id or not event_id.strip():
            raise DomainError('Event id is required')
        if event_id != self.selected_event_id:
            self.result = None
            self.status = ScanStatus.IDLE
        self.selected_event_id = event_id

    def begin_scan(self) -> str:
        if self.selected_event_id is None:
            raise DomainError('Select an event before scanning')
        if self.status == ScanStatus.SCANNING:
            raise DomainError('A scan is already in progress')
        self.status = ScanStatus.SCANNING
        self.result = None
        return self.selected_event_id

    def complete(self, result: ScanResult) -> ScanResult:
        self._ensure_scanning()
        self.status = ScanStatus.SUCCESS
        self.result = result
        return result

    def fail(self, message: str) -> ScanResult:
        self._ensure_scanning()
        self.status = ScanStatus.ERROR
        self.result = ScanResult.error(message)
        return self.result

    def replace_result(self, result: ScanResult) -> None:
        if self.status != ScanStatus.SUCCESS or self.result is None:
            raise DomainError('No verified scan result to update')
        self.result = result

    def _ensure_scanning(self) -> None:
        if self.status != ScanStatus.SCANNING:
            raise DomainError(f'Cannot finish a scan from state {self.status}')
