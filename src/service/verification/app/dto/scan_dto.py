from typing import List, Optional

import attrs

from src.service.verification.domain.entity.ticket_entity import Ticket
from src.service.verification.domain.enum.scan_status import ScanCue
from src.service.verification.domain.value_object.scan_result import (
    ALREADY_ATTENDED_MESSAGE,
    MARK_ATTENDED_MESSAGE,
    ScanResult,
    ScanUser,
)


@attrs.define(frozen=True)
class VerifiedScan:
    """Purchaser and tickets returned by the verify endpoint."""

    user: Optional[ScanUser]
    tickets: List[Ticket] = attrs.field(factory=list)


@attrs.define(frozen=True)
class MarkAttendedOutcome:
    result: ScanResult
    ticket: Ticket
    already_attended: bool = False

    @property
    def message(self) -> str:
        return ALREADY_ATTENDED_MESSAGE if self.already_attended else MARK_ATTENDED_MESSAGE

    @property
    def cue(self) -> ScanCue:
        """Its own cue, independent of the scan result it updated."""
        return ScanCue.SUCCESS
