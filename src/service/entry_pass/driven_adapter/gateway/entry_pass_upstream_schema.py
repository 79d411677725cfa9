"""Upstream wire schemas for /entrypass and /tickets/book."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _UpstreamModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra='ignore')


class UpstreamEntryPass(_UpstreamModel):
    head_count: int = Field(ge=0)
    expires_at: datetime


class UpstreamEntryPassEnvelope(_UpstreamModel):
    """``{"entryPass": {...}}``; a null entryPass means the caller has no pass."""

    entry_pass: Optional[UpstreamEntryPass] = None


class UpstreamBookedTicket(_UpstreamModel):
    id: Optional[str] = Field(default=None, alias='_id')
    qr_code: Any


class UpstreamBookingEnvelope(_UpstreamModel):
    """``{"ticket": {"_id": ..., "qrCode": ...}}`` for a single show booking."""

    ticket: UpstreamBookedTicket


class UpstreamEventsBookingEnvelope(_UpstreamModel):
    """
    Answer to an ``{events, quantity}`` booking.

    The QR code may come back as ``ticket.qrCode``, as a top-level ``qrCode``
    or nested under ``data.qrCode``, checked in that order.
    """

    ticket: Optional[UpstreamBookedTicket] = None
    qr_code: Any = None
    data: Any = None

    def booked_ticket(self) -> Optional[UpstreamBookedTicket]:
        if self.ticket is not None and self.ticket.qr_code is not None:
            return self.ticket
        if self.qr_code is not None:
            return UpstreamBookedTicket(qr_code=self.qr_code)
        if isinstance(self.data, dict) and self.data.get('qrCode') is not None:
            return UpstreamBookedTicket.model_validate(self.data)
        return None
