"""
Upstream wire schemas for /tickets/verify and /tickets/:id.

verify -> ``{"user": {...}, "tickets": [...]}``
detail -> ``{"ticket": {...}}``
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.service.verification.domain.enum.ticket_status import TicketStatus


class _UpstreamModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra='ignore')


class UpstreamScanUser(_UpstreamModel):
    id: Optional[str] = Field(default=None, alias='_id')
    name: str = ''
    email: str = ''


class UpstreamTicket(_UpstreamModel):
    ticket_id: str
    ticket_number: str = ''
    event_id: str = ''
    status: TicketStatus
    head_count: Optional[int] = None
    total_amount: Optional[float] = None
    payment_status: Optional[str] = None
    verified_at: Optional[datetime] = None
    can_be_marked_attended: bool = False
    can_verify: bool = False
    is_event_active: bool = False
    purchase_date: Optional[datetime] = None


class UpstreamVerifyResponse(_UpstreamModel):
    user: Optional[UpstreamScanUser] = None
    tickets: List[UpstreamTicket] = []


class UpstreamTicketDetail(_UpstreamModel):
    status: Optional[TicketStatus] = None
    head_count: Optional[int] = None
    total_amount: Optional[float] = None
    payment_status: Optional[str] = None
    purchase_date: Optional[datetime] = None
    verified_at: Optional[datetime] = None


class UpstreamTicketDetailEnvelope(_UpstreamModel):
    ticket: UpstreamTicketDetail
