"""Upstream wire schema for admin event endpoints: ``{"event": {...}}``."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.service.scheduling.domain.enum.event_status import EventStatus


class _UpstreamModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra='ignore')


class UpstreamShow(_UpstreamModel):
    show_id: str
    date: str
    start_time: str
    end_time: str


class UpstreamEvent(_UpstreamModel):
    id: str = Field(alias='_id')
    name: str
    description: str = ''
    venue: str = ''
    capacity: int = 0
    price: float = 0
    status: EventStatus = EventStatus.DRAFT
    tags: List[str] = []
    features: List[str] = []
    staff_assigned: List[str] = []
    tickets_sold: int = 0
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    shows: List[UpstreamShow] = []


class UpstreamEventEnvelope(_UpstreamModel):
    event: UpstreamEvent
