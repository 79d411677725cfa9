from datetime import datetime, timezone
from typing import Optional

import attrs

from src.service.entry_pass.domain.enum.pass_state import PassState


def _validate_head_count(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if value < 0:
        raise ValueError('Entry pass head count cannot be negative')


def _ensure_aware(value: datetime) -> datetime:
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


@attrs.define(frozen=True)
class EntryPass:
    """Prepaid, expiring head-count quota. Balance is owned by the server."""

    head_count: int = attrs.field(validator=_validate_head_count)
    expires_at: datetime = attrs.field(converter=_ensure_aware)

    def is_expired(self, now: datetime) -> bool:
        return _ensure_aware(now) >= self.expires_at


def pass_state(entry_pass: Optional[EntryPass], now: Optional[datetime] = None) -> PassState:
    """Exactly one of VALID / EXPIRED / NONE for any pass and instant."""
    if entry_pass is None:
        return PassState.NONE
    now = now or datetime.now(timezone.utc)
    return PassState.EXPIRED if entry_pass.is_expired(now) else PassState.VALID
