from typing import Optional

import attrs

from src.service.entry_pass.domain.entity.entry_pass_entity import EntryPass
from src.service.entry_pass.domain.enum.pass_state import PassState


@attrs.define(frozen=True)
class EntryPassView:
    entry_pass: Optional[EntryPass]
    state: PassState

    @property
    def has_valid_pass(self) -> bool:
        return self.state == PassState.VALID

    @property
    def is_expired(self) -> bool:
        return self.state == PassState.EXPIRED

    @property
    def no_pass(self) -> bool:
        return self.state == PassState.NONE
