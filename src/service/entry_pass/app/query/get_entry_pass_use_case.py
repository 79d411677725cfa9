from datetime import datetime
from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.entry_pass.app.dto.entry_pass_view import EntryPassView
from src.service.entry_pass.app.interface.i_entry_pass_gateway import IEntryPassGateway
from src.service.entry_pass.domain.entity.entry_pass_entity import EntryPass, pass_state
from src.service.shared_kernel.domain.value_object.auth_session import AuthSession


class GetEntryPassUseCase:
    def __init__(self, *, entry_pass_gateway: IEntryPassGateway) -> None:
        self.entry_pass_gateway = entry_pass_gateway

    @classmethod
    @inject
    def depends(
        cls,
        entry_pass_gateway: IEntryPassGateway = Depends(Provide[Container.entry_pass_gateway]),
    ) -> Self:
        return cls(entry_pass_gateway=entry_pass_gateway)

    @Logger.io
    async def fetch_current_pass(self, *, session: AuthSession) -> Optional[EntryPass]:
        return await self.entry_pass_gateway.fetch_current_pass(session=session)

    @Logger.io
    async def get_view(
        self, *, session: AuthSession, now: Optional[datetime] = None
    ) -> EntryPassView:
        entry_pass = await self.fetch_current_pass(session=session)
        state = pass_state(entry_pass, now)
        Logger.base.info(f'[ENTRY_PASS] Current pass state: {state}')
        return EntryPassView(entry_pass=entry_pass, state=state)
