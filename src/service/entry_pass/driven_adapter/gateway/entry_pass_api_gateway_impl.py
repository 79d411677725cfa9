from typing import Optional

from pydantic import ValidationError

from src.platform.exception.exceptions import NotFoundError, UpstreamApiError
from src.platform.http.upstream_api_client import UpstreamApiClient
from src.platform.logging.loguru_io import Logger
from src.service.entry_pass.app.dto.booking_confirmation import SimulatedPayment
from src.service.entry_pass.app.interface.i_entry_pass_gateway import IEntryPassGateway
from src.service.entry_pass.domain.entity.entry_pass_entity import EntryPass
from src.service.entry_pass.driven_adapter.gateway.entry_pass_upstream_schema import (
    UpstreamEntryPass,
    UpstreamEntryPassEnvelope,
)
from src.service.shared_kernel.domain.value_object.auth_session import AuthSession


def _to_entry_pass(upstream_pass: UpstreamEntryPass) -> EntryPass:
    return EntryPass(head_count=upstream_pass.head_count, expires_at=upstream_pass.expires_at)


class EntryPassApiGatewayImpl(IEntryPassGateway):
    def __init__(self, *, client: UpstreamApiClient) -> None:
        self.client = client

    @staticmethod
    def _parse(body: dict) -> UpstreamEntryPassEnvelope:
        try:
            return UpstreamEntryPassEnvelope.model_validate(body)
        except ValidationError as e:
            raise UpstreamApiError('Unexpected entry pass payload') from e

    @Logger.io
    async def fetch_current_pass(self, *, session: AuthSession) -> Optional[EntryPass]:
        try:
            body = await self.client.get('/entrypass/me', session=session)
        except NotFoundError:
            return None

        envelope = self._parse(body)
        if envelope.entry_pass is None:
            return None
        return _to_entry_pass(envelope.entry_pass)

    @Logger.io
    async def purchase(
        self, *, session: AuthSession, head_count: int, payment: SimulatedPayment
    ) -> EntryPass:
        body = await self.client.post(
            '/entrypass/purchase',
            session=session,
            json={
                'headCount': head_count,
                'amount': payment.amount,
                'paymentId': payment.payment_id,
                'transactionInfo': payment.transaction_info,
            },
        )
        envelope = self._parse(body)
        if envelope.entry_pass is None:
            raise UpstreamApiError('Entry pass purchase returned no pass')
        return _to_entry_pass(envelope.entry_pass)
