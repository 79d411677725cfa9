from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.ticketing_metrics import metrics
from src.service.entry_pass.app.interface.i_entry_pass_gateway import IEntryPassGateway
from src.service.entry_pass.app.interface.i_payment_simulator import IPaymentSimulator
from src.service.entry_pass.domain.entity.entry_pass_entity import EntryPass
from src.service.shared_kernel.domain.value_object.auth_session import AuthSession


class PurchaseEntryPassUseCase:
    """
    Buy head count for the caller's entry pass.

    Replace-on-success: the server's pass is returned only when the purchase
    call succeeds, otherwise the error propagates and nothing is replaced.
    """

    def __init__(
        self,
        *,
        entry_pass_gateway: IEntryPassGateway,
        payment_simulator: IPaymentSimulator,
        rate: int,
    ) -> None:
        self.entry_pass_gateway = entry_pass_gateway
        self.payment_simulator = payment_simulator
        self.rate = rate
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        entry_pass_gateway: IEntryPassGateway = Depends(Provide[Container.entry_pass_gateway]),
        payment_simulator: IPaymentSimulator = Depends(Provide[Container.payment_simulator]),
        rate: int = Depends(Provide[Container.config_service.provided.ENTRY_PASS_RATE]),
    ) -> Self:
        return cls(
            entry_pass_gateway=entry_pass_gateway,
            payment_simulator=payment_simulator,
            rate=rate,
        )

    @staticmethod
    def _validate_head_count(head_count: int) -> None:
        if head_count < 1:
            raise DomainError('Head count must be at least 1')

    def quote_purchase(self, head_count: int) -> int:
        self._validate_head_count(head_count)
        return head_count * self.rate

    @Logger.io
    async def purchase(self, *, session: AuthSession, head_count: int) -> EntryPass:
        amount = self.quote_purchase(head_count)

        with self.tracer.start_as_current_span(
            'use_case.purchase_entry_pass',
            attributes={'entry_pass.head_count': head_count, 'entry_pass.amount': amount},
        ):
            try:
                payment = await self.payment_simulator.authorize(amount=amount)
                entry_pass = await self.entry_pass_gateway.purchase(
                    session=session, head_count=head_count, payment=payment
                )
            except Exception:
                metrics.record_entry_pass_purchase(result='error')
                raise

            metrics.record_entry_pass_purchase(result='success', head_count=head_count)
            Logger.base.info(
                f'[ENTRY_PASS] Purchased {head_count} head(s) for {amount}, '
                f'pass now has {entry_pass.head_count}'
            )
            return entry_pass
