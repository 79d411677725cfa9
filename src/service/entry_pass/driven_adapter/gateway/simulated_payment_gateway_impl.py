from datetime import datetime, timezone
from typing import Callable, Optional

import anyio

from src.platform.logging.loguru_io import Logger
from src.service.entry_pass.app.dto.booking_confirmation import SimulatedPayment
from src.service.entry_pass.app.interface.i_payment_simulator import IPaymentSimulator


PAYMENT_ID_PREFIX = 'SIMULATED_PAYMENT_ID_'


class SimulatedPaymentGatewayImpl(IPaymentSimulator):
    def __init__(
        self,
        *,
        delay_seconds: float,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.delay_seconds = delay_seconds
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    @Logger.io
    async def authorize(self, *, amount: float) -> SimulatedPayment:
        await anyio.sleep(self.delay_seconds)
        millis = int(self.clock().timestamp() * 1000)
        return SimulatedPayment(payment_id=f'{PAYMENT_ID_PREFIX}{millis}', amount=amount)
