from abc import ABC, abstractmethod

from src.service.entry_pass.app.dto.booking_confirmation import SimulatedPayment


class IPaymentSimulator(ABC):
    @abstractmethod
    async def authorize(self, *, amount: float) -> SimulatedPayment:
        """
        Stand-in for a payment provider: waits, then returns a synthetic payment id.

        There is no real gateway; the upstream API accepts the simulated id.
        """
        pass
