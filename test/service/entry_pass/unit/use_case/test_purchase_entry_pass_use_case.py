"""
Unit tests for PurchaseEntryPassUseCase

The pass is replaced only by what the server returns after a successful
purchase; a failed purchase leaves the caller with whatever they had.
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest

from src.platform.exception.exceptions import DomainError, UpstreamApiError
from src.service.entry_pass.app.command.purchase_entry_pass_use_case import (
    PurchaseEntryPassUseCase,
)
from src.service.entry_pass.app.dto.booking_confirmation import SimulatedPayment
from src.service.entry_pass.domain.entity.entry_pass_entity import EntryPass


EXPIRES_AT = datetime(2025, 7, 1, tzinfo=timezone.utc)


@pytest.fixture
def mock_entry_pass_gateway() -> AsyncMock:
    gateway = AsyncMock()
    gateway.purchase.return_value = EntryPass(head_count=5, expires_at=EXPIRES_AT)
    return gateway


@pytest.fixture
def mock_payment_simulator() -> AsyncMock:
    simulator = AsyncMock()
    simulator.authorize.return_value = SimulatedPayment(
        payment_id='SIMULATED_PAYMENT_ID_1748772000000', amount=300
    )
    return simulator


@pytest.fixture
def use_case(mock_entry_pass_gateway, mock_payment_simulator) -> PurchaseEntryPassUseCase:
    return PurchaseEntryPassUseCase(
        entry_pass_gateway=mock_entry_pass_gateway,
        payment_simulator=mock_payment_simulator,
        rate=100,
    )


@pytest.mark.unit
class TestQuotePurchase:
    @pytest.mark.parametrize('head_count,amount', [(1, 100), (3, 300), (10, 1000)])
    def test_amount_is_head_count_times_rate(self, use_case, head_count, amount):
        assert use_case.quote_purchase(head_count) == amount

    @pytest.mark.parametrize('head_count', [0, -2])
    def test_head_count_below_one_is_rejected(self, use_case, head_count):
        with pytest.raises(DomainError, match='at least 1'):
            use_case.quote_purchase(head_count)


@pytest.mark.unit
class TestPurchase:
    @pytest.mark.asyncio
    async def test_pays_then_returns_server_pass(
        self, use_case, mock_entry_pass_gateway, mock_payment_simulator, customer_session
    ):
        # Act
        entry_pass = await use_case.purchase(session=customer_session, head_count=3)

        # Assert
        assert entry_pass.head_count == 5
        mock_payment_simulator.authorize.assert_awaited_once_with(amount=300)
        mock_entry_pass_gateway.purchase.assert_awaited_once_with(
            session=customer_session,
            head_count=3,
            payment=mock_payment_simulator.authorize.return_value,
        )

    @pytest.mark.asyncio
    async def test_invalid_head_count_never_reaches_payment(
        self, use_case, mock_entry_pass_gateway, mock_payment_simulator, customer_session
    ):
        with pytest.raises(DomainError):
            await use_case.purchase(session=customer_session, head_count=0)

        mock_payment_simulator.authorize.assert_not_awaited()
        mock_entry_pass_gateway.purchase.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_server_rejection_propagates(
        self, use_case, mock_entry_pass_gateway, customer_session
    ):
        # Arrange
        mock_entry_pass_gateway.purchase.side_effect = UpstreamApiError('Payment declined', 400)

        # Act & Assert
        with pytest.raises(UpstreamApiError, match='Payment declined'):
            await use_case.purchase(session=customer_session, head_count=1)
