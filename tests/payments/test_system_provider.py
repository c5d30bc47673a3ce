from decimal import Decimal

import pytest

from application.dtos.payments import CreatePaymentSession, PaymentProviderDataInput, ProviderWebhookPayload
from application.services.payment_provider_service import PaymentProviderService
from domain.payment.types import PaymentAction, PaymentSessionStatus
from infrastructure.payments import SYSTEM_PROVIDER_ID, build_provider_registry
from core.settings import PaymentSettings


@pytest.fixture
def system_service(recording_logger):
    registry = build_provider_registry(PaymentSettings(system_provider_enabled=True, providers=[]))
    return PaymentProviderService(registry=registry, logger=recording_logger)


@pytest.mark.asyncio
async def test_system_provider_lifecycle(system_service):
    data = await system_service.create_session(
        SYSTEM_PROVIDER_ID, CreatePaymentSession(amount=Decimal("20"), currency_code="eur", data={"ref": "manual"})
    )
    assert data == {"ref": "manual"}

    inp = PaymentProviderDataInput(provider_id=SYSTEM_PROVIDER_ID, data=data)
    auth = await system_service.authorize_payment(inp, {})
    assert auth.status is PaymentSessionStatus.AUTHORIZED
    assert await system_service.get_status(inp) is PaymentSessionStatus.AUTHORIZED
    assert await system_service.capture_payment(inp) == {"ref": "manual"}
    assert await system_service.refund_payment(inp, Decimal("5")) == {"ref": "manual"}
    assert await system_service.cancel_payment(inp) is None
    assert await system_service.delete_session(inp) is None


@pytest.mark.asyncio
async def test_system_provider_webhooks_not_supported(system_service):
    res = await system_service.get_webhook_action_and_data(SYSTEM_PROVIDER_ID, ProviderWebhookPayload())
    assert res.action is PaymentAction.NOT_SUPPORTED
    assert res.data is None
