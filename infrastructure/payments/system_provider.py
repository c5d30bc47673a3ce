"""
Built-in system provider for manual/offline payments.

Always succeeds: sessions are authorized immediately and settlement happens
outside of any payment network.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional

from application.dtos.payments import (
    CreatePaymentSession,
    ProviderSuccess,
    ProviderWebhookPayload,
    UpdatePaymentSession,
    WebhookActionResult,
)
from domain.payment.types import PaymentAction, PaymentSessionStatus


class SystemPaymentProvider:
    identifier = "system"

    async def initiate_payment(self, session_input: CreatePaymentSession) -> ProviderSuccess:
        return ProviderSuccess(data=session_input.data)

    async def update_payment(self, session_input: UpdatePaymentSession) -> Optional[ProviderSuccess]:
        return ProviderSuccess(data=session_input.data)

    async def delete_payment(self, data: dict[str, Any]) -> None:
        return None

    async def authorize_payment(self, data: dict[str, Any], context: dict[str, Any]) -> ProviderSuccess:
        return ProviderSuccess(data=data, status=PaymentSessionStatus.AUTHORIZED)

    async def get_payment_status(self, data: dict[str, Any]) -> PaymentSessionStatus:
        return PaymentSessionStatus.AUTHORIZED

    async def capture_payment(self, data: dict[str, Any]) -> ProviderSuccess:
        return ProviderSuccess(data=data)

    async def cancel_payment(self, data: dict[str, Any]) -> None:
        return None

    async def refund_payment(self, data: dict[str, Any], amount: Decimal) -> ProviderSuccess:
        return ProviderSuccess(data=data)

    async def get_webhook_action_and_data(self, payload: ProviderWebhookPayload) -> WebhookActionResult:
        return WebhookActionResult(action=PaymentAction.NOT_SUPPORTED)
