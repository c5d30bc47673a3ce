"""
Routes inbound provider webhooks to the provider that owns them.

Payload formats (signatures, encodings, schemas) are provider-specific, so the
router never looks inside the payload and returns the provider's result as-is.
"""
from __future__ import annotations

from typing import Callable

from application.dtos.payments import ProviderWebhookPayload, WebhookActionResult
from application.ports.payment_provider import PaymentProvider


class PaymentWebhookRouter:
    def __init__(self, resolve: Callable[[str], PaymentProvider]) -> None:
        self._resolve = resolve

    async def route(self, provider_id: str, payload: ProviderWebhookPayload) -> WebhookActionResult:
        provider = self._resolve(provider_id)
        return await provider.get_webhook_action_and_data(payload)
