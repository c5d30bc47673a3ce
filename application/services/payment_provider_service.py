"""
Application service dispatching payment session lifecycle calls to providers.

Every operation resolves the provider, invokes the matching capability with the
untouched session data and classifies the result: provider failures are
normalized into ``PaymentProviderError``, successes are slimmed to ``data``
(plus ``status`` for authorization). The service is stateless; it does not
retry, time out or serialize calls. Exceptions raised by a provider itself
propagate unchanged.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional

from structlog.typing import BindableLogger

from application.dtos.payments import (
    AuthorizeResult,
    CreatePaymentSession,
    PaymentProviderDataInput,
    ProviderFailure,
    ProviderSuccess,
    ProviderWebhookPayload,
    UpdatePaymentSession,
    WebhookActionResult,
)
from application.ports.payment_provider import PaymentProvider, ProviderLookup
from application.services.error_normalizer import classify, normalize_provider_error
from application.services.webhook_router import PaymentWebhookRouter
from domain.payment.exceptions import PaymentProviderNotFoundError
from domain.payment.types import PaymentSessionStatus


class PaymentProviderService:
    def __init__(self, registry: ProviderLookup, logger: BindableLogger) -> None:
        self.registry = registry
        self.logger = logger
        self.webhooks = PaymentWebhookRouter(self.retrieve_provider)

    def retrieve_provider(self, provider_id: str) -> PaymentProvider:
        provider = self.registry.get(provider_id)
        if provider is None:
            # Root cause goes to the logs only; callers get remediation text
            self.logger.error(
                "payment_provider_resolution_failed",
                provider_id=provider_id,
                error=f"no provider registered under key {provider_id!r}",
                registered=self.registry.ids(),
            )
            raise PaymentProviderNotFoundError(provider_id)
        return provider

    async def create_session(self, provider_id: str, session_input: CreatePaymentSession) -> Optional[dict[str, Any]]:
        provider = self.retrieve_provider(provider_id)
        self.logger.info("payment_session_create_request", provider_id=provider_id, currency_code=session_input.currency_code)
        res = self._check(provider_id, await provider.initiate_payment(session_input))
        return res.data if res else None

    async def update_session(self, provider_id: str, session_input: UpdatePaymentSession) -> Optional[dict[str, Any]]:
        provider = self.retrieve_provider(provider_id)
        self.logger.info("payment_session_update_request", provider_id=provider_id)
        res = self._check(provider_id, await provider.update_payment(session_input))
        # Provider may decline to update; that is not an error
        return res.data if res else None

    async def delete_session(self, input: PaymentProviderDataInput) -> None:
        provider = self.retrieve_provider(input.provider_id)
        self.logger.info("payment_session_delete_request", provider_id=input.provider_id)
        self._check(input.provider_id, await provider.delete_payment(input.data))

    async def authorize_payment(self, input: PaymentProviderDataInput, context: dict[str, Any]) -> AuthorizeResult:
        provider = self.retrieve_provider(input.provider_id)
        self.logger.info("payment_session_authorize_request", provider_id=input.provider_id)
        res = self._check(input.provider_id, await provider.authorize_payment(input.data, context))
        if res is None or res.status is None:
            raise TypeError(f"Provider {input.provider_id} returned no status from authorize_payment")
        return AuthorizeResult(data=res.data or {}, status=res.status)

    async def get_status(self, input: PaymentProviderDataInput) -> PaymentSessionStatus:
        provider = self.retrieve_provider(input.provider_id)
        return await provider.get_payment_status(input.data)

    async def capture_payment(self, input: PaymentProviderDataInput) -> Optional[dict[str, Any]]:
        provider = self.retrieve_provider(input.provider_id)
        self.logger.info("payment_session_capture_request", provider_id=input.provider_id)
        res = self._check(input.provider_id, await provider.capture_payment(input.data))
        return res.data if res else None

    async def cancel_payment(self, input: PaymentProviderDataInput) -> None:
        provider = self.retrieve_provider(input.provider_id)
        self.logger.info("payment_session_cancel_request", provider_id=input.provider_id)
        self._check(input.provider_id, await provider.cancel_payment(input.data))

    async def refund_payment(self, input: PaymentProviderDataInput, amount: Decimal) -> Optional[dict[str, Any]]:
        provider = self.retrieve_provider(input.provider_id)
        self.logger.info("payment_session_refund_request", provider_id=input.provider_id, amount=str(amount))
        res = self._check(input.provider_id, await provider.refund_payment(input.data, amount))
        return res.data if res else None

    async def get_webhook_action_and_data(self, provider_id: str, payload: ProviderWebhookPayload) -> WebhookActionResult:
        return await self.webhooks.route(provider_id, payload)

    def _check(self, provider_id: str, response: Any) -> Optional[ProviderSuccess]:
        res = classify(response)
        if isinstance(res, ProviderFailure):
            self.logger.warning("payment_provider_error", provider_id=provider_id, provider_code=res.code)
            raise normalize_provider_error(res, provider_id=provider_id)
        return res
