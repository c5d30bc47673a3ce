"""
Base provider client implementing shared concerns for HTTP-backed plugins:
http, retry, logging, status mapping and failure conversion.

Concrete providers subclass and implement the PaymentProvider capabilities.
Retry lives here, inside the provider; the dispatcher never retries.
"""
from __future__ import annotations

from contextlib import asynccontextmanager
from decimal import Decimal
from typing import Any, Callable, Optional

import httpx
from tenacity import AsyncRetrying, stop_after_attempt, wait_exponential, retry_if_exception_type

from application.dtos.payments import (
    CreatePaymentSession,
    ProviderFailure,
    ProviderWebhookPayload,
    UpdatePaymentSession,
    WebhookActionResult,
)
from application.ports.payment_provider import ProviderResult
from core.logging_config import get_logger
from core.settings import payment_settings
from domain.payment.types import PaymentSessionStatus
from shared.codes.payment_codes import PROVIDER_STATUS_TO_INTERNAL


logger = get_logger(__name__)


class BaseProviderClient:
    identifier: str = "base"

    def __init__(
        self,
        *,
        timeouts: Optional[dict[str, float]] = None,
        retry: Optional[dict[str, Any]] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._timeouts_cfg = timeouts or payment_settings.timeouts.model_dump()
        self._retry_cfg = retry or {"max": payment_settings.retry.max, "base": payment_settings.retry.base_backoff}
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def timeouts(self) -> httpx.Timeout:
        return httpx.Timeout(
            connect=self._timeouts_cfg["connect"],
            read=self._timeouts_cfg["read"],
            write=self._timeouts_cfg["write"],
            timeout=self._timeouts_cfg["total"],
        )

    @asynccontextmanager
    async def client(self):
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeouts, transport=self._transport)
        # Kept open for reuse; aclose() releases it
        yield self._client

    async def aclose(self) -> None:
        """Close underlying HTTP client if created."""
        if self._client is not None:
            try:
                await self._client.aclose()
            finally:
                self._client = None

    async def _retry(self, fn: Callable[[], Any]):
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(int(self._retry_cfg["max"]) + 1),
            wait=wait_exponential(multiplier=self._retry_cfg["base"], min=0.1, max=2.0),
            retry=retry_if_exception_type((httpx.TimeoutException, httpx.TransportError)),
            reraise=True,
        ):
            with attempt:
                return await fn()

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        async def send() -> httpx.Response:
            async with self.client() as http:
                resp = await http.request(method, url, **kwargs)
                resp.raise_for_status()
                return resp

        return await self._retry(send)

    # Default implementations raise to force override where needed
    async def initiate_payment(self, session_input: CreatePaymentSession) -> ProviderResult:
        raise NotImplementedError

    async def update_payment(self, session_input: UpdatePaymentSession) -> Optional[ProviderResult]:
        raise NotImplementedError

    async def delete_payment(self, data: dict[str, Any]) -> Optional[ProviderResult]:
        raise NotImplementedError

    async def authorize_payment(self, data: dict[str, Any], context: dict[str, Any]) -> ProviderResult:
        raise NotImplementedError

    async def get_payment_status(self, data: dict[str, Any]) -> PaymentSessionStatus:
        raise NotImplementedError

    async def capture_payment(self, data: dict[str, Any]) -> ProviderResult:
        raise NotImplementedError

    async def cancel_payment(self, data: dict[str, Any]) -> Optional[ProviderResult]:
        raise NotImplementedError

    async def refund_payment(self, data: dict[str, Any], amount: Decimal) -> ProviderResult:
        raise NotImplementedError

    async def get_webhook_action_and_data(self, payload: ProviderWebhookPayload) -> WebhookActionResult:
        raise NotImplementedError

    # Helpers
    def _map_status(self, provider_status: str) -> PaymentSessionStatus:
        mapping = PROVIDER_STATUS_TO_INTERNAL.get(self.identifier, {})
        return PaymentSessionStatus(mapping.get(provider_status, provider_status))

    def failure_from_http_error(self, exc: httpx.HTTPStatusError) -> ProviderFailure:
        """Turn a provider HTTP error response into a ProviderFailure."""
        code: Optional[str] = None
        detail: Any = None
        message = f"{self.identifier} request failed with status {exc.response.status_code}"
        try:
            body = exc.response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            err = body.get("error")
            if isinstance(err, dict):
                message = str(err.get("message") or message)
                code = err.get("code")
                detail = err.get("decline_code") or err.get("detail")
            elif err:
                message = str(err)
                code = body.get("code")
                detail = body.get("detail")
        self._log("payment_provider_http_error", status_code=exc.response.status_code, provider_code=code)
        return ProviderFailure(error=message, detail=detail, code=code)

    def _log(self, event: str, **kwargs) -> None:
        logger.info(
            event,
            provider=self.identifier,
            **kwargs,
        )
