"""
Payment provider port (application/ports) exposing the plugin capability protocol.

Application depends on this Protocol; plugins live in infrastructure or in
third-party packages and are wired in by the composition root.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Any, Mapping, Optional, Protocol, Union, runtime_checkable

from application.dtos.payments import (
    CreatePaymentSession,
    ProviderResponse,
    ProviderWebhookPayload,
    UpdatePaymentSession,
    WebhookActionResult,
)
from domain.payment.types import PaymentSessionStatus


# Plain mappings are accepted from loosely typed plugins and classified by shape.
ProviderResult = Union[ProviderResponse, Mapping[str, Any]]


@runtime_checkable
class PaymentProvider(Protocol):
    """Capability protocol every payment provider plugin implements.

    Implementations must be async and safe for concurrent invocation.
    Business failures are returned as ``ProviderFailure``, not raised.
    """

    identifier: str

    async def initiate_payment(self, session_input: CreatePaymentSession) -> ProviderResult: ...

    async def update_payment(self, session_input: UpdatePaymentSession) -> Optional[ProviderResult]: ...

    async def delete_payment(self, data: dict[str, Any]) -> Optional[ProviderResult]: ...

    async def authorize_payment(self, data: dict[str, Any], context: dict[str, Any]) -> ProviderResult: ...

    async def get_payment_status(self, data: dict[str, Any]) -> PaymentSessionStatus: ...

    async def capture_payment(self, data: dict[str, Any]) -> ProviderResult: ...

    async def cancel_payment(self, data: dict[str, Any]) -> Optional[ProviderResult]: ...

    async def refund_payment(self, data: dict[str, Any], amount: Decimal) -> ProviderResult: ...

    async def get_webhook_action_and_data(self, payload: ProviderWebhookPayload) -> WebhookActionResult: ...


@runtime_checkable
class ProviderLookup(Protocol):
    """Read side of the provider registry used by application services."""

    def get(self, provider_id: str) -> Optional[PaymentProvider]: ...

    def ids(self) -> list[str]: ...
