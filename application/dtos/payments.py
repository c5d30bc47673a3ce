"""
Payment DTOs (Pydantic v2) used at the provider boundary.

Session ``data`` is provider-owned and passed through untouched in both
directions; amounts are arbitrary-precision and never validated here.
"""
from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from domain.payment.types import PaymentAction, PaymentSessionStatus


class CreatePaymentSession(BaseModel):
    amount: Decimal
    currency_code: str = Field(validation_alias=AliasChoices("currency_code", "currency"))
    context: dict[str, Any] = Field(default_factory=dict)
    data: dict[str, Any] = Field(default_factory=dict)


class UpdatePaymentSession(CreatePaymentSession):
    # Current provider-owned session data is required to update it
    data: dict[str, Any]


class PaymentProviderDataInput(BaseModel):
    provider_id: str
    data: dict[str, Any] = Field(default_factory=dict)


class ProviderSuccess(BaseModel):
    kind: Literal["success"] = "success"
    data: Optional[dict[str, Any]] = None
    status: Optional[PaymentSessionStatus] = None

    # Provider-internal fields never make it past the boundary
    model_config = ConfigDict(extra="ignore")

    @field_validator("status", mode="before")
    @classmethod
    def _coerce_status(cls, v):
        if isinstance(v, str):
            return PaymentSessionStatus(v)
        return v


class ProviderFailure(BaseModel):
    kind: Literal["failure"] = "failure"
    error: str
    detail: Any = None
    code: Optional[str] = None

    model_config = ConfigDict(extra="ignore")

    @field_validator("error", mode="before")
    @classmethod
    def _stringify_error(cls, v):
        # Providers sometimes report numeric or structured errors
        if v is None:
            return "Unknown payment provider error"
        if not isinstance(v, str):
            return str(v)
        return v

    @field_validator("code", mode="before")
    @classmethod
    def _stringify_code(cls, v):
        if v is not None and not isinstance(v, str):
            return str(v)
        return v


ProviderResponse = Annotated[Union[ProviderSuccess, ProviderFailure], Field(discriminator="kind")]


class AuthorizeResult(BaseModel):
    data: dict[str, Any] = Field(default_factory=dict)
    status: PaymentSessionStatus


class ProviderWebhookPayload(BaseModel):
    data: dict[str, Any] = Field(default_factory=dict)
    raw_data: bytes = b""
    headers: dict[str, Any] = Field(default_factory=dict)


class WebhookActionData(BaseModel):
    session_id: str
    amount: Decimal


class WebhookActionResult(BaseModel):
    action: PaymentAction
    data: Optional[WebhookActionData] = None
