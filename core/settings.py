"""
Payment-related settings using pydantic-settings v2 with nested env keys.

Example:
    PAYMENT__SYSTEM_PROVIDER_ENABLED=false
    PAYMENT__LOGGER=null
    PAYMENT__PROVIDERS='[{"id": "default", "resolve": "acme_pay.provider:AcmeProvider", "options": {"api_key": "..."}}]'
    PAYMENT__TIMEOUTS__READ=5
"""
from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PaymentTimeouts(BaseModel):
    connect: float = 1.0
    read: float = 3.0
    write: float = 3.0
    total: float = 5.0


class PaymentRetry(BaseModel):
    max: int = 2
    base_backoff: float = 0.2


class ProviderRegistration(BaseModel):
    id: str
    resolve: str  # "package.module:ClassName"
    options: dict[str, Any] = Field(default_factory=dict)

    @field_validator("resolve")
    @classmethod
    def _validate_resolve(cls, v: str) -> str:
        module, sep, attr = v.partition(":")
        if not sep or not module or not attr:
            raise ValueError("resolve must look like 'package.module:ClassName'")
        return v


class PaymentSettings(BaseSettings):
    system_provider_enabled: bool = True
    providers: list[ProviderRegistration] = Field(default_factory=list)
    # Dispatcher logger, an explicit choice: "structlog" or "null" (drop everything)
    logger: Literal["structlog", "null"] = "structlog"
    timeouts: PaymentTimeouts = Field(default_factory=PaymentTimeouts)
    retry: PaymentRetry = Field(default_factory=PaymentRetry)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="PAYMENT__",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__",
    )


payment_settings = PaymentSettings()
