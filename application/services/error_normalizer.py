"""
Classification and normalization of provider results.

A provider result is either a success payload or a provider-reported failure.
Failures are turned into one uniform ``PaymentProviderError`` so callers never
see a raw provider error shape.
"""
from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from application.dtos.payments import ProviderFailure, ProviderSuccess
from domain.payment.exceptions import PaymentProviderError


SUCCESS_FIELDS = ("data", "status")


def is_provider_error(response: Any) -> bool:
    """Error-shape discriminant for untyped results.

    A mapping is a provider error iff it carries ``error`` and none of the
    success-shape fields.
    """
    if isinstance(response, ProviderFailure):
        return True
    if isinstance(response, Mapping):
        return "error" in response and not any(f in response for f in SUCCESS_FIELDS)
    return False


def classify(response: Any) -> Optional[Union[ProviderSuccess, ProviderFailure]]:
    if response is None or isinstance(response, (ProviderSuccess, ProviderFailure)):
        return response
    if isinstance(response, Mapping):
        fields = {k: v for k, v in response.items() if k != "kind"}
        if is_provider_error(fields):
            return ProviderFailure.model_validate(fields)
        return ProviderSuccess.model_validate(fields)
    raise TypeError(f"Unsupported provider result type: {type(response).__name__}")


def format_provider_error_message(error: str, detail: Any = None) -> str:
    # Fixed "\n" keeps the message identical across platforms
    if detail:
        return f"{error}:\n{detail}"
    return error


def normalize_provider_error(failure: ProviderFailure, *, provider_id: str | None = None) -> PaymentProviderError:
    return PaymentProviderError(
        format_provider_error_message(failure.error, failure.detail),
        provider_code=failure.code,
        provider_id=provider_id,
    )
