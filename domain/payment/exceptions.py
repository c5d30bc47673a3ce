"""
Payment exceptions mapped to unified BusinessException variants.
"""
from __future__ import annotations

from typing import Optional

from domain.common.exceptions import BusinessException
from shared.codes.payment_codes import PaymentCode


class PaymentProviderError(BusinessException):
    """Provider-reported failure, normalized into a single error kind.

    ``provider_code`` carries the provider's own classification token
    (e.g. ``card_declined``) for programmatic handling by callers.
    """

    def __init__(
        self,
        message: str,
        *,
        provider_code: Optional[str] = None,
        provider_id: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        self.provider_code = provider_code
        self.provider_id = provider_id
        full_details = {"provider_id": provider_id, "provider_code": provider_code}
        if details:
            full_details.update(details)
        super().__init__(
            code=PaymentCode.INVALID_DATA,
            message=message,
            error_type="InvalidData",
            details=full_details,
        )


class PaymentProviderNotFoundError(BusinessException):
    """No provider registered under the requested id (configuration fault)."""

    def __init__(self, provider_id: str):
        self.provider_id = provider_id
        message = (
            f"Unable to retrieve the payment provider with id: {provider_id}\n"
            "Please make sure that the provider is registered and it is configured "
            "correctly in your project configuration file."
        )
        super().__init__(
            code=PaymentCode.PROVIDER_NOT_FOUND,
            message=message,
            error_type="ProviderNotFound",
            details={"provider_id": provider_id},
        )
