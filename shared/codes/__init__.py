"""
Shared codes used across layers (Domain/Application/Infrastructure).

Payment-specific codes live under `shared.codes.payment_codes`.
"""
from shared.codes.payment_codes import PROVIDER_STATUS_TO_INTERNAL, PaymentCode


__all__ = ["PaymentCode", "PROVIDER_STATUS_TO_INTERNAL"]
