"""
Payment specific codes and provider status mapping.
"""
from __future__ import annotations

from enum import IntEnum


class PaymentCode(IntEnum):
    # Generic success
    SUCCESS = 0

    # Provider errors (6xxxx)
    INVALID_DATA = 60000
    PROVIDER_NOT_FOUND = 60005


# Provider→internal session status mapping, keyed by provider identifier.
# Values are PaymentSessionStatus values.
PROVIDER_STATUS_TO_INTERNAL = {
    "stripe": {
        "requires_payment_method": "requires_more",
        "requires_confirmation": "requires_more",
        "requires_action": "requires_more",
        "processing": "pending",
        "requires_capture": "authorized",
        "succeeded": "captured",
        "canceled": "canceled",
    },
    "paypal": {
        "CREATED": "pending",
        "SAVED": "pending",
        "APPROVED": "authorized",
        "PAYER_ACTION_REQUIRED": "requires_more",
        "COMPLETED": "captured",
        "VOIDED": "canceled",
    },
}
