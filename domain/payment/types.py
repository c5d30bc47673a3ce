"""
Payment session value types owned by providers.

The dispatcher only reads and forwards these; providers decide transitions.
"""
from __future__ import annotations

from enum import Enum


class PaymentSessionStatus(str, Enum):
    """Payment session status categories"""
    PENDING = "pending"
    REQUIRES_MORE = "requires_more"  # customer action needed (3DS, redirect)
    AUTHORIZED = "authorized"
    CAPTURED = "captured"
    CANCELED = "canceled"
    ERROR = "error"

    @classmethod
    def _missing_(cls, value):
        # Providers commonly report upper-case names (e.g. "PENDING")
        if isinstance(value, str):
            lowered = value.lower()
            for member in cls:
                if member.value == lowered:
                    return member
        return None


class PaymentAction(str, Enum):
    """Action a caller should apply after a provider webhook"""
    AUTHORIZED = "authorized"
    SUCCESSFUL = "captured"
    FAILED = "failed"
    PENDING = "pending"
    REQUIRES_MORE = "requires_more"
    CANCELED = "canceled"
    NOT_SUPPORTED = "not_supported"
