"""Domain-level business exceptions shared by domain, application and infrastructure.

Callers map these to transport-specific responses; this layer never imports
outward.
"""
from __future__ import annotations

from typing import Optional


class BusinessException(Exception):
    """Base business exception"""

    def __init__(
        self,
        code: int,
        message: str,
        error_type: str = "BusinessError",
        details: Optional[dict] = None,
        field: Optional[str] = None,
    ) -> None:
        self.code = code
        self.message = message
        self.error_type = error_type
        self.details = details
        self.field = field
        super().__init__(self.message)
