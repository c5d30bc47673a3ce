"""
Provider registry: provider id → provider instance.

Populated once at startup by the composition root; lookups never construct
providers, so a resolved provider is always fully initialized.
"""
from __future__ import annotations

from typing import Dict, Optional

from application.ports.payment_provider import PaymentProvider


class ProviderRegistry:
    """Registry tracking instantiated payment providers."""

    def __init__(self) -> None:
        self._providers: Dict[str, PaymentProvider] = {}

    def register(self, provider_id: str, provider: PaymentProvider) -> None:
        if not isinstance(provider, PaymentProvider):
            raise TypeError(f"{type(provider).__name__} does not implement PaymentProvider")
        if provider_id in self._providers:
            raise ValueError(f"Payment provider already registered: {provider_id}")
        self._providers[provider_id] = provider

    def get(self, provider_id: str) -> Optional[PaymentProvider]:
        return self._providers.get(provider_id)

    def ids(self) -> list[str]:
        return sorted(self._providers)

    def __contains__(self, provider_id: object) -> bool:
        return provider_id in self._providers

    def __len__(self) -> int:
        return len(self._providers)
