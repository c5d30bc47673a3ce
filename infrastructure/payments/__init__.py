"""
Composition root for payment providers: registry building and service factory.
"""
from __future__ import annotations

import importlib
from typing import Optional

from application.services.payment_provider_service import PaymentProviderService
from core.logging_config import get_logger, make_payment_logger
from core.settings import PaymentSettings, ProviderRegistration, payment_settings
from infrastructure.payments.registry import ProviderRegistry
from infrastructure.payments.system_provider import SystemPaymentProvider


logger = get_logger(__name__)

SYSTEM_PROVIDER_ID = "pp_system_default"


def make_provider_id(identifier: str, registration_id: str) -> str:
    return f"pp_{identifier}_{registration_id}"


def load_provider(registration: ProviderRegistration):
    module_path, _, attr = registration.resolve.partition(":")
    cls = getattr(importlib.import_module(module_path), attr)
    return make_provider_id(cls.identifier, registration.id), cls(**registration.options)


def build_provider_registry(settings: Optional[PaymentSettings] = None) -> ProviderRegistry:
    cfg = settings or payment_settings
    registry = ProviderRegistry()
    if cfg.system_provider_enabled:
        registry.register(SYSTEM_PROVIDER_ID, SystemPaymentProvider())
    for registration in cfg.providers:
        provider_id, provider = load_provider(registration)
        registry.register(provider_id, provider)
        logger.info("payment_provider_registered", provider_id=provider_id, resolve=registration.resolve)
    return registry


def get_payment_provider_service(settings: Optional[PaymentSettings] = None) -> PaymentProviderService:
    cfg = settings or payment_settings
    return PaymentProviderService(
        registry=build_provider_registry(cfg),
        logger=make_payment_logger(cfg.logger),
    )


__all__ = [
    "SYSTEM_PROVIDER_ID",
    "ProviderRegistry",
    "SystemPaymentProvider",
    "build_provider_registry",
    "get_payment_provider_service",
    "load_provider",
    "make_provider_id",
]
