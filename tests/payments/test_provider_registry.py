import pytest

from infrastructure.payments.registry import ProviderRegistry
from infrastructure.payments.system_provider import SystemPaymentProvider


def test_resolution_is_referentially_stable():
    reg = ProviderRegistry()
    provider = SystemPaymentProvider()
    reg.register("pp_system_default", provider)
    assert reg.get("pp_system_default") is provider
    assert reg.get("pp_system_default") is reg.get("pp_system_default")


def test_unknown_id_returns_none():
    reg = ProviderRegistry()
    assert reg.get("pp_unknown") is None
    assert "pp_unknown" not in reg


def test_duplicate_registration_rejected():
    reg = ProviderRegistry()
    reg.register("pp_system_default", SystemPaymentProvider())
    with pytest.raises(ValueError):
        reg.register("pp_system_default", SystemPaymentProvider())
    assert len(reg) == 1


def test_non_provider_rejected():
    class _Half:
        identifier = "half"

        async def initiate_payment(self, session_input):
            return None

    reg = ProviderRegistry()
    with pytest.raises(TypeError):
        reg.register("pp_half_default", _Half())
    assert reg.ids() == []


def test_ids_sorted():
    reg = ProviderRegistry()
    reg.register("pp_system_b", SystemPaymentProvider())
    reg.register("pp_system_a", SystemPaymentProvider())
    assert reg.ids() == ["pp_system_a", "pp_system_b"]
