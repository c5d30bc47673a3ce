"""Pytest bootstrap configuration.

Shared stub providers and a recording logger for dispatcher tests.
"""

from decimal import Decimal
from typing import Any

import pytest

from application.services.payment_provider_service import PaymentProviderService
from domain.payment.types import PaymentAction, PaymentSessionStatus
from infrastructure.payments.registry import ProviderRegistry


class RecordingLogger:
    """Captures structured log calls as (level, event, kwargs)."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, dict]] = []

    def _record(self, level: str, event: str, **kw: Any) -> None:
        self.calls.append((level, event, kw))

    def debug(self, event: str, **kw: Any) -> None:
        self._record("debug", event, **kw)

    def info(self, event: str, **kw: Any) -> None:
        self._record("info", event, **kw)

    def warning(self, event: str, **kw: Any) -> None:
        self._record("warning", event, **kw)

    def error(self, event: str, **kw: Any) -> None:
        self._record("error", event, **kw)

    def events(self, level: str | None = None) -> list[str]:
        return [e for lvl, e, _ in self.calls if level is None or lvl == level]


class StubProvider:
    """Provider returning canned results per capability and recording calls."""

    identifier = "stub"

    def __init__(self, **responses: Any) -> None:
        self.responses = responses
        self.calls: list[tuple[str, tuple]] = []

    def _respond(self, name: str, *args: Any, default: Any = None) -> Any:
        self.calls.append((name, args))
        res = self.responses.get(name, default)
        if isinstance(res, Exception):
            raise res
        return res

    async def initiate_payment(self, session_input):
        return self._respond("initiate_payment", session_input, default={"data": {"id": "ps_1"}})

    async def update_payment(self, session_input):
        return self._respond("update_payment", session_input, default={"data": session_input.data})

    async def delete_payment(self, data):
        return self._respond("delete_payment", data)

    async def authorize_payment(self, data, context):
        return self._respond("authorize_payment", data, context, default={"data": data, "status": "authorized"})

    async def get_payment_status(self, data):
        return self._respond("get_payment_status", data, default=PaymentSessionStatus.PENDING)

    async def capture_payment(self, data):
        return self._respond("capture_payment", data, default={"data": data})

    async def cancel_payment(self, data):
        return self._respond("cancel_payment", data)

    async def refund_payment(self, data, amount: Decimal):
        return self._respond("refund_payment", data, amount, default={"data": data})

    async def get_webhook_action_and_data(self, payload):
        return self._respond("get_webhook_action_and_data", payload, default={"action": PaymentAction.NOT_SUPPORTED})


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def stub_provider() -> StubProvider:
    return StubProvider()


@pytest.fixture
def registry(stub_provider: StubProvider) -> ProviderRegistry:
    reg = ProviderRegistry()
    reg.register("pp_stub_default", stub_provider)
    return reg


@pytest.fixture
def service(registry: ProviderRegistry, recording_logger: RecordingLogger) -> PaymentProviderService:
    return PaymentProviderService(registry=registry, logger=recording_logger)


@pytest.fixture
def make_service(recording_logger: RecordingLogger):
    """Build a service around a StubProvider with the given canned responses."""

    def _make(provider_id: str = "pp_stub_default", **responses: Any):
        provider = StubProvider(**responses)
        reg = ProviderRegistry()
        reg.register(provider_id, provider)
        return PaymentProviderService(registry=reg, logger=recording_logger), provider

    return _make
