"""Shared pytest fixtures and test helpers for pagarme tests."""

from __future__ import annotations

import copy
import json
import logging
import os
from collections.abc import Generator
from typing import Any

import pytest
from click.testing import CliRunner

from pagarme.config.settings import PagarMeSettings
from pagarme.infrastructure.provider import PagarMeProvider
from pagarme.infrastructure.service import PagarMeService, _reset_default_service

TRANSACTION_PAYLOAD: dict[str, Any] = {
    "object": "transaction",
    "id": 1234,
    "status": "paid",
    "amount": 1000,
    "installments": 1,
    "payment_method": "credit_card",
    "refuse_reason": None,
    "card": {
        "object": "card",
        "id": "card_ci6l9fx8f0042rt16rtb477gj",
        "brand": "visa",
        "holder_name": "Api Customer",
        "first_digits": "401872",
        "last_digits": "8048",
        "valid": True,
    },
    "customer": {
        "object": "customer",
        "id": 11222,
        "name": "Api Customer",
        "email": "api@test.com",
        "document_number": "12345678909",
        "addresses": [
            {"object": "address", "street": "Rua A", "street_number": "100", "zipcode": "01452000"}
        ],
        "phones": [{"object": "phone", "ddd": "11", "number": "999887766"}],
    },
    "metadata": {"order_id": "ord_1"},
}

SUBSCRIPTION_PAYLOAD: dict[str, Any] = {
    "object": "subscription",
    "id": 555,
    "status": "paid",
    "payment_method": "boleto",
    "charges": 2,
    "plan": {
        "object": "plan",
        "id": 77,
        "name": "Gold",
        "amount": 3190,
        "days": 30,
        "payment_methods": ["boleto", "credit_card"],
    },
    "current_transaction": {"object": "transaction", "id": 1234, "amount": 3190},
    "customer": {"object": "customer", "id": 11222, "email": "api@test.com"},
    "card": None,
}


class RecordingExecutor:
    """Query executor double: records every call, replays queued bodies."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, dict[str, str]]] = []
        self._responses: list[str] = []

    def queue(self, body: Any) -> None:
        """Queue a response body; non-strings are JSON-encoded."""
        self._responses.append(body if isinstance(body, str) else json.dumps(body))

    def execute(self, method: str, path: str, parameters: dict[str, str]) -> str:
        self.calls.append((method, path, parameters))
        if not self._responses:
            raise AssertionError(f"Unexpected query: {method} {path}")
        return self._responses.pop(0)

    @property
    def last_call(self) -> tuple[str, str, dict[str, str]]:
        return self.calls[-1]


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Strip PAGARME_* env vars and reset the default session around each test."""
    for name in list(os.environ):
        if name.startswith("PAGARME_"):
            monkeypatch.delenv(name, raising=False)
    _reset_default_service()
    yield
    _reset_default_service()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings() -> PagarMeSettings:
    return PagarMeSettings(api_key="ak_test_key", encryption_key="ek_test_key")


@pytest.fixture
def executor() -> RecordingExecutor:
    return RecordingExecutor()


@pytest.fixture
def session(settings: PagarMeSettings, executor: RecordingExecutor) -> PagarMeService:
    """A session wired to the recording executor."""
    return PagarMeService(settings, executor=executor)


@pytest.fixture
def provider(settings: PagarMeSettings, executor: RecordingExecutor) -> PagarMeProvider:
    return PagarMeProvider(executor=executor, settings=settings)


@pytest.fixture
def transaction_payload() -> dict[str, Any]:
    """A fresh copy of a realistic transaction response."""
    return copy.deepcopy(TRANSACTION_PAYLOAD)


@pytest.fixture
def subscription_payload() -> dict[str, Any]:
    """A fresh copy of a realistic subscription response."""
    return copy.deepcopy(SUBSCRIPTION_PAYLOAD)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo the handler swap performed by every CLI invocation."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    sdk = logging.getLogger("pagarme")
    sdk_level = sdk.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    sdk.setLevel(sdk_level)
