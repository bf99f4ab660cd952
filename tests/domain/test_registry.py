"""Tests for the discriminator registry."""

from typing import Any

import pytest

from pagarme.domain.base import AbstractModel
from pagarme.domain.card import Card
from pagarme.domain.customer import Customer
from pagarme.domain.plan import Plan
from pagarme.domain.registry import MODEL_REGISTRY, resolve_model
from pagarme.domain.subscription import Subscription
from pagarme.domain.transaction import Transaction


class TestModelRegistry:
    def test_builtin_models_registered(self) -> None:
        assert MODEL_REGISTRY == {
            "object": AbstractModel,
            "transaction": Transaction,
            "card": Card,
            "customer": Customer,
            "plan": Plan,
            "subscription": Subscription,
        }

    @pytest.mark.parametrize(
        ("discriminator", "cls"),
        [
            ("transaction", Transaction),
            ("subscription", Subscription),
            ("object", AbstractModel),
        ],
    )
    def test_resolve_known(self, discriminator: str, cls: type) -> None:
        assert resolve_model(discriminator) is cls

    @pytest.mark.parametrize(
        "discriminator", ["unknown_type", "Transaction", "", None, 42, ["card"]]
    )
    def test_resolve_fallback(self, discriminator: Any) -> None:
        assert resolve_model(discriminator) is AbstractModel
