"""Discriminator registry for polymorphic decoding.

Maps the JSON ``"object"`` field to the model class instantiated for a
nested object. Populated once at import; read-only afterwards.

Unknown or non-string discriminators resolve to :class:`AbstractModel`,
so unfamiliar objects keep every field generically.
"""

from __future__ import annotations

from typing import Any

from pagarme.domain.base import AbstractModel
from pagarme.domain.card import Card
from pagarme.domain.customer import Customer
from pagarme.domain.plan import Plan
from pagarme.domain.subscription import Subscription
from pagarme.domain.transaction import Transaction

MODEL_REGISTRY: dict[str, type[AbstractModel]] = {}


def resolve_model(discriminator: Any) -> type[AbstractModel]:
    """Return the class registered for *discriminator*, or AbstractModel."""
    if not isinstance(discriminator, str):
        return AbstractModel
    return MODEL_REGISTRY.get(discriminator, AbstractModel)


def _register_models() -> None:
    """Populate :data:`MODEL_REGISTRY` with the built-in models."""
    MODEL_REGISTRY["object"] = AbstractModel
    MODEL_REGISTRY["transaction"] = Transaction
    MODEL_REGISTRY["card"] = Card
    MODEL_REGISTRY["customer"] = Customer
    MODEL_REGISTRY["plan"] = Plan
    MODEL_REGISTRY["subscription"] = Subscription


_register_models()
