"""pagarme — Python client SDK for the Pagar.me payment gateway."""

from __future__ import annotations

from pagarme.domain.base import AbstractModel, Model
from pagarme.domain.card import Card
from pagarme.domain.customer import Customer
from pagarme.domain.plan import Plan
from pagarme.domain.subscription import Subscription
from pagarme.domain.transaction import Transaction
from pagarme.domain.types import (
    CardBrand,
    PaymentMethod,
    SerializationRule,
    SubscriptionStatus,
    TransactionStatus,
)
from pagarme.errors import (
    CoercionError,
    DecodeError,
    EncodeError,
    MissingIdentityError,
    PagarMeError,
    ServiceConfigurationError,
)
from pagarme.infrastructure.provider import PagarMeProvider
from pagarme.infrastructure.query import PagarMeQuery, QueryExecutor
from pagarme.infrastructure.service import (
    PagarMeService,
    configure_default_service,
    get_default_service,
)

__version__ = "0.1.0"

__all__ = [
    "AbstractModel",
    "Card",
    "CardBrand",
    "CoercionError",
    "Customer",
    "DecodeError",
    "EncodeError",
    "MissingIdentityError",
    "Model",
    "PagarMeError",
    "PagarMeProvider",
    "PagarMeQuery",
    "PagarMeService",
    "PaymentMethod",
    "Plan",
    "QueryExecutor",
    "SerializationRule",
    "ServiceConfigurationError",
    "Subscription",
    "SubscriptionStatus",
    "Transaction",
    "TransactionStatus",
    "__version__",
    "configure_default_service",
    "get_default_service",
]
