"""Payment domain enums and the nested-model serialization policy.

Enum values are the exact strings the remote API sends and expects.
"""

from __future__ import annotations

from enum import StrEnum


class PaymentMethod(StrEnum):
    """How a transaction is paid."""

    BOLETO = "boleto"
    CREDIT_CARD = "credit_card"


class TransactionStatus(StrEnum):
    """Lifecycle states of a transaction."""

    PROCESSING = "processing"
    AUTHORIZED = "authorized"
    PAID = "paid"
    REFUNDED = "refunded"
    WAITING_PAYMENT = "waiting_payment"
    PENDING_REFUND = "pending_refund"
    REFUSED = "refused"


class SubscriptionStatus(StrEnum):
    """Lifecycle states of a subscription."""

    TRIALING = "trialing"
    PAID = "paid"
    PENDING_PAYMENT = "pending_payment"
    UNPAID = "unpaid"
    CANCELED = "canceled"
    ENDED = "ended"


class CardBrand(StrEnum):
    """Card networks reported for stored cards."""

    VISA = "visa"
    MASTERCARD = "mastercard"
    AMEX = "amex"
    DISCOVER = "discover"
    DINERS = "diners"
    ELO = "elo"
    HIPERCARD = "hipercard"
    JCB = "jcb"
    AURA = "aura"


class SerializationRule(StrEnum):
    """How a nested identified model is written when its parent is encoded.

    ``REFERENCE`` writes ``<field>_id`` with the nested model's id.
    ``EMBED`` writes the nested model's own field mapping.
    """

    REFERENCE = "reference"
    EMBED = "embed"
