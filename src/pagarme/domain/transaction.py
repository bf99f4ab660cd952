"""Transaction — a single charge by card or boleto."""

from __future__ import annotations

from typing import Any

from pagarme.domain.base import Model
from pagarme.domain.card import Card
from pagarme.domain.customer import Customer
from pagarme.domain.fields import ANY, Attribute, EnumOf, ModelOf, OptionalOf, Primitive
from pagarme.domain.types import PaymentMethod, SerializationRule, TransactionStatus


class Transaction(Model):
    """A charge.

    The customer travels embedded in the payload; the card is sent as
    ``card_id`` unless a fresh ``card_hash`` is supplied instead.
    """

    ENDPOINT = "transactions"

    SERIALIZATION_RULES = {
        "customer": SerializationRule.EMBED,
    }

    amount = Attribute(Primitive(int))
    paid_amount = Attribute(Primitive(int))
    refunded_amount = Attribute(Primitive(int))
    installments = Attribute(Primitive(int))
    status = Attribute(OptionalOf(EnumOf(TransactionStatus)))
    status_reason = Attribute(OptionalOf(Primitive(str)))
    refuse_reason = Attribute(OptionalOf(Primitive(str)))
    payment_method = Attribute(OptionalOf(EnumOf(PaymentMethod)))
    card_hash = Attribute(Primitive(str))
    card = Attribute(ModelOf(Card), coerce_on_load=True)
    customer = Attribute(ModelOf(Customer), coerce_on_load=True)
    postback_url = Attribute(OptionalOf(Primitive(str)))
    soft_descriptor = Attribute(OptionalOf(Primitive(str)))
    boleto_url = Attribute(OptionalOf(Primitive(str)))
    boleto_barcode = Attribute(OptionalOf(Primitive(str)))
    boleto_expiration_date = Attribute(OptionalOf(Primitive(str)))
    metadata = Attribute(ANY)
    date_created = Attribute(OptionalOf(Primitive(str)))

    def refund(self) -> None:
        """Refund the transaction in full."""
        self._post_action("refund")

    def capture(self, amount: int | None = None) -> None:
        """Capture an authorized transaction, optionally for a partial *amount*."""
        parameters: dict[str, Any] = {}
        if amount is not None:
            parameters["amount"] = amount
        self._post_action("capture", parameters)
