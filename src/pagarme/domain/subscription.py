"""Subscription — a customer enrolled in a plan."""

from __future__ import annotations

from pagarme.domain.base import Model, decode_payload
from pagarme.domain.card import Card
from pagarme.domain.customer import Customer
from pagarme.domain.fields import (
    ANY,
    ArrayOf,
    Attribute,
    EnumOf,
    ModelOf,
    OptionalOf,
    Primitive,
    coerce,
)
from pagarme.domain.plan import Plan
from pagarme.domain.transaction import Transaction
from pagarme.domain.types import PaymentMethod, SerializationRule, SubscriptionStatus


class Subscription(Model):
    """A recurring charge.

    ``plan``, ``card`` and ``current_transaction`` are sent by id;
    the customer is embedded.
    """

    ENDPOINT = "subscriptions"

    SERIALIZATION_RULES = {
        "customer": SerializationRule.EMBED,
    }

    plan = Attribute(ModelOf(Plan), coerce_on_load=True)
    status = Attribute(OptionalOf(EnumOf(SubscriptionStatus)))
    payment_method = Attribute(OptionalOf(EnumOf(PaymentMethod)))
    card_hash = Attribute(Primitive(str))
    card = Attribute(ModelOf(Card), coerce_on_load=True)
    customer = Attribute(ModelOf(Customer), coerce_on_load=True)
    current_transaction = Attribute(ModelOf(Transaction), coerce_on_load=True)
    postback_url = Attribute(OptionalOf(Primitive(str)))
    charges = Attribute(Primitive(int))
    current_period_start = Attribute(OptionalOf(Primitive(str)))
    current_period_end = Attribute(OptionalOf(Primitive(str)))
    metadata = Attribute(ANY)
    date_created = Attribute(OptionalOf(Primitive(str)))

    def cancel(self) -> None:
        """Cancel the subscription; the response replaces the snapshot."""
        self._post_action("cancel")

    def transactions(self) -> list[Transaction]:
        """Fetch every transaction charged for this subscription."""
        model_id = self._require_id()
        query = self._query("GET", f"{self.ENDPOINT}/{model_id}/transactions")
        decoded = decode_payload(query.execute(), self.service)
        return coerce(ArrayOf(ModelOf(Transaction)), decoded, self.service)
