"""Plan — recurring billing template for subscriptions."""

from __future__ import annotations

from pagarme.domain.base import Model
from pagarme.domain.fields import ArrayOf, Attribute, EnumOf, OptionalOf, Primitive
from pagarme.domain.types import PaymentMethod


class Plan(Model):
    """A billing plan.

    ``charges`` is ``None`` for plans that bill until canceled.
    """

    ENDPOINT = "plans"

    name = Attribute(Primitive(str))
    amount = Attribute(Primitive(int))
    days = Attribute(Primitive(int))
    trial_days = Attribute(Primitive(int))
    charges = Attribute(OptionalOf(Primitive(int)))
    installments = Attribute(Primitive(int))
    color = Attribute(OptionalOf(Primitive(str)))
    payment_methods = Attribute(ArrayOf(EnumOf(PaymentMethod)))
    date_created = Attribute(OptionalOf(Primitive(str)))
