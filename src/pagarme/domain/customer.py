"""Customer — the payer attached to transactions and subscriptions."""

from __future__ import annotations

from pagarme.domain.base import Model
from pagarme.domain.fields import ANY, ArrayOf, Attribute, OptionalOf, Primitive


class Customer(Model):
    """A payer record.

    Addresses and phones arrive as untyped nested objects and are always
    embedded when the customer is encoded.
    """

    ENDPOINT = "customers"

    name = Attribute(Primitive(str))
    email = Attribute(Primitive(str))
    document_number = Attribute(Primitive(str))
    document_type = Attribute(Primitive(str))
    gender = Attribute(OptionalOf(Primitive(str)))
    born_at = Attribute(OptionalOf(Primitive(str)))
    addresses = Attribute(ArrayOf(ANY))
    phones = Attribute(ArrayOf(ANY))
    date_created = Attribute(OptionalOf(Primitive(str)))
