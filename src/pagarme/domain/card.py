"""Card — a stored credit card."""

from __future__ import annotations

from pagarme.domain.base import Model
from pagarme.domain.customer import Customer
from pagarme.domain.fields import Attribute, EnumOf, ModelOf, OptionalOf, Primitive
from pagarme.domain.types import CardBrand


class Card(Model):
    ENDPOINT = "cards"

    brand = Attribute(OptionalOf(EnumOf(CardBrand)))
    holder_name = Attribute(Primitive(str))
    first_digits = Attribute(Primitive(str))
    last_digits = Attribute(Primitive(str))
    fingerprint = Attribute(Primitive(str))
    country = Attribute(OptionalOf(Primitive(str)))
    expiration_date = Attribute(Primitive(str))
    valid = Attribute(Primitive(bool))
    card_hash = Attribute(Primitive(str))
    customer = Attribute(ModelOf(Customer), coerce_on_load=True)
    date_created = Attribute(OptionalOf(Primitive(str)))
