"""Field type descriptors and the coercion routine.

Every declared model field carries one descriptor saying what shape its
value must have. :func:`coerce` switches on the descriptor to turn a
loosely-typed decoded value into that shape:

- ``Primitive(int)``      -> ``"10"`` becomes ``10``
- ``EnumOf(PaymentMethod)`` -> ``"boleto"`` becomes ``PaymentMethod.BOLETO``
- ``ArrayOf(inner)``      -> each element coerced, order and length kept
- ``OptionalOf(inner)``   -> ``None`` stays ``None``, anything else as *inner*
- ``ModelOf(Card)``       -> a generic model is re-typed by snapshot copy
- ``ANY``                 -> returned unchanged

INVARIANT: ``None`` is never coerced. A JSON ``null`` stays ``None``
whatever the declared type.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from pagarme.errors import CoercionError

if TYPE_CHECKING:
    from pagarme.domain.base import AbstractModel


@dataclass(frozen=True)
class FieldType:
    """Base of all field type descriptors."""

    def zero(self) -> Any:
        """Value returned for a field absent from both stores."""
        return None

    def describe(self) -> str:
        return "any"


@dataclass(frozen=True)
class AnyValue(FieldType):
    """No declared type; values pass through."""


@dataclass(frozen=True)
class Primitive(FieldType):
    """A scalar: ``str``, ``int``, ``float`` or ``bool``."""

    py_type: type

    def zero(self) -> Any:
        return self.py_type()

    def describe(self) -> str:
        return self.py_type.__name__


@dataclass(frozen=True)
class EnumOf(FieldType):
    """An enum carried on the wire as its string value."""

    enum_cls: type[Enum]

    def describe(self) -> str:
        return self.enum_cls.__name__


@dataclass(frozen=True)
class ArrayOf(FieldType):
    """A homogeneous list."""

    element: FieldType

    def zero(self) -> Any:
        return []

    def describe(self) -> str:
        return f"list[{self.element.describe()}]"


@dataclass(frozen=True)
class OptionalOf(FieldType):
    """A value that may be absent."""

    inner: FieldType

    def describe(self) -> str:
        return f"{self.inner.describe()} | None"


@dataclass(frozen=True)
class ModelOf(FieldType):
    """A nested model of a specific class."""

    model_cls: type[AbstractModel]

    def describe(self) -> str:
        return self.model_cls.__name__


ANY = AnyValue()

_PRIMITIVES = (str, int, float, bool)


def coerce(field_type: FieldType, raw: Any, service: Any = None) -> Any:
    """Convert *raw* to the shape declared by *field_type*.

    Args:
        field_type: Descriptor of the expected type.
        raw: Value as decoded or as written by the caller.
        service: Session context for models created by the conversion.

    Raises:
        CoercionError: *raw* cannot be converted.
    """
    if raw is None:
        return None

    if isinstance(field_type, Primitive):
        return _coerce_primitive(field_type, raw)

    if isinstance(field_type, EnumOf):
        return _coerce_enum(field_type, raw)

    if isinstance(field_type, ArrayOf):
        if not isinstance(raw, (list, tuple)):
            raise CoercionError(
                f"Expected a list for {field_type.describe()}, got {type(raw).__name__}",
                field_type=field_type,
                value=raw,
            )
        return [coerce(field_type.element, item, service) for item in raw]

    if isinstance(field_type, OptionalOf):
        return coerce(field_type.inner, raw, service)

    if isinstance(field_type, ModelOf):
        return _coerce_model(field_type, raw, service)

    return raw


def _coerce_primitive(field_type: Primitive, raw: Any) -> Any:
    target = field_type.py_type
    # bool subclasses int but never stands in for a number
    if isinstance(raw, target) and not (isinstance(raw, bool) and target is not bool):
        return raw

    if not isinstance(raw, _PRIMITIVES):
        raise CoercionError(
            f"Cannot convert {type(raw).__name__} to {target.__name__}",
            field_type=field_type,
            value=raw,
        )

    try:
        if target is bool:
            return _to_bool(raw)
        if target is int:
            return _to_int(raw)
        if target is float:
            return float(raw)
        if target is str:
            if isinstance(raw, bool):
                return "true" if raw else "false"
            return str(raw)
    except ValueError as exc:
        raise CoercionError(
            f"Cannot convert {raw!r} to {target.__name__}",
            field_type=field_type,
            value=raw,
        ) from exc

    raise CoercionError(
        f"Unsupported primitive type {target.__name__}",
        field_type=field_type,
        value=raw,
    )


def _to_bool(raw: Any) -> bool:
    if isinstance(raw, str):
        lowered = raw.strip().lower()
        if lowered in ("true", "false"):
            return lowered == "true"
        raise ValueError(raw)
    return bool(raw)


def _to_int(raw: Any) -> int:
    if isinstance(raw, float):
        if not raw.is_integer():
            raise ValueError(raw)
        return int(raw)
    if isinstance(raw, str):
        return int(raw.strip())
    return int(raw)


def _coerce_enum(field_type: EnumOf, raw: Any) -> Enum:
    enum_cls = field_type.enum_cls
    if isinstance(raw, enum_cls):
        return raw
    # Case-sensitive, exact match on the member value.
    table = {str(member.value): member for member in enum_cls}
    member = table.get(str(raw))
    if member is None:
        raise CoercionError(
            f"{raw!r} is not a valid {enum_cls.__name__}; expected one of {sorted(table)}",
            field_type=field_type,
            value=raw,
        )
    return member


def _coerce_model(field_type: ModelOf, raw: Any, service: Any) -> Any:
    from pagarme.domain.base import AbstractModel

    if isinstance(raw, field_type.model_cls):
        return raw
    if isinstance(raw, AbstractModel):
        model = field_type.model_cls(service=service)
        model.load_from_model(raw)
        return model
    return raw


class Attribute:
    """Typed property over a model's stores.

    Reads go through :meth:`AbstractModel.get_attribute` with the declared
    descriptor; writes land in the dirty store unchanged.

    Usage::

        class Card(Model):
            holder_name = Attribute(Primitive(str))
            brand = Attribute(EnumOf(CardBrand), coerce_on_load=True)
    """

    def __init__(
        self,
        field_type: FieldType = ANY,
        *,
        key: str | None = None,
        coerce_on_load: bool = False,
    ) -> None:
        self.field_type = field_type
        self.key = key
        self.coerce_on_load = coerce_on_load
        self.name = key or ""

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name
        if self.key is None:
            self.key = name

    def __get__(self, instance: AbstractModel | None, owner: type) -> Any:
        if instance is None:
            return self
        return instance.get_attribute(self.key, self.field_type)

    def __set__(self, instance: AbstractModel, value: Any) -> None:
        instance.set_attribute(self.key, value)

    def __repr__(self) -> str:
        return f"Attribute({self.key!r}, {self.field_type.describe()})"
