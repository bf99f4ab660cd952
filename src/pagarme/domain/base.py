"""AbstractModel — field stores, decoding, encoding, and attribute access.

Each model keeps two stores:

- ``_keys``: the snapshot, replaced wholesale on every load.
- ``_dirty_keys``: values written locally since the last load.

Reads consult the dirty store, then the snapshot, then fall back to the
declared type's zero value. Encoding exports either the dirty store alone
(the patch sent on update) or the snapshot merged with the dirty store
(the full view).

Nested JSON objects are decoded into the class registered for their
``"object"`` discriminator (see :mod:`pagarme.domain.registry`); objects
without a known discriminator become plain :class:`AbstractModel`.

INVARIANT: the dirty store is empty right after any load, and only an
explicit load (``refresh``, ``save``, ``load_from_*``) or
:meth:`AbstractModel.discard_changes` empties it.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar

from pagarme.domain.fields import ANY, Attribute, FieldType, coerce
from pagarme.domain.types import SerializationRule
from pagarme.errors import DecodeError, EncodeError, MissingIdentityError, PagarMeError

if TYPE_CHECKING:
    from pagarme.infrastructure.query import PagarMeQuery
    from pagarme.infrastructure.service import PagarMeService

logger = logging.getLogger(__name__)


def convert_key_name(name: str) -> str:
    """Map a friendly attribute name to its storage key.

    Every uppercase letter after the first character starts a new word
    and is prefixed with ``_``; the result is lowercased::

        CardHash  -> card_hash
        cardHash  -> card_hash
        card_hash -> card_hash
    """
    chars: list[str] = []
    for index, char in enumerate(name):
        if index > 0 and char.isupper():
            chars.append("_")
        chars.append(char)
    return "".join(chars).lower()


def parse_json(text: str | bytes) -> Any:
    """Parse *text*, mapping parser failures to :class:`DecodeError`."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DecodeError(f"Malformed JSON payload: {exc.msg} at position {exc.pos}") from exc


def decode_value(token: Any, service: PagarMeService) -> Any:
    """Decode a parsed JSON node.

    Arrays become lists, objects become models of the class registered
    for their ``"object"`` discriminator, scalars are returned as-is.
    """
    if isinstance(token, list):
        return [decode_value(item, service) for item in token]

    if isinstance(token, Mapping):
        from pagarme.domain.registry import resolve_model

        model = resolve_model(token.get("object"))(service=service)
        model.load_from_object(token)
        return model

    return token


def decode_payload(text: str | bytes, service: PagarMeService) -> Any:
    """Decode a JSON document of any root shape (object, array, scalar)."""
    return decode_value(parse_json(text), service)


class AbstractModel:
    """Generic API object with snapshot/dirty field tracking.

    Subclasses declare typed fields with :class:`Attribute` and may
    override :attr:`SERIALIZATION_RULES` to embed nested models instead
    of referencing them by id.
    """

    SERIALIZATION_RULES: ClassVar[dict[str, SerializationRule]] = {}

    # Built per subclass from its Attribute declarations, keyed by storage key.
    _attributes: ClassVar[dict[str, Attribute]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        attributes: dict[str, Attribute] = {}
        for klass in reversed(cls.__mro__):
            for value in vars(klass).values():
                if isinstance(value, Attribute) and value.key:
                    attributes[value.key] = value
        cls._attributes = attributes

    def __init__(self, service: PagarMeService | None = None) -> None:
        if service is None:
            from pagarme.infrastructure.service import get_default_service

            service = get_default_service()

        self._service = service
        self._loaded = False
        self._keys: dict[str, Any] = {}
        self._dirty_keys: dict[str, Any] = {}

    @property
    def service(self) -> PagarMeService:
        """Session context this model (and every model decoded from it) uses."""
        return self._service

    @property
    def loaded(self) -> bool:
        """Whether the snapshot has been populated at least once."""
        return self._loaded

    @property
    def has_changes(self) -> bool:
        return bool(self._dirty_keys)

    @property
    def snapshot(self) -> dict[str, Any]:
        """Shallow copy of the last loaded values."""
        return dict(self._keys)

    @property
    def changes(self) -> dict[str, Any]:
        """Shallow copy of the values written since the last load."""
        return dict(self._dirty_keys)

    # ------------------------------------------------------------------
    # Decoding
    # ------------------------------------------------------------------

    def load_from_json(self, text: str) -> None:
        """Replace the snapshot with the JSON object in *text*.

        Raises:
            DecodeError: *text* is not valid JSON or its root is not an object.
        """
        tree = parse_json(text)
        if not isinstance(tree, Mapping):
            raise DecodeError(f"Expected a JSON object, got {type(tree).__name__}")

        self.load_from_object(tree)

    def load_from_object(self, obj: Mapping[str, Any]) -> None:
        """Replace the snapshot with a decoded copy of a parsed JSON object."""
        self.load_from_mapping({key: self._decode_value(value) for key, value in obj.items()})

    def load_from_model(self, model: AbstractModel) -> None:
        """Replace the snapshot with a shallow copy of *model*'s snapshot."""
        self.load_from_mapping(model._keys)

    def load_from_mapping(self, keys: Mapping[str, Any]) -> None:
        """Install *keys* as the new snapshot and finalize the load."""
        self._keys = dict(keys)
        self._coerce_types()
        self._dirty_keys.clear()
        self._loaded = True
        logger.debug("Loaded %s with %d fields", type(self).__name__, len(self._keys))

    def _decode_value(self, token: Any) -> Any:
        return decode_value(token, self._service)

    def _coerce_types(self) -> None:
        """Apply load-time coercions declared with ``coerce_on_load``."""
        for attribute in self._attributes.values():
            if attribute.coerce_on_load and attribute.key:
                self.coerce_attribute(attribute.key, attribute.field_type)

    def coerce_attribute(self, name: str, field_type: FieldType) -> None:
        """Coerce the snapshot value of *name* in place, if present."""
        if name in self._keys:
            self._keys[name] = self.cast_attribute(field_type, self._keys[name])

    def cast_attribute(self, field_type: FieldType, value: Any) -> Any:
        return coerce(field_type, value, self._service)

    # ------------------------------------------------------------------
    # Field access
    # ------------------------------------------------------------------

    def get_attribute(self, name: str, field_type: FieldType = ANY) -> Any:
        """Read *name* (dirty store first) coerced to *field_type*."""
        if name in self._dirty_keys:
            value = self._dirty_keys[name]
        elif name in self._keys:
            value = self._keys[name]
        else:
            return field_type.zero()
        return self.cast_attribute(field_type, value)

    def set_attribute(self, name: str, value: Any) -> None:
        self._dirty_keys[name] = value

    def discard_changes(self) -> None:
        """Drop every local write, keeping the snapshot."""
        self._dirty_keys.clear()

    def __getitem__(self, key: str) -> Any:
        return self.get_attribute(key)

    def __setitem__(self, key: str, value: Any) -> None:
        self.set_attribute(key, value)

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails: friendly names and undeclared fields.
        if name.startswith("_"):
            raise AttributeError(name)

        key = convert_key_name(name)
        attribute = self._attributes.get(key)
        if attribute is not None:
            return self.get_attribute(key, attribute.field_type)
        if key in self._dirty_keys:
            return self._dirty_keys[key]
        if key in self._keys:
            return self._keys[key]
        raise AttributeError(f"{type(self).__name__!r} object has no field {key!r}")

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith("_") or hasattr(type(self), name):
            object.__setattr__(self, name, value)
        else:
            self._dirty_keys[convert_key_name(name)] = value

    # ------------------------------------------------------------------
    # Encoding
    # ------------------------------------------------------------------

    def serialization_rule_for_field(self, field: str, full: bool) -> SerializationRule:
        """Rule used when *field* holds an identified nested model."""
        return self.SERIALIZATION_RULES.get(field, SerializationRule.REFERENCE)

    def get_fields(self, full: bool = False) -> dict[str, Any]:
        """Export the model as a plain mapping.

        Args:
            full: When False, only locally changed fields (the patch).
                When True, the snapshot merged with local changes; local
                changes win for a shared key.

        Raises:
            EncodeError: A referenced model's ``<field>_id`` collides with
                another field of the same name.
        """
        if full:
            entries = {**self._keys, **self._dirty_keys}
        else:
            entries = self._dirty_keys

        result: dict[str, Any] = {}
        for key, value in entries.items():
            out_key, out_value = self._convert_entry(key, value, full)
            if out_key in result:
                raise EncodeError(
                    f"{type(self).__name__} exports {out_key!r} twice; "
                    f"field {key!r} collides with an existing key"
                )
            result[out_key] = out_value
        return result

    def _convert_entry(self, key: str, value: Any, full: bool) -> tuple[str, Any]:
        if isinstance(value, (list, tuple)):
            return key, [self._convert_entry(key, item, full)[1] for item in value]

        if isinstance(value, Model):
            if self.serialization_rule_for_field(key, full) == SerializationRule.REFERENCE:
                return f"{key}_id", value.id
            return key, value.get_fields(full)

        if isinstance(value, AbstractModel):
            return key, value.get_fields(full)

        if isinstance(value, Enum):
            return key, value.value

        return key, value

    def to_json(self, full: bool = False) -> str:
        return json.dumps(self.get_fields(full))

    def __repr__(self) -> str:
        state = "loaded" if self._loaded else "new"
        name = type(self).__name__
        return f"<{name} fields={len(self._keys)} dirty={len(self._dirty_keys)} {state}>"


class Model(AbstractModel):
    """An API resource with an ``id`` and a REST endpoint.

    Only ``Model`` instances are subject to the reference serialization
    rule; a nested :class:`AbstractModel` is always embedded.
    """

    ENDPOINT: ClassVar[str] = ""

    id = Attribute(ANY)

    def __repr__(self) -> str:
        state = "loaded" if self._loaded else "new"
        return f"<{type(self).__name__} id={self.id!r} {state}>"

    def _query(self, method: str, path: str) -> PagarMeQuery:
        if not self.ENDPOINT:
            raise PagarMeError(f"{type(self).__name__} has no API endpoint")
        return self._service.query(method, path)

    def _require_id(self) -> Any:
        model_id = self.id
        if model_id is None:
            raise MissingIdentityError(f"{type(self).__name__} has no id; save it first")
        return model_id

    def save(self) -> None:
        """Create (POST) or update (PUT) the resource with the local changes.

        The response replaces the snapshot, which clears the dirty store.
        """
        if self.id is None:
            query = self._query("POST", self.ENDPOINT)
        else:
            query = self._query("PUT", f"{self.ENDPOINT}/{self.id}")
        query.add_fields(self.get_fields(full=False))
        self.load_from_json(query.execute())

    def refresh(self) -> None:
        """Reload the resource from the API, discarding local changes."""
        model_id = self._require_id()
        query = self._query("GET", f"{self.ENDPOINT}/{model_id}")
        self.load_from_json(query.execute())

    def _post_action(self, action: str, parameters: Mapping[str, Any] | None = None) -> None:
        model_id = self._require_id()
        query = self._query("POST", f"{self.ENDPOINT}/{model_id}/{action}")
        if parameters:
            query.add_fields(parameters)
        self.load_from_json(query.execute())
