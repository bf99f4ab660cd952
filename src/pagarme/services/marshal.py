"""MarshalService — decode payloads and report what the SDK makes of them.

Two read-only surfaces:
- inspect: the resolved model class for every nested object
- export: the mapping the SDK would send (patch or full view)
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pagarme.domain.base import AbstractModel, Model, decode_payload
from pagarme.domain.registry import MODEL_REGISTRY
from pagarme.errors import PagarMeError
from pagarme.services.base import BaseService
from pagarme.services.result import ServiceError, ServiceResult


def describe_value(value: Any) -> Any:
    """Render a decoded value as a JSON-friendly tree of types."""
    if isinstance(value, AbstractModel):
        return describe_model(value)
    if isinstance(value, list):
        return [describe_value(item) for item in value]
    if isinstance(value, Enum):
        return value.value
    return value


def describe_model(model: AbstractModel) -> dict[str, Any]:
    description: dict[str, Any] = {"type": type(model).__name__}
    if isinstance(model, Model):
        description["id"] = model.id
    description["fields"] = {key: describe_value(value) for key, value in model.snapshot.items()}
    return description


class MarshalService(BaseService):
    """Decodes JSON payloads against the model registry."""

    def _decode_root(self, op: str, text: str) -> AbstractModel | ServiceResult:
        try:
            root = decode_payload(text, self._session)
        except PagarMeError as exc:
            return self._failure(op, exc)

        if not isinstance(root, AbstractModel):
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="invalid_format",
                    message=f"Payload root must be a JSON object, got {type(root).__name__}",
                ),
            )
        return root

    def inspect(self, text: str) -> ServiceResult:
        """Decode *text* and describe the resulting model tree."""
        root = self._decode_root("inspect", text)
        if isinstance(root, ServiceResult):
            return root

        warnings: list[str] = []
        discriminator = root.snapshot.get("object")
        if discriminator is not None and not (
            isinstance(discriminator, str) and discriminator in MODEL_REGISTRY
        ):
            warnings.append(f"Unknown object type {discriminator!r}; decoded generically")

        return ServiceResult(
            ok=True,
            op="inspect",
            data=describe_model(root),
            warnings=warnings,
        )

    def export(self, text: str, *, full: bool = True) -> ServiceResult:
        """Decode *text* and return its exported field mapping.

        A freshly decoded model has no local changes, so the patch view
        (``full=False``) is always empty.
        """
        root = self._decode_root("export", text)
        if isinstance(root, ServiceResult):
            return root

        try:
            fields = root.get_fields(full)
        except PagarMeError as exc:
            return self._failure("export", exc)

        return ServiceResult(
            ok=True,
            op="export",
            data={
                "type": type(root).__name__,
                "mode": "full" if full else "patch",
                "fields": fields,
            },
        )
