"""PagarMeQuery — request builder over an injected query executor.

The SDK never performs HTTP itself. A :class:`QueryExecutor` receives a
method, a path relative to the API endpoint, and flat string
parameters, and returns the raw JSON response text.

Nested field mappings are flattened to bracket notation::

    {"customer": {"address": {"street": "Rua A"}}}
        -> {"customer[address][street]": "Rua A"}
    {"payment_methods": ["boleto", "credit_card"]}
        -> {"payment_methods[0]": "boleto", "payment_methods[1]": "credit_card"}
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol

from pagarme.errors import ServiceConfigurationError

if TYPE_CHECKING:
    from pagarme.infrastructure.service import PagarMeService

logger = logging.getLogger(__name__)


class QueryExecutor(Protocol):
    """Transport contract consumed by the SDK.

    *path* is relative to :attr:`PagarMeService.endpoint`; a transport
    built for a session joins the two (see :attr:`PagarMeQuery.url`) and
    applies :attr:`PagarMeService.timeout_seconds` to each request.
    """

    def execute(self, method: str, path: str, parameters: dict[str, str]) -> str:
        """Perform the request and return the response body as JSON text."""
        ...


def format_scalar(value: Any) -> str:
    """Render a scalar as a query parameter value."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def flatten_parameters(fields: Mapping[str, Any], prefix: str = "") -> dict[str, str]:
    """Flatten an exported field mapping into bracket-notation parameters."""
    flat: dict[str, str] = {}
    for key, value in fields.items():
        name = f"{prefix}[{key}]" if prefix else str(key)
        flat.update(_flatten_value(name, value))
    return flat


def _flatten_value(name: str, value: Any) -> dict[str, str]:
    if isinstance(value, Mapping):
        return flatten_parameters(value, name)
    if isinstance(value, (list, tuple)):
        flat: dict[str, str] = {}
        for index, item in enumerate(value):
            flat.update(_flatten_value(f"{name}[{index}]", item))
        return flat
    return {name: format_scalar(value)}


class PagarMeQuery:
    """A single API call: method, path, and accumulated parameters.

    Usage::

        query = service.query("POST", "transactions")
        query.add_fields(transaction.get_fields())
        body = query.execute()
    """

    def __init__(self, service: PagarMeService, method: str, path: str) -> None:
        self._service = service
        self.method = method.upper()
        self.path = path.strip("/")
        self._parameters: dict[str, str] = {}

    @property
    def parameters(self) -> dict[str, str]:
        return dict(self._parameters)

    @property
    def url(self) -> str:
        """Absolute URL of the call under the session's endpoint."""
        return f"{self._service.endpoint}/{self.path}"

    @property
    def timeout_seconds(self) -> float:
        return self._service.timeout_seconds

    def add_query(self, key: str, value: Any) -> PagarMeQuery:
        """Add one parameter; nested values are flattened under *key*."""
        self._parameters.update(_flatten_value(key, value))
        return self

    def add_fields(self, fields: Mapping[str, Any]) -> PagarMeQuery:
        """Add every entry of an exported field mapping."""
        self._parameters.update(flatten_parameters(fields))
        return self

    def execute(self) -> str:
        """Run the query through the session's executor.

        Raises:
            ServiceConfigurationError: The session has no executor.
        """
        executor = self._service.executor
        if executor is None:
            raise ServiceConfigurationError(
                f"No query executor configured for {self.method} {self.path}"
            )

        logger.debug(
            "Executing %s %s with %d parameters (timeout %ss)",
            self.method,
            self.url,
            len(self._parameters),
            self.timeout_seconds,
        )
        body = executor.execute(self.method, self.path, dict(self._parameters))
        logger.debug("Received %d bytes for %s %s", len(body), self.method, self.path)
        return body

    def __repr__(self) -> str:
        return f"<PagarMeQuery {self.method} {self.path}>"
