"""Exception hierarchy for the pagarme SDK.

Every error raised by the SDK derives from :class:`PagarMeError`.
Failures from an injected query executor are not wrapped; they
propagate to the caller unchanged.
"""

from __future__ import annotations

from typing import Any


class PagarMeError(Exception):
    """Base for all SDK errors."""


class DecodeError(PagarMeError, ValueError):
    """A payload could not be parsed into a model."""


class EncodeError(PagarMeError, ValueError):
    """Two fields of a model export to the same key."""


class CoercionError(PagarMeError, TypeError):
    """A value cannot be converted to a field's declared type."""

    def __init__(self, message: str, *, field_type: Any = None, value: Any = None) -> None:
        super().__init__(message)
        self.field_type = field_type
        self.value = value


class ServiceConfigurationError(PagarMeError):
    """The session context is incomplete or can no longer be changed."""


class MissingIdentityError(PagarMeError):
    """An id-based action was attempted on a model without an id."""
