"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, pagarme.toml only contains
overrides. The sections are composed by ``PagarMeSettings``; credentials
usually come from ``PAGARME_API_KEY`` and ``PAGARME_ENCRYPTION_KEY``
rather than the file.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_ENDPOINT = "https://api.pagar.me/1"


class ApiConfig(BaseModel):
    """[api] section."""

    model_config = {"frozen": True}

    endpoint: str = DEFAULT_ENDPOINT
    timeout_seconds: float = Field(default=30.0, gt=0)


class SerializationConfig(BaseModel):
    """[serialization] section."""

    model_config = {"frozen": True}

    full_payloads: bool = False

