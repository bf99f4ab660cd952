"""PagarMeService — the session context shared by a graph of models.

Every model is bound to one service at construction; models decoded
from it, or created by coercion, inherit the same service. A model
built without one falls back to the process-wide default returned by
:func:`get_default_service`.

INVARIANT: the default service is created at most once per process.
After the first :func:`get_default_service` call it can no longer be
replaced.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from pagarme.config.settings import PagarMeSettings
from pagarme.errors import ServiceConfigurationError
from pagarme.infrastructure.query import PagarMeQuery

if TYPE_CHECKING:
    from pagarme.infrastructure.query import QueryExecutor

logger = logging.getLogger(__name__)


class PagarMeService:
    """Credentials, settings, and the transport used by models.

    Args:
        settings: Resolved settings; loaded from env/TOML when omitted.
        executor: Transport for API calls. Without one, models can be
            decoded and encoded but not saved or refreshed.
        api_key: Overrides ``settings.api_key``.
        encryption_key: Overrides ``settings.encryption_key``.
    """

    def __init__(
        self,
        settings: PagarMeSettings | None = None,
        *,
        executor: QueryExecutor | None = None,
        api_key: str | None = None,
        encryption_key: str | None = None,
    ) -> None:
        self._settings = settings or PagarMeSettings.from_cli()
        self._executor = executor
        self._api_key = api_key if api_key is not None else self._settings.api_key
        self._encryption_key = (
            encryption_key if encryption_key is not None else self._settings.encryption_key
        )

    @property
    def settings(self) -> PagarMeSettings:
        return self._settings

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def encryption_key(self) -> str:
        return self._encryption_key

    @property
    def executor(self) -> QueryExecutor | None:
        return self._executor

    @property
    def endpoint(self) -> str:
        """Base URL every query path is relative to."""
        return self._settings.api.endpoint.rstrip("/")

    @property
    def timeout_seconds(self) -> float:
        return self._settings.api.timeout_seconds

    def query(self, method: str, path: str) -> PagarMeQuery:
        """Start a query against *path*, relative to the API endpoint."""
        return PagarMeQuery(self, method, path)

    def __repr__(self) -> str:
        transport = type(self._executor).__name__ if self._executor else "none"
        return f"<PagarMeService endpoint={self.endpoint} executor={transport}>"


_default_service: PagarMeService | None = None
_default_lock = threading.Lock()


def get_default_service() -> PagarMeService:
    """Return the process-wide default service, creating it on first use."""
    global _default_service
    with _default_lock:
        if _default_service is None:
            logger.debug("Creating default PagarMeService from settings")
            _default_service = PagarMeService()
        return _default_service


def configure_default_service(service: PagarMeService) -> None:
    """Install *service* as the process-wide default.

    Raises:
        ServiceConfigurationError: A default service already exists.
    """
    global _default_service
    with _default_lock:
        if _default_service is not None:
            raise ServiceConfigurationError(
                "The default PagarMeService is already in use and cannot be replaced"
            )
        _default_service = service


def _reset_default_service() -> None:
    """Forget the default service. Test isolation only."""
    global _default_service
    with _default_lock:
        _default_service = None
