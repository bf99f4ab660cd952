"""BaseService — abstract foundation for pagarme services.

Every service receives a :class:`PagarMeService` session at construction
time and builds all of its models against it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pagarme.errors import CoercionError, DecodeError, EncodeError, PagarMeError
from pagarme.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from pagarme.infrastructure.service import PagarMeService

logger = logging.getLogger(__name__)

_ERROR_CODES: dict[type[PagarMeError], str] = {
    DecodeError: "decode_error",
    CoercionError: "coercion_error",
    EncodeError: "encode_error",
}


class BaseService:
    """Abstract base for service-layer classes.

    Usage::

        class MarshalService(BaseService):
            def inspect(self, text: str) -> ServiceResult:
                ...
    """

    def __init__(self, session: PagarMeService) -> None:
        self._session = session

    @staticmethod
    def _failure(op: str, exc: PagarMeError) -> ServiceResult:
        """Convert an SDK error into a failed ServiceResult."""
        code = next(
            (code for cls, code in _ERROR_CODES.items() if isinstance(exc, cls)),
            "pagarme_error",
        )
        logger.debug("%s failed with %s: %s", op, code, exc)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(
                code=code,
                message=str(exc),
                detail={"exception": type(exc).__name__},
            ),
        )
