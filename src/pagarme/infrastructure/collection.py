"""PagarMeQueryable — read access to one API resource collection."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from pagarme.domain.base import Model, decode_payload
from pagarme.domain.fields import ArrayOf, ModelOf, coerce
from pagarme.errors import DecodeError

if TYPE_CHECKING:
    from pagarme.infrastructure.service import PagarMeService

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Model)


class PagarMeQueryable(Generic[T]):
    """Finder for a model class, bound to one session.

    Usage::

        transactions = PagarMeQueryable(service, Transaction)
        tx = transactions.find(1234)
        paid = transactions.find_all(status="paid", count=50)
    """

    def __init__(self, service: PagarMeService, model_cls: type[T]) -> None:
        self._service = service
        self._model_cls = model_cls

    @property
    def model_cls(self) -> type[T]:
        return self._model_cls

    @property
    def endpoint(self) -> str:
        return self._model_cls.ENDPOINT

    def build(self) -> T:
        """Return a new, unsaved model bound to this collection's session."""
        return self._model_cls(service=self._service)

    def find(self, model_id: Any) -> T:
        """Fetch a single resource by id."""
        query = self._service.query("GET", f"{self.endpoint}/{model_id}")
        model = self.build()
        model.load_from_json(query.execute())
        return model

    def find_all(self, page: int = 1, count: int = 10, **filters: Any) -> list[T]:
        """Fetch one page of resources matching *filters*.

        Raises:
            DecodeError: The response is not a JSON array.
        """
        query = self._service.query("GET", self.endpoint)
        query.add_query("page", page)
        query.add_query("count", count)
        query.add_fields(filters)

        decoded = decode_payload(query.execute(), self._service)
        if not isinstance(decoded, list):
            raise DecodeError(
                f"Expected a JSON array from {self.endpoint}, got {type(decoded).__name__}"
            )
        logger.debug("Fetched %d %s on page %d", len(decoded), self.endpoint, page)
        return coerce(ArrayOf(ModelOf(self._model_cls)), decoded, self._service)

    def iterate(self, count: int = 10, **filters: Any) -> Iterator[T]:
        """Yield every matching resource, page by page, until a short page.

        Raises:
            ValueError: *count* is smaller than 1.
        """
        if count < 1:
            raise ValueError(f"count must be at least 1, got {count}")

        page = 1
        while True:
            batch = self.find_all(page=page, count=count, **filters)
            yield from batch
            if len(batch) < count:
                return
            page += 1

    def __iter__(self) -> Iterator[T]:
        return self.iterate()

    def __repr__(self) -> str:
        return f"<PagarMeQueryable {self._model_cls.__name__}>"
