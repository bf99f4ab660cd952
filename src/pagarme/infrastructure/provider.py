"""PagarMeProvider — root object for accessing the Pagar.me API."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pagarme.domain.base import AbstractModel
from pagarme.domain.card import Card
from pagarme.domain.customer import Customer
from pagarme.domain.plan import Plan
from pagarme.domain.subscription import Subscription
from pagarme.domain.transaction import Transaction
from pagarme.infrastructure.collection import PagarMeQueryable
from pagarme.infrastructure.service import PagarMeService

if TYPE_CHECKING:
    from pagarme.config.settings import PagarMeSettings
    from pagarme.infrastructure.query import QueryExecutor


class PagarMeProvider:
    """Owns one session and exposes a collection per resource.

    Usage::

        provider = PagarMeProvider("ak_test_...", "ek_test_...", executor=transport)
        tx = provider.transactions.build()
        tx.amount = 1000
        tx.payment_method = PaymentMethod.BOLETO
        tx.save()
    """

    def __init__(
        self,
        api_key: str | None = None,
        encryption_key: str | None = None,
        *,
        executor: QueryExecutor | None = None,
        settings: PagarMeSettings | None = None,
    ) -> None:
        self._service = PagarMeService(
            settings,
            executor=executor,
            api_key=api_key,
            encryption_key=encryption_key,
        )
        self._transactions = PagarMeQueryable(self._service, Transaction)
        self._customers = PagarMeQueryable(self._service, Customer)
        self._cards = PagarMeQueryable(self._service, Card)
        self._plans = PagarMeQueryable(self._service, Plan)
        self._subscriptions = PagarMeQueryable(self._service, Subscription)

    @property
    def service(self) -> PagarMeService:
        return self._service

    @property
    def api_key(self) -> str:
        return self._service.api_key

    @property
    def encryption_key(self) -> str:
        return self._service.encryption_key

    @property
    def transactions(self) -> PagarMeQueryable[Transaction]:
        return self._transactions

    @property
    def customers(self) -> PagarMeQueryable[Customer]:
        return self._customers

    @property
    def cards(self) -> PagarMeQueryable[Card]:
        return self._cards

    @property
    def plans(self) -> PagarMeQueryable[Plan]:
        return self._plans

    @property
    def subscriptions(self) -> PagarMeQueryable[Subscription]:
        return self._subscriptions

    def post_transaction(self, fields: Mapping[str, Any] | AbstractModel) -> Transaction:
        """Create a transaction from raw setup *fields* and return it.

        A model is sent as its full field mapping. Field values are not
        validated client-side; the API rejects incomplete setups.
        """
        return self._post_setup("transactions", fields)

    def post_subscription(self, fields: Mapping[str, Any] | AbstractModel) -> Transaction:
        """Create a subscription from raw setup *fields*.

        The API answers with the subscription's first charge, which is
        returned as a :class:`Transaction`.
        """
        return self._post_setup("subscriptions", fields)

    def _post_setup(self, path: str, fields: Mapping[str, Any] | AbstractModel) -> Transaction:
        if isinstance(fields, AbstractModel):
            fields = fields.get_fields(full=True)

        query = self._service.query("POST", path)
        query.add_fields(fields)
        transaction = Transaction(service=self._service)
        transaction.load_from_json(query.execute())
        return transaction
