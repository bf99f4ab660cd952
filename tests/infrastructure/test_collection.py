"""Tests for PagarMeQueryable."""

from typing import Any

import pytest

from pagarme.domain.plan import Plan
from pagarme.domain.transaction import Transaction
from pagarme.errors import DecodeError
from pagarme.infrastructure.collection import PagarMeQueryable
from pagarme.infrastructure.service import PagarMeService


@pytest.fixture
def transactions(session: PagarMeService) -> PagarMeQueryable[Transaction]:
    return PagarMeQueryable(session, Transaction)


class TestFind:
    def test_find(
        self,
        transactions: PagarMeQueryable[Transaction],
        executor: Any,
        transaction_payload: dict[str, Any],
    ) -> None:
        executor.queue(transaction_payload)
        tx = transactions.find(1234)
        assert executor.last_call == ("GET", "transactions/1234", {})
        assert isinstance(tx, Transaction)
        assert tx.amount == 1000

    def test_build(
        self, transactions: PagarMeQueryable[Transaction], session: PagarMeService
    ) -> None:
        tx = transactions.build()
        assert isinstance(tx, Transaction)
        assert tx.loaded is False
        assert tx.service is session


class TestFindAll:
    def test_parameters(
        self, transactions: PagarMeQueryable[Transaction], executor: Any
    ) -> None:
        executor.queue([])
        transactions.find_all(page=2, count=50, status="paid")
        assert executor.last_call == (
            "GET",
            "transactions",
            {"page": "2", "count": "50", "status": "paid"},
        )

    def test_elements_typed(
        self, transactions: PagarMeQueryable[Transaction], executor: Any
    ) -> None:
        executor.queue([{"object": "transaction", "id": 1}, {"id": 2, "amount": "300"}])
        result = transactions.find_all()
        assert [type(tx) for tx in result] == [Transaction, Transaction]
        assert result[1].amount == 300

    def test_non_array_response(
        self, transactions: PagarMeQueryable[Transaction], executor: Any
    ) -> None:
        executor.queue({"errors": [{"message": "not found"}]})
        with pytest.raises(DecodeError, match="Expected a JSON array"):
            transactions.find_all()


class TestIterate:
    def test_pages_until_short_page(self, session: PagarMeService, executor: Any) -> None:
        plans = PagarMeQueryable(session, Plan)
        executor.queue([{"id": 1}, {"id": 2}])
        executor.queue([{"id": 3}])

        ids = [plan.id for plan in plans.iterate(count=2)]

        assert ids == [1, 2, 3]
        assert [call[2]["page"] for call in executor.calls] == ["1", "2"]

    def test_empty_last_page(self, session: PagarMeService, executor: Any) -> None:
        plans = PagarMeQueryable(session, Plan)
        executor.queue([{"id": 1}, {"id": 2}])
        executor.queue([])

        assert len(list(plans.iterate(count=2))) == 2
        assert len(executor.calls) == 2

    @pytest.mark.parametrize("count", [0, -1])
    def test_rejects_non_positive_count(
        self, session: PagarMeService, executor: Any, count: int
    ) -> None:
        plans = PagarMeQueryable(session, Plan)
        with pytest.raises(ValueError, match="count must be at least 1"):
            list(plans.iterate(count=count))
        assert executor.calls == []

    def test_dunder_iter(self, session: PagarMeService, executor: Any) -> None:
        plans = PagarMeQueryable(session, Plan)
        executor.queue([{"id": 1}])
        assert [plan.id for plan in plans] == [1]
        assert executor.last_call[2]["count"] == "10"


def test_repr(transactions: PagarMeQueryable[Transaction]) -> None:
    assert repr(transactions) == "<PagarMeQueryable Transaction>"
    assert transactions.endpoint == "transactions"
    assert transactions.model_cls is Transaction
