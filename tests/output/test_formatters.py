"""Tests for human and JSON result formatting."""

import json

from pagarme.output.formatters import format_result
from pagarme.services.result import ServiceError, ServiceResult


class TestFormatResult:
    def test_success_human(self) -> None:
        result = ServiceResult(
            ok=True,
            op="export",
            data={"type": "Plan", "fields": {"amount": 3190}},
        )
        assert format_result(result) == (
            'OK: export\n  type: Plan\n  fields: {"amount":3190}'
        )

    def test_success_quiet(self) -> None:
        result = ServiceResult(ok=True, op="export", data={"type": "Plan"})
        assert format_result(result, quiet=True) == "OK: export"

    def test_failure_human(self) -> None:
        result = ServiceResult(
            ok=False,
            op="inspect",
            error=ServiceError(code="decode_error", message="Malformed JSON payload"),
        )
        assert format_result(result) == "ERROR: inspect: Malformed JSON payload"

    def test_failure_without_error(self) -> None:
        result = ServiceResult(ok=False, op="inspect")
        assert format_result(result) == "ERROR: inspect: Unknown error"

    def test_json(self) -> None:
        result = ServiceResult(ok=True, op="inspect", warnings=["careful"])
        parsed = json.loads(format_result(result, json_output=True))
        assert parsed["ok"] is True
        assert parsed["warnings"] == ["careful"]
        assert parsed["error"] is None
