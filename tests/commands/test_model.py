"""Tests for the model command group."""

import json
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from pagarme.cli import cli


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run each CLI invocation from an isolated directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def transaction_file(workdir: Path, transaction_payload: dict[str, Any]) -> Path:
    path = workdir / "transaction.json"
    path.write_text(json.dumps(transaction_payload))
    return path


class TestModelGroup:
    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["model", "--examples"])
        assert result.exit_code == 0
        assert "pagarme model inspect transaction.json" in result.output

    def test_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["model", "--help"])
        assert result.exit_code == 0
        assert "inspect" in result.output
        assert "export" in result.output


class TestInspectCommand:
    def test_human_output(self, cli_runner: CliRunner, transaction_file: Path) -> None:
        result = cli_runner.invoke(cli, ["model", "inspect", str(transaction_file)])
        assert result.exit_code == 0
        assert "OK: inspect" in result.output
        assert "type: Transaction" in result.output

    def test_json_output(self, cli_runner: CliRunner, transaction_file: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "model", "inspect", str(transaction_file)])
        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert payload["ok"] is True
        assert payload["data"]["fields"]["card"]["type"] == "Card"

    def test_quiet(self, cli_runner: CliRunner, transaction_file: Path) -> None:
        result = cli_runner.invoke(cli, ["-q", "model", "inspect", str(transaction_file)])
        assert result.exit_code == 0
        assert result.output.strip() == "OK: inspect"

    def test_unknown_type_warns(self, cli_runner: CliRunner, workdir: Path) -> None:
        path = workdir / "payable.json"
        path.write_text('{"object": "payable", "id": 9}')
        result = cli_runner.invoke(cli, ["model", "inspect", str(path)])
        assert result.exit_code == 0
        assert "WARNING: Unknown object type 'payable'" in result.output

    def test_malformed_file(self, cli_runner: CliRunner, workdir: Path) -> None:
        path = workdir / "broken.json"
        path.write_text('{"object": ')
        result = cli_runner.invoke(cli, ["model", "inspect", str(path)])
        assert result.exit_code == 1
        assert "ERROR: inspect: Malformed JSON payload" in result.output

    def test_missing_file(self, cli_runner: CliRunner, workdir: Path) -> None:
        result = cli_runner.invoke(cli, ["model", "inspect", str(workdir / "absent.json")])
        assert result.exit_code == 2


class TestExportCommand:
    def test_defaults_to_patch(self, cli_runner: CliRunner, transaction_file: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "model", "export", str(transaction_file)])
        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert payload["data"]["mode"] == "patch"
        assert payload["data"]["fields"] == {}

    def test_full_mode(self, cli_runner: CliRunner, transaction_file: Path) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "model", "export", str(transaction_file), "--mode", "full"]
        )
        assert result.exit_code == 0
        fields = json.loads(result.output)["data"]["fields"]
        assert fields["card_id"] == "card_ci6l9fx8f0042rt16rtb477gj"
        assert fields["customer"]["id"] == 11222
        assert fields["metadata"] == {"order_id": "ord_1"}

    def test_config_full_payloads(
        self, cli_runner: CliRunner, workdir: Path, transaction_file: Path
    ) -> None:
        (workdir / "pagarme.toml").write_text("[serialization]\nfull_payloads = true\n")
        result = cli_runner.invoke(cli, ["--json", "model", "export", str(transaction_file)])
        assert result.exit_code == 0
        assert json.loads(result.output)["data"]["mode"] == "full"

    def test_mode_flag_beats_config(
        self, cli_runner: CliRunner, workdir: Path, transaction_file: Path
    ) -> None:
        config = workdir / "custom.toml"
        config.write_text("[serialization]\nfull_payloads = true\n")
        result = cli_runner.invoke(
            cli,
            [
                "--json",
                "-c",
                str(config),
                "model",
                "export",
                str(transaction_file),
                "--mode",
                "patch",
            ],
        )
        assert result.exit_code == 0
        assert json.loads(result.output)["data"]["mode"] == "patch"

    def test_invalid_mode(self, cli_runner: CliRunner, transaction_file: Path) -> None:
        result = cli_runner.invoke(
            cli, ["model", "export", str(transaction_file), "--mode", "diff"]
        )
        assert result.exit_code == 2

    def test_json_failure(self, cli_runner: CliRunner, workdir: Path) -> None:
        path = workdir / "list.json"
        path.write_text("[1, 2]")
        result = cli_runner.invoke(cli, ["--json", "model", "export", str(path)])
        assert result.exit_code == 1
        payload = json.loads(result.output)
        assert payload["ok"] is False
        assert payload["error"]["code"] == "invalid_format"
