"""Tests for the decode CLI command."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from annoguide.cli import cli


@pytest.mark.usefixtures("_isolated_cli")
class TestDecodeCommand:
    def test_from_file(
        self, cli_runner: CliRunner, tmp_path: Path, user_payload: dict[str, Any]
    ) -> None:
        path = tmp_path / "user.json"
        path.write_text(json.dumps(user_payload))
        result = cli_runner.invoke(cli, ["--json", "-v", "decode", "user", str(path)])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["data"]["entity"]["email"] == "Shanna@melissa.tv"
        assert data["meta"]["source"] == str(path)

    def test_from_stdin(self, cli_runner: CliRunner, post_payload: dict[str, Any]) -> None:
        result = cli_runner.invoke(cli, ["--json", "decode", "post"], input=json.dumps(post_payload))
        assert result.exit_code == 0
        assert json.loads(result.stdout)["meta"]["source"] == "<stdin>"

    @pytest.mark.parametrize("strategy", ["validate", "construct"])
    def test_violation_same_for_both_strategies(
        self, cli_runner: CliRunner, user_payload: dict[str, Any], strategy: str
    ) -> None:
        user_payload["email"] = "john@@example"
        result = cli_runner.invoke(
            cli,
            ["--json", "decode", "user", "--strategy", strategy],
            input=json.dumps(user_payload),
        )
        assert result.exit_code == 1
        payload = json.loads(result.stderr)
        assert payload["error"]["code"] == "CONSTRAINT_VIOLATION"
        assert payload["error"]["detail"]["field"] == "email"
        assert payload["meta"]["strategy"] == strategy

    def test_human_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["decode", "address"], input='{"street": "s", "city": "c", "zipcode": "12345"}'
        )
        assert result.exit_code == 1
        assert "Regex does not match: zipcode = 12345" in result.stderr
        assert "pattern: \\d{5}-\\d{4}" in result.stderr

    def test_unknown_kind_rejected_by_click(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["decode", "comment"], input="{}")
        assert result.exit_code == 2
