from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from physcalc.cli.main import cli
from physcalc.evaluator import SAMPLE_INPUTS

pytestmark = pytest.mark.usefixtures("clean_settings")


def test_cli_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "eval" in result.output
    assert "demo" in result.output


def test_eval_prints_formatted_quantity() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["eval", "15 N m * 12 kg * 92"], catch_exceptions=False)
    assert result.exit_code == 0
    assert result.output.strip() == "16560 kg^2 m^2 s^-2"


def test_eval_multiple_expressions() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["eval", "3 s", "(23 + 58)"], catch_exceptions=False)
    assert result.exit_code == 0
    assert result.output.splitlines() == ["3 s", "81 dimensionless"]


def test_eval_reports_errors_and_exits_nonzero() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["eval", "(3 m + 4 kg)"])
    assert result.exit_code == 1
    assert 'error[adding-different-units]' in result.output
    assert '(input: "(3 m + 4 kg)")' in result.output


def test_eval_json_output() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["eval", "--output", "json", "12 kg m^2", "3 m @"])
    assert result.exit_code == 1
    payload = json.loads(result.output)
    assert payload[0]["ok"] is True
    assert payload[0]["unit"] == "kg m^2"
    assert payload[1]["error"]["code"] == "parse-error"


def test_eval_output_defaults_to_environment(monkeypatch) -> None:
    monkeypatch.setenv("PHYSCALC_OUTPUT", "json")
    runner = CliRunner()
    result = runner.invoke(cli, ["eval", "3 m"], catch_exceptions=False)
    assert json.loads(result.output)[0]["display"] == "3 m"


def test_eval_tree_prints_parsed_expression() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["eval", "--tree", "(1 m + 2 m) * 3"], catch_exceptions=False)
    assert result.exit_code == 0
    assert result.output.splitlines() == ["((1 m + 2 m) * 3)", "9 m"]


def test_eval_lenient_units() -> None:
    runner = CliRunner()
    strict = runner.invoke(cli, ["eval", "5 foo"])
    assert strict.exit_code == 1
    assert "error[unknown-unit]" in strict.output

    lenient = runner.invoke(cli, ["eval", "--lenient-units", "5 foo"], catch_exceptions=False)
    assert lenient.exit_code == 0
    assert "5 dimensionless" in lenient.output.splitlines()


def test_demo_lists_every_sample() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["demo"], catch_exceptions=False)
    assert result.exit_code == 0
    for text in SAMPLE_INPUTS:
        assert f'Input: "{text}" => result:' in result.output
    assert 'Input: "(23 + 58)" => result: 81 dimensionless' in result.output


def test_units_lists_table() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["units"], catch_exceptions=False)
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert len(lines) == 22
    assert lines[0].split()[:3] == ["s", "s", "Time"]
    assert any(line.split()[:3] == ["ohm", "Ω", "ElectricalResistance"] for line in lines)


def test_unknown_log_level_is_a_usage_error() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--log-level", "bogus", "eval", "3 m"])
    assert result.exit_code == 2
    assert "--log-level" in result.output
    assert not isinstance(result.exception, ValueError)


def test_log_level_override_is_case_insensitive() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--log-level", "error", "eval", "3 m"], catch_exceptions=False)
    assert result.exit_code == 0
    assert result.output.splitlines()[-1] == "3 m"


def test_eval_tree_renders_long_operator_chain() -> None:
    text = " + ".join(["1 m"] * 3000)
    runner = CliRunner()
    result = runner.invoke(cli, ["eval", "--tree", text], catch_exceptions=False)
    assert result.exit_code == 0
    assert result.output.splitlines() == [f"({text})", "3000 m"]
