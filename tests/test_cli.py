"""Tests for the command line interface."""

import json

from paymill_models.cli.main import cli


def test_kinds(cli_runner):
    """Test listing resource kinds."""
    result = cli_runner.invoke(cli, ["kinds"])
    assert result.exit_code == 0
    kinds = result.output.split()
    assert "transaction" in kinds
    assert "refund" in kinds


def test_schema(cli_runner):
    """Test showing a schema."""
    result = cli_runner.invoke(cli, ["schema", "Transaction"])
    assert result.exit_code == 0
    assert "transaction:" in result.output
    assert "nested-list (refund)" in result.output
    assert "nested (payment) [required]" in result.output
    assert "origin_amount" in result.output


def test_schema_unknown_kind(cli_runner):
    """Test showing an unknown schema."""
    result = cli_runner.invoke(cli, ["schema", "chargeback"])
    assert result.exit_code == 1
    assert "Unknown resource kind 'chargeback'" in result.output


def test_map_envelope(cli_runner, fixtures_dir):
    """Test mapping a transaction response file."""
    result = cli_runner.invoke(
        cli, ["map", "transaction", str(fixtures_dir / "transaction.json")]
    )
    assert result.exit_code == 0
    assert "amount: '4200' (42.00 EUR)" in result.output
    assert "response_code: 20000 (General success response)" in result.output
    assert "refunds: [2]" in result.output
    assert "payment: <payment>" in result.output
    assert "preauthorization" not in result.output


def test_map_json_output(cli_runner, fixtures_dir):
    """Test re-serializing a mapped list response."""
    result = cli_runner.invoke(
        cli, ["map", "refund", str(fixtures_dir / "refunds.json"), "--json"]
    )
    assert result.exit_code == 0
    payloads = json.loads(result.output)
    assert [p["amount"] for p in payloads] == [1000, 500]


def test_map_stdin(cli_runner, transaction_payload):
    """Test mapping a bare payload from standard input."""
    result = cli_runner.invoke(
        cli,
        ["map", "transaction", "-", "--json"],
        input=json.dumps(transaction_payload),
    )
    assert result.exit_code == 0
    assert json.loads(result.output) == transaction_payload


def test_map_missing_payment(cli_runner, transaction_payload):
    """Test that schema mismatches are reported as errors."""
    del transaction_payload["payment"]
    result = cli_runner.invoke(
        cli, ["map", "transaction", "-"], input=json.dumps(transaction_payload)
    )
    assert result.exit_code == 1
    assert "Required field 'transaction.payment' is missing or null" in result.output


def test_map_error_envelope(cli_runner, fixtures_dir):
    """Test mapping an API error response."""
    result = cli_runner.invoke(
        cli, ["map", "transaction", str(fixtures_dir / "error.json")]
    )
    assert result.exit_code == 1
    assert "Error: Transaction not found" in result.output


def test_map_invalid_json(cli_runner):
    """Test mapping a file that is not JSON."""
    result = cli_runner.invoke(cli, ["map", "transaction", "-"], input="{not json")
    assert result.exit_code == 1
    assert "Invalid JSON" in result.output


def test_map_empty_list(cli_runner):
    """Test mapping an empty list."""
    result = cli_runner.invoke(cli, ["map", "refund", "-"], input="[]")
    assert result.exit_code == 0
    assert "No refund records found." in result.output


def test_code(cli_runner):
    """Test describing a response code."""
    result = cli_runner.invoke(cli, ["code", "50102"])
    assert result.exit_code == 0
    assert "50102: Card declined by authorization system (failure)" in result.output


def test_log_level_from_environment(cli_runner):
    """Test that the log level can come from the environment."""
    result = cli_runner.invoke(
        cli, ["kinds"], env={"PAYMILL_MODELS_LOG_LEVEL": "debug"}
    )
    assert result.exit_code == 0


def test_invalid_log_level(cli_runner):
    """Test that unknown log levels are rejected."""
    result = cli_runner.invoke(cli, ["--log-level", "LOUD", "kinds"])
    assert result.exit_code == 2


def test_map_out_of_range_timestamp(cli_runner, transaction_payload):
    """Test that unrenderable timestamps are shown as sent."""
    transaction_payload["created_at"] = 10**20
    result = cli_runner.invoke(
        cli, ["map", "transaction", "-"], input=json.dumps(transaction_payload)
    )
    assert result.exit_code == 0
    assert "created_at: 100000000000000000000\n" in result.output
