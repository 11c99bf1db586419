"""Tests for the fintrack command line interface."""

from __future__ import annotations

import json

import pytest
from click import BadParameter
from click.testing import CliRunner

from fintrack.cli import main, parse_debt


@pytest.fixture
def runner(monkeypatch):
    monkeypatch.setenv("FINTRACK_DEV_MODE", "false")
    return CliRunner()


class TestParseDebt:
    def test_parses_fields(self):
        debt = parse_debt("Credit Card:50000:0.42:5000", 1)

        assert debt.id == "1"
        assert debt.name == "Credit Card"
        assert debt.balance == 50000
        assert debt.apr == 0.42
        assert debt.min_payment == 5000

    def test_name_may_contain_colons(self):
        assert parse_debt("Card: HDFC:100:0.3:10", 2).name == "Card: HDFC"

    @pytest.mark.parametrize(
        "value",
        ["nonsense", "Card:abc:0.1:10", "Card:100:1.5:10", "Card:-5:0.1:10", "Card:100:0.1:0"],
    )
    def test_rejects_out_of_range(self, value):
        with pytest.raises(BadParameter):
            parse_debt(value, 1)


class TestPayoffCommand:
    def test_prints_simulation_json(self, runner):
        result = runner.invoke(
            main,
            ["payoff", "--debt", "Card:1000:0:100", "--strategy", "snowball", "--extra", "100"],
        )

        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert payload["strategy"] == "snowball"
        assert payload["totalMonths"] == 5
        assert payload["debts"][0]["monthlyBreakdown"][0]["payment"] == 200.0

    def test_summary_drops_breakdown(self, runner):
        result = runner.invoke(main, ["payoff", "--debt", "Card:1000:0.12:100", "--summary"])

        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert "monthlyBreakdown" not in payload["debts"][0]

    def test_invalid_strategy(self, runner):
        result = runner.invoke(main, ["payoff", "--debt", "Card:1000:0.12:100", "--strategy", "bogus"])

        assert result.exit_code != 0

    def test_bad_debt_is_usage_error(self, runner):
        result = runner.invoke(main, ["payoff", "--debt", "Card:1000:12:100"])

        assert result.exit_code == 2
        assert "apr must be a fraction" in result.output


class TestCompareCommand:
    def test_prints_recommendation(self, runner):
        result = runner.invoke(
            main,
            [
                "compare",
                "--debt", "card:100000:0.36:3000",
                "--debt", "loan:10000:0.05:500",
                "--extra", "5000",
            ],
        )

        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert payload["recommendation"] == "avalanche"
        assert payload["interestDifference"] > 1000


class TestAlertsCommand:
    def test_negative_cashflow_alert(self, runner):
        result = runner.invoke(
            main,
            ["alerts", "--income", "50000", "--expenses", "45000", "--emi", "15000", "--liquid", "600000"],
        )

        assert result.exit_code == 0, result.output
        ids = [alert["id"] for alert in json.loads(result.output)]
        assert ids[0] == "negative-cashflow"
        assert "low-savings-rate" not in ids

    def test_bad_allocation(self, runner):
        result = runner.invoke(main, ["alerts", "--income", "1", "--allocation", "equity"])

        assert result.exit_code == 2
