"""Tests for CLI commands."""

import json

import pytest

from retireplan.cli.main import cli


def test_help_lists_commands(cli_runner):
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    for command in ("totals", "project", "score", "loan", "pension"):
        assert command in result.output


def test_totals(cli_runner, items_csv):
    result = cli_runner.invoke(cli, ["totals", items_csv])

    assert result.exit_code == 0
    assert "Income (monthly)" in result.output
    assert "Net worth" in result.output
    assert "210,000" in result.output


def test_totals_owner_filter(cli_runner, items_csv):
    result = cli_runner.invoke(cli, ["totals", items_csv, "--owner", "spouse"])

    assert result.exit_code == 0
    assert "-50,000" in result.output


def test_totals_missing_file(cli_runner, tmp_path):
    result = cli_runner.invoke(cli, ["totals", str(tmp_path / "nope.csv")])

    assert result.exit_code == 1
    assert "not found" in result.output


def test_totals_reports_bad_rows(cli_runner, tmp_path):
    path = tmp_path / "items.csv"
    path.write_text("category,amount\nincome,100\nsalary,200\n", encoding="utf-8")

    result = cli_runner.invoke(cli, ["totals", str(path)])

    assert result.exit_code == 0
    assert "Warning: Row 3" in result.output


def test_totals_empty(cli_runner, tmp_path):
    path = tmp_path / "items.csv"
    path.write_text("category,amount\n", encoding="utf-8")

    result = cli_runner.invoke(cli, ["totals", str(path)])

    assert result.exit_code == 0
    assert "No items found" in result.output


def test_project_table(cli_runner, items_csv):
    result = cli_runner.invoke(
        cli,
        ["project", items_csv, "--current-age", "59", "--retirement-age", "60",
         "--life-expectancy", "61"],
    )

    assert result.exit_code == 0
    assert "Retirement Projection" in result.output
    assert "12,900" in result.output
    assert "12,297" in result.output
    assert "Assets last through age 61" in result.output


def test_project_depletion(cli_runner, tmp_path):
    path = tmp_path / "items.csv"
    path.write_text("category,amount\nasset,2000\nexpense,100\n", encoding="utf-8")

    result = cli_runner.invoke(
        cli,
        ["project", str(path), "--current-age", "50", "--retirement-age", "50",
         "--return-rate", "0", "--inflation-rate", "0%"],
    )

    assert result.exit_code == 0
    assert "Assets run out at age 51" in result.output


def test_project_json(cli_runner, items_csv):
    result = cli_runner.invoke(
        cli,
        ["project", items_csv, "--current-age", "59", "--retirement-age", "60",
         "--life-expectancy", "61", "--json"],
    )

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["assumptions"]["retirement_age"] == 60
    assert data["simulation"][0]["assets"] == 12900


def test_project_export(cli_runner, items_csv, tmp_path):
    export_path = tmp_path / "out.csv"
    result = cli_runner.invoke(
        cli,
        ["project", items_csv, "--current-age", "59", "--retirement-age", "60",
         "--life-expectancy", "61", "--export", str(export_path)],
    )

    assert result.exit_code == 0
    assert "Exported 3 rows" in result.output
    assert export_path.read_text(encoding="utf-8").startswith("age,year,assets,income,expense")


def test_project_current_assets_override(cli_runner, items_csv):
    result = cli_runner.invoke(
        cli,
        ["project", items_csv, "--current-age", "59", "--retirement-age", "60",
         "--life-expectancy", "59", "--current-assets", "20000"],
    )

    assert result.exit_code == 0
    # 20000 * 1.05 + 4800 - 2400
    assert "23,400" in result.output


def test_project_past_life_expectancy(cli_runner, items_csv):
    result = cli_runner.invoke(
        cli,
        ["project", items_csv, "--current-age", "70", "--retirement-age", "60",
         "--life-expectancy", "65"],
    )

    assert result.exit_code == 0
    assert "Nothing to project" in result.output


def test_project_uses_environment_defaults(cli_runner, items_csv, monkeypatch):
    monkeypatch.setenv("RETIREPLAN_LIFE_EXPECTANCY", "60")

    result = cli_runner.invoke(
        cli, ["project", items_csv, "--current-age", "59", "--retirement-age", "60"]
    )

    assert result.exit_code == 0
    assert "Assets last through age 60" in result.output


def test_project_invalid_environment(cli_runner, items_csv, monkeypatch):
    monkeypatch.setenv("RETIREPLAN_RETURN_RATE", "lots")

    result = cli_runner.invoke(
        cli, ["project", items_csv, "--current-age", "59", "--retirement-age", "60"]
    )

    assert result.exit_code == 1
    assert "Error:" in result.output


def test_project_requires_age(cli_runner, items_csv):
    result = cli_runner.invoke(cli, ["project", items_csv, "--retirement-age", "60"])

    assert result.exit_code == 1
    assert "--birth-date or --current-age" in result.output


def test_project_rejects_both_ages(cli_runner, items_csv):
    result = cli_runner.invoke(
        cli,
        ["project", items_csv, "--birth-date", "1966-01-01", "--current-age", "59",
         "--retirement-age", "60"],
    )

    assert result.exit_code == 1
    assert "cannot be combined" in result.output


def test_project_invalid_birth_date(cli_runner, items_csv):
    result = cli_runner.invoke(
        cli, ["project", items_csv, "--birth-date", "someday", "--retirement-age", "60"]
    )

    assert result.exit_code == 1
    assert "Invalid birth date" in result.output


def test_project_invalid_rate(cli_runner, items_csv):
    result = cli_runner.invoke(
        cli,
        ["project", items_csv, "--current-age", "59", "--retirement-age", "60",
         "--return-rate", "high"],
    )

    assert result.exit_code == 1
    assert "Could not parse rate" in result.output


@pytest.mark.parametrize("rate", ["nan", "inf", "1e999"])
def test_project_rejects_non_finite_rate(cli_runner, items_csv, rate):
    result = cli_runner.invoke(
        cli,
        ["project", items_csv, "--current-age", "40", "--retirement-age", "60",
         "--return-rate", rate],
    )

    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert "Could not parse rate" in result.output


def test_score(cli_runner, items_csv):
    result = cli_runner.invoke(
        cli,
        ["score", items_csv, "--current-age", "59", "--retirement-age", "60",
         "--target-fund", "400000"],
    )

    assert result.exit_code == 0
    assert "Retirement Readiness" in result.output
    for label in ("Overall", "Income", "Expense", "Asset", "Debt", "Pension"):
        assert label in result.output
    assert "210,000" in result.output


def test_score_requires_target(cli_runner, items_csv):
    result = cli_runner.invoke(
        cli, ["score", items_csv, "--current-age", "59", "--retirement-age", "60"]
    )

    assert result.exit_code != 0
    assert "--target-fund" in result.output


def test_loan_payment(cli_runner):
    result = cli_runner.invoke(
        cli,
        ["loan", "payment", "12000", "--rate", "12", "--start", "2025-01",
         "--maturity", "2026-01"],
    )

    assert result.exit_code == 0
    assert "Monthly payment: 1,066" in result.output
    assert "Total interest:  794" in result.output


def test_loan_payment_matured(cli_runner):
    result = cli_runner.invoke(
        cli,
        ["loan", "payment", "12000", "--rate", "12", "--start", "2025-01",
         "--maturity", "2024-01"],
    )

    assert result.exit_code == 0
    assert "Nothing to repay" in result.output


def test_loan_payment_invalid_maturity(cli_runner):
    result = cli_runner.invoke(
        cli, ["loan", "payment", "12000", "--rate", "12", "--maturity", "June"]
    )

    assert result.exit_code == 1
    assert "YYYY-MM" in result.output


def test_loan_balance(cli_runner):
    result = cli_runner.invoke(
        cli,
        ["loan", "balance", "12000", "--rate", "0", "--type", "equal_principal",
         "--start", "2025-01", "--maturity", "2026-01", "--as-of", "2025-04-01"],
    )

    assert result.exit_code == 0
    assert "Remaining principal: 9,000" in result.output
    assert "Months remaining:    9" in result.output


def test_loan_schedule(cli_runner):
    result = cli_runner.invoke(
        cli,
        ["loan", "schedule", "12000", "--rate", "12", "--type", "bullet",
         "--start", "2025-01", "--maturity", "2026-01"],
    )

    assert result.exit_code == 0
    assert "Effective rate: 12.00%" in result.output
    lines = result.output.splitlines()
    assert lines[-2].split() == ["2025", "0", "1,320", "1,320"]
    assert lines[-1].split() == ["2026", "12,000", "120", "12,120"]


def test_loan_schedule_matured(cli_runner):
    result = cli_runner.invoke(
        cli,
        ["loan", "schedule", "12000", "--rate", "12", "--start", "2025-01",
         "--maturity", "2024-01"],
    )

    assert result.exit_code == 0
    assert "Nothing to repay" in result.output


def test_loan_floating_rate_uses_base_plus_spread(cli_runner):
    common = ["--start", "2025-01", "--maturity", "2026-01"]
    floating = cli_runner.invoke(
        cli,
        ["loan", "payment", "12000", "--rate-type", "floating", "--base-rate", "10",
         "--spread", "2", *common],
    )
    fixed = cli_runner.invoke(cli, ["loan", "payment", "12000", "--rate", "12", *common])

    assert floating.exit_code == 0
    assert floating.output == fixed.output


def test_loan_rejects_non_finite_rate(cli_runner):
    result = cli_runner.invoke(
        cli, ["loan", "payment", "12000", "--rate", "nan", "--maturity", "2030-01"]
    )

    assert result.exit_code == 1
    assert "finite" in result.output


def test_pension_withdrawal(cli_runner):
    result = cli_runner.invoke(cli, ["pension", "10000", "--years", "10", "--return-rate", "0"])

    assert result.exit_code == 0
    assert "Annual withdrawal:  1,000" in result.output
    assert "Monthly equivalent: 83" in result.output


def test_pension_withdrawal_default_rate_pays_more(cli_runner):
    result = cli_runner.invoke(cli, ["pension", "10000", "--years", "10"])

    assert result.exit_code == 0
    assert "Annual withdrawal:  1,172" in result.output


def test_pension_withdrawal_invalid_balance(cli_runner):
    result = cli_runner.invoke(cli, ["pension", "lots", "--years", "10"])

    assert result.exit_code == 1
    assert "Error:" in result.output


def test_verbose_flag(cli_runner, items_csv):
    result = cli_runner.invoke(cli, ["--verbose", "totals", items_csv])
    assert result.exit_code == 0
