"""Tests for the CLI entry point."""

import json
import os

import pytest
import yaml
from click.testing import CliRunner

from hanvitt.core.cli import main


@pytest.fixture
def runner():
    return CliRunner()


class TestCliGroup:
    def test_help(self, runner):
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "Hanvitt" in result.output
        for command in ("savings", "retirement", "health", "term", "insurance", "score", "dime", "ledger", "contact"):
            assert command in result.output

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output

    def test_invalid_log_level(self, runner):
        result = runner.invoke(main, ["--log-level", "chatty", "dime"])
        assert result.exit_code != 0
        assert "Invalid configuration" in result.output


class TestCalculatorCommands:
    def test_savings_json(self, runner):
        result = runner.invoke(main, ["savings", "--initial", "10,000", "--monthly", "500", "--years", "20", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["total_invested"] == 130_000
        assert len(data["points"]) == 21

    def test_savings_table(self, runner):
        result = runner.invoke(main, ["savings", "--yearly"])
        assert result.exit_code == 0
        assert "Final balance" in result.output
        assert "By year" in result.output

    def test_invalid_amount(self, runner):
        result = runner.invoke(main, ["savings", "--initial", "lots"])
        assert result.exit_code != 0
        assert "not a valid amount" in result.output

    def test_retirement_json(self, runner):
        result = runner.invoke(main, ["retirement", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["years_to_retirement"] == 30
        assert data["corpus_needed"] == pytest.approx(500_000 * 1.06**30 / 0.04)

    def test_health_gap_defaults(self, runner):
        result = runner.invoke(main, ["health", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["floater"]["cover"] == 1_800_000
        assert data["floater"]["premium"] == 17_500
        assert data["parents"] is None

    def test_health_finscore_with_parents(self, runner):
        result = runner.invoke(
            main,
            ["health", "--variant", "finscore", "--age", "30", "--spouse-age", "28", "--parents", "2", "--json"],
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["floater"]["cover"] == 1_400_000
        assert data["parents"]["cover"] == 1_700_000

    def test_health_table(self, runner):
        result = runner.invoke(main, ["health", "--existing-cover", "500000"])
        assert result.exit_code == 0
        assert "Health cover" in result.output
        assert "short by" in result.output

    def test_term_zero_income(self, runner):
        result = runner.invoke(main, ["term", "--income", "0", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output)["cover"] == 5_000_000

    def test_insurance_json(self, runner):
        result = runner.invoke(main, ["insurance", "--income", "100000", "--children", "1", "--parents", "2", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["term"]["cover"] == 32_500_000
        assert data["parents"]["plan_type"] == "parents"

    def test_score_zero_income(self, runner):
        result = runner.invoke(main, ["score", "--income", "0", "--health-insurance", "yes", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output)["total"] == 0

    def test_score_table(self, runner):
        result = runner.invoke(main, ["score", "--income", "100000", "--savings", "30000"])
        assert result.exit_code == 0
        assert "Financial health score" in result.output

    def test_dime_defaults(self, runner):
        result = runner.invoke(main, ["dime", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["total_needs"] == 355_000
        assert data["gap"] == 330_000


class TestLedgerCommands:
    def test_add_list_summary(self, runner, tmp_config_file):
        base = ["--config", tmp_config_file, "ledger"]
        result = runner.invoke(main, [*base, "add", "income", "salary", "1,00,000", "--date", "2024-03-01"])
        assert result.exit_code == 0, result.output
        assert "Added income" in result.output

        runner.invoke(main, [*base, "add", "expense", "rent", "25000", "--date", "2024-03-05"])

        result = runner.invoke(main, [*base, "summary", "--json"])
        data = json.loads(result.output)
        assert data["total_income"] == 100_000
        assert data["total_expenses"] == 25_000
        assert data["savings_rate"] == 75

        result = runner.invoke(main, [*base, "list"])
        assert "salary" in result.output

    def test_add_rejects_wrong_category(self, runner, tmp_config_file):
        result = runner.invoke(main, ["--config", tmp_config_file, "ledger", "add", "income", "food", "100"])
        assert result.exit_code != 0

    def test_add_rejects_bad_date(self, runner, tmp_config_file):
        result = runner.invoke(
            main, ["--config", tmp_config_file, "ledger", "add", "expense", "food", "100", "--date", "yesterday"]
        )
        assert result.exit_code != 0
        assert "YYYY-MM-DD" in result.output

    def test_delete_unknown(self, runner, tmp_config_file):
        result = runner.invoke(main, ["--config", tmp_config_file, "ledger", "delete", "nope"])
        assert result.exit_code == 0
        assert "No entry with id nope" in result.output

    def test_clear_needs_confirmation(self, runner, tmp_config_file):
        base = ["--config", tmp_config_file, "ledger"]
        runner.invoke(main, [*base, "add", "expense", "food", "100"])

        result = runner.invoke(main, [*base, "clear"], input="n\n")
        assert "Aborted." in result.output
        assert json.loads(runner.invoke(main, [*base, "summary", "--json"]).output)["total_expenses"] == 100

        result = runner.invoke(main, [*base, "clear", "--yes"])
        assert "Ledger cleared." in result.output
        assert "No entries yet." in runner.invoke(main, [*base, "list"]).output


class TestContactCommands:
    def test_submit_and_list(self, runner, tmp_config_file):
        base = ["--config", tmp_config_file, "contact"]
        result = runner.invoke(
            main,
            [*base, "submit", "--name", "Asha Rao", "--email", "asha@example.com", "--message", "Need a plan review", "--no-notify"],
        )
        assert result.exit_code == 0, result.output
        assert "Saved request #1" in result.output

        result = runner.invoke(main, [*base, "list", "--unread"])
        assert "Asha Rao" in result.output

        result = runner.invoke(main, [*base, "mark-read", "1"])
        assert result.exit_code == 0
        assert "No requests." in runner.invoke(main, [*base, "list", "--unread"]).output

    def test_submit_invalid_email(self, runner, tmp_config_file):
        result = runner.invoke(
            main,
            ["--config", tmp_config_file, "contact", "submit", "--name", "Asha", "--email", "nope", "--message", "Hello there", "--no-notify"],
        )
        assert result.exit_code != 0
        assert "email" in result.output

    def test_mark_read_unknown(self, runner, tmp_config_file):
        result = runner.invoke(main, ["--config", tmp_config_file, "contact", "mark-read", "9"])
        assert result.exit_code != 0


class TestConfiguredPaths:
    def _write_config(self, tmp_dir, paths):
        config_path = os.path.join(tmp_dir, "config.yaml")
        with open(config_path, "w") as f:
            yaml.dump({"paths": paths}, f)
        return config_path

    def test_home_relative_ledger_file(self, runner, tmp_dir, monkeypatch):
        home = os.path.join(tmp_dir, "home")
        workdir = os.path.join(tmp_dir, "work")
        os.makedirs(home)
        os.makedirs(workdir)
        monkeypatch.setenv("HOME", home)
        monkeypatch.chdir(workdir)
        config_path = self._write_config(tmp_dir, {"data_dir": "~/hanvitt", "ledger_file": "~/ledger.json"})

        result = runner.invoke(main, ["--config", config_path, "ledger", "add", "income", "salary", "1000"])
        assert result.exit_code == 0, result.output
        assert os.path.exists(os.path.join(home, "ledger.json"))
        assert not os.path.exists(os.path.join(workdir, "~"))

    def test_ledger_follows_configured_data_dir(self, runner, tmp_dir):
        data_dir = os.path.join(tmp_dir, "data")
        config_path = self._write_config(tmp_dir, {"data_dir": data_dir})

        result = runner.invoke(main, ["--config", config_path, "ledger", "add", "expense", "food", "250"])
        assert result.exit_code == 0, result.output
        assert os.path.exists(os.path.join(data_dir, "ledger.json"))

        result = runner.invoke(
            main,
            ["--config", config_path, "contact", "submit", "--name", "Asha", "--email", "asha@example.com", "--message", "Hello there", "--no-notify"],
        )
        assert result.exit_code == 0, result.output
        assert os.path.exists(os.path.join(data_dir, "contact_requests.json"))
