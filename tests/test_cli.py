"""Tests for the click front end."""

import json
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from weatherbook.cli import main
from weatherbook.config import Config

ADD_SUNNY = "add\n25\n50\nsunny\n2024-05-01\nmorning\n"


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def default_config():
    with patch("weatherbook.cli.load_config", side_effect=Config) as mock_load:
        yield mock_load


class TestShell:
    def test_add_then_query(self, runner):
        # query re-uses the date and time typed for add
        result = runner.invoke(main, ["shell"], input=ADD_SUNNY + "query\n\n\nstatus\nquit\n")

        assert result.exit_code == 0
        assert "Weather record added successfully!" in result.output
        assert "Found 1 record(s) for 2024-05-01 (morning):" in result.output
        assert "Travel suitability: Suitable" in result.output
        assert "1/10 records stored" in result.output
        assert "Goodbye." in result.output

    def test_validation_error(self, runner):
        result = runner.invoke(main, ["shell"], input="add\nabc\n50\nsunny\n2024-05-01\nmorning\nstatus\nquit\n")

        assert "Invalid temperature!" in result.output
        assert "0/10 records stored" in result.output

    def test_oversized_number_keeps_session(self, runner):
        huge = "9" * 5000
        result = runner.invoke(
            main, ["shell"], input=f"add\n{huge}\n50\nsunny\n2024-05-01\nmorning\nstatus\nquit\n"
        )

        assert result.exit_code == 0
        assert "Invalid temperature!" in result.output
        assert "0/10 records stored" in result.output

    def test_full_with_capacity_override(self, runner):
        result = runner.invoke(
            main, ["--capacity", "1", "shell"], input=ADD_SUNNY + "add\n\n\n\n\n\nquit\n"
        )

        assert result.exit_code == 0
        assert "Weather book is full!" in result.output
        assert "Maximum capacity: 1 records" in result.output

    def test_query_without_matches(self, runner):
        result = runner.invoke(main, ["shell"], input="query\n1999-01-01\nafternoon\nquit\n")
        assert "No records found" in result.output

    def test_clear_keeps_records(self, runner):
        result = runner.invoke(
            main, ["shell"], input=ADD_SUNNY + "clear\nstatus\nquery\n2024-05-01\nmorning\nquit\n"
        )

        assert "Fields cleared." in result.output
        assert "1/10 records stored" in result.output
        assert "Found 1 record(s)" in result.output

    def test_unknown_command(self, runner):
        result = runner.invoke(main, ["shell"], input="launch\nquit\n")
        assert "Unknown command 'launch'" in result.output

    def test_help(self, runner):
        result = runner.invoke(main, ["shell"], input="help\nquit\n")
        assert "query   Look up records" in result.output

    def test_exit_alias(self, runner):
        result = runner.invoke(main, ["shell"], input="exit\n")
        assert result.exit_code == 0
        assert "Goodbye." in result.output


class TestJudge:
    def test_sunny(self, runner):
        result = runner.invoke(
            main,
            ["judge", "--temperature", "25", "--humidity", "50", "--phenomenon", "sunny",
             "--date", "2024-05-01", "--time", "morning"],
        )

        assert result.exit_code == 0
        assert "Travel suitability: Suitable (ideal for travel)" in result.output

    def test_json(self, runner):
        result = runner.invoke(
            main,
            ["judge", "--temperature=-20", "--humidity", "50", "--phenomenon", "snowy",
             "--date", "2024-01-10", "--time", "Afternoon", "--json"],
        )

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["suitability"] == "Not suitable"
        assert data["time"] == "afternoon"
        assert data["temperature"] == -20

    def test_defaults_date_and_time(self, runner):
        result = runner.invoke(
            main, ["judge", "--temperature", "20", "--humidity", "60", "--phenomenon", "cloudy"]
        )
        assert result.exit_code == 0
        assert "Acceptable" in result.output

    def test_invalid_input(self, runner):
        result = runner.invoke(
            main, ["judge", "--temperature", "25", "--humidity", "wet", "--phenomenon", "sunny"]
        )
        assert result.exit_code == 1
        assert "Invalid humidity!" in result.output
