"""Tests for the objtasks CLI commands."""
from __future__ import annotations

from click.testing import CliRunner

from objtasks.cli.main import cli


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_cli_group_help(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "CSS selector builder" in result.output

    def test_cli_lists_commands(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert "selector" in result.output
        assert "tickets" in result.output
        assert "word" in result.output

    def test_version(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "objtasks" in result.output


# ---------------------------------------------------------------------------
# selector command
# ---------------------------------------------------------------------------


class TestSelectorCommand:
    def test_builds_selector(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli, ["selector", "element:a", 'attr:href$=".png"', "pseudo-class:focus"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == 'a[href$=".png"]:focus'

    def test_value_may_contain_colon(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["selector", "pseudo-class:not(:first-child)"])
        assert result.exit_code == 0
        assert result.output.strip() == ":not(:first-child)"

    def test_order_error(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["selector", "id:main", "element:div"])
        assert result.exit_code == 1
        assert "arranged in the following order" in result.output

    def test_cardinality_error(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["selector", "id:a", "id:b"])
        assert result.exit_code == 1
        assert "more then one time" in result.output

    def test_unknown_kind(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["selector", "tag:div"])
        assert result.exit_code == 2

    def test_verbose_flag(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--verbose", "selector", "element:p"])
        assert result.exit_code == 0
        assert "p" in result.output


# ---------------------------------------------------------------------------
# tickets / word commands
# ---------------------------------------------------------------------------


class TestTicketsCommand:
    def test_yes(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["tickets", "25", "25", "50"])
        assert result.exit_code == 0
        assert result.output.strip() == "yes"

    def test_no(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["tickets", "25", "100"])
        assert result.exit_code == 1
        assert result.output.strip() == "no"

    def test_rejects_bad_bill(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["tickets", "20"])
        assert result.exit_code == 2


class TestWordCommand:
    def test_word(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["word", '{"a": [0, 1], "b": [2, 3], "c": [4, 5]}'])
        assert result.exit_code == 0
        assert result.output.strip() == "aabbcc"

    def test_bad_json(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["word", "{nope"])
        assert result.exit_code == 1
        assert "Error" in result.output
