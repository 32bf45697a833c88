"""Tests for the click WrappedParamType."""

from __future__ import annotations

import click
import pytest
from click.testing import CliRunner

from tests.conftest import POSITIVE_INT, PositiveInt
from valuewrap.converters.binders import INT_PATH
from valuewrap.integrations.click_types import WrappedParamType

POSITIVE = WrappedParamType(POSITIVE_INT, INT_PATH, wrapper_type=PositiveInt)


@click.command()
@click.argument("limit", type=POSITIVE)
@click.option("--page", type=POSITIVE, default=PositiveInt(1))
def show(limit: PositiveInt, page: PositiveInt) -> None:
    click.echo(f"limit={limit.value} page={page.value}")


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


class TestWrappedParamType:
    def test_name_from_rule(self) -> None:
        assert POSITIVE.name == "PositiveInt"

    def test_binds_argument(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(show, ["5"])
        assert result.exit_code == 0
        assert result.output.strip() == "limit=5 page=1"

    def test_binds_option(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(show, ["5", "--page", "3"])
        assert result.exit_code == 0
        assert "page=3" in result.output

    def test_wrap_failure(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(show, ["0"])
        assert result.exit_code == 2
        assert "must be positive" in result.output

    def test_parse_failure(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(show, ["abc"])
        assert result.exit_code == 2
        assert "Cannot parse parameter limit as int" in result.output

    def test_convert_directly(self) -> None:
        assert POSITIVE.convert("9", None, None) == PositiveInt(9)
        with pytest.raises(click.BadParameter, match="must be positive"):
            POSITIVE.convert("-9", None, None)
