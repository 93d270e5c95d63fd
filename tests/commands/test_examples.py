"""Tests for the --examples flag on CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from aggregen.cli import cli

# (CLI args, expected keywords in output)
EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["generate", "--examples"], ["aggregen generate lexis.yaml A", "--seed 42"]),
    (["library", "--examples"], ["aggregen library lexis.yaml"]),
]


@pytest.mark.parametrize(("args", "keywords"), EXAMPLES_COMMANDS)
def test_examples_flag(cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0, result.output
    assert "Examples for" in result.output
    for kw in keywords:
        assert kw in result.output


def test_help_does_not_include_examples(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["generate", "--help"])
    assert result.exit_code == 0
    assert "--examples" in result.output
    assert "aggregen generate lexis.yaml A B" not in result.output
