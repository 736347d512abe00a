"""Tests for the CLI module."""

import logging
import os
from pathlib import Path
from typing import Generator
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from deepvalidate import __version__
from deepvalidate.cli.cli import cli


@pytest.fixture
def runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def restore_logging() -> Generator[None, None, None]:
    """Undo logging configuration done by the CLI."""
    package_logger = logging.getLogger("deepvalidate")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    yield
    package_logger.handlers = handlers
    package_logger.setLevel(level)


def test_version(runner: CliRunner) -> None:
    """Test the version option."""
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_list_examples(runner: CliRunner) -> None:
    """Test listing the bundled examples."""
    result = runner.invoke(cli, ["examples", "list"])
    assert result.exit_code == 0
    assert result.output.split() == ["basic", "complex"]


def test_run_basic_example(runner: CliRunner) -> None:
    """Test running the basic example reports every failure."""
    result = runner.invoke(cli, ["examples", "run", "basic"])
    assert result.exit_code == 1
    assert "Example 'basic' has 2 error(s):" in result.output
    assert "books.0.title: is required" in result.output
    assert "books.0.author: is required" in result.output


def test_run_complex_example(runner: CliRunner) -> None:
    """Test running the complex example reports every failure in order."""
    result = runner.invoke(cli, ["examples", "run", "complex"])
    assert result.exit_code == 1

    lines = [line.strip("• ").strip() for line in result.output.splitlines()[1:]]
    assert lines == [
        "spec.containers.1.imageRef: image with name 'myServer' not found",
        "spec.containers.0.name: is required",
        "spec.images.0.uri: is required",
        "spec.images.0.tag: is required",
    ]


def test_run_unknown_example(runner: CliRunner) -> None:
    """Test an unknown example name is a usage error."""
    result = runner.invoke(cli, ["examples", "run", "nope"])
    assert result.exit_code == 2
    assert "Unknown example 'nope'" in result.output


def test_debug_flag_sets_log_level(runner: CliRunner) -> None:
    """Test --debug enables debug logging for the package."""
    result = runner.invoke(cli, ["--debug", "examples", "list"])
    assert result.exit_code == 0
    assert logging.getLogger("deepvalidate").level == logging.DEBUG


def test_invalid_log_level_is_usage_error(
    runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Test an invalid DEEPVALIDATE_LOG_LEVEL is reported without a traceback."""
    monkeypatch.chdir(tmp_path)
    with patch.dict(os.environ, {"DEEPVALIDATE_LOG_LEVEL": "loud"}):
        result = runner.invoke(cli, ["examples", "list"])

    assert result.exit_code == 2
    assert "Invalid DEEPVALIDATE_LOG_LEVEL value: LOUD" in result.output
    assert not isinstance(result.exception, ValueError)


def test_log_level_from_environment(
    runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Test the package log level comes from DEEPVALIDATE_LOG_LEVEL."""
    monkeypatch.chdir(tmp_path)
    with patch.dict(os.environ, {"DEEPVALIDATE_LOG_LEVEL": "error"}):
        result = runner.invoke(cli, ["examples", "list"])

    assert result.exit_code == 0
    assert logging.getLogger("deepvalidate").level == logging.ERROR
