"""Tests for the delino-action command line."""

import logging

import pytest
from click.testing import CliRunner

from delino_actions.cli.main import cli
from delino_actions.utils.action_logging import ROOT_LOGGER_NAME
from delino_actions.utils.subprocess_utils import run_command


@pytest.fixture(autouse=True)
def restore_package_logger():
    yield
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture
def runner():
    return CliRunner()


def test_scan_lists_plan_files(runner, tmp_path):
    (tmp_path / "PLAN-1.yaml").write_text("a: 1\nb: 2\n")

    result = runner.invoke(cli, ["scan", "--workspace", str(tmp_path)])

    assert result.exit_code == 0
    assert "PLAN-1.yaml" in result.output
    assert "Nothing to upload" not in result.output


def test_scan_lists_branches(runner, tmp_path):
    for args in (
        ["init", "--initial-branch=main"],
        ["config", "user.email", "test@example.com"],
        ["config", "user.name", "Test User"],
        ["commit", "--allow-empty", "-m", "initial"],
        ["branch", "feature-a"],
    ):
        run_command(["git", *args], cwd=tmp_path)

    result = runner.invoke(cli, ["scan", "-w", str(tmp_path)])

    assert result.exit_code == 0
    assert "feature-a" in result.output


def test_scan_empty_directory(runner, tmp_path):
    result = runner.invoke(cli, ["scan", "-w", str(tmp_path)])

    assert result.exit_code == 0
    assert "Nothing to upload" in result.output


def test_scan_rejects_missing_directory(runner, tmp_path):
    result = runner.invoke(cli, ["scan", "-w", str(tmp_path / "missing")])
    assert result.exit_code != 0


def test_help_lists_commands(runner):
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    for command in ("prepare", "postprocess", "scan"):
        assert command in result.output
