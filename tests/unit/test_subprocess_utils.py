"""Tests for subprocess_utils."""

import subprocess
from pathlib import Path

import pytest

from delino_actions.utils.subprocess_utils import (
    SubprocessError,
    run_command,
    run_git_command,
)


def test_subprocess_error_includes_context():
    """Test SubprocessError includes all context."""
    error = SubprocessError(
        cmd="git branch",
        returncode=128,
        stderr="fatal: not a git repository\n",
        stdout="",
        cwd=Path("/tmp"),
    )

    assert error.returncode == 128
    assert error.cwd == Path("/tmp")
    assert "/tmp" in str(error)
    assert "exit code 128" in str(error)
    assert "fatal: not a git repository" in str(error)


def test_run_command_success():
    result = run_command(["echo", "hello"], check=True)
    assert result.returncode == 0
    assert "hello" in result.stdout


def test_run_command_failure_raises():
    with pytest.raises(SubprocessError) as exc_info:
        run_command(["false"], check=True)

    assert exc_info.value.returncode != 0


def test_run_command_failure_no_check():
    result = run_command(["false"], check=False)
    assert result.returncode != 0


def test_missing_executable_raises_subprocess_error():
    with pytest.raises(SubprocessError) as exc_info:
        run_command(["nonexistent_command_12345"])

    assert exc_info.value.returncode == 127


def test_run_command_timeout():
    with pytest.raises(subprocess.TimeoutExpired):
        run_command(["sleep", "10"], timeout=1)


def test_run_command_with_cwd(tmp_path):
    (tmp_path / "PLAN-1.yaml").write_text("content")

    result = run_command(["ls"], cwd=tmp_path, check=True)
    assert "PLAN-1.yaml" in result.stdout


def test_run_git_command_outside_repository(tmp_path):
    with pytest.raises(SubprocessError) as exc_info:
        run_git_command(["branch"], cwd=tmp_path)

    assert exc_info.value.cwd == tmp_path
    assert exc_info.value.cmd == "git branch"


def test_run_git_command_success(tmp_path):
    run_command(["git", "init"], cwd=tmp_path, check=True)

    result = run_git_command(["status"], cwd=tmp_path, timeout=None)
    assert result.returncode == 0
