"""Shared fixtures for unit tests."""

import io
from unittest.mock import MagicMock

import pytest
import requests

from delino_actions.core.config import ActionSettings, GitHubContext
from delino_actions.integrations.github.io import ActionIO

_RUNNER_ENV_VARS = [
    "AUTODEV_API_URL",
    "DEVBIRD_API_URL",
    "DELINO_LOG_LEVEL",
    "DELINO_REQUEST_TIMEOUT",
    "DELINO_OIDC_AUDIENCE",
    "GITHUB_REPOSITORY",
    "GITHUB_RUN_ID",
    "GITHUB_WORKSPACE",
    "GITHUB_OUTPUT",
    "GITHUB_ENV",
    "GITHUB_ACTIONS",
    "ACTIONS_ID_TOKEN_REQUEST_URL",
    "ACTIONS_ID_TOKEN_REQUEST_TOKEN",
]


@pytest.fixture(autouse=True)
def clean_runner_env(monkeypatch):
    """Keep the host runner's environment out of settings and context."""
    for name in _RUNNER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings():
    return ActionSettings(
        autodev_api_url="https://autodev.test",
        devbird_api_url="https://devbird.test",
    )


@pytest.fixture
def github_context(tmp_path):
    return GitHubContext(repository="acme/widgets", run_id="4242", workspace=tmp_path)


@pytest.fixture
def session():
    """requests.Session stand-in; tests set post/get return values."""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def runner_files(tmp_path):
    """GITHUB_OUTPUT / GITHUB_ENV files the runner would provide."""
    output = tmp_path / "github_output"
    env = tmp_path / "github_env"
    output.touch()
    env.touch()
    return output, env


@pytest.fixture
def action_io(runner_files, session):
    """ActionIO over a private environ dict and a captured stdout."""
    output, env = runner_files
    environ = {
        "GITHUB_OUTPUT": str(output),
        "GITHUB_ENV": str(env),
    }
    return ActionIO(environ=environ, stdout=io.StringIO(), session=session)

