"""Configuration, run context and action inputs."""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..errors import ActionError
from ..utils.validators import validate_base_url, validate_owner_repo

logger = logging.getLogger(__name__)

DEFAULT_AUTODEV_API_URL = "https://autodev.api.delino.io"
DEFAULT_DEVBIRD_API_URL = "https://devbird.api.delino.io"
DEFAULT_BASE_BRANCH = "main"


class ActionSettings(BaseSettings):
    """Process-wide settings read once from the environment."""

    model_config = SettingsConfigDict(extra="ignore", populate_by_name=True, env_ignore_empty=True)

    autodev_api_url: str = Field(default=DEFAULT_AUTODEV_API_URL, validation_alias="AUTODEV_API_URL")
    devbird_api_url: str = Field(default=DEFAULT_DEVBIRD_API_URL, validation_alias="DEVBIRD_API_URL")
    log_level: str = Field(default="INFO", validation_alias="DELINO_LOG_LEVEL")

    # None leaves the transport default (no client-side timeout)
    request_timeout: Optional[float] = Field(default=None, validation_alias="DELINO_REQUEST_TIMEOUT")
    oidc_audience: Optional[str] = Field(default=None, validation_alias="DELINO_OIDC_AUDIENCE")

    @field_validator("autodev_api_url", "devbird_api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        return validate_base_url(v)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR"):
            raise ValueError(f"log_level must be DEBUG, INFO, WARNING or ERROR, got '{v}'")
        return level

    @field_validator("request_timeout")
    @classmethod
    def validate_timeout(cls, v: Optional[float]) -> Optional[float]:
        if v is not None and v <= 0:
            raise ValueError(f"request_timeout must be positive, got {v}")
        return v


class GitHubContext(BaseSettings):
    """The slice of the workflow run context the actions need."""

    model_config = SettingsConfigDict(extra="ignore", populate_by_name=True, env_ignore_empty=True)

    repository: str = Field(default="", validation_alias="GITHUB_REPOSITORY")
    run_id: str = Field(default="", validation_alias="GITHUB_RUN_ID")
    workspace: Optional[Path] = Field(default=None, validation_alias="GITHUB_WORKSPACE")

    @field_validator("repository")
    @classmethod
    def validate_repository(cls, v: str) -> str:
        return validate_owner_repo(v) if v else v

    def _require_repository(self) -> str:
        if not self.repository:
            raise ActionError("GitHub context requires a GITHUB_REPOSITORY environment variable like 'owner/repo'")
        return self.repository

    @property
    def owner(self) -> str:
        return self._require_repository().split("/", 1)[0]

    @property
    def repo(self) -> str:
        return self._require_repository().split("/", 1)[1]

    @property
    def working_directory(self) -> Path:
        return self.workspace or Path.cwd()


class DevbirdMode(Enum):
    """Which discovery the postprocess step performs."""
    PLAN = "plan"
    DEVELOP = "develop"

    @classmethod
    def from_input(cls, value: str) -> "DevbirdMode":
        """Parse the ``devbird_mode`` input; anything but exactly "plan" means develop."""
        if value == cls.PLAN.value:
            return cls.PLAN
        if value and value != cls.DEVELOP.value:
            logger.debug(f"Unrecognized devbird_mode '{value}', using develop")
        return cls.DEVELOP


@dataclass(frozen=True)
class PrepareInputs:
    workflow_execution_token: str
    agent: str
    delino_access_token: str = ""
    base_branch: str = ""
    agent_model: str = ""

    @classmethod
    def from_io(cls, io) -> "PrepareInputs":
        """Read prepare inputs; raises InputRequiredError for missing required ones."""
        workflow_execution_token = io.get_input("autodev_workflow_execution_token", required=True)
        delino_access_token = io.get_input("delino_access_token")
        base_branch = io.get_input("base_branch")
        agent = io.get_input("agent", required=True)
        agent_model = io.get_input("agent_model")
        return cls(
            workflow_execution_token=workflow_execution_token,
            agent=agent,
            delino_access_token=delino_access_token,
            base_branch=base_branch,
            agent_model=agent_model,
        )


@dataclass(frozen=True)
class PostprocessInputs:
    workflow_execution_token: str
    delino_access_token: str
    base_branch: str = ""
    mode: DevbirdMode = DevbirdMode.DEVELOP

    @classmethod
    def from_io(cls, io) -> Optional["PostprocessInputs"]:
        """Read postprocess inputs.

        Returns None when no workflow execution token was supplied: there is
        nothing to link. A missing access token is a configuration error and
        raises InputRequiredError.
        """
        workflow_execution_token = io.get_input("devbird_workflow_execution_token")
        if not workflow_execution_token:
            return None

        return cls(
            workflow_execution_token=workflow_execution_token,
            delino_access_token=io.get_input("delino_access_token", required=True),
            base_branch=io.get_input("base_branch"),
            mode=DevbirdMode.from_input(io.get_input("devbird_mode")),
        )
