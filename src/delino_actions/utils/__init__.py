"""Shared utility functions for the Delino actions."""

from .action_logging import (
    SecretRedactingFilter,
    WorkflowCommandFormatter,
    escape_command_data,
    register_secret,
    setup_action_logging,
)
from .subprocess_utils import SubprocessError, run_command, run_git_command
from .validators import validate_base_url, validate_owner_repo

__all__ = [
    # Logging
    "SecretRedactingFilter",
    "WorkflowCommandFormatter",
    "escape_command_data",
    "register_secret",
    "setup_action_logging",
    # Subprocess utilities
    "SubprocessError",
    "run_command",
    "run_git_command",
    # Validators
    "validate_base_url",
    "validate_owner_repo",
]
