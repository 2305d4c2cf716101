"""Logging that speaks the GitHub Actions workflow-command dialect."""

import logging
import os
import sys
from datetime import datetime
from typing import IO, Optional, Set

ROOT_LOGGER_NAME = "delino_actions"

# Levels that map onto a workflow command; INFO stays plain text
_COMMAND_LEVELS = {
    "DEBUG": "debug",
    "WARNING": "warning",
    "ERROR": "error",
    "CRITICAL": "error",
}


def escape_command_data(value: str) -> str:
    """Escape a message for use as workflow command data."""
    return str(value).replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class WorkflowCommandFormatter(logging.Formatter):
    """Render records as ``::warning::``-style commands on a runner, colored text locally."""

    def __init__(self, use_workflow_commands: bool = True, use_colors: bool = False):
        super().__init__()
        self.use_workflow_commands = use_workflow_commands
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        if record.exc_info and record.levelno >= logging.ERROR:
            message = f"{message}\n{self.formatException(record.exc_info)}"

        if self.use_workflow_commands:
            command = _COMMAND_LEVELS.get(record.levelname)
            if command is None:
                return message
            return f"::{command}::{escape_command_data(message)}"

        timestamp = datetime.fromtimestamp(record.created).strftime("%H:%M:%S")
        if self.use_colors:
            level_colors = {
                "DEBUG": "\033[36m",      # Cyan
                "INFO": "\033[32m",       # Green
                "WARNING": "\033[33m",    # Yellow
                "ERROR": "\033[31m",      # Red
                "CRITICAL": "\033[35m",   # Magenta
            }
            level_color = level_colors.get(record.levelname, "")
            reset = "\033[0m"
        else:
            level_color = ""
            reset = ""

        return f"{timestamp} {level_color}{record.levelname:8s}{reset} {message}"


class SecretRedactingFilter(logging.Filter):
    """Replace registered secret values with ``***`` before a record is emitted."""

    def __init__(self):
        super().__init__()
        self._secrets: Set[str] = set()

    def add_secret(self, value: str) -> None:
        if value:
            self._secrets.add(value)

    def redact(self, text: str) -> str:
        # Longest first so a secret containing another is fully hidden
        for secret in sorted(self._secrets, key=len, reverse=True):
            text = text.replace(secret, "***")
        return text

    def filter(self, record: logging.LogRecord) -> bool:
        if self._secrets:
            record.msg = self.redact(record.getMessage())
            record.args = None
        return True


_secret_filter = SecretRedactingFilter()


def register_secret(value: str) -> None:
    """Hide ``value`` from every handler installed by setup_action_logging."""
    _secret_filter.add_secret(value)


def running_on_actions_runner() -> bool:
    return os.environ.get("GITHUB_ACTIONS", "").lower() == "true"


def setup_action_logging(
    log_level: str = "INFO",
    stream: Optional[IO[str]] = None,
    use_workflow_commands: Optional[bool] = None,
) -> logging.Logger:
    """
    Configure the package logger for one action invocation.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        stream: Output stream (defaults to stdout, which the runner parses)
        use_workflow_commands: Emit ``::warning::`` commands; auto-detected
            from GITHUB_ACTIONS when None

    Returns:
        The configured package logger
    """
    if use_workflow_commands is None:
        use_workflow_commands = running_on_actions_runner()
    stream = stream or sys.stdout

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Close existing handlers before clearing (repeated setup in one process)
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)

    use_colors = not use_workflow_commands and hasattr(stream, "isatty") and stream.isatty()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        WorkflowCommandFormatter(use_workflow_commands=use_workflow_commands, use_colors=use_colors)
    )
    handler.addFilter(_secret_filter)
    logger.addHandler(handler)

    return logger
