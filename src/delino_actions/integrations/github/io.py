"""Workflow-command I/O for code running as a GitHub Actions step.

Inputs arrive as ``INPUT_<NAME>`` environment variables. Outputs and exported
variables are appended to the files named by ``GITHUB_OUTPUT`` / ``GITHUB_ENV``;
everything else (masking, failure) is a ``::command::`` line on stdout.
"""

import os
import sys
import uuid
from typing import IO, MutableMapping, Optional
from urllib.parse import quote

import requests

from ...errors import ActionError, InputRequiredError
from ...utils.action_logging import escape_command_data, register_secret


def _escape_property(value: str) -> str:
    return escape_command_data(value).replace(":", "%3A").replace(",", "%2C")


class ActionIO:
    """Read inputs and publish results through the runner's command channels."""

    def __init__(
        self,
        environ: Optional[MutableMapping[str, str]] = None,
        stdout: Optional[IO[str]] = None,
        session: Optional[requests.Session] = None,
    ):
        self.environ = environ if environ is not None else os.environ
        self.stdout = stdout or sys.stdout
        self.session = session or requests.Session()
        self.exit_code = 0
        self.failure_message: Optional[str] = None

    def issue_command(self, command: str, message: str = "", **properties: str) -> None:
        """Write a ``::command key=value::message`` line."""
        props = ",".join(f"{key}={_escape_property(value)}" for key, value in properties.items())
        prefix = f"::{command} {props}" if props else f"::{command}"
        self.stdout.write(f"{prefix}::{escape_command_data(message)}\n")
        self.stdout.flush()

    def get_input(self, name: str, required: bool = False) -> str:
        """Return the stripped value of input ``name`` ("" when unset).

        Raises:
            InputRequiredError: If required and the value is empty
        """
        key = f"INPUT_{name.replace(' ', '_').upper()}"
        value = self.environ.get(key, "").strip()
        if required and not value:
            raise InputRequiredError(name)
        return value

    def _append_file_command(self, env_var: str, key: str, value: str) -> bool:
        path = self.environ.get(env_var)
        if not path:
            return False

        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        if delimiter in key or delimiter in value:
            raise ActionError(f"Unexpected input: name or value contains the delimiter {delimiter}")

        with open(path, "a", encoding="utf-8") as f:
            f.write(f"{key}<<{delimiter}\n{value}\n{delimiter}\n")
        return True

    def set_output(self, name: str, value: str) -> None:
        if not self._append_file_command("GITHUB_OUTPUT", name, value):
            self.stdout.write("\n")
            self.issue_command("set-output", value, name=name)

    def export_variable(self, name: str, value: str) -> None:
        """Export ``name`` to later steps and to this process."""
        self.environ[name] = value
        if not self._append_file_command("GITHUB_ENV", name, value):
            self.issue_command("set-env", value, name=name)

    def set_secret(self, value: str) -> None:
        """Mask ``value`` in the runner log and in our own log handlers."""
        if not value:
            return
        register_secret(value)
        self.issue_command("add-mask", value)

    def set_failed(self, message: str) -> None:
        """Mark the step failed; the entry point exits with ``exit_code``."""
        self.exit_code = 1
        self.failure_message = message
        self.issue_command("error", message)

    def get_id_token(self, audience: Optional[str] = None, timeout: Optional[float] = None) -> str:
        """
        Request an OIDC identity token from the runner.

        Requires the workflow to grant ``id-token: write``; the runner then
        provides ACTIONS_ID_TOKEN_REQUEST_URL and ACTIONS_ID_TOKEN_REQUEST_TOKEN.

        Raises:
            ActionError: If the runner offers no token endpoint or returns no token
            requests.RequestException: On transport failure
        """
        request_url = self.environ.get("ACTIONS_ID_TOKEN_REQUEST_URL")
        request_token = self.environ.get("ACTIONS_ID_TOKEN_REQUEST_TOKEN")
        if not request_url or not request_token:
            raise ActionError(
                "Unable to get ACTIONS_ID_TOKEN_REQUEST_URL or ACTIONS_ID_TOKEN_REQUEST_TOKEN env variable"
            )

        if audience:
            request_url = f"{request_url}&audience={quote(audience, safe='')}"

        response = self.session.get(
            request_url,
            headers={"Authorization": f"Bearer {request_token}", "Accept": "application/json"},
            timeout=timeout,
        )
        if response.status_code != 200:
            raise ActionError(f"Failed to get ID token: HTTP {response.status_code}")

        id_token = (response.json() or {}).get("value")
        if not id_token:
            raise ActionError("ID token response has no value field")

        self.set_secret(id_token)
        return id_token
