"""Subprocess helpers for the git commands the actions run."""

import logging
import subprocess
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)


class SubprocessError(Exception):
    """Raised when a command exits non-zero or cannot be started."""

    def __init__(
        self,
        cmd: str,
        returncode: int,
        stderr: str,
        stdout: str = "",
        cwd: Optional[Path] = None,
    ):
        self.cmd = cmd
        self.returncode = returncode
        self.stderr = stderr
        self.stdout = stdout
        self.cwd = cwd
        location = f" (in {cwd})" if cwd else ""
        super().__init__(
            f"Command failed with exit code {returncode}{location}: {cmd}\nstderr: {stderr.strip()}"
        )


def run_command(
    cmd: List[str],
    *,
    cwd: Optional[Path] = None,
    check: bool = True,
    timeout: Optional[int] = None,
) -> subprocess.CompletedProcess:
    """
    Run a command and capture its text output.

    Args:
        cmd: Command to run as an argv list
        cwd: Working directory
        check: Raise SubprocessError on non-zero exit
        timeout: Timeout in seconds, None to wait indefinitely

    Returns:
        CompletedProcess with stdout, stderr, returncode

    Raises:
        SubprocessError: If check=True and the command fails, or the
            executable cannot be found
        subprocess.TimeoutExpired: If timeout exceeded
    """
    cmd_str = " ".join(cmd)

    try:
        result = subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except FileNotFoundError as e:
        raise SubprocessError(cmd=cmd_str, returncode=127, stderr=str(e), cwd=cwd) from e
    except subprocess.TimeoutExpired:
        logger.error(f"Command timed out after {timeout}s: {cmd_str}")
        raise

    if check and result.returncode != 0:
        raise SubprocessError(
            cmd=cmd_str,
            returncode=result.returncode,
            stderr=result.stderr,
            stdout=result.stdout,
            cwd=cwd,
        )

    return result


def run_git_command(
    args: List[str],
    *,
    cwd: Optional[Path] = None,
    check: bool = True,
    timeout: Optional[int] = 30,
) -> subprocess.CompletedProcess:
    """
    Run a git command in the given repository.

    Args:
        args: Git arguments (without the 'git' prefix)
        cwd: Repository directory
        check: Raise SubprocessError on non-zero exit
        timeout: Timeout in seconds (default: 30)
    """
    try:
        return run_command(["git"] + args, cwd=cwd, check=check, timeout=timeout)
    except SubprocessError:
        logger.debug(f"Git command failed in {cwd}: git {' '.join(args)}")
        raise
