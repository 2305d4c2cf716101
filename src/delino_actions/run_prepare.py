"""Entry point for the prepare action step."""

import asyncio
import os
import sys

from .core.orchestrator import PrepareAction
from .integrations.github.io import ActionIO
from .utils.action_logging import setup_action_logging


def run() -> int:
    """Run prepare against the current environment and return the exit status."""
    # Logging comes up before settings are validated so a bad setting is still reported
    setup_action_logging(os.environ.get("DELINO_LOG_LEVEL") or "INFO")
    return asyncio.run(PrepareAction(ActionIO()).run())


def main():
    sys.exit(run())


if __name__ == "__main__":
    main()
