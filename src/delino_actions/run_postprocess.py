"""Entry point for the postprocess action step."""

import asyncio
import os
import sys
from pathlib import Path
from typing import Optional

from .core.orchestrator import PostprocessAction
from .integrations.github.io import ActionIO
from .utils.action_logging import setup_action_logging


def run(working_dir: Optional[Path] = None) -> int:
    """Run postprocess; ``working_dir`` overrides GITHUB_WORKSPACE / cwd for scanning."""
    setup_action_logging(os.environ.get("DELINO_LOG_LEVEL") or "INFO")
    return asyncio.run(PostprocessAction(ActionIO(), working_dir=working_dir).run())


def main():
    sys.exit(run())


if __name__ == "__main__":
    main()
