"""Discover branches and plan files in the checked-out repository."""

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from ..utils.subprocess_utils import SubprocessError, run_git_command
from .config import DEFAULT_BASE_BRANCH

logger = logging.getLogger(__name__)

MAX_BRANCHES = 20
PLAN_FILE_PATTERN = "PLAN-*.yaml"


@dataclass(frozen=True)
class PlanFile:
    filename: str
    content: str


class RepositoryScanner:
    """Read-only inspection of the working directory."""

    def __init__(self, working_dir: Optional[Path] = None):
        self.working_dir = Path(working_dir) if working_dir else Path.cwd()

    def detect_branches(self, base_branch: str = "") -> List[str]:
        """
        List local branches other than the base branch.

        Args:
            base_branch: Branch to exclude ("main" when empty)

        Returns:
            Up to MAX_BRANCHES names in ``git branch`` order; empty when git fails
        """
        base = base_branch.strip() or DEFAULT_BASE_BRANCH
        logger.info("Detecting newly created branches...")

        try:
            result = run_git_command(
                ["branch", "--format=%(refname:short)"],
                cwd=self.working_dir,
            )
        except (SubprocessError, subprocess.TimeoutExpired, OSError) as e:
            logger.warning(f"Error detecting branches: {e}")
            return []

        branches: List[str] = []
        for line in result.stdout.splitlines():
            name = line.strip()
            # "(HEAD detached at ...)" appears on a detached checkout
            if not name or name.startswith("(") or name == base or name in branches:
                continue
            branches.append(name)
            if len(branches) == MAX_BRANCHES:
                break

        logger.info(f"Found {len(branches)} branches: {', '.join(branches)}")
        return branches

    def detect_plan_files(self) -> List[PlanFile]:
        """Read every ``PLAN-*.yaml`` file; unreadable files are logged and skipped."""
        logger.info("Detecting plan files...")

        try:
            paths = sorted(p for p in self.working_dir.glob(PLAN_FILE_PATTERN) if p.is_file())
        except OSError as e:
            logger.warning(f"Error detecting plan files: {e}")
            return []

        if not paths:
            logger.info("No plan files found to upload")
            return []

        plans: List[PlanFile] = []
        for path in paths:
            logger.info(f"Found plan file: {path.name}")
            try:
                content = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                logger.warning(f"Error reading plan file {path.name}: {e}")
                continue
            plans.append(PlanFile(filename=path.name, content=content))

        return plans
