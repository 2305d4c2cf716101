"""Core components of the prepare and postprocess actions."""

from .config import ActionSettings, DevbirdMode, GitHubContext, PostprocessInputs, PrepareInputs
from .orchestrator import PostprocessAction, PrepareAction
from .outcome import OutcomeReport, best_effort_rpc
from .repository_scanner import PlanFile, RepositoryScanner
from .task_linker import TaskLinker
from .token_exchange import TokenExchanger
from .uploader import Uploader

__all__ = [
    "ActionSettings",
    "DevbirdMode",
    "GitHubContext",
    "PostprocessInputs",
    "PrepareInputs",
    "PostprocessAction",
    "PrepareAction",
    "OutcomeReport",
    "best_effort_rpc",
    "PlanFile",
    "RepositoryScanner",
    "TaskLinker",
    "TokenExchanger",
    "Uploader",
]
