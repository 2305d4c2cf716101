"""Sequencing for the prepare and postprocess actions.

Each action is one process invocation with its own inputs; the two never
share state. Individual steps degrade to warnings, and only a missing
required input or an unexpected exception fails the step.
"""

import asyncio
import logging
from pathlib import Path
from typing import Optional

import requests

from ..integrations.delino.client import DelinoClient
from .config import (
    ActionSettings,
    DevbirdMode,
    GitHubContext,
    PostprocessInputs,
    PrepareInputs,
)
from .repository_scanner import RepositoryScanner
from .task_linker import TaskLinker
from .token_exchange import TokenExchanger
from .uploader import Uploader

logger = logging.getLogger(__name__)


class ActionRunner:
    """Maps the outcome of ``_run`` onto the step's exit status."""

    name = "action"

    def __init__(
        self,
        io,
        settings: Optional[ActionSettings] = None,
        context: Optional[GitHubContext] = None,
        session: Optional[requests.Session] = None,
    ):
        self.io = io
        self._settings = settings
        self._context = context
        self.session = session

    @property
    def settings(self) -> ActionSettings:
        if self._settings is None:
            self._settings = ActionSettings()
        return self._settings

    @property
    def context(self) -> GitHubContext:
        if self._context is None:
            self._context = GitHubContext()
        return self._context

    async def run(self) -> int:
        """Run the action; returns 0 on success, 1 after ``set_failed``."""
        try:
            await self._run()
        except Exception as e:
            logger.debug(f"{self.name} failed", exc_info=True)
            self.io.set_failed(str(e) or f"Unknown error occurred ({type(e).__name__})")
        return self.io.exit_code

    async def _run(self) -> None:
        raise NotImplementedError


class PrepareAction(ActionRunner):
    """Exchange credentials, publish outputs and link the run to its AutoDev task."""

    name = "prepare"

    async def _run(self) -> None:
        inputs = PrepareInputs.from_io(self.io)
        self.io.set_secret(inputs.delino_access_token)
        settings = self.settings
        context = self.context

        exchanger = TokenExchanger(
            settings,
            self.io,
            DelinoClient.for_autodev(settings, session=self.session),
        )
        github_token = await asyncio.to_thread(exchanger.exchange, context.owner, context.repo)

        logger.info(f"Preparing AutoDev environment for {inputs.agent} agent")
        logger.info(f"Repository: {context.owner}/{context.repo}")
        logger.info(f"Base branch: {inputs.base_branch or 'default'}")

        self.io.set_output("workflow_execution_token", inputs.workflow_execution_token)
        self.io.set_output("agent", inputs.agent)
        self.io.set_output("agent_model", inputs.agent_model)
        self.io.set_output("githubToken_obtained", "true" if github_token else "false")

        if inputs.delino_access_token and inputs.workflow_execution_token:
            linker = TaskLinker(
                DelinoClient.for_autodev(
                    settings,
                    access_token=inputs.delino_access_token,
                    session=self.session,
                )
            )
            await asyncio.to_thread(linker.link, inputs.workflow_execution_token, context.run_id)

        logger.info("Preparation complete")


class PostprocessAction(ActionRunner):
    """Link the run to its DevBird task and upload what the run produced."""

    name = "postprocess"

    def __init__(self, io, working_dir: Optional[Path] = None, **kwargs):
        super().__init__(io, **kwargs)
        self.working_dir = working_dir
        self._mode_handlers = {
            DevbirdMode.PLAN: (
                "Running in plan mode - only uploading plan files",
                self._upload_plan_files,
            ),
            DevbirdMode.DEVELOP: (
                "Running in develop mode - only detecting branches",
                self._register_branches,
            ),
        }

    def _client(self, inputs: PostprocessInputs) -> DelinoClient:
        return DelinoClient.for_devbird(
            self.settings,
            access_token=inputs.delino_access_token,
            session=self.session,
        )

    async def _upload_plan_files(
        self, scanner: RepositoryScanner, uploader: Uploader, inputs: PostprocessInputs
    ) -> None:
        plans = await asyncio.to_thread(scanner.detect_plan_files)
        for plan in plans:
            await asyncio.to_thread(uploader.upload_plan, plan)

    async def _register_branches(
        self, scanner: RepositoryScanner, uploader: Uploader, inputs: PostprocessInputs
    ) -> None:
        branches = await asyncio.to_thread(scanner.detect_branches, inputs.base_branch)
        if not branches:
            logger.info("No branches to register")
            return
        await asyncio.to_thread(uploader.upload_branches, branches)

    async def _run(self) -> None:
        inputs = PostprocessInputs.from_io(self.io)
        if inputs is None:
            logger.warning("No task token provided")
            return
        self.io.set_secret(inputs.delino_access_token)

        context = self.context
        scanner = RepositoryScanner(self.working_dir or context.working_directory)
        linker = TaskLinker(self._client(inputs))
        uploader = Uploader(self._client(inputs), inputs.workflow_execution_token)

        banner, discover = self._mode_handlers[inputs.mode]
        logger.info(banner)
        await asyncio.gather(
            asyncio.to_thread(linker.link, inputs.workflow_execution_token, context.run_id),
            discover(scanner, uploader, inputs),
        )
