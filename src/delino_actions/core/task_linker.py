"""Associate the current workflow run with its task on the backend."""

import logging
from typing import Optional

from ..integrations.delino.client import DelinoClient
from ..integrations.delino.models import LinkGitHubActionRequest
from .outcome import OutcomeReport, best_effort_rpc

logger = logging.getLogger(__name__)

LINK_METHOD = "LinkGitHubActionByToken"


class TaskLinker:
    """Calls ``LinkGitHubActionByToken`` on whichever service ``client`` targets."""

    def __init__(self, client: DelinoClient):
        self.client = client

    def link(self, workflow_execution_token: str, run_id: str) -> Optional[OutcomeReport]:
        """Link run ``run_id`` to the task behind ``workflow_execution_token``.

        Returns None without calling the backend when the token is empty.
        """
        if not workflow_execution_token:
            logger.debug("No workflow execution token, skipping GitHub Action link")
            return None

        logger.info(f"Linking GitHub Action run {run_id} to task")
        request = LinkGitHubActionRequest(
            workflow_execution_token=workflow_execution_token,
            github_run_id=run_id,
        )
        return best_effort_rpc(
            "GitHub Action link",
            lambda: self.client.call(LINK_METHOD, request),
            logger_instance=logger,
        )
