"""Send discovered branches and plan files to DevBird."""

import logging
from typing import List

from ..integrations.delino.client import DelinoClient
from ..integrations.delino.models import (
    RegisterBranchesRequest,
    RegisterBranchesResponse,
    UploadTaskGraphPlanRequest,
)
from .outcome import OutcomeReport, best_effort_rpc
from .repository_scanner import PlanFile

logger = logging.getLogger(__name__)

REGISTER_BRANCHES_METHOD = "RegisterBranchesByToken"
UPLOAD_PLAN_METHOD = "UploadTaskGraphPlanByToken"


class Uploader:
    """Bearer-authenticated uploads scoped to one workflow execution token."""

    def __init__(self, client: DelinoClient, workflow_execution_token: str):
        self.client = client
        self.workflow_execution_token = workflow_execution_token

    def upload_branches(self, branches: List[str]) -> OutcomeReport:
        request = RegisterBranchesRequest(
            workflow_execution_token=self.workflow_execution_token,
            branch_names=list(branches),
        )
        report = best_effort_rpc(
            "Branch registration",
            lambda: self.client.call(REGISTER_BRANCHES_METHOD, request),
            RegisterBranchesResponse,
            logger_instance=logger,
        )

        if report.success:
            existing = report.envelope.registered_pull_requests or []
            if existing:
                logger.info(f"Found {len(existing)} existing PRs for these branches")
        return report

    def upload_plan(self, plan: PlanFile) -> OutcomeReport:
        request = UploadTaskGraphPlanRequest(
            workflow_execution_token=self.workflow_execution_token,
            plan_filename=plan.filename,
            plan_content=plan.content,
        )
        return best_effort_rpc(
            f"Plan upload ({plan.filename})",
            lambda: self.client.call(UPLOAD_PLAN_METHOD, request),
            logger_instance=logger,
        )
