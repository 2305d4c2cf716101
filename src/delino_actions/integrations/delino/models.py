"""Wire models for the AutoDev / DevBird RPC endpoints."""

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class RpcEnvelope(BaseModel):
    """Common response shape: ``{success, message}`` plus endpoint-specific extras."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    success: bool = False
    message: str = ""

    @field_validator("message", mode="before")
    @classmethod
    def null_message_as_empty(cls, v):
        return "" if v is None else v


class ExchangeOIDCTokenRequest(BaseModel):
    oidc_token: str
    repository_owner: str
    repository_name: str


class ExchangeOIDCTokenResponse(RpcEnvelope):
    github_token: Optional[str] = Field(default=None, alias="githubToken")

    @model_validator(mode="after")
    def require_token_on_success(self) -> "ExchangeOIDCTokenResponse":
        if self.success and not self.github_token:
            raise ValueError("successful exchange returned no githubToken")
        return self


class LinkGitHubActionRequest(BaseModel):
    workflow_execution_token: str
    github_run_id: str


class RegisterBranchesRequest(BaseModel):
    workflow_execution_token: str
    branch_names: List[str]


class RegisterBranchesResponse(RpcEnvelope):
    # Existing pull requests the backend found for the submitted branches
    registered_pull_requests: Optional[List[Any]] = None


class UploadTaskGraphPlanRequest(BaseModel):
    workflow_execution_token: str
    plan_filename: str
    plan_content: str
