"""Delino AutoDev / DevBird RPC integration."""

from .client import AUTODEV_SERVICE, DEVBIRD_SERVICE, DelinoClient
from .models import (
    ExchangeOIDCTokenRequest,
    ExchangeOIDCTokenResponse,
    LinkGitHubActionRequest,
    RegisterBranchesRequest,
    RegisterBranchesResponse,
    RpcEnvelope,
    UploadTaskGraphPlanRequest,
)

__all__ = [
    "AUTODEV_SERVICE",
    "DEVBIRD_SERVICE",
    "DelinoClient",
    "ExchangeOIDCTokenRequest",
    "ExchangeOIDCTokenResponse",
    "LinkGitHubActionRequest",
    "RegisterBranchesRequest",
    "RegisterBranchesResponse",
    "RpcEnvelope",
    "UploadTaskGraphPlanRequest",
]
