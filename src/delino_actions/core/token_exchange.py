"""Exchange the run's OIDC token for a GitHub App installation token."""

import logging
from typing import Optional

from ..errors import ActionError
from ..integrations.delino.client import DelinoClient
from ..integrations.delino.models import ExchangeOIDCTokenRequest, ExchangeOIDCTokenResponse
from .outcome import best_effort_rpc

logger = logging.getLogger(__name__)

EXCHANGE_METHOD = "ExchangeOIDCTokenForGitHubToken"

# Names downstream workflow steps read the installation token from
GITHUB_TOKEN_OUTPUT = "github_token"
GITHUB_TOKEN_ENV = "githubToken"


class TokenExchanger:
    """Best-effort OIDC → installation token exchange against AutoDev.

    Never raises: a runner without OIDC, or a backend that refuses the
    exchange, leaves the action to work with the tokens it was given.
    """

    def __init__(self, settings, io, client: Optional[DelinoClient] = None):
        self.settings = settings
        self.io = io
        self.client = client or DelinoClient.for_autodev(settings)

    def _request_oidc_token(self) -> Optional[str]:
        logger.info("Requesting GitHub OIDC token...")
        try:
            return self.io.get_id_token(
                audience=self.settings.oidc_audience,
                timeout=self.settings.request_timeout,
            )
        except Exception as e:
            logger.info("OIDC token not available, will use provided tokens")
            logger.debug(f"OIDC error: {e}")
            return None

    def exchange(self, repository_owner: str, repository_name: str) -> Optional[str]:
        """Return the installation token, or None when it could not be obtained.

        On success the token is masked, exported as ``githubToken`` and
        published as the ``github_token`` output before it is returned.
        """
        oidc_token = self._request_oidc_token()
        if not oidc_token:
            return None

        logger.info("OIDC token obtained, exchanging for GitHub App installation token...")
        request = ExchangeOIDCTokenRequest(
            oidc_token=oidc_token,
            repository_owner=repository_owner,
            repository_name=repository_name,
        )
        report = best_effort_rpc(
            "OIDC token exchange",
            lambda: self.client.call(EXCHANGE_METHOD, request, authenticated=False),
            ExchangeOIDCTokenResponse,
            logger_instance=logger,
        )
        if not report.success:
            return None

        github_token = report.envelope.github_token
        try:
            self.io.set_secret(github_token)
            self.io.export_variable(GITHUB_TOKEN_ENV, github_token)
            self.io.set_output(GITHUB_TOKEN_OUTPUT, github_token)
        except (OSError, ActionError) as e:
            logger.warning(f"Could not publish GitHub App installation token: {e}")
            return None
        logger.info("Obtained GitHub App installation token via OIDC")
        return github_token
