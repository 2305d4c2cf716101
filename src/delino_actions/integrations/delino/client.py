"""JSON-over-HTTPS client for the Delino RPC services."""

from typing import Optional

import requests
from pydantic import BaseModel

AUTODEV_SERVICE = "delino.autodev.v1.AutoDev"
DEVBIRD_SERVICE = "delino.devbird.v1.DevBird"


class DelinoClient:
    """Posts request models to ``{base_url}/{service}/{method}``.

    Transport errors propagate; callers wrap each call in ``best_effort_rpc``.
    """

    def __init__(
        self,
        base_url: str,
        service: str,
        user_agent: str,
        access_token: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.service = service
        self.user_agent = user_agent
        self.access_token = access_token
        self.timeout = timeout
        self.session = session or requests.Session()

    @classmethod
    def for_autodev(cls, settings, access_token: Optional[str] = None, session=None) -> "DelinoClient":
        return cls(
            settings.autodev_api_url,
            AUTODEV_SERVICE,
            user_agent="autodev-action",
            access_token=access_token,
            timeout=settings.request_timeout,
            session=session,
        )

    @classmethod
    def for_devbird(cls, settings, access_token: Optional[str] = None, session=None) -> "DelinoClient":
        return cls(
            settings.devbird_api_url,
            DEVBIRD_SERVICE,
            user_agent="devbird-action",
            access_token=access_token,
            timeout=settings.request_timeout,
            session=session,
        )

    def endpoint(self, method: str) -> str:
        return f"{self.base_url}/{self.service}/{method}"

    def call(self, method: str, request: BaseModel, authenticated: bool = True) -> requests.Response:
        """POST ``request`` as JSON, with the bearer token unless ``authenticated`` is False."""
        headers = {
            "Content-Type": "application/json",
            "User-Agent": self.user_agent,
        }
        if authenticated and self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"

        return self.session.post(
            self.endpoint(method),
            json=request.model_dump(),
            headers=headers,
            timeout=self.timeout,
        )
