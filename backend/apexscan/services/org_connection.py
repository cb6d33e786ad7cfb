"""Authenticated connection to an org's REST API."""

import logging
from typing import Any, Optional

import httpx

from apexscan.config import Settings, get_settings

logger = logging.getLogger(__name__)

ACCESS_DENIED_STATUS_CODES = (401, 403)


class OrgConnection:
    """Generic authenticated request primitive used by the runtime data service."""

    def __init__(
        self,
        instance_url: str,
        access_token: str,
        org_id: str,
        user_id: str = "",
    ):
        self.instance_url = instance_url.rstrip("/")
        self.access_token = access_token
        self.org_id = org_id
        self.user_id = user_id

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> Optional["OrgConnection"]:
        """Build a connection from settings, or None when no org is configured."""
        settings = settings or get_settings()
        if not settings.has_org_credentials:
            return None
        return cls(
            instance_url=settings.org_instance_url,
            access_token=settings.org_access_token,
            org_id=settings.org_id,
            user_id=settings.org_user_id,
        )

    async def request(
        self,
        method: str,
        path: str,
        json: Optional[dict[str, Any]] = None,
        timeout: float = 30.0,
    ) -> Any:
        """Send a request and return the decoded JSON body.

        Args:
            method: HTTP method
            path: Path relative to the instance URL
            json: Request body
            timeout: Seconds before the request is abandoned

        Returns:
            Decoded response body. 401/403 responses come back as a
            FAILURE payload so callers can tell denial from breakage.

        Raises:
            httpx.HTTPError: on transport errors and other HTTP failures
        """
        async with httpx.AsyncClient(timeout=timeout) as client:
            response = await client.request(
                method,
                f"{self.instance_url}{path}",
                json=json,
                headers={
                    "Authorization": f"Bearer {self.access_token}",
                    "Content-Type": "application/json",
                    "Accept": "application/json",
                },
            )
            if response.status_code in ACCESS_DENIED_STATUS_CODES:
                logger.warning(f"Org request to {path} denied with HTTP {response.status_code}")
                return {
                    "status": "FAILURE",
                    "message": f"Access denied (HTTP {response.status_code}): {_error_detail(response)}",
                }
            response.raise_for_status()
            return response.json()


def _error_detail(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text
    # REST errors come back as [{"message": ..., "errorCode": ...}]
    if isinstance(body, list) and body and isinstance(body[0], dict):
        return body[0].get("message", "")
    if isinstance(body, dict):
        return body.get("message", "")
    return str(body)
