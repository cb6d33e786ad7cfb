"""Runtime telemetry fetched from the org.

The service never raises: every failure is folded into a
`RuntimeFetchOutcome` so a scan can fall back to static severities.
"""

import asyncio
import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import ValidationError

from apexscan.config import get_settings
from apexscan.models import ClassRuntimeData, RuntimeDataRequest, RuntimeReport
from apexscan.services.org_connection import OrgConnection

logger = logging.getLogger(__name__)

settings = get_settings()

ACCESS_DENIED_MARKERS = ("access denied", "permission")


class RuntimeFetchStatus(str, Enum):
    SUCCESS = "SUCCESS"
    ACCESS_DENIED = "ACCESS_DENIED"
    API_ERROR = "API_ERROR"
    NO_ORG_CONNECTION = "NO_ORG_CONNECTION"


@dataclass
class RuntimeFetchOutcome:
    """Typed result of a telemetry fetch."""

    status: RuntimeFetchStatus
    report: Optional[RuntimeReport] = None
    message: str = ""

    @property
    def is_success(self) -> bool:
        return self.status == RuntimeFetchStatus.SUCCESS and self.report is not None


class RuntimeDataService:
    """Fetches per-class runtime data with a bounded timeout and sequential retries."""

    def __init__(
        self,
        api_path: Optional[str] = None,
        timeout: Optional[float] = None,
        retry_attempts: Optional[int] = None,
    ):
        self.api_path = api_path or settings.runtime_api_path
        self.timeout = timeout if timeout is not None else settings.runtime_timeout_seconds
        self.retry_attempts = retry_attempts if retry_attempts is not None else settings.runtime_retry_attempts

    async def fetch_runtime_data(
        self,
        connection: Optional[OrgConnection],
        request: RuntimeDataRequest,
    ) -> RuntimeFetchOutcome:
        """
        POST the request to the runtime endpoint.

        Args:
            connection: Authenticated org connection, or None
            request: Classes to fetch data for

        Returns:
            RuntimeFetchOutcome; never raises
        """
        if connection is None:
            return RuntimeFetchOutcome(RuntimeFetchStatus.NO_ORG_CONNECTION, message="No org connection available")

        attempts = self.retry_attempts + 1
        last_error = ""
        for attempt in range(1, attempts + 1):
            try:
                payload = await asyncio.wait_for(
                    connection.request(
                        "POST",
                        self.api_path,
                        json=request.model_dump(by_alias=True),
                        timeout=self.timeout,
                    ),
                    timeout=self.timeout,
                )
            except asyncio.TimeoutError:
                last_error = f"Request timed out after {self.timeout}s"
            except Exception as e:
                last_error = str(e) or type(e).__name__
            else:
                return self._classify(payload)

            logger.warning(
                f"Runtime data request {request.request_id} failed (attempt {attempt}/{attempts}): {last_error}"
            )

        return RuntimeFetchOutcome(RuntimeFetchStatus.API_ERROR, message=last_error)

    def _classify(self, payload) -> RuntimeFetchOutcome:
        try:
            report = RuntimeReport.model_validate(payload)
        except ValidationError as e:
            logger.error(f"Malformed runtime data response: {e}")
            return RuntimeFetchOutcome(
                RuntimeFetchStatus.API_ERROR,
                message=f"Malformed runtime data response ({e.error_count()} errors)",
            )

        if report.is_success:
            return RuntimeFetchOutcome(RuntimeFetchStatus.SUCCESS, report=report, message=report.message)

        message = report.message or "Runtime data request failed"
        if any(marker in message.lower() for marker in ACCESS_DENIED_MARKERS):
            logger.info(f"Runtime data not available for this org: {message}")
            return RuntimeFetchOutcome(RuntimeFetchStatus.ACCESS_DENIED, message=message)
        return RuntimeFetchOutcome(RuntimeFetchStatus.API_ERROR, message=message)

    @staticmethod
    def get_class_data(report: Optional[RuntimeReport], class_name: str) -> Optional[ClassRuntimeData]:
        if report is None:
            return None
        return report.get_class_data(class_name)

    @staticmethod
    def generate_request_id(org_id: str, user_id: str) -> str:
        """Correlation id: `org:user:epoch_ms`."""
        return f"{org_id}:{user_id}:{int(time.time() * 1000)}"
