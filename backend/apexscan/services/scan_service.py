"""Scan service: runtime data fetch plus the antipattern registry."""

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from apexscan.antipatterns import AntipatternRegistry, build_default_registry
from apexscan.models import ClassRuntimeData, RuntimeDataRequest, ScanResult
from apexscan.services.org_connection import OrgConnection
from apexscan.services.runtime_data_service import (
    RuntimeDataService,
    RuntimeFetchOutcome,
    RuntimeFetchStatus,
)

logger = logging.getLogger(__name__)


@dataclass
class ScanReport:
    """A scan result with the outcome of the runtime data fetch."""

    class_name: str
    result: ScanResult
    runtime_status: RuntimeFetchStatus
    runtime_message: str = ""
    runtime_data_used: bool = False


class ScanService:
    """Orchestrates one class scan. Holds no per-scan state."""

    def __init__(
        self,
        registry: Optional[AntipatternRegistry] = None,
        runtime_service: Optional[RuntimeDataService] = None,
    ):
        self.registry = registry or build_default_registry()
        self.runtime_service = runtime_service or RuntimeDataService()

    def scan(
        self,
        class_name: str,
        code: str,
        class_data: Optional[ClassRuntimeData] = None,
    ) -> ScanResult:
        return self.registry.scan(class_name, code, class_data)

    async def fetch_class_data(
        self,
        class_name: str,
        connection: Optional[OrgConnection],
    ) -> tuple[Optional[ClassRuntimeData], RuntimeFetchOutcome]:
        if connection is None:
            outcome = RuntimeFetchOutcome(RuntimeFetchStatus.NO_ORG_CONNECTION, message="No org connection available")
            return None, outcome

        request = RuntimeDataRequest(
            request_id=RuntimeDataService.generate_request_id(connection.org_id, connection.user_id),
            org_id=connection.org_id,
            classes=[class_name],
        )
        outcome = await self.runtime_service.fetch_runtime_data(connection, request)
        if not outcome.is_success:
            logger.warning(f"Runtime data unavailable for {class_name} ({outcome.status.value}): {outcome.message}")
            return None, outcome

        class_data = RuntimeDataService.get_class_data(outcome.report, class_name)
        if class_data is None:
            logger.info(f"No runtime data reported for {class_name}")
        return class_data, outcome

    async def scan_class(
        self,
        class_name: str,
        code: str,
        connection: Optional[OrgConnection] = None,
    ) -> ScanReport:
        """
        Scan a class, using runtime data when an org connection is given.

        Args:
            class_name: Name of the Apex class
            code: Apex source code
            connection: Org connection for runtime data, or None

        Returns:
            ScanReport; static severities are kept when runtime data is missing
        """
        class_data, outcome = await self.fetch_class_data(class_name, connection)
        result = await asyncio.to_thread(self.scan, class_name, code, class_data)
        logger.info(
            f"Scanned {class_name}: {result.total_issues} issue(s) in "
            f"{len(result.antipattern_results)} type(s), runtime={outcome.status.value}"
        )
        return ScanReport(
            class_name=class_name,
            result=result,
            runtime_status=outcome.status,
            runtime_message=outcome.message,
            runtime_data_used=class_data is not None,
        )
