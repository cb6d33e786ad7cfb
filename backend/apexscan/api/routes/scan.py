"""Scan routes."""

import logging

from fastapi import APIRouter

from apexscan.api.deps import OrgConnectionDep, Scanner
from apexscan.schemas.scan import ScanRequest, ScanResponse
from apexscan.services.report_service import format_scan_report

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/scan", response_model=ScanResponse, response_model_by_alias=True)
async def scan_class(
    scan_request: ScanRequest,
    scanner: Scanner,
    connection: OrgConnectionDep,
):
    """Scan an Apex class for performance antipatterns.

    Runtime data is used when requested and an org connection is configured;
    otherwise severities come from static analysis alone.
    """
    logger.info(f"Scan requested for {scan_request.class_name} ({len(scan_request.source_text)} chars)")

    report = await scanner.scan_class(
        scan_request.class_name,
        scan_request.source_text,
        connection if scan_request.use_runtime_data else None,
    )

    return ScanResponse(
        class_name=report.class_name,
        runtime_status=report.runtime_status.value,
        runtime_message=report.runtime_message,
        total_issues=report.result.total_issues,
        antipattern_results=report.result.to_dict()["antipatternResults"],
        report=format_scan_report(report.class_name, report.result, report.runtime_data_used),
    )
