"""API dependencies for dependency injection."""

from functools import lru_cache
from typing import Annotated, Optional

from fastapi import Depends

from apexscan.antipatterns import AntipatternRegistry, build_default_registry
from apexscan.services.org_connection import OrgConnection
from apexscan.services.scan_service import ScanService


@lru_cache
def get_registry() -> AntipatternRegistry:
    """Registry shared across requests; modules hold no per-scan state."""
    return build_default_registry()


def get_scan_service(registry: Annotated[AntipatternRegistry, Depends(get_registry)]) -> ScanService:
    return ScanService(registry=registry)


def get_org_connection() -> Optional[OrgConnection]:
    """Org connection from settings, or None when no org is configured."""
    return OrgConnection.from_settings()


Scanner = Annotated[ScanService, Depends(get_scan_service)]
OrgConnectionDep = Annotated[Optional[OrgConnection], Depends(get_org_connection)]
