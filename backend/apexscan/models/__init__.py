"""Domain models."""

from apexscan.models.antipattern_type import AntipatternType
from apexscan.models.detection import AntipatternResult, DetectedAntipattern, ScanResult
from apexscan.models.query_info import QueryInfo
from apexscan.models.runtime_data import (
    ClassRuntimeData,
    EntrypointData,
    MethodRuntimeData,
    RuntimeDataRequest,
    RuntimeReport,
    SOQLRuntimeData,
)
from apexscan.models.severity import Severity, SeveritySource, max_severity

__all__ = [
    "AntipatternType",
    "AntipatternResult",
    "DetectedAntipattern",
    "ScanResult",
    "QueryInfo",
    "ClassRuntimeData",
    "EntrypointData",
    "MethodRuntimeData",
    "RuntimeDataRequest",
    "RuntimeReport",
    "SOQLRuntimeData",
    "Severity",
    "SeveritySource",
    "max_severity",
]
