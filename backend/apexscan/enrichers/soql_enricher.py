"""Runtime enricher keyed by query line number."""

from apexscan.enrichers.base import RuntimeEnricher, apply_runtime_severity
from apexscan.enrichers.severity_calculator import (
    DEFAULT_SOQL_THRESHOLDS,
    SOQLSeverityThresholds,
    calculate_soql_severity,
    parse_line_number_from_identifier,
)
from apexscan.models import AntipatternType, ClassRuntimeData, DetectedAntipattern, SOQLRuntimeData


def format_query_insight(data: SOQLRuntimeData) -> str:
    total = data.total_query_execution_time
    if float(total).is_integer():
        total = int(total)
    return f"Query executed {data.representative_count} times, total execution time: {total}ms"


class SOQLRuntimeEnricher(RuntimeEnricher):
    """Matches findings to query telemetry through `ClassName.cls.LINE` identifiers."""

    antipattern_types = frozenset({AntipatternType.SOQL_NO_WHERE_LIMIT, AntipatternType.SOQL_UNUSED_FIELDS})

    def __init__(self, thresholds: SOQLSeverityThresholds = DEFAULT_SOQL_THRESHOLDS):
        self.thresholds = thresholds

    def build_index(self, class_data: ClassRuntimeData, class_name: str) -> dict[int, SOQLRuntimeData]:
        prefix = f"{class_name}.cls."
        index = {}
        for data in class_data.soql_runtime_data:
            if not data.unique_query_identifier.startswith(prefix):
                continue
            line = parse_line_number_from_identifier(data.unique_query_identifier)
            if line is not None:
                index[line] = data
        return index

    def enrich_instance(
        self,
        detection: DetectedAntipattern,
        index: dict[int, SOQLRuntimeData],
    ) -> DetectedAntipattern:
        data = index.get(detection.line_number)
        if data is None:
            return detection
        severity = calculate_soql_severity(data, self.thresholds)
        return apply_runtime_severity(detection, severity, format_query_insight(data))
