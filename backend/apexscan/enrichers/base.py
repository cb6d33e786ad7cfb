"""Base runtime enricher."""

from dataclasses import replace
from typing import Any, Optional

from apexscan.models import (
    AntipatternType,
    ClassRuntimeData,
    DetectedAntipattern,
    Severity,
    SeveritySource,
    max_severity,
)


class RuntimeEnricher:
    """Adjusts static findings with runtime telemetry for the same class.

    Static severity is a floor: runtime data can raise it, never lower it.
    Findings without a matching telemetry entry pass through unchanged.
    """

    antipattern_types: frozenset[AntipatternType] = frozenset()

    def supports(self, antipattern_type: AntipatternType) -> bool:
        return antipattern_type in self.antipattern_types

    def enrich(
        self,
        detections: list[DetectedAntipattern],
        class_data: Optional[ClassRuntimeData],
        class_name: str,
    ) -> list[DetectedAntipattern]:
        if class_data is None:
            return list(detections)
        index = self.build_index(class_data, class_name)
        if not index:
            return list(detections)
        return [self.enrich_instance(detection, index) for detection in detections]

    def build_index(self, class_data: ClassRuntimeData, class_name: str) -> dict[Any, Any]:
        raise NotImplementedError

    def enrich_instance(self, detection: DetectedAntipattern, index: dict[Any, Any]) -> DetectedAntipattern:
        raise NotImplementedError


def apply_runtime_severity(
    detection: DetectedAntipattern,
    runtime_severity: Severity,
    insight: str,
) -> DetectedAntipattern:
    """Return a copy carrying the runtime verdict."""
    return replace(
        detection,
        severity=max_severity(detection.severity, runtime_severity),
        severity_source=SeveritySource.RUNTIME,
        runtime_insight=insight,
    )
