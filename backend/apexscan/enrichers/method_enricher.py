"""Runtime enricher keyed by the enclosing method."""

from apexscan.enrichers.base import RuntimeEnricher, apply_runtime_severity
from apexscan.enrichers.severity_calculator import (
    DEFAULT_METHOD_THRESHOLDS,
    MethodSeverityThresholds,
    calculate_method_severity,
)
from apexscan.models import (
    AntipatternType,
    ClassRuntimeData,
    DetectedAntipattern,
    EntrypointData,
    MethodRuntimeData,
)

TOP_ENTRYPOINTS = 3


def format_entrypoint_insight(entrypoints: list[EntrypointData]) -> str:
    top = sorted(entrypoints, key=lambda ep: ep.sum_cpu_time, reverse=True)[:TOP_ENTRYPOINTS]
    names = ", ".join(ep.entrypoint_name for ep in top)
    total_cpu = sum(ep.sum_cpu_time for ep in entrypoints) / 1000
    total_db = sum(ep.sum_db_time for ep in entrypoints) / 1000
    return f"Top entrypoints: {names}. Total CPU: {total_cpu:.1f}s, Total DB: {total_db:.1f}s"


class MethodRuntimeEnricher(RuntimeEnricher):
    """Uses per-method entrypoint metrics. Method names match case-insensitively."""

    antipattern_types = frozenset({AntipatternType.GGD})

    def __init__(self, thresholds: MethodSeverityThresholds = DEFAULT_METHOD_THRESHOLDS):
        self.thresholds = thresholds

    def build_index(self, class_data: ClassRuntimeData, class_name: str) -> dict[str, MethodRuntimeData]:
        return {m.method_name.lower(): m for m in class_data.methods if m.entrypoints}

    def enrich_instance(
        self,
        detection: DetectedAntipattern,
        index: dict[str, MethodRuntimeData],
    ) -> DetectedAntipattern:
        if not detection.method_name:
            return detection
        method = index.get(detection.method_name.lower())
        if method is None:
            return detection
        severity = calculate_method_severity(method.entrypoints, self.thresholds)
        return apply_runtime_severity(detection, severity, format_entrypoint_insight(method.entrypoints))
