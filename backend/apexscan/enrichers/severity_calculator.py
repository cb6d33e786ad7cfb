"""Severity from runtime metrics."""

from dataclasses import dataclass
from typing import Optional

from apexscan.models import EntrypointData, Severity, SOQLRuntimeData


@dataclass(frozen=True)
class SOQLSeverityThresholds:
    critical_execution_count: int = 10_000_000
    major_execution_count: int = 1_000
    # count x average cost; an hour of total query time is critical
    critical_total_time_ms: float = 3_600_000

    @classmethod
    def from_settings(cls, settings) -> "SOQLSeverityThresholds":
        return cls(
            critical_execution_count=settings.soql_critical_execution_count,
            major_execution_count=settings.soql_major_execution_count,
            critical_total_time_ms=settings.soql_critical_total_time_ms,
        )


@dataclass(frozen=True)
class MethodSeverityThresholds:
    critical_avg_cpu_ms: float = 2_000

    @classmethod
    def from_settings(cls, settings) -> "MethodSeverityThresholds":
        return cls(critical_avg_cpu_ms=settings.method_critical_avg_cpu_ms)


DEFAULT_SOQL_THRESHOLDS = SOQLSeverityThresholds()
DEFAULT_METHOD_THRESHOLDS = MethodSeverityThresholds()


def calculate_soql_severity(
    data: SOQLRuntimeData,
    thresholds: SOQLSeverityThresholds = DEFAULT_SOQL_THRESHOLDS,
) -> Severity:
    if (
        data.representative_count > thresholds.critical_execution_count
        or data.total_query_execution_time > thresholds.critical_total_time_ms
    ):
        return Severity.CRITICAL
    if data.representative_count > thresholds.major_execution_count:
        return Severity.HIGH
    return Severity.LOW


def calculate_method_severity(
    entrypoints: list[EntrypointData],
    thresholds: MethodSeverityThresholds = DEFAULT_METHOD_THRESHOLDS,
) -> Severity:
    """CRITICAL if any entrypoint averages above the CPU threshold, else HIGH."""
    if not entrypoints:
        return Severity.LOW
    if any(ep.avg_cpu_time > thresholds.critical_avg_cpu_ms for ep in entrypoints):
        return Severity.CRITICAL
    return Severity.HIGH


def parse_line_number_from_identifier(identifier: str) -> Optional[int]:
    """Line number from a `ClassName.cls.LINE` query identifier."""
    parts = identifier.split(".")
    if len(parts) < 3:
        return None
    try:
        line = int(parts[-1])
    except ValueError:
        return None
    return line if line > 0 else None
