"""Scan result models."""

from dataclasses import dataclass, field
from typing import Any, Optional

from apexscan.models.antipattern_type import AntipatternType
from apexscan.models.severity import Severity, SeveritySource


@dataclass
class DetectedAntipattern:
    """One reported finding."""

    class_name: str
    line_number: int
    code_before: str
    severity: Severity
    method_name: Optional[str] = None
    severity_source: SeveritySource = SeveritySource.STATIC
    code_after: Optional[str] = None
    runtime_insight: Optional[str] = None  # set by runtime enrichers
    metadata: Optional[dict[str, Any]] = None

    def __post_init__(self):
        if self.line_number < 1:
            raise ValueError(f"line_number must be >= 1, got {self.line_number}")

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the camelCase keys of the scan output contract."""
        data: dict[str, Any] = {"className": self.class_name}
        if self.method_name is not None:
            data["methodName"] = self.method_name
        data["lineNumber"] = self.line_number
        data["codeBefore"] = self.code_before
        if self.code_after:
            data["codeAfter"] = self.code_after
        data["severity"] = self.severity.value
        data["severitySource"] = self.severity_source.value
        if self.runtime_insight is not None:
            data["runtimeInsight"] = self.runtime_insight
        if self.metadata is not None:
            data["metadata"] = dict(self.metadata)
        return data


@dataclass
class AntipatternResult:
    """All findings of one antipattern type."""

    antipattern_type: AntipatternType
    fix_instruction: str
    detected_instances: list[DetectedAntipattern] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "antipatternType": self.antipattern_type.value,
            "fixInstruction": self.fix_instruction,
            "detectedInstances": [i.to_dict() for i in self.detected_instances],
        }


@dataclass
class ScanResult:
    """Whole-file outcome. Only types with findings are present."""

    antipattern_results: list[AntipatternResult] = field(default_factory=list)

    @property
    def total_issues(self) -> int:
        return sum(len(r.detected_instances) for r in self.antipattern_results)

    def instances(self) -> list[DetectedAntipattern]:
        return [i for r in self.antipattern_results for i in r.detected_instances]

    def to_dict(self) -> dict[str, Any]:
        return {"antipatternResults": [r.to_dict() for r in self.antipattern_results]}
