"""Schemas for the scan endpoint."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ScanRequest(BaseModel):
    """Request to scan one Apex class."""

    model_config = ConfigDict(populate_by_name=True)

    class_name: str = Field(..., min_length=1, alias="className", description="Apex class name")
    source_text: str = Field(..., min_length=1, alias="sourceText", description="Apex source code")
    use_runtime_data: bool = Field(default=True, alias="useRuntimeData")


class ScanResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    class_name: str = Field(..., alias="className")
    runtime_status: str = Field(..., alias="runtimeStatus")
    runtime_message: str = Field(default="", alias="runtimeMessage")
    total_issues: int = Field(..., alias="totalIssues")
    antipattern_results: list[dict[str, Any]] = Field(
        default_factory=list, alias="antipatternResults"
    )
    report: str
