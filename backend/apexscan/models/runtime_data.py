"""Runtime telemetry payloads exchanged with the org endpoint."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RuntimeModel(BaseModel):
    """Base for payload models; camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EntrypointData(RuntimeModel):
    """Aggregated metrics for one entrypoint that reaches a method."""

    entrypoint_name: str
    avg_cpu_time: float = 0.0
    avg_db_time: float = 0.0
    sum_cpu_time: float = 0.0
    sum_db_time: float = 0.0


class MethodRuntimeData(RuntimeModel):
    method_name: str
    entrypoints: list[EntrypointData] = Field(default_factory=list)


class SOQLRuntimeData(RuntimeModel):
    """Execution stats for one query, keyed by `ClassName.cls.LINE`."""

    unique_query_identifier: str
    representative_count: int = 0
    total_query_execution_time: float = 0.0


class ClassRuntimeData(RuntimeModel):
    methods: list[MethodRuntimeData] = Field(default_factory=list)
    soql_runtime_data: list[SOQLRuntimeData] = Field(default_factory=list)


class RuntimeReport(RuntimeModel):
    """Full response of the runtime telemetry endpoint."""

    status: str
    message: str = ""
    class_data: dict[str, ClassRuntimeData] = Field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return self.status.upper() == "SUCCESS"

    def get_class_data(self, class_name: str) -> Optional[ClassRuntimeData]:
        return self.class_data.get(class_name)


class RuntimeDataRequest(RuntimeModel):
    request_id: str
    org_id: str
    classes: list[str]
