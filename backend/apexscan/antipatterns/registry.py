"""Registry of antipattern modules."""

import logging
from typing import Optional

from apexscan.antipatterns.module import AntipatternModule
from apexscan.config import Settings, get_settings
from apexscan.detectors import GGDDetector, SOQLNoWhereLimitDetector, SOQLUnusedFieldsDetector
from apexscan.enrichers import MethodRuntimeEnricher, SOQLRuntimeEnricher
from apexscan.enrichers.severity_calculator import MethodSeverityThresholds, SOQLSeverityThresholds
from apexscan.models import AntipatternType, ClassRuntimeData, ScanResult
from apexscan.recommenders import GGDRecommender, SOQLNoWhereLimitRecommender, SOQLUnusedFieldsRecommender

logger = logging.getLogger(__name__)


class AntipatternRegistry:
    """Ordered set of modules; results follow registration order."""

    def __init__(self):
        self._modules: dict[AntipatternType, AntipatternModule] = {}

    def register(self, module: AntipatternModule):
        """Add a module. Re-registering a type replaces it in place."""
        self._modules[module.antipattern_type] = module

    def get_module(self, antipattern_type: AntipatternType) -> Optional[AntipatternModule]:
        return self._modules.get(antipattern_type)

    def modules(self) -> list[AntipatternModule]:
        return list(self._modules.values())

    def registered_types(self) -> list[AntipatternType]:
        return list(self._modules.keys())

    def scan(
        self,
        class_name: str,
        code: str,
        class_data: Optional[ClassRuntimeData] = None,
    ) -> ScanResult:
        """
        Run every module over one class.

        Args:
            class_name: Name of the Apex class
            code: Apex source code
            class_data: Runtime telemetry for the class, if fetched

        Returns:
            ScanResult holding only the types that had findings
        """
        results = []
        for module in self._modules.values():
            try:
                result = module.scan(class_name, code, class_data)
            except Exception as e:
                logger.error(f"{module.antipattern_type.value} scan failed for {class_name}: {e}")
                continue
            if result.detected_instances:
                results.append(result)
        return ScanResult(antipattern_results=results)


def build_default_registry(settings: Optional[Settings] = None) -> AntipatternRegistry:
    """Registry with the GGD, SOQL no WHERE/LIMIT and SOQL unused fields modules."""
    settings = settings or get_settings()
    method_enricher = MethodRuntimeEnricher(MethodSeverityThresholds.from_settings(settings))
    soql_enricher = SOQLRuntimeEnricher(SOQLSeverityThresholds.from_settings(settings))

    registry = AntipatternRegistry()
    registry.register(AntipatternModule(GGDDetector(), GGDRecommender(), method_enricher))
    registry.register(AntipatternModule(SOQLNoWhereLimitDetector(), SOQLNoWhereLimitRecommender(), soql_enricher))
    registry.register(AntipatternModule(SOQLUnusedFieldsDetector(), SOQLUnusedFieldsRecommender(), soql_enricher))
    return registry
