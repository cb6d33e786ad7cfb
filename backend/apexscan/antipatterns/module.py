"""A detector, its recommender and an optional runtime enricher as one unit."""

from typing import Optional

from apexscan.detectors.base import Detector
from apexscan.enrichers.base import RuntimeEnricher
from apexscan.models import AntipatternResult, AntipatternType, ClassRuntimeData
from apexscan.recommenders.base import Recommender


class AntipatternModule:
    """Pluggable unit handling a single antipattern type."""

    def __init__(
        self,
        detector: Detector,
        recommender: Optional[Recommender] = None,
        enricher: Optional[RuntimeEnricher] = None,
    ):
        if recommender is not None and recommender.antipattern_type != detector.antipattern_type:
            raise ValueError(
                "Detector and recommender antipattern types must match. "
                f"Detector: {detector.antipattern_type.value}, "
                f"Recommender: {recommender.antipattern_type.value}"
            )
        if enricher is not None and not enricher.supports(detector.antipattern_type):
            raise ValueError(
                f"{type(enricher).__name__} does not handle {detector.antipattern_type.value}"
            )
        self.detector = detector
        self.recommender = recommender
        self.enricher = enricher

    @property
    def antipattern_type(self) -> AntipatternType:
        return self.detector.antipattern_type

    def fix_instruction(self) -> str:
        if self.recommender is None:
            return f"{self.antipattern_type.value} antipattern detected. Manual review and fix recommended."
        return self.recommender.fix_instruction()

    def scan(
        self,
        class_name: str,
        code: str,
        class_data: Optional[ClassRuntimeData] = None,
    ) -> AntipatternResult:
        """Detect, attach instance guidance, then apply runtime data if any."""
        detections = self.detector.detect(class_name, code)
        if self.recommender is not None:
            detections = [self.recommender.recommend(d) for d in detections]
        if self.enricher is not None and class_data is not None:
            detections = self.enricher.enrich(detections, class_data, class_name)

        return AntipatternResult(
            antipattern_type=self.antipattern_type,
            fix_instruction=self.fix_instruction() if detections else "",
            detected_instances=detections,
        )
