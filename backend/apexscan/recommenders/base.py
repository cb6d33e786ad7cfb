"""Base recommender."""

from apexscan.models import AntipatternType, DetectedAntipattern


class Recommender:
    """Supplies fix guidance for one antipattern type."""

    antipattern_type: AntipatternType

    def fix_instruction(self) -> str:
        raise NotImplementedError

    def recommend(self, detection: DetectedAntipattern) -> DetectedAntipattern:
        """Attach instance-level guidance. Default: none."""
        return detection
