"""Recommender that also rewrites the offending query."""

import logging
from dataclasses import replace

from apexscan.detectors.soql_parser import has_nested_queries, remove_unused_fields
from apexscan.models import AntipatternType, DetectedAntipattern
from apexscan.recommenders.base import Recommender
from apexscan.recommenders.instructions import SOQL_UNUSED_FIELDS_FIX_INSTRUCTION

logger = logging.getLogger(__name__)


class SOQLUnusedFieldsRecommender(Recommender):
    antipattern_type = AntipatternType.SOQL_UNUSED_FIELDS

    def fix_instruction(self) -> str:
        return SOQL_UNUSED_FIELDS_FIX_INSTRUCTION

    def recommend(self, detection: DetectedAntipattern) -> DetectedAntipattern:
        """Fill `code_after` with the query minus its unused fields, when safe."""
        metadata = detection.metadata or {}
        unused = metadata.get("unusedFields") or []
        original = metadata.get("originalFields") or []
        if not unused:
            return detection

        if has_nested_queries(detection.code_before):
            logger.debug(f"{detection.class_name}:{detection.line_number} nested query, no rewrite")
            return detection
        if len(unused) >= len(original):
            return detection
        if detection.code_before.endswith("..."):
            # truncated snippet, rewriting it would drop the tail
            return detection

        fixed = remove_unused_fields(detection.code_before, unused)
        if not fixed:
            return detection
        return replace(detection, code_after=fixed)
