"""Antipattern detectors."""

from apexscan.detectors.base import ApexTreeVisitor, Detector
from apexscan.detectors.ggd_detector import GGDDetector
from apexscan.detectors.soql_no_where_limit_detector import SOQLNoWhereLimitDetector
from apexscan.detectors.soql_unused_fields_detector import SOQLUnusedFieldsDetector

__all__ = [
    "ApexTreeVisitor",
    "Detector",
    "GGDDetector",
    "SOQLNoWhereLimitDetector",
    "SOQLUnusedFieldsDetector",
]
