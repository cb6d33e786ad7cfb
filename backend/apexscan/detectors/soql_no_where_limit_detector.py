"""Detector for SOQL queries without a WHERE or LIMIT clause."""

from tree_sitter import Node

from apexscan.detectors.base import Detector, loop_severity, source_line
from apexscan.detectors.soql_parser import has_bounding_clause
from apexscan.detectors.soql_visitor import collect_queries
from apexscan.models import AntipatternType, DetectedAntipattern


class SOQLNoWhereLimitDetector(Detector):
    """Flags queries whose outer clause has neither WHERE nor LIMIT.

    Sub-selects are ignored when checking the outer clause, so a bounded
    child query cannot hide an unbounded parent (or the reverse).
    """

    antipattern_type = AntipatternType.SOQL_NO_WHERE_LIMIT

    def detect_in_tree(self, tree: Node, class_name: str, code: str) -> list[DetectedAntipattern]:
        visitor = collect_queries(tree, code)
        return [
            DetectedAntipattern(
                class_name=class_name,
                method_name=query.method_name,
                line_number=query.start_line,
                code_before=source_line(code, query.start_line),
                severity=loop_severity(query.in_loop),
            )
            for query in visitor.queries
            if query.text.lstrip().upper().startswith("SELECT") and not has_bounding_clause(query.text)
        ]
