"""Detector for SOQL queries that select fields the code never reads.

A query is analyzed only when it can be tied to a result variable. The
variable is the nearest declaration at most two lines above the query,
which stands in for real def-use tracking. Queries are skipped when:
- no variable could be tied to the query
- the query or its variable is returned from the method
- the variable is a class member (usage in other methods is invisible)
- the result is consumed as a whole (passed on, serialized, indexed)

Fields count as used when read through the variable (or a loop alias of
it) after the query, or when a later query mentions them alongside the
variable. `Id` and `COUNT()` are never reported.
"""

import logging
from typing import Optional

from tree_sitter import Node

from apexscan.detectors.base import Detector, loop_severity
from apexscan.detectors.field_tracker import (
    check_complete_usage,
    find_columns_used_in_later_soqls,
    find_direct_field_access,
    is_returned,
)
from apexscan.detectors.soql_parser import (
    exclude_system_fields,
    format_query_snippet,
    has_nested_queries,
)
from apexscan.detectors.soql_visitor import SOQLQueryVisitor, collect_queries
from apexscan.models import AntipatternType, DetectedAntipattern, QueryInfo

logger = logging.getLogger(__name__)


class SOQLUnusedFieldsDetector(Detector):
    """Flags queries where some, but not all, selected fields go unread."""

    antipattern_type = AntipatternType.SOQL_UNUSED_FIELDS

    def detect_in_tree(self, tree: Node, class_name: str, code: str) -> list[DetectedAntipattern]:
        try:
            visitor = collect_queries(tree, code)
            detections = []
            for query in visitor.queries:
                detection = self._analyze_query(query, visitor, class_name)
                if detection is not None:
                    detections.append(detection)
            return detections
        except Exception as e:
            logger.error(f"Unused field analysis failed for {class_name}: {e}")
            return []

    def _analyze_query(
        self,
        query: QueryInfo,
        visitor: SOQLQueryVisitor,
        class_name: str,
    ) -> Optional[DetectedAntipattern]:
        variable = query.assigned_variable
        if not variable or query.is_returned:
            return None

        source = visitor.source
        scope_end = query.scope_end_byte if query.scope_end_byte is not None else len(source)
        if is_returned(variable, source[query.start_byte:scope_end].decode("utf-8")):
            return None
        if variable.lower() in visitor.class_fields:
            return None

        code_after = source[query.end_byte:scope_end].decode("utf-8")
        candidates = exclude_system_fields(query.fields)
        if check_complete_usage(variable, code_after, candidates):
            logger.debug(f"{class_name}:{query.start_line} result of {variable} used as a whole")
            return None

        later_queries = [
            other.text
            for other in visitor.queries
            if query.start_byte < other.start_byte < scope_end
        ]
        direct = find_direct_field_access(variable, code_after, candidates)
        in_later_queries = find_columns_used_in_later_soqls(variable, later_queries, candidates)
        used = direct | in_later_queries

        unused = [f for f in candidates if f not in used]
        if not 0 < len(unused) < len(query.fields):
            return None

        return DetectedAntipattern(
            class_name=class_name,
            method_name=query.method_name,
            line_number=query.start_line,
            code_before=format_query_snippet(query.text),
            severity=loop_severity(query.in_loop),
            metadata={
                "unusedFields": unused,
                "originalFields": list(query.fields),
                "assignedVariable": variable,
                "isInLoop": query.in_loop,
                "isReturned": False,
                "isClassMember": False,
                "hasNestedQueries": has_nested_queries(query.text),
                "usedInLaterSOQLs": bool(in_later_queries),
                "completeUsageDetected": False,
            },
        )
