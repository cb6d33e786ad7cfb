"""Detector for Schema.getGlobalDescribe() calls."""

from dataclasses import dataclass
from typing import Optional

from tree_sitter import Node

from apexscan.detectors.base import ApexTreeVisitor, Detector, loop_severity, source_line
from apexscan.models import AntipatternType, DetectedAntipattern
from apexscan.parsers.apex_parser import get_node_text, node_line

GUARDED_METHOD = "getglobaldescribe"
GUARDED_RECEIVER = "schema"


@dataclass
class GlobalDescribeCall:
    line: int
    method_name: Optional[str]
    in_loop: bool


def is_global_describe_call(node: Node) -> bool:
    """True for `Schema.getGlobalDescribe(...)`, including `System.Schema`."""
    if node.type != "method_invocation":
        return False
    name = node.child_by_field_name("name")
    if name is None or get_node_text(name).lower() != GUARDED_METHOD:
        return False
    receiver = node.child_by_field_name("object")
    if receiver is None:
        return False
    last_segment = "".join(get_node_text(receiver).split()).split(".")[-1]
    return last_segment.rstrip("?").lower() == GUARDED_RECEIVER


class GlobalDescribeVisitor(ApexTreeVisitor):
    def __init__(self, code: str):
        super().__init__(code)
        self.calls: list[GlobalDescribeCall] = []

    def visit_method_invocation(self, node: Node):
        if is_global_describe_call(node):
            name = node.child_by_field_name("name")
            self.calls.append(GlobalDescribeCall(node_line(name), self.current_method, self.in_loop))
        self.visit_children(node)


class GGDDetector(Detector):
    """Flags every Schema.getGlobalDescribe() call; HIGH inside loops, MEDIUM elsewhere."""

    antipattern_type = AntipatternType.GGD

    def detect_in_tree(self, tree: Node, class_name: str, code: str) -> list[DetectedAntipattern]:
        visitor = GlobalDescribeVisitor(code)
        visitor.visit(tree)
        return [
            DetectedAntipattern(
                class_name=class_name,
                method_name=call.method_name,
                line_number=call.line,
                code_before=source_line(code, call.line),
                severity=loop_severity(call.in_loop),
            )
            for call in visitor.calls
        ]
