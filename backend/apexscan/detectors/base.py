"""Base detector and syntax tree visitor."""

import logging
from typing import Optional

from tree_sitter import Node

from apexscan.models import AntipatternType, DetectedAntipattern, Severity
from apexscan.parsers.apex_parser import ApexParser, ApexSyntaxError, get_node_text

logger = logging.getLogger(__name__)


class ApexTreeVisitor:
    """Depth-first visitor that tracks loop nesting and the enclosing method.

    Dispatches to `visit_<node type>` when defined, otherwise visits named
    children. State lives on the instance, so build a new visitor for every
    scan.
    """

    def __init__(self, code: str):
        self.code = code
        self.source = code.encode("utf-8")
        self.loop_depth = 0
        self.current_method: Optional[str] = None
        self.current_method_node: Optional[Node] = None

    @property
    def in_loop(self) -> bool:
        return self.loop_depth > 0

    def visit(self, node: Node):
        handler = getattr(self, f"visit_{node.type}", None)
        if handler is not None:
            handler(node)
        else:
            self.visit_children(node)

    def visit_children(self, node: Node):
        for child in node.named_children:
            self.visit(child)

    # Scopes

    def visit_class_declaration(self, node: Node):
        self._visit_scope(node, None, None)

    def visit_interface_declaration(self, node: Node):
        self._visit_scope(node, None, None)

    def visit_trigger_declaration(self, node: Node):
        self._visit_scope(node, None, None)

    def visit_method_declaration(self, node: Node):
        name = node.child_by_field_name("name")
        self._visit_scope(node, get_node_text(name) if name is not None else None, node)

    def visit_constructor_declaration(self, node: Node):
        self.visit_method_declaration(node)

    def _visit_scope(self, node: Node, method_name: Optional[str], method_node: Optional[Node]):
        saved = (self.current_method, self.current_method_node, self.loop_depth)
        self.current_method = method_name
        self.current_method_node = method_node
        self.loop_depth = 0
        try:
            self.visit_children(node)
        finally:
            self.current_method, self.current_method_node, self.loop_depth = saved

    # Loops: the body and per-iteration clauses run inside the loop,
    # `for` init and the enhanced-for iterable run once.

    def visit_for_statement(self, node: Node):
        for init in node.children_by_field_name("init"):
            self.visit(init)
        self._visit_in_loop(
            *node.children_by_field_name("condition"),
            *node.children_by_field_name("update"),
            node.child_by_field_name("body"),
        )

    def visit_enhanced_for_statement(self, node: Node):
        body = node.child_by_field_name("body")
        for child in node.named_children:
            if body is None or child.id != body.id:
                self.visit(child)
        self._visit_in_loop(body)

    def visit_while_statement(self, node: Node):
        self._visit_in_loop(node.child_by_field_name("condition"), node.child_by_field_name("body"))

    def visit_do_statement(self, node: Node):
        self._visit_in_loop(node.child_by_field_name("body"), node.child_by_field_name("condition"))

    def _visit_in_loop(self, *nodes: Optional[Node]):
        self.loop_depth += 1
        try:
            for child in nodes:
                if child is not None:
                    self.visit(child)
        finally:
            self.loop_depth -= 1


def source_line(code: str, line_number: int) -> str:
    """Trimmed text of a 1-based source line."""
    lines = code.splitlines()
    if 1 <= line_number <= len(lines):
        return lines[line_number - 1].strip()
    return ""


def loop_severity(in_loop: bool) -> Severity:
    return Severity.HIGH if in_loop else Severity.MEDIUM


class Detector:
    """Base class for antipattern detectors."""

    antipattern_type: AntipatternType

    def detect(self, class_name: str, code: str) -> list[DetectedAntipattern]:
        """
        Parse the class and report every instance of this antipattern.

        Unparseable source yields no findings rather than an error.
        """
        try:
            tree = ApexParser().parse(code)
        except ApexSyntaxError as e:
            logger.warning(f"{self.antipattern_type.value}: skipping unparseable class {class_name}: {e}")
            return []
        return self.detect_in_tree(tree, class_name, code)

    def detect_in_tree(self, tree: Node, class_name: str, code: str) -> list[DetectedAntipattern]:
        raise NotImplementedError
