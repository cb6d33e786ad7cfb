"""Collects query literals together with their surrounding context."""

from typing import Optional

from tree_sitter import Node

from apexscan.detectors.base import ApexTreeVisitor
from apexscan.detectors.soql_parser import extract_fields
from apexscan.models import QueryInfo
from apexscan.parsers.apex_parser import get_node_text, node_end_line, node_line, query_text

# A query is linked to the last declaration at most this many lines above it
ASSIGNMENT_LINE_WINDOW = 2


class SOQLQueryVisitor(ApexTreeVisitor):
    """Builds a `QueryInfo` for every `query_expression` in the tree.

    Byte offsets in the collected `QueryInfo` index into `self.source`.
    """

    def __init__(self, code: str):
        super().__init__(code)
        self.queries: list[QueryInfo] = []
        self.class_fields: set[str] = set()
        self._last_declaration: Optional[tuple[str, int]] = None
        self._return_depth = 0

    def visit_method_declaration(self, node: Node):
        self._last_declaration = None
        super().visit_method_declaration(node)

    def visit_field_declaration(self, node: Node):
        # Properties are field declarations with an accessor list
        for declarator in node.named_children:
            if declarator.type == "variable_declarator":
                name = declarator.child_by_field_name("name")
                if name is not None:
                    self.class_fields.add(get_node_text(name).lower())
        self.visit_children(node)

    def visit_variable_declarator(self, node: Node):
        name = node.child_by_field_name("name")
        if name is not None:
            self._last_declaration = (get_node_text(name), node_line(name))
        self.visit_children(node)

    def visit_enhanced_for_statement(self, node: Node):
        name = node.child_by_field_name("name")
        if name is not None:
            self._last_declaration = (get_node_text(name), node_line(node))
        super().visit_enhanced_for_statement(node)

    def visit_return_statement(self, node: Node):
        self._return_depth += 1
        try:
            self.visit_children(node)
        finally:
            self._return_depth -= 1

    def visit_query_expression(self, node: Node):
        start_line = node_line(node)
        assigned_variable, declaration_line = None, None
        if self._last_declaration is not None:
            name, line = self._last_declaration
            if 0 <= start_line - line <= ASSIGNMENT_LINE_WINDOW:
                assigned_variable, declaration_line = name, line

        text = query_text(node)
        method = self.current_method_node
        self.queries.append(
            QueryInfo(
                text=text,
                start_line=start_line,
                end_line=node_end_line(node),
                start_byte=node.start_byte,
                end_byte=node.end_byte,
                method_name=self.current_method,
                in_loop=self.in_loop,
                fields=extract_fields(text),
                assigned_variable=assigned_variable,
                declaration_line=declaration_line,
                is_returned=self._return_depth > 0,
                scope_end_byte=method.end_byte if method is not None else len(self.source),
            )
        )


def collect_queries(tree: Node, code: str) -> SOQLQueryVisitor:
    visitor = SOQLQueryVisitor(code)
    visitor.visit(tree)
    return visitor
