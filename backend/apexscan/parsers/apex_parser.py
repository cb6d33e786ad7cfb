"""Apex parser using tree-sitter.

The `apex` grammar is loaded from tree-sitter-language-pack. Nodes used by
the detectors:
- `class_declaration`, `interface_declaration`, `trigger_declaration`
- `method_declaration` and `constructor_declaration` (field `name`)
- `field_declaration` and `local_variable_declaration` with `variable_declarator`
- `for_statement`, `enhanced_for_statement`, `while_statement`, `do_statement`
- `query_expression` for bracketed SOQL/SOSL literals
- `method_invocation` (fields `object` and `name`)
"""

import logging
from typing import Iterator, Optional

from tree_sitter import Node, Parser
from tree_sitter_language_pack import get_parser

logger = logging.getLogger(__name__)

APEX_LANGUAGE = "apex"


class ApexSyntaxError(Exception):
    """Raised when source text cannot be parsed."""

    def __init__(self, message: str, line: int = 0):
        super().__init__(f"{message} (line {line})" if line else message)
        self.line = line


class ApexParser:
    """Parser for Apex code using tree-sitter.

    tree-sitter recovers from syntax errors by inserting ERROR and MISSING
    nodes. Such trees are rejected so detectors never see partial classes.
    """

    def __init__(self):
        self._parser: Parser = get_parser(APEX_LANGUAGE)

    def parse(self, code: str) -> Node:
        """
        Parse Apex source into a syntax tree.

        Args:
            code: Apex source code

        Returns:
            Root node of the tree

        Raises:
            ApexSyntaxError: if the tree contains error or missing nodes
        """
        tree = self._parser.parse(code.encode("utf-8"))
        root = tree.root_node
        if root.has_error:
            error = find_error_node(root)
            raise ApexSyntaxError("Invalid Apex syntax", node_line(error) if error is not None else 0)
        return root


def find_error_node(node: Node) -> Optional[Node]:
    """First ERROR or MISSING node in source order."""
    if node.is_error or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            found = find_error_node(child)
            if found is not None:
                return found
    return None


def walk(node: Node) -> Iterator[Node]:
    """Pre-order traversal of a node and its named descendants."""
    yield node
    for child in node.named_children:
        yield from walk(child)


def get_node_text(node: Node) -> str:
    return node.text.decode("utf-8")


def node_line(node: Node) -> int:
    """1-based line a node starts on."""
    return node.start_point[0] + 1


def node_end_line(node: Node) -> int:
    return node.end_point[0] + 1


def query_text(node: Node) -> str:
    """Text between the brackets of a `query_expression`."""
    text = get_node_text(node).strip()
    if text.startswith("["):
        text = text[1:]
    if text.endswith("]"):
        text = text[:-1]
    return text.strip()
