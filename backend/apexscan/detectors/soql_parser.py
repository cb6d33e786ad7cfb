"""Helpers for reading SOQL query text.

All functions take the text between the query brackets, e.g.
`SELECT Id, Name FROM Account WHERE Name != null`.
"""

import re
from typing import Optional

SYSTEM_FIELDS = frozenset({"id", "count()"})

_SUBQUERY_START_RE = re.compile(r"\(\s*SELECT\b", re.IGNORECASE)
_BOUNDING_RE = re.compile(r"\b(WHERE|LIMIT)\b", re.IGNORECASE)
_SELECT_RE = re.compile(r"\bSELECT\b", re.IGNORECASE)
_FROM_RE = re.compile(r"\bFROM\b", re.IGNORECASE)
_SELECT_CLAUSE_RE = re.compile(r"\bSELECT\b\s*(.*?)\s*\bFROM\b", re.IGNORECASE | re.DOTALL)
_FROM_SPLIT_RE = re.compile(r"\s+FROM\s+", re.IGNORECASE)
_OBJECT_RE = re.compile(r"\bFROM\s+(\w+)", re.IGNORECASE)
_STRING_RE = re.compile(r"'(?:\\.|[^'\\])*'")

MAX_SNIPPET_LENGTH = 200


def normalize_query(text: str) -> str:
    """Collapse whitespace runs so multi-line queries compare as one line."""
    return " ".join(text.split())


def _closing_paren(text: str, open_index: int) -> int:
    depth = 0
    i = open_index
    while i < len(text):
        ch = text[i]
        if ch == "'":
            match = _STRING_RE.match(text, i)
            i = match.end() if match else len(text)
            continue
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth == 0:
                return i
        i += 1
    return len(text) - 1


def remove_subqueries(text: str) -> str:
    """Replace every balanced `(SELECT ...)` group with `()`."""
    parts = []
    position = 0
    while True:
        match = _SUBQUERY_START_RE.search(text, position)
        if match is None:
            parts.append(text[position:])
            break
        parts.append(text[position:match.start()])
        parts.append("()")
        position = _closing_paren(text, match.start()) + 1
    return "".join(parts)


def has_bounding_clause(text: str) -> bool:
    """True when the outer query has a WHERE or LIMIT clause."""
    outer = remove_subqueries(_STRING_RE.sub("''", text))
    return _BOUNDING_RE.search(outer) is not None


def has_nested_queries(text: str) -> bool:
    return len(_SELECT_RE.findall(text)) > 1 and len(_FROM_RE.findall(text)) > 1


def _split_top_level(clause: str, separator: str = ",") -> list[str]:
    items = []
    depth = 0
    current = []
    for ch in clause:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
        if ch == separator and depth == 0:
            items.append("".join(current))
            current = []
        else:
            current.append(ch)
    items.append("".join(current))
    return items


def _item_name(item: str) -> Optional[str]:
    """Name a select item is read back by: its alias, else the expression."""
    tokens = [t for t in _split_top_level(item, " ") if t]
    if not tokens:
        return None
    name = tokens[-1]
    if name.lower() == "as":
        return None
    return name


def select_items(text: str) -> list[tuple[str, str]]:
    """Return `(item_text, field_name)` pairs of the outer select list."""
    outer = normalize_query(remove_subqueries(text))
    match = _SELECT_CLAUSE_RE.search(outer)
    if match is None:
        return []

    items = []
    for raw in _split_top_level(match.group(1)):
        item = raw.strip()
        if not item or item == "()":
            continue
        name = _item_name(item)
        if name:
            items.append((item, name))
    return items


def extract_fields(text: str) -> list[str]:
    """Fields selected by the outer query, sub-selects excluded."""
    return [name for _, name in select_items(text)]


def exclude_system_fields(fields: list[str]) -> list[str]:
    return [f for f in fields if f.lower() not in SYSTEM_FIELDS]


def extract_object_name(text: str) -> Optional[str]:
    match = _OBJECT_RE.search(remove_subqueries(text))
    return match.group(1) if match else None


def is_valid_soql(text: str) -> bool:
    normalized = normalize_query(text)
    return normalized.upper().startswith("SELECT") and _FROM_RE.search(normalized) is not None


def remove_unused_fields(text: str, unused_fields: list[str]) -> str:
    """
    Rebuild a query without the given fields.

    Returns an empty string when no safe rewrite exists: nested queries,
    no FROM clause, or every field would be removed.
    """
    if has_nested_queries(text):
        return ""

    normalized = normalize_query(text)
    parts = _FROM_SPLIT_RE.split(normalized, maxsplit=1)
    if len(parts) != 2:
        return ""

    unused = {f.lower() for f in unused_fields}
    kept = [item for item, name in select_items(normalized) if name.lower() not in unused]
    if not kept:
        return ""
    return f"SELECT {', '.join(kept)} FROM {parts[1]}"


def format_query_snippet(text: str, max_length: int = MAX_SNIPPET_LENGTH) -> str:
    normalized = normalize_query(text)
    if len(normalized) > max_length:
        return normalized[: max_length - 3] + "..."
    return normalized
