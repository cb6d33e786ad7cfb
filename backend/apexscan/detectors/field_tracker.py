"""Heuristics for how a query result variable is used after the query.

These work on source text, not on the syntax tree: they only approximate
data flow and can be fooled by shadowed names.
"""

import re

_LINE_COMMENT_RE = re.compile(r"//[^\n]*")
_BLOCK_COMMENT_RE = re.compile(r"/\*[\s\S]*?\*/")
_TYPE_PATTERN = r"(?:final\s+)?[\w.]+(?:\s*<[\w.,\s<>]*>)?(?:\s*\[\s*\])?"


def strip_comments(code: str) -> str:
    return _LINE_COMMENT_RE.sub("", _BLOCK_COMMENT_RE.sub("", code))


def _loop_aliases(variable: str, code: str) -> list[str]:
    """Names bound by `for (Type x : variable)` loops."""
    pattern = re.compile(
        rf"for\s*\(\s*{_TYPE_PATTERN}\s+(\w+)\s*:\s*{re.escape(variable)}\s*\)",
        re.IGNORECASE,
    )
    return [m.group(1) for m in pattern.finditer(code)]


def _field_matches(path: str, field: str) -> bool:
    path, field = path.lower(), field.lower()
    return path == field or path.startswith(field + ".") or field.startswith(path + ".")


def find_direct_field_access(variable: str, code_after: str, fields: list[str]) -> set[str]:
    """
    Find selected fields read through the variable or a loop alias of it.

    Matches `var.Field`, `var[0].Field` and relationship paths such as
    `var.Owner.Name`. Assignments (`var.Field = x`) are writes, not reads.

    Returns:
        The subset of `fields` (original spelling) that is read
    """
    code = strip_comments(code_after)
    names = [variable, *_loop_aliases(variable, code)]

    used = set()
    for name in names:
        access = re.compile(
            rf"\b{re.escape(name)}(?:\s*\[[^\]]*\])?\s*\.\s*([A-Za-z_][\w.]*)(?![\w.])(?!\s*=[^=])",
            re.IGNORECASE,
        )
        for match in access.finditer(code):
            path = match.group(1).rstrip(".")
            for field in fields:
                if _field_matches(path, field):
                    used.add(field)
    return used


def find_columns_used_in_later_soqls(variable: str, later_queries: list[str], fields: list[str]) -> set[str]:
    """Fields that a later query mentions alongside the variable, e.g. as a bind."""
    variable_re = re.compile(rf"\b{re.escape(variable)}\b", re.IGNORECASE)
    used = set()
    for query in later_queries:
        if not variable_re.search(query):
            continue
        for field in fields:
            if re.search(rf"\b{re.escape(field)}\b", query, re.IGNORECASE):
                used.add(field)
    return used


def check_complete_usage(variable: str, code_after: str, fields: list[str]) -> bool:
    """
    Detect the result being consumed as a whole rather than field by field.

    A bare reference such as `process(accs);`, `accs[0],` or `return accs;`
    means every field may be read elsewhere. Null, emptiness and size
    checks, loop headers and DML on the variable do not count.
    """
    v = re.escape(variable)
    flags = re.IGNORECASE
    code = strip_comments(code_after)
    code = re.sub(rf"\b{v}\s*\.\s*isEmpty\s*\(\s*\)", "", code, flags=flags)
    code = re.sub(rf"\b{v}\s*\.\s*size\s*\(\s*\)", "", code, flags=flags)
    code = re.sub(rf"\b{v}\s*[!=]=\s*null\b", "", code, flags=flags)
    code = re.sub(rf"for\s*\([^:()]*:\s*{v}\s*\)", "", code, flags=flags)
    code = re.sub(rf"\b(?:insert|update|delete|upsert|undelete)\s+{v}\s*;", "", code, flags=flags)

    selected = {f.lower() for f in fields}
    member_access = re.compile(rf"\b{v}(?:\[\d+\])?\.(\w+)", flags)
    for pattern in (rf"\b{v}\b\s*[,;)]", rf"\b{v}\s*\[\d+\]\s*[,;)]"):
        if not re.search(pattern, code, flags):
            continue
        accessed = {m.group(1).lower() for m in member_access.finditer(code)}
        if accessed & selected:
            continue
        return True
    return False


def is_returned(variable: str, code: str) -> bool:
    return re.search(rf"\breturn\s+{re.escape(variable)}\b", code, re.IGNORECASE) is not None
