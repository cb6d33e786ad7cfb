"""Per-scan record of a query literal found in the syntax tree."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class QueryInfo:
    """One SOQL/SOSL literal and the context it was found in."""

    text: str
    start_line: int
    end_line: int
    # Offsets into the UTF-8 encoded source
    start_byte: int
    end_byte: int
    method_name: Optional[str] = None
    in_loop: bool = False
    fields: list[str] = field(default_factory=list)
    # Nearest preceding declaration within two lines, not a def-use link
    assigned_variable: Optional[str] = None
    declaration_line: Optional[int] = None
    is_returned: bool = False
    # End of the enclosing method, or of the file at class level
    scope_end_byte: Optional[int] = None
