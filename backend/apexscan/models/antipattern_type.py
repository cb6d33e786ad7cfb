"""Antipattern type identifiers."""

from enum import Enum


class AntipatternType(str, Enum):
    """Antipatterns the scanner knows how to detect."""

    # Schema.getGlobalDescribe() usage
    GGD = "GGD"
    # SOQL query without a WHERE or LIMIT clause
    SOQL_NO_WHERE_LIMIT = "SOQL_NO_WHERE_LIMIT"
    # SOQL query selecting fields the code never reads
    SOQL_UNUSED_FIELDS = "SOQL_UNUSED_FIELDS"
