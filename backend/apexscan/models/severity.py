"""Severity levels and their provenance."""

from enum import Enum


class Severity(str, Enum):
    """Finding severity levels, ordered LOW < MEDIUM < HIGH < CRITICAL."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"

    @property
    def rank(self) -> int:
        return _RANKS[self]


_RANKS = {
    Severity.LOW: 0,
    Severity.MEDIUM: 1,
    Severity.HIGH: 2,
    Severity.CRITICAL: 3,
}


class SeveritySource(str, Enum):
    """Where a finding's severity came from."""

    STATIC = "static"
    RUNTIME = "runtime"


def max_severity(*severities: Severity) -> Severity:
    """Return the most severe of the given levels."""
    if not severities:
        raise ValueError("max_severity() needs at least one severity")
    return max(severities, key=lambda s: s.rank)
