"""Runtime enrichers."""

from apexscan.enrichers.base import RuntimeEnricher
from apexscan.enrichers.method_enricher import MethodRuntimeEnricher
from apexscan.enrichers.soql_enricher import SOQLRuntimeEnricher

__all__ = [
    "RuntimeEnricher",
    "MethodRuntimeEnricher",
    "SOQLRuntimeEnricher",
]
