"""Antipattern modules and registry."""

from apexscan.antipatterns.module import AntipatternModule
from apexscan.antipatterns.registry import AntipatternRegistry, build_default_registry

__all__ = [
    "AntipatternModule",
    "AntipatternRegistry",
    "build_default_registry",
]
