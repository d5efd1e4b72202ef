"""
C# diagnostic catalog: merge model, builder and end-to-end pipeline.
"""

from catalog.models import CatalogEntry, Severity, parse_severity
from catalog.builder import (
    SourceTables,
    build_catalog,
    build_entry,
    sentinel_entry,
    severity_counts,
)
from catalog.pipeline import CatalogOptions, generate_catalog

__all__ = [
    # Data models
    "CatalogEntry",
    "Severity",
    "parse_severity",
    # Merge
    "SourceTables",
    "build_catalog",
    "build_entry",
    "sentinel_entry",
    "severity_counts",
    # Orchestration
    "CatalogOptions",
    "generate_catalog",
]
