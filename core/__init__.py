"""Core shared contracts and utilities."""

from core.errors import (
    CatalogError,
    DeclarationNotFoundError,
    FetchError,
    ResourceFormatError,
)
from core.structured_logging import (
    bind_context,
    configure_structured_logging,
    get_phase,
    get_run_id,
    phase_scope,
    set_run_id,
)
from core.run_artifacts import RunSummary, write_run_report
from core.tasks import run_concurrently

__all__ = [
    "CatalogError",
    "DeclarationNotFoundError",
    "FetchError",
    "ResourceFormatError",
    "bind_context",
    "configure_structured_logging",
    "get_phase",
    "get_run_id",
    "phase_scope",
    "set_run_id",
    "RunSummary",
    "write_run_report",
    "run_concurrently",
]
