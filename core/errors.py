"""Error taxonomy for the diagnostic catalog pipeline.

Every failure that must abort a run derives from ``CatalogError`` so the
command-line entry point can report it with a single handler. Lookup misses
(message, warning level, link, details) are never errors; they resolve to
documented defaults inside the catalog builder.
"""

from __future__ import annotations

from typing import Optional


class CatalogError(RuntimeError):
    """Base class for fatal catalog pipeline failures."""


class FetchError(CatalogError):
    """Raised when an upstream text resource cannot be retrieved."""

    def __init__(self, url: str, reason: str, status_code: Optional[int] = None):
        self.url = url
        self.reason = reason
        self.status_code = status_code
        if status_code is not None:
            message = f"Failed to fetch {url}: HTTP {status_code} ({reason})"
        else:
            message = f"Failed to fetch {url}: {reason}"
        super().__init__(message)


class DeclarationNotFoundError(CatalogError):
    """Raised when an expected declaration is absent from a parsed source.

    Upstream sources are assumed stable, so a missing enum, method or switch
    statement signals a breaking upstream change.
    """

    def __init__(self, kind: str, name: str):
        self.kind = kind
        self.name = name
        super().__init__(f"Could not find {kind} '{name}' in parsed source")


class ResourceFormatError(CatalogError):
    """Raised when the localized-message resource document is malformed."""
