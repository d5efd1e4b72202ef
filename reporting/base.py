"""
Base writer interface.

This module defines the protocol that all catalog report writers implement.
"""

from typing import Protocol, Sequence, TextIO

from catalog.models import CatalogEntry


class ReportWriter(Protocol):
    """Protocol defining interface for report writers."""

    def write(self, entries: Sequence[CatalogEntry], stream: TextIO) -> None:
        """Render the catalog to the given text stream."""
        ...
