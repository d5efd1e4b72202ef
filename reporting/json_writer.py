"""
JSON output writer.

Emits one record per catalog entry, sentinels included.
"""

import json
import logging
from typing import Any, Dict, Sequence, TextIO

from catalog.models import CatalogEntry

logger = logging.getLogger(__name__)


def entry_record(entry: CatalogEntry) -> Dict[str, Any]:
    """Map an entry to its JSON record shape."""
    return {
        "id": entry.code,
        "message": entry.message,
        "description": entry.details,
        "category": f"Level {entry.warning_level}",
        "severity": str(entry.severity),
        "type": entry.name,
        "link": entry.link,
    }


class JsonWriter:
    """Writer for JSON output format."""

    def write(self, entries: Sequence[CatalogEntry], stream: TextIO) -> None:
        json.dump([entry_record(e) for e in entries], stream, indent=2, ensure_ascii=False)
        stream.write("\n")
        logger.info("JSON report written (%d records)", len(entries))
