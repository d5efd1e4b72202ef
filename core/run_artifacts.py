"""Run summary artifacts for catalog generation runs."""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict


@dataclass
class RunSummary:
    """Operational summary of one catalog run.

    Attributes:
        run_id: Correlation id shared with the run's log records.
        options: Flags the run was invoked with (links, details, json, ...).
        severity_counts: Rendered entry count per severity name.
        total_entries: Length of the full catalog, sentinels included.
        elapsed_seconds: Wall-clock duration of fetch, extract and build.
        timestamp_utc: ISO-8601 completion time.
    """

    run_id: str
    options: Dict[str, Any] = field(default_factory=dict)
    severity_counts: Dict[str, int] = field(default_factory=dict)
    total_entries: int = 0
    elapsed_seconds: float = 0.0
    timestamp_utc: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def write_run_report(summary: RunSummary, output_dir: str) -> str:
    """Write ``summary`` as ``{output_dir}/{run_id}.json`` and return the path."""
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, f"{summary.run_id}.json")
    with open(path, "w", encoding="utf-8") as f:
        json.dump(summary.to_dict(), f, indent=2, sort_keys=True)
    return path
