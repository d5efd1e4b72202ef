"""
Markdown table writer.

Renders one table row per diagnostic (sentinels and other ``Unknown``
entries are left out) followed by per-severity statistics.
"""

import logging
from typing import Sequence, TextIO

from catalog.builder import severity_counts
from catalog.models import CatalogEntry, Severity

logger = logging.getLogger(__name__)

TITLE = "# All C# errors and warnings"
ATTRIBUTION = (
    "*Parsed from the [Roslyn source code](https://github.com/dotnet/roslyn) "
    "using tree-sitter.*"
)


def _code_cell(entry: CatalogEntry) -> str:
    if not entry.link:
        return entry.code
    return f"[{entry.code}]({entry.link})"


class MarkdownWriter:
    """Writer for the markdown table format."""

    def __init__(self, include_details: bool = False):
        self.include_details = include_details

    def write(self, entries: Sequence[CatalogEntry], stream: TextIO) -> None:
        stream.write(f"{TITLE}\n\n{ATTRIBUTION}\n\n")

        if self.include_details:
            stream.write("|Code|Severity|Message|Details|\n")
            stream.write("|----|--------|-------|-------|\n")
        else:
            stream.write("|Code|Severity|Message|\n")
            stream.write("|----|--------|-------|\n")

        rows = 0
        for entry in entries:
            if entry.severity is Severity.Unknown:
                continue
            line = f"|{_code_cell(entry)}|{entry.severity}|{entry.message}|"
            if self.include_details:
                line += f"{entry.details}|".replace("\n", "<br>")
            stream.write(line + "\n")
            rows += 1

        stream.write("\n## Statistics\n\n")
        stream.write("|Severity|Count|\n")
        stream.write("|--------|-----|\n")
        for severity, count in severity_counts(entries).items():
            stream.write(f"|{severity}|{count}|\n")
        stream.write(f"|**Total**|**{len(entries)}**|\n")

        logger.info("Markdown report written (%d rows)", rows)
