"""
Writer factory for creating the report writer matching the requested format.
"""

from enum import Enum, auto
from typing import Union

from reporting.base import ReportWriter
from reporting.json_writer import JsonWriter
from reporting.markdown_writer import MarkdownWriter


class OutputFormat(Enum):
    """Enumeration of supported report formats."""

    MARKDOWN = auto()
    JSON = auto()

    @classmethod
    def from_string(cls, format_name: str) -> "OutputFormat":
        """Convert string format name to enum value."""
        name = format_name.upper()
        if name in cls.__members__:
            return cls[name]
        raise ValueError(f"Unsupported output format: {format_name}")


def create_writer(
    format_type: Union[OutputFormat, str],
    include_details: bool = False,
) -> ReportWriter:
    """Create and return the writer for the given output format."""
    if isinstance(format_type, str):
        format_type = OutputFormat.from_string(format_type)

    if format_type is OutputFormat.JSON:
        return JsonWriter()
    return MarkdownWriter(include_details=include_details)
