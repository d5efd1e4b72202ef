"""
Report rendering for the finished catalog.
"""

from reporting.factory import OutputFormat, create_writer
from reporting.json_writer import JsonWriter, entry_record
from reporting.markdown_writer import MarkdownWriter

__all__ = [
    "OutputFormat",
    "create_writer",
    "JsonWriter",
    "MarkdownWriter",
    "entry_record",
]
