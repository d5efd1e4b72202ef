"""
Source extraction

Tree-sitter-based C# parsing plus the resource, TOC and documentation-page
extractors feeding the diagnostic catalog.
"""

from extraction.models import EnumMember
from extraction.parser import (
    count_error_nodes,
    create_parser,
    parse_bytes,
    parse_integer_literal,
    parse_text,
)
from extraction.enum_members import extract_enum_members
from extraction.warning_levels import extract_warning_levels
from extraction.resources import extract_resource_dictionary
from extraction.doc_index import extract_doc_links
from extraction.doc_details import extract_doc_excerpt, fetch_doc_details

__all__ = [
    # Data models
    "EnumMember",
    # Low-level parsing
    "create_parser",
    "parse_bytes",
    "parse_text",
    "count_error_nodes",
    "parse_integer_literal",
    # Extractors
    "extract_enum_members",
    "extract_warning_levels",
    "extract_resource_dictionary",
    "extract_doc_links",
    "extract_doc_excerpt",
    "fetch_doc_details",
]
