"""
Configuration constants for C# source and documentation extraction.

Defines the declarations the extractors look for and the tree-sitter node
type strings used to recognize them.
"""

import re
from typing import FrozenSet, Pattern, Set

# Declarations of interest in the Roslyn sources
ERROR_CODE_ENUM: str = "ErrorCode"
WARNING_LEVEL_METHOD: str = "GetWarningLevel"

# Enum members that are placeholders, not diagnostics
SENTINEL_NAMES: FrozenSet[str] = frozenset({"Void", "Unknown"})

# Resource-name suffixes joined to a member name
TITLE_SUFFIX: str = "_Title"
DESCRIPTION_SUFFIX: str = "_Description"

# toc.yml entries such as "href: cs0029.md"; pages in other folders are not matched
DOC_TOC_PATTERN: Pattern[str] = re.compile(r"href:\s*cs(?P<code>\d{4})\.md")

# Markdown heading that ends the preamble of a documentation page
DOC_HEADING_PREFIX: str = "# "

# ---------------------------------------------------------------------------
# tree-sitter-c-sharp node types
# ---------------------------------------------------------------------------
ENUM_DECLARATION: str = "enum_declaration"
ENUM_MEMBER: str = "enum_member_declaration"
METHOD_DECLARATION: str = "method_declaration"
SWITCH_STATEMENT: str = "switch_statement"
SWITCH_SECTION: str = "switch_section"
RETURN_STATEMENT: str = "return_statement"
INTEGER_LITERAL: str = "integer_literal"

# Older grammar releases wrap initializers and labels in dedicated nodes
EQUALS_VALUE_CLAUSE: str = "equals_value_clause"
SWITCH_LABEL_TYPES: Set[str] = {
    "case_switch_label",
    "case_pattern_switch_label",
    "default_switch_label",
}

CASE_KEYWORD: str = "case"
DEFAULT_KEYWORD: str = "default"
COMMENT: str = "comment"
LABEL_COLON: str = ":"
