"""
Warning-level extraction from a C# switch statement.

Roslyn's ``ErrorFacts.GetWarningLevel`` maps diagnostics to levels with a
``switch`` whose sections each end in ``return <n>;``. This module recovers
that mapping: every case label of a section whose first return statement
starts with an integer literal is associated with that integer. Labels of
statement-less sections fall through to the next section with a body.
"""

import logging
from typing import Dict, Iterator, List, Optional

from tree_sitter import Node

from core.errors import DeclarationNotFoundError
from extraction.config import (
    CASE_KEYWORD,
    COMMENT,
    DEFAULT_KEYWORD,
    INTEGER_LITERAL,
    LABEL_COLON,
    METHOD_DECLARATION,
    RETURN_STATEMENT,
    SWITCH_LABEL_TYPES,
    SWITCH_SECTION,
    SWITCH_STATEMENT,
    WARNING_LEVEL_METHOD,
)
from extraction.parser import (
    find_first,
    find_named_declaration,
    first_token,
    last_token,
    node_text,
    parse_integer_literal,
    parse_text,
)

logger = logging.getLogger(__name__)


def _label_tokens(container: Node) -> Iterator[str]:
    """Yield the selector token of each ``case`` label directly under ``container``.

    The selector is the token right before the label's colon, so a qualified
    ``case ErrorCode.WRN_X:`` yields ``WRN_X``. ``default:`` labels are skipped.
    """
    previous = None
    for child in container.children:
        if child.type in SWITCH_LABEL_TYPES:
            yield from _label_tokens(child)
        elif child.type == LABEL_COLON and previous is not None:
            token = last_token(previous)
            if token.type != DEFAULT_KEYWORD:
                text = node_text(token)
                if text:
                    yield text
        previous = child


def _section_has_statements(section: Node) -> bool:
    """Return True if anything besides case labels and comments is in the section.

    Newer grammars give every statement-less ``case A:`` its own section, so an
    empty section means its labels fall through to the next one.
    """
    after_colon = False
    for child in section.children:
        if child.type in SWITCH_LABEL_TYPES or child.type == LABEL_COLON:
            after_colon = True
        elif child.type in (CASE_KEYWORD, DEFAULT_KEYWORD):
            after_colon = False
        elif after_colon and child.is_named and child.type != COMMENT:
            return True
    return False


def _section_return_value(section: Node) -> Optional[int]:
    """Return the integer the section returns, or None if it is not a literal."""
    statement = find_first(section, RETURN_STATEMENT)
    if statement is None:
        return None
    expression = next((c for c in statement.children if c.is_named), None)
    if expression is None:
        return None
    token = first_token(expression)
    if token.type != INTEGER_LITERAL:
        return None
    return parse_integer_literal(node_text(token))


def extract_warning_levels(
    source: str,
    method_name: str = WARNING_LEVEL_METHOD,
) -> Dict[str, int]:
    """Build the label -> warning level table from ``method_name``'s switch.

    Args:
        source: C# source text containing the method.
        method_name: Name of the method whose switch is read.

    Returns:
        Mapping from case-label identifier to the section's literal return value.

    Raises:
        DeclarationNotFoundError: If the method, or a switch inside it, is missing.
    """
    tree = parse_text(source)
    method = find_named_declaration(tree.root_node, METHOD_DECLARATION, method_name)
    if method is None:
        raise DeclarationNotFoundError("method", method_name)

    body = method.child_by_field_name("body") or method
    switch = find_first(body, SWITCH_STATEMENT)
    if switch is None:
        raise DeclarationNotFoundError("switch statement in method", method_name)

    levels: Dict[str, int] = {}
    pending: List[str] = []
    skipped_sections = 0
    for section in (switch.child_by_field_name("body") or switch).children:
        if section.type != SWITCH_SECTION:
            continue
        pending.extend(_label_tokens(section))
        if not _section_has_statements(section):
            continue
        labels, pending = pending, []
        value = _section_return_value(section)
        if value is None:
            skipped_sections += 1
            continue
        for label in labels:
            levels[label] = value

    logger.info(
        "Extracted %d warning levels from %s (%d non-literal sections skipped)",
        len(levels),
        method_name,
        skipped_sections,
    )
    return levels
