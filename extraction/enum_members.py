"""
Enum member extraction from C# source.

Locates a named ``enum`` declaration and returns its members in declaration
order, keeping each initializer's text verbatim for later integer parsing.
"""

import logging
from typing import List, Optional

from tree_sitter import Node

from core.errors import DeclarationNotFoundError
from extraction.config import (
    ENUM_DECLARATION,
    ENUM_MEMBER,
    EQUALS_VALUE_CLAUSE,
    ERROR_CODE_ENUM,
)
from extraction.models import EnumMember
from extraction.parser import find_named_declaration, node_text, parse_text

logger = logging.getLogger(__name__)


def _initializer_node(member: Node) -> Optional[Node]:
    """Return the expression after ``=`` in an enum member, if any."""
    value = member.child_by_field_name("value")
    if value is not None:
        return value

    seen_equals = False
    for child in member.children:
        if child.type == EQUALS_VALUE_CLAUSE:
            return next((c for c in child.children if c.is_named), None)
        if child.type == "=":
            seen_equals = True
        elif seen_equals and child.is_named:
            return child
    return None


def extract_enum_members(source: str, enum_name: str = ERROR_CODE_ENUM) -> List[EnumMember]:
    """Extract the members of the first enum named ``enum_name``.

    Args:
        source: C# source text.
        enum_name: Identifier of the enum to find.

    Returns:
        Members in declaration order with their initializer text.

    Raises:
        DeclarationNotFoundError: If no such enum is declared.

    Example:
        >>> extract_enum_members("enum ErrorCode { Void, ERR_X = 5 }")
        [EnumMember(name='Void', literal_text=None), EnumMember(name='ERR_X', literal_text='5')]
    """
    tree = parse_text(source)
    declaration = find_named_declaration(tree.root_node, ENUM_DECLARATION, enum_name)
    if declaration is None:
        raise DeclarationNotFoundError("enum", enum_name)

    body = declaration.child_by_field_name("body")
    if body is None:
        return []

    members = []
    for child in body.children:
        if child.type != ENUM_MEMBER:
            continue
        name = node_text(child.child_by_field_name("name"))
        if not name:
            logger.debug(
                "Skipping unnamed enum member at line %d", child.start_point.row + 1
            )
            continue
        members.append(EnumMember(name=name, literal_text=node_text(_initializer_node(child))))

    logger.info("Extracted %d members from enum %s", len(members), enum_name)
    return members
