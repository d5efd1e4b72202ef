"""
Tree-sitter parser initialization and syntax-tree helpers for C# sources.

This module provides functions to parse C# text and to walk the resulting
tree for the handful of constructs the extractors care about.
"""

import logging
from typing import Iterator, Optional

import tree_sitter_c_sharp as tscsharp
from tree_sitter import Language, Node, Parser, Tree

# Configure logging
logger = logging.getLogger(__name__)

# Module-level language constant
CSHARP_LANGUAGE = Language(tscsharp.language())

_INTEGER_SUFFIX_CHARS = "uUlL"


def create_parser() -> Parser:
    """Create and configure a tree-sitter parser for C#.

    Returns:
        A Parser instance configured with the C# language.

    Example:
        >>> parser = create_parser()
        >>> tree = parser.parse(b"enum E { A = 1 }")
    """
    parser = Parser(CSHARP_LANGUAGE)
    logger.debug("Created tree-sitter C# parser")
    return parser


def count_error_nodes(tree: Tree) -> int:
    """Count ERROR and MISSING nodes in a parsed tree."""
    count = 0
    for node in iter_nodes(tree.root_node):
        if node.type == "ERROR" or node.is_missing:
            count += 1
    return count


def parse_bytes(source: bytes) -> Tree:
    """Parse raw bytes of C# source code.

    Args:
        source: UTF-8 encoded bytes of C# source code.

    Returns:
        A Tree object representing the parsed syntax tree.

    Raises:
        TypeError: If source is not bytes.

    Example:
        >>> tree = parse_bytes(b"class C {}")
        >>> tree.root_node.type
        'compilation_unit'
    """
    if not isinstance(source, bytes):
        raise TypeError(f"Source must be bytes, got {type(source).__name__}")

    parser = create_parser()
    tree = parser.parse(source)

    if tree.root_node.has_error:
        logger.warning(
            "Parsed tree contains syntax errors (%d error nodes)",
            count_error_nodes(tree),
        )

    logger.debug("Parsed %d bytes of C# code", len(source))
    return tree


def parse_text(source: str) -> Tree:
    """Parse C# source held in a str."""
    return parse_bytes(source.encode("utf-8"))


def iter_nodes(root: Node, node_type: Optional[str] = None) -> Iterator[Node]:
    """Yield ``root`` and its descendants in document (pre-)order.

    Args:
        root: Node to start from.
        node_type: When given, only nodes of this type are yielded.
    """
    stack = [root]
    while stack:
        node = stack.pop()
        if node_type is None or node.type == node_type:
            yield node
        stack.extend(reversed(node.children))


def find_first(root: Node, node_type: str) -> Optional[Node]:
    """Return the first descendant of ``node_type`` in document order."""
    return next(iter_nodes(root, node_type), None)


def find_named_declaration(root: Node, node_type: str, name: str) -> Optional[Node]:
    """Return the first ``node_type`` declaration whose ``name`` field equals ``name``."""
    for node in iter_nodes(root, node_type):
        if node_text(node.child_by_field_name("name")) == name:
            return node
    return None


def node_text(node: Optional[Node]) -> Optional[str]:
    """Decode a node's source text, or None for a missing node."""
    if node is None or node.text is None:
        return None
    return node.text.decode("utf-8")


def first_token(node: Node) -> Node:
    """Return the leftmost leaf under ``node``."""
    while node.children:
        node = node.children[0]
    return node


def last_token(node: Node) -> Node:
    """Return the rightmost leaf under ``node``."""
    while node.children:
        node = node.children[-1]
    return node


def parse_integer_literal(text: Optional[str]) -> Optional[int]:
    """Parse a C# integer literal, returning None when ``text`` is not one.

    Accepts decimal, ``0x`` hex and ``0b`` binary forms, ``_`` digit
    separators, ``u``/``l`` suffixes and a leading minus sign.

    Example:
        >>> parse_integer_literal("0x1F")
        31
        >>> parse_integer_literal("ERR_Other + 1") is None
        True
    """
    if text is None:
        return None
    literal = text.strip().replace("_", "")
    sign = 1
    if literal.startswith("-"):
        sign = -1
        literal = literal[1:].strip()
    literal = literal.rstrip(_INTEGER_SUFFIX_CHARS)
    lowered = literal.lower()
    try:
        if lowered.startswith("0x"):
            value = int(lowered[2:], 16)
        elif lowered.startswith("0b"):
            value = int(lowered[2:], 2)
        else:
            if not lowered.isdigit():
                return None
            value = int(lowered, 10)
    except ValueError:
        return None
    return sign * value
