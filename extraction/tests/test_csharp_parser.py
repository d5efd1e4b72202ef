"""
Unit tests for parser.py

Tests tree-sitter C# parser initialization, parsing, tree helpers and
integer literal parsing.
"""

import unittest

from extraction.parser import (
    count_error_nodes,
    create_parser,
    find_first,
    find_named_declaration,
    first_token,
    iter_nodes,
    last_token,
    node_text,
    parse_bytes,
    parse_integer_literal,
    parse_text,
)


class TestParserInitialization(unittest.TestCase):
    """Test parser creation and initialization."""

    def test_create_parser(self):
        """Test that create_parser returns a Parser with a language set."""
        parser = create_parser()
        self.assertIsNotNone(parser)
        self.assertIsNotNone(parser.language)


class TestParseSource(unittest.TestCase):
    """Test parsing raw C# source."""

    def test_parse_simple_class(self):
        tree = parse_bytes(b"class Foo { int Bar() { return 0; } }")
        self.assertEqual(tree.root_node.type, "compilation_unit")
        self.assertFalse(tree.root_node.has_error)

    def test_parse_text_encodes_str(self):
        tree = parse_text("enum E { A = 1 }")
        self.assertEqual(tree.root_node.type, "compilation_unit")
        self.assertFalse(tree.root_node.has_error)

    def test_parse_invalid_type(self):
        """Test that parse_bytes raises TypeError for non-bytes input."""
        with self.assertRaises(TypeError):
            parse_bytes("not bytes")

    def test_parse_with_errors(self):
        """Broken source still yields a tree, with error nodes counted."""
        tree = parse_bytes(b"class Broken { void M() { int x = ; ")
        self.assertTrue(tree.root_node.has_error)
        self.assertGreater(count_error_nodes(tree), 0)

    def test_count_error_nodes_clean(self):
        tree = parse_bytes(b"class Ok {}")
        self.assertEqual(count_error_nodes(tree), 0)


class TestTreeHelpers(unittest.TestCase):
    """Test node search and token helpers."""

    SOURCE = """
    namespace N
    {
        enum First { A }
        enum Second { B = 2 }
        class C { int M() { return 7 + x; } }
    }
    """

    def setUp(self):
        self.root = parse_text(self.SOURCE).root_node

    def test_iter_nodes_filters_by_type(self):
        enums = list(iter_nodes(self.root, "enum_declaration"))
        self.assertEqual(len(enums), 2)

    def test_iter_nodes_document_order(self):
        names = [
            node_text(n.child_by_field_name("name"))
            for n in iter_nodes(self.root, "enum_declaration")
        ]
        self.assertEqual(names, ["First", "Second"])

    def test_find_first_missing(self):
        self.assertIsNone(find_first(self.root, "switch_statement"))

    def test_find_named_declaration(self):
        node = find_named_declaration(self.root, "enum_declaration", "Second")
        self.assertIsNotNone(node)
        self.assertIn("B = 2", node_text(node))

    def test_find_named_declaration_absent(self):
        self.assertIsNone(find_named_declaration(self.root, "enum_declaration", "Third"))

    def test_first_and_last_token(self):
        ret = find_first(self.root, "return_statement")
        expression = next(c for c in ret.children if c.is_named)
        self.assertEqual(node_text(first_token(expression)), "7")
        self.assertEqual(node_text(last_token(expression)), "x")

    def test_node_text_none(self):
        self.assertIsNone(node_text(None))


class TestParseIntegerLiteral(unittest.TestCase):
    """Test C# integer literal parsing."""

    def test_decimal(self):
        self.assertEqual(parse_integer_literal("1002"), 1002)

    def test_whitespace(self):
        self.assertEqual(parse_integer_literal("  8 "), 8)

    def test_hex_and_binary(self):
        self.assertEqual(parse_integer_literal("0x1F"), 31)
        self.assertEqual(parse_integer_literal("0b101"), 5)

    def test_separators_and_suffixes(self):
        self.assertEqual(parse_integer_literal("1_000"), 1000)
        self.assertEqual(parse_integer_literal("42UL"), 42)

    def test_negative(self):
        self.assertEqual(parse_integer_literal("-1"), -1)

    def test_not_a_literal(self):
        self.assertIsNone(parse_integer_literal("ERR_Other + 1"))
        self.assertIsNone(parse_integer_literal("SomeIdentifier"))
        self.assertIsNone(parse_integer_literal(""))
        self.assertIsNone(parse_integer_literal("0x"))

    def test_none(self):
        self.assertIsNone(parse_integer_literal(None))


if __name__ == "__main__":
    unittest.main()
