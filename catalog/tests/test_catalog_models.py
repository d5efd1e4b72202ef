"""
Unit tests for catalog models: severity parsing and entry properties.
"""

import unittest
from dataclasses import FrozenInstanceError

from catalog.models import CatalogEntry, Severity, parse_severity


class TestParseSeverity(unittest.TestCase):
    """Severity parsing is total and pure."""

    def test_known_prefixes(self):
        self.assertIs(parse_severity("ERR"), Severity.Error)
        self.assertIs(parse_severity("WRN"), Severity.Warning)
        self.assertIs(parse_severity("HDN"), Severity.Hidden)
        self.assertIs(parse_severity("INF"), Severity.Info)
        self.assertIs(parse_severity("FTL"), Severity.Fatal)

    def test_unknown_prefixes(self):
        for prefix in ("XYZ", "err", "", "ERRX", "Voi"):
            self.assertIs(parse_severity(prefix), Severity.Unknown)

    def test_ordering(self):
        self.assertLess(Severity.Unknown, Severity.Hidden)
        self.assertLess(Severity.Warning, Severity.Error)
        self.assertLess(Severity.Error, Severity.Fatal)

    def test_str_is_name(self):
        self.assertEqual(str(Severity.Warning), "Warning")


class TestCatalogEntry(unittest.TestCase):
    """Test CatalogEntry properties."""

    def test_code_zero_padded(self):
        entry = CatalogEntry(name="X", numeric_code=29, severity=Severity.Error)
        self.assertEqual(entry.code, "CS0029")

    def test_code_wide(self):
        entry = CatalogEntry(name="X", numeric_code=12345, severity=Severity.Error)
        self.assertEqual(entry.code, "CS12345")

    def test_code_without_number(self):
        entry = CatalogEntry(name="X", numeric_code=None, severity=Severity.Error)
        self.assertEqual(entry.code, "")

    def test_is_sentinel(self):
        self.assertTrue(CatalogEntry("Void", 0, Severity.Unknown).is_sentinel)
        self.assertFalse(CatalogEntry("Void", 1, Severity.Error).is_sentinel)
        self.assertFalse(CatalogEntry("Other", 0, Severity.Unknown).is_sentinel)

    def test_immutable(self):
        entry = CatalogEntry(name="X", numeric_code=1, severity=Severity.Error)
        with self.assertRaises(FrozenInstanceError):
            entry.details = "changed"

    def test_to_dict(self):
        entry = CatalogEntry(
            name="BadSyntax",
            numeric_code=1002,
            severity=Severity.Error,
            message="Bad syntax",
        )
        data = entry.to_dict()
        self.assertEqual(data["severity"], "Error")
        self.assertEqual(data["code"], "CS1002")
        self.assertEqual(data["warning_level"], 0)


if __name__ == "__main__":
    unittest.main()
