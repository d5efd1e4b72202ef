"""
Unit tests for the markdown and JSON report writers.
"""

import io
import json
import unittest

from catalog.models import CatalogEntry, Severity
from reporting.factory import OutputFormat, create_writer
from reporting.json_writer import JsonWriter, entry_record
from reporting.markdown_writer import MarkdownWriter

ENTRIES = [
    CatalogEntry("Void", 0, Severity.Unknown),
    CatalogEntry("Unknown", 0, Severity.Unknown),
    CatalogEntry(
        "BadSyntax",
        1002,
        Severity.Error,
        message="Bad syntax",
        link="https://docs.example/cs1002",
        details="Line one\nLine two",
    ),
    CatalogEntry("UnreachableCode", 162, Severity.Warning, message="Unreachable", warning_level=2),
    CatalogEntry("Odd", 7, Severity.Unknown, message="never shown"),
    CatalogEntry("Hidden", 8019, Severity.Hidden, message="Unnecessary using"),
]


def _render(writer, entries=ENTRIES):
    stream = io.StringIO()
    writer.write(entries, stream)
    return stream.getvalue()


class TestMarkdownWriter(unittest.TestCase):

    def test_header_and_rows(self):
        output = _render(MarkdownWriter())
        self.assertTrue(output.startswith("# All C# errors and warnings\n"))
        self.assertIn("|Code|Severity|Message|\n|----|--------|-------|\n", output)
        self.assertIn("|[CS1002](https://docs.example/cs1002)|Error|Bad syntax|\n", output)
        self.assertIn("|CS0162|Warning|Unreachable|\n", output)

    def test_unknown_rows_skipped(self):
        output = _render(MarkdownWriter())
        self.assertNotIn("never shown", output)
        self.assertNotIn("|CS0000|", output)

    def test_details_column(self):
        output = _render(MarkdownWriter(include_details=True))
        self.assertIn("|Code|Severity|Message|Details|\n", output)
        self.assertIn(
            "|[CS1002](https://docs.example/cs1002)|Error|Bad syntax|Line one<br>Line two|\n",
            output,
        )
        self.assertIn("|CS0162|Warning|Unreachable||\n", output)

    def test_statistics(self):
        output = _render(MarkdownWriter())
        stats = output.split("## Statistics", 1)[1]
        self.assertIn("|Severity|Count|\n|--------|-----|\n", stats)
        self.assertLess(stats.index("|Error|1|"), stats.index("|Warning|1|"))
        self.assertLess(stats.index("|Warning|1|"), stats.index("|Hidden|1|"))
        self.assertNotIn("|Unknown|", stats)
        self.assertTrue(stats.endswith("|**Total**|**6**|\n"))


class TestJsonWriter(unittest.TestCase):

    def test_record_shape(self):
        record = entry_record(ENTRIES[3])
        self.assertEqual(
            record,
            {
                "id": "CS0162",
                "message": "Unreachable",
                "description": "",
                "category": "Level 2",
                "severity": "Warning",
                "type": "UnreachableCode",
                "link": "",
            },
        )

    def test_all_entries_written(self):
        records = json.loads(_render(JsonWriter()))
        self.assertEqual(len(records), len(ENTRIES))
        self.assertEqual(records[0]["type"], "Void")
        self.assertEqual(records[0]["severity"], "Unknown")
        self.assertEqual(records[2]["description"], "Line one\nLine two")

    def test_non_ascii_kept(self):
        entry = CatalogEntry("Quote", 1, Severity.Error, message="“{0}” expected")
        self.assertIn("“{0}” expected", _render(JsonWriter(), [entry]))


class TestWriterFactory(unittest.TestCase):

    def test_by_enum(self):
        self.assertIsInstance(create_writer(OutputFormat.JSON), JsonWriter)
        writer = create_writer(OutputFormat.MARKDOWN, include_details=True)
        self.assertIsInstance(writer, MarkdownWriter)
        self.assertTrue(writer.include_details)

    def test_by_string(self):
        self.assertIsInstance(create_writer("json"), JsonWriter)
        self.assertIsInstance(create_writer("markdown"), MarkdownWriter)

    def test_unknown_format(self):
        with self.assertRaises(ValueError):
            create_writer("xml")


if __name__ == "__main__":
    unittest.main()
