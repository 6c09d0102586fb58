"""Tests for output formatting of parsed schedules."""

import io
import json
import unittest

from recurrence_phrase import parse
from recurrence_phrase.model import RepeatType
from recurrence_phrase.output import OutputConfig, OutputFormat, OutputWriter, describe
from tests.fixtures import capture_output, has_pyyaml


class TestDescribe(unittest.TestCase):
    def test_descriptions(self):
        cases = {
            "every monday and wednesday from 3pm to 5pm": "weekly on monday, wednesday from 15:00 to 17:00",
            "every 2 weeks": "every 2 weeks",
            "every 1st december at 9am": "yearly on december 1 at 09:00",
            "every 15th": "monthly on day 15",
            "next friday": "on friday",
            "daily at 7:45am": "daily at 07:45",
        }
        for text, expected in cases.items():
            with self.subTest(text=text):
                self.assertEqual(describe(parse(text)), expected)


class TestOutputWriter(unittest.TestCase):
    def _writer(self, fmt):
        buf = io.StringIO()
        return OutputWriter(OutputConfig(format=fmt, file=buf)), buf

    def test_text(self):
        writer, buf = self._writer(OutputFormat.TEXT)
        writer.print_data(parse("every day"))
        self.assertEqual(buf.getvalue(), "daily\n")

    def test_text_dict(self):
        writer, buf = self._writer(OutputFormat.TEXT)
        writer.print_data({"a": 1, "b": "x"})
        self.assertEqual(buf.getvalue(), "a: 1\nb: x\n")

    def test_json(self):
        writer, buf = self._writer(OutputFormat.JSON)
        result = parse("every monday at 9am")
        writer.print_data(result)
        self.assertEqual(json.loads(buf.getvalue()), result.to_dict())

    def test_json_normalizes_enums(self):
        writer, buf = self._writer(OutputFormat.JSON)
        writer.print_data({"repeats": RepeatType.DAILY})
        self.assertEqual(json.loads(buf.getvalue()), {"repeats": "daily"})

    @unittest.skipUnless(has_pyyaml(), "requires PyYAML")
    def test_yaml(self):
        import yaml

        writer, buf = self._writer(OutputFormat.YAML)
        result = parse("every 2 weeks on friday")
        writer.print_data([result])
        self.assertEqual(yaml.safe_load(buf.getvalue()), [result.to_dict()])

    def test_print_error_goes_to_stderr(self):
        writer, buf = self._writer(OutputFormat.TEXT)
        with capture_output() as (_out, err):
            writer.print_error("boom")
        self.assertEqual(buf.getvalue(), "")
        self.assertEqual(err.getvalue(), "Error: boom\n")


if __name__ == "__main__":
    unittest.main()
