import io
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest import mock

from bookquiz.app import explain
from bookquiz.app.cli import main

BANK = """\
- question: "2+2?"
  a: "3"
  b: "4"
  c: "5"
  d: "6"
  answer: b
- question: "3+3?"
  a: "6"
  b: "7"
  c: "8"
  d: "9"
  answer: a
"""


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.bank = Path(self._tmp.name) / "bank.yml"
        self.bank.write_text(BANK, encoding="utf-8")

    def tearDown(self) -> None:
        explain.enable(False)
        self._tmp.cleanup()

    def test_list_modes(self) -> None:
        out = io.StringIO()
        with redirect_stdout(out):
            code = main(["list-modes"])
        self.assertEqual(code, 0)
        self.assertIn("standard: Standard", out.getvalue())
        self.assertIn("review: Review", out.getvalue())

    def test_run_review_quiz(self) -> None:
        out = io.StringIO()
        with mock.patch("builtins.input", side_effect=["c", "a", "b"]), redirect_stdout(out):
            code = main(["run", "--questions", str(self.bank), "--mode", "review", "--no-shuffle"])
        self.assertEqual(code, 0)
        text = out.getvalue()
        self.assertIn("Incorrect! The correct answer is B.", text)
        self.assertEqual(text.count("2+2?"), 2)
        self.assertTrue(text.rstrip().endswith("Quiz complete."))

    def test_run_with_explain_traces(self) -> None:
        out = io.StringIO()
        with mock.patch("builtins.input", side_effect=["b", "a"]), redirect_stdout(out):
            code = main(["run", "--questions", str(self.bank), "--explain"])
        self.assertEqual(code, 0)
        self.assertIn("[EXPLAIN] session_started", out.getvalue())
        self.assertIn("[EXPLAIN] session_ended", out.getvalue())

    def test_run_without_bank(self) -> None:
        err = io.StringIO()
        with redirect_stderr(err):
            code = main(["run"])
        self.assertEqual(code, 2)
        self.assertIn("No question bank given", err.getvalue())

    def test_run_with_missing_bank(self) -> None:
        with redirect_stderr(io.StringIO()):
            code = main(["run", "--questions", str(Path(self._tmp.name) / "missing.yml")])
        self.assertEqual(code, 2)

    def test_run_with_unknown_mode(self) -> None:
        with redirect_stderr(io.StringIO()):
            code = main(["run", "--questions", str(self.bank), "--mode", "speedrun"])
        self.assertEqual(code, 2)

    def test_run_stops_when_input_is_closed(self) -> None:
        err = io.StringIO()
        with mock.patch("builtins.input", side_effect=EOFError) as fake_input, redirect_stdout(io.StringIO()), redirect_stderr(err):
            code = main(["run", "--questions", str(self.bank), "--mode", "review"])
        self.assertEqual(code, 1)
        self.assertEqual(fake_input.call_count, 1)
        self.assertIn("Quiz stopped", err.getvalue())

    def test_run_with_malformed_yaml_bank(self) -> None:
        broken = Path(self._tmp.name) / "broken.yml"
        broken.write_text("- question: [2+2?\n", encoding="utf-8")
        err = io.StringIO()
        with redirect_stderr(err):
            code = main(["run", "--questions", str(broken)])
        self.assertEqual(code, 2)
        self.assertIn("ERROR:", err.getvalue())

    def test_run_with_empty_bank(self) -> None:
        empty = Path(self._tmp.name) / "empty.yml"
        empty.write_text("", encoding="utf-8")
        with redirect_stderr(io.StringIO()):
            code = main(["run", "--questions", str(empty)])
        self.assertEqual(code, 2)


if __name__ == "__main__":
    unittest.main()
