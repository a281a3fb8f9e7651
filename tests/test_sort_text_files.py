#!/usr/bin/env python3
"""
Tests for sort_text_files.py, runner.py and discovery.py

This test suite covers:
- Input discovery (top-level only, recursive, exclusions, missing paths)
- Timed runs and the (strategy x sort type) run matrix
- Sequential/concurrent comparison
- CLI integration
"""

import io
import os
import shutil
import tempfile
import unittest
from unittest.mock import patch

from text_sort_tools.discovery import get_input_files, should_exclude
from text_sort_tools.ingest.strategies import CONCURRENT, SEQUENTIAL
from text_sort_tools.runner import (
    compare_strategies,
    default_output_name,
    run_all,
    run_sort,
)
from text_sort_tools.sort.ordering import ALPH_ASC, ALPH_DESC, LAST_LETTER_ASC
from text_sort_tools.sort_text_files import main

ALL_OUTPUTS = [
    "AlphabeticalAscendingTextOutput.txt",
    "AlphabeticalDescendingTextOutput.txt",
    "LastLetterAscendingTextOutput.txt",
    "MultiAscTextOutput.txt",
    "MultiDescTextOutput.txt",
    "MultiLastLetterTextOutput.txt",
]


class SortTestCase(unittest.TestCase):
    """Base class with input and output directories."""

    def setUp(self):
        """Create temporary test directories."""
        self.temp_dir = tempfile.mkdtemp()
        self.input_dir = os.path.join(self.temp_dir, "InputText")
        self.output_dir = os.path.join(self.temp_dir, "OutputText")
        os.makedirs(self.input_dir)

    def tearDown(self):
        """Clean up temporary files."""
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def create_test_file(self, filename, lines, directory=None):
        """Helper to create a test file with given lines"""
        path = os.path.join(directory or self.input_dir, filename)
        with open(path, "w", encoding="utf-8") as f:
            f.write("\n".join(lines) + "\n" if lines else "")
        return path

    def read_output(self, filename):
        with open(os.path.join(self.output_dir, filename), "r", encoding="utf-8") as f:
            return f.read().splitlines()


class TestDiscovery(SortTestCase):
    """Test input discovery."""

    def setUp(self):
        super().setUp()
        self.create_test_file("b.txt", ["b"])
        self.create_test_file("a.txt", ["a"])
        self.create_test_file("notes.tmp", ["tmp"])
        subdir = os.path.join(self.input_dir, "sub")
        os.makedirs(subdir)
        self.create_test_file("c.txt", ["c"], directory=subdir)

    def test_top_level_only(self):
        """Sub-directories are skipped by default."""
        files = get_input_files([self.input_dir])
        self.assertEqual(
            [os.path.basename(f) for f in files], ["a.txt", "b.txt", "notes.tmp"]
        )

    def test_recursive(self):
        files = get_input_files([self.input_dir], recursive=True)
        self.assertEqual(len(files), 4)
        self.assertIn(os.path.join(self.input_dir, "sub", "c.txt"), files)

    def test_exclude(self):
        files = get_input_files([self.input_dir], exclude_patterns=["*.tmp"])
        self.assertEqual([os.path.basename(f) for f in files], ["a.txt", "b.txt"])

    def test_single_file_and_duplicates(self):
        path = os.path.join(self.input_dir, "a.txt")
        self.assertEqual(get_input_files([path, path]), [path])

    def test_missing_path(self):
        with patch("sys.stderr", new_callable=io.StringIO) as mock_stderr:
            files = get_input_files([os.path.join(self.temp_dir, "nope")])

        self.assertEqual(files, [])
        self.assertIn("Skipping missing path", mock_stderr.getvalue())

    def test_verbose_logging(self):
        with patch("sys.stderr", new_callable=io.StringIO) as mock_stderr:
            get_input_files([self.input_dir], exclude_patterns=["*.tmp"], verbose=True)

        output = mock_stderr.getvalue()
        self.assertIn("[EXCLUDE] notes.tmp (matches: *.tmp)", output)
        self.assertIn("[INCLUDE] a.txt", output)
        self.assertIn("[SUMMARY] Total: 3 found, 1 excluded, 2 included", output)

    def test_should_exclude(self):
        self.assertEqual(should_exclude("/x/y/file.tmp", ["*.log", "*.tmp"]), (True, "*.tmp"))
        self.assertEqual(should_exclude("file.txt", ["*.tmp"]), (False, None))
        self.assertEqual(should_exclude("file.txt", None), (False, None))


class TestRunner(SortTestCase):
    """Test timed runs."""

    def setUp(self):
        super().setUp()
        self.files = [
            self.create_test_file("one.txt", ["cat", "bat", "ace"]),
            self.create_test_file("two.txt", ["Apple", "apple", "banana"]),
        ]

    def test_run_sort(self):
        for strategy in (SEQUENTIAL, CONCURRENT):
            with self.subTest(strategy=strategy):
                sorted_lines, elapsed = run_sort(self.files, strategy, LAST_LETTER_ASC)
                self.assertEqual(sorted_lines, ["banana", "ace", "Apple", "apple", "bat", "cat"])
                self.assertGreaterEqual(elapsed, 0.0)

    def test_default_output_names(self):
        self.assertEqual(
            default_output_name(SEQUENTIAL, ALPH_ASC), "AlphabeticalAscendingTextOutput"
        )
        self.assertEqual(default_output_name(CONCURRENT, ALPH_DESC), "MultiDescTextOutput")
        self.assertEqual(default_output_name("other", "kind"), "other-kind")

    def test_run_all_matrix(self):
        with patch("sys.stdout", new_callable=io.StringIO) as mock_stdout:
            records = run_all(self.files, output_dir=self.output_dir)

        self.assertEqual(len(records), 6)
        self.assertEqual(sorted(os.listdir(self.output_dir)), sorted(ALL_OUTPUTS))
        self.assertEqual([r["strategy"] for r in records[:3]], [SEQUENTIAL] * 3)
        self.assertEqual(mock_stdout.getvalue().count("Time Taken (s)"), 6)
        self.assertEqual(
            self.read_output("MultiAscTextOutput.txt"),
            ["Apple", "ace", "apple", "banana", "bat", "cat"],
        )

    def test_compare_strategies(self):
        with patch("sys.stdout", new_callable=io.StringIO):
            records = run_all(self.files, output_dir=self.output_dir, sort_types=[ALPH_DESC])

        comparison = compare_strategies(records)

        self.assertEqual(list(comparison), [ALPH_DESC])
        self.assertTrue(comparison[ALPH_DESC]["identical"])
        self.assertIn(SEQUENTIAL, comparison[ALPH_DESC])
        self.assertIn(CONCURRENT, comparison[ALPH_DESC])

    def test_compare_detects_difference(self):
        records = [
            {"strategy": SEQUENTIAL, "sort_type": ALPH_ASC, "elapsed": 0.1, "sorted_lines": ["a"]},
            {"strategy": CONCURRENT, "sort_type": ALPH_ASC, "elapsed": 0.2, "sorted_lines": ["b"]},
            {"strategy": SEQUENTIAL, "sort_type": ALPH_DESC, "elapsed": 0.1, "sorted_lines": []},
        ]

        comparison = compare_strategies(records)

        self.assertEqual(list(comparison), [ALPH_ASC])
        self.assertFalse(comparison[ALPH_ASC]["identical"])


class TestCLI(SortTestCase):
    """CLI integration tests."""

    def setUp(self):
        super().setUp()
        self.create_test_file("animals.txt", ["cat", "Dog", "bat", "emu2", "ace"])
        self.create_test_file("fruits.txt", ["apple", "Apple", "", "banana"])

    def test_default_run(self):
        with patch("sys.stdout", new_callable=io.StringIO) as mock_stdout:
            with patch("sys.stderr", new_callable=io.StringIO) as mock_stderr:
                main([self.input_dir, "-o", self.output_dir])

        self.assertEqual(sorted(os.listdir(self.output_dir)), sorted(ALL_OUTPUTS))
        self.assertEqual(
            self.read_output("AlphabeticalAscendingTextOutput.txt"),
            ["Apple", "Dog", "ace", "apple", "banana", "bat", "cat"],
        )
        self.assertEqual(
            self.read_output("AlphabeticalDescendingTextOutput.txt"),
            ["cat", "bat", "banana", "apple", "ace", "Dog", "Apple"],
        )
        self.assertEqual(
            self.read_output("LastLetterAscendingTextOutput.txt"),
            ["banana", "ace", "Apple", "apple", "Dog", "bat", "cat"],
        )
        for sequential, concurrent in zip(ALL_OUTPUTS[:3], ALL_OUTPUTS[3:]):
            self.assertEqual(self.read_output(sequential), self.read_output(concurrent))

        self.assertIn("Done...", mock_stdout.getvalue())
        self.assertIn("emu2", mock_stderr.getvalue())

    def test_single_type_and_strategy(self):
        with patch("sys.stdout", new_callable=io.StringIO):
            main(
                [
                    self.input_dir,
                    "-o",
                    self.output_dir,
                    "-s",
                    LAST_LETTER_ASC,
                    "--strategy",
                    CONCURRENT,
                    "-w",
                    "2",
                    "--exclude",
                    "fruits.txt",
                    "-q",
                ]
            )

        self.assertEqual(os.listdir(self.output_dir), ["MultiLastLetterTextOutput.txt"])
        self.assertEqual(
            self.read_output("MultiLastLetterTextOutput.txt"), ["ace", "Dog", "bat", "cat"]
        )

    def test_stdout_output(self):
        with patch("sys.stdout", new_callable=io.StringIO) as mock_stdout:
            with patch("sys.stderr", new_callable=io.StringIO) as mock_stderr:
                main([self.input_dir, "-o", "-", "-s", ALPH_ASC, "--strategy", SEQUENTIAL])

        self.assertEqual(
            mock_stdout.getvalue().splitlines(),
            ["Apple", "Dog", "ace", "apple", "banana", "bat", "cat"],
        )
        self.assertIn("Time Taken (s)", mock_stderr.getvalue())
        self.assertIn("Done...", mock_stderr.getvalue())

    def test_verbose_comparison(self):
        with patch("sys.stdout", new_callable=io.StringIO):
            with patch("sys.stderr", new_callable=io.StringIO) as mock_stderr:
                main([self.input_dir, "-o", self.output_dir, "-s", ALPH_DESC, "-v"])

        self.assertIn("[COMPARE] alph-desc: identical", mock_stderr.getvalue())

    def test_no_input_files(self):
        empty_dir = os.path.join(self.temp_dir, "empty")
        os.makedirs(empty_dir)

        with patch("sys.stderr", new_callable=io.StringIO) as mock_stderr:
            with self.assertRaises(SystemExit) as ctx:
                main([empty_dir, "-o", self.output_dir])

        self.assertEqual(ctx.exception.code, 1)
        self.assertIn("No input files found", mock_stderr.getvalue())

    def test_invalid_workers(self):
        with patch("sys.stderr", new_callable=io.StringIO):
            with self.assertRaises(SystemExit) as ctx:
                main([self.input_dir, "-w", "0"])

        self.assertEqual(ctx.exception.code, 1)

    def test_invalid_sort_type(self):
        with patch("sys.stderr", new_callable=io.StringIO):
            with self.assertRaises(SystemExit) as ctx:
                main([self.input_dir, "-s", "bogus"])

        self.assertEqual(ctx.exception.code, 2)

    def test_mismatch_exits_with_error(self):
        fake = {ALPH_ASC: {"identical": False, SEQUENTIAL: 0.1, CONCURRENT: 0.1}}

        with patch("text_sort_tools.sort_text_files.compare_strategies", return_value=fake):
            with patch("sys.stdout", new_callable=io.StringIO):
                with patch("sys.stderr", new_callable=io.StringIO) as mock_stderr:
                    with self.assertRaises(SystemExit) as ctx:
                        main([self.input_dir, "-o", self.output_dir, "-s", ALPH_ASC])

        self.assertEqual(ctx.exception.code, 1)
        self.assertIn("outputs differ for: alph-asc", mock_stderr.getvalue())


if __name__ == "__main__":
    unittest.main()
