"""Integration tests for the full load-correct-write pipeline."""

import json
import sys

import pytest
import yaml
from loguru import logger

from typofix.__main__ import main
from typofix.core import Config, build_dictionary
from typofix.processing import run_pipeline
from typofix.processing.batch import correct_lines

WORDS = "this\nis\na\ntest\nhello\nworld\n"


@pytest.fixture
def words_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text(WORDS)
    return path


class TestRunPipeline:
    """End-to-end runs through run_pipeline."""

    def test_corrects_inline_text_to_stdout(self, words_file, capsys) -> None:
        """Inline text is corrected and printed."""
        config = Config(dictionary=str(words_file), min_dictionary_words=0, text="Ths is a tst.")

        run_pipeline(config)

        assert capsys.readouterr().out == "This is a test."

    def test_corrects_file_to_file(self, words_file, tmp_path) -> None:
        """An input file is corrected into the output file."""
        input_file = tmp_path / "in.txt"
        input_file.write_text("Helllo wrld!\nHELLLO\n")
        output_file = tmp_path / "out.txt"
        config = Config(
            dictionary=str(words_file),
            min_dictionary_words=0,
            input=str(input_file),
            output=str(output_file),
        )

        run_pipeline(config)

        assert output_file.read_text() == "Hello world!\nHELLO\n"

    def test_line_mode_with_workers_matches_whole_text(self, words_file, tmp_path) -> None:
        """Parallel line-by-line correction gives the same text as a single pass."""
        input_file = tmp_path / "in.txt"
        input_file.write_text("Ths is a tst.\n" * 20 + "Helllo wrld")
        whole = tmp_path / "whole.txt"
        lines = tmp_path / "lines.txt"
        common = {"dictionary": str(words_file), "min_dictionary_words": 0, "input": str(input_file)}

        run_pipeline(Config(output=str(whole), **common))
        run_pipeline(Config(output=str(lines), lines=True, jobs=2, **common))

        assert lines.read_text() == whole.read_text()

    def test_writes_yaml_report(self, words_file, tmp_path, capsys) -> None:
        """The report lists corrections and unresolved words."""
        report_file = tmp_path / "report.yml"
        config = Config(
            dictionary=str(words_file),
            min_dictionary_words=0,
            text="Ths xqzzy tst",
            report=str(report_file),
        )

        run_pipeline(config)
        report = yaml.safe_load(report_file.read_text())

        assert (report["total_corrections"], report["unresolved"]) == (
            2,
            [{"word": "xqzzy", "count": 1}],
        )

    def test_report_includes_line_numbers_in_line_mode(self, words_file, tmp_path) -> None:
        """Multi-line results record which line each correction is on."""
        input_file = tmp_path / "in.txt"
        input_file.write_text("this\ntst\n")
        report_file = tmp_path / "report.yml"
        config = Config(
            dictionary=str(words_file),
            min_dictionary_words=0,
            input=str(input_file),
            output=str(tmp_path / "out.txt"),
            report=str(report_file),
            lines=True,
        )

        run_pipeline(config)
        report = yaml.safe_load(report_file.read_text())

        assert report["corrections"][0]["line"] == 2


class TestCorrectLines:
    """Batch correction helper."""

    def test_preserves_order(self) -> None:
        """Results come back in input order."""
        lexicon = build_dictionary(["this", "is", "a", "test"])
        lines = ["tst\n", "ths\n", "is\n"]
        results = correct_lines(lines, lexicon, jobs=2)
        assert [r.text for r in results] == ["test\n", "this\n", "is\n"]


class TestMain:
    """The command-line entry point."""

    @pytest.fixture(autouse=True)
    def reset_logger(self):
        yield
        logger.remove()

    def test_main_corrects_text(self, words_file, tmp_path, monkeypatch, capsys) -> None:
        """Running the CLI prints the corrected text and exits cleanly."""
        config_file = tmp_path / "config.json"
        config_file.write_text(
            json.dumps({"dictionary": str(words_file), "min_dictionary_words": 0})
        )
        monkeypatch.setattr(
            sys, "argv", ["typofix", "-c", str(config_file), "--text", "Ths is a tst."]
        )

        status = main()

        assert (status, capsys.readouterr().out) == (0, "This is a test.")

    def test_main_reports_missing_input(self, tmp_path, monkeypatch) -> None:
        """An unreadable input file gives exit status 1."""
        monkeypatch.setattr(
            sys, "argv", ["typofix", "--input", str(tmp_path / "missing.txt")]
        )

        assert main() == 1

    def test_main_reports_undecodable_input(self, tmp_path, monkeypatch) -> None:
        """An input file that is not UTF-8 gives exit status 1."""
        input_file = tmp_path / "in.txt"
        input_file.write_bytes(b"Ths is a tst \xff\n")
        monkeypatch.setattr(sys, "argv", ["typofix", "--input", str(input_file)])

        assert main() == 1

    def test_main_reports_bad_config(self, tmp_path, monkeypatch) -> None:
        """A broken config file gives exit status 1."""
        config_file = tmp_path / "config.json"
        config_file.write_text("{")
        monkeypatch.setattr(sys, "argv", ["typofix", "-c", str(config_file), "--text", "x"])

        assert main() == 1

    def test_debug_words_require_debug(self, monkeypatch) -> None:
        """--debug-words without --debug is a usage error."""
        monkeypatch.setattr(sys, "argv", ["typofix", "--text", "x", "--debug-words", "teh"])

        with pytest.raises(SystemExit):
            main()
