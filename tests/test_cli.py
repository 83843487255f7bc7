"""Tests for the string_calculator command-line interface.

WHY: The CLI is a thin wrapper, but its exit codes, stdout/stderr split
and escape decoding are what shell users depend on.

HOW: main() is called with an explicit argv; capsys captures output and
monkeypatch supplies stdin.
"""

import importlib
import io

import pytest

from string_calculator import cli as cli_module
from string_calculator import config as config_module
from string_calculator.cli import build_parser, decode_escapes, main


class TestDecodeEscapes:

    def test_newline_and_tab(self):
        assert decode_escapes("//;\\n1;2") == "//;\n1;2"
        assert decode_escapes("1,\\t2") == "1,\t2"

    def test_escaped_backslash(self):
        assert decode_escapes("//\\\\\\n1\\\\2") == "//\\\n1\\2"

    def test_plain_text_untouched(self):
        assert decode_escapes("1,2") == "1,2"


class TestMain:

    def test_prints_sum(self, capsys):
        main(["1,2"])
        assert capsys.readouterr().out.strip() == "3"

    def test_decodes_declaration(self, capsys):
        main(["//;\\n1;2", "3,4"])
        assert capsys.readouterr().out.strip() == "10"

    def test_raw_keeps_backslashes(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--raw", "1\\n2"])
        assert exc.value.code == 1
        assert "Invalid number" in capsys.readouterr().err

    def test_reads_stdin_when_no_inputs(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("1\n2,3"))
        main([])
        assert capsys.readouterr().out.strip() == "6"

    def test_reads_stdin_with_trailing_newline(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("1,2\n"))
        main([])
        assert capsys.readouterr().out.strip() == "3"

    def test_only_one_stdin_line_ending_dropped(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("1,2\n\n"))
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 1
        assert "Separator at end not allowed" in capsys.readouterr().err

    def test_dash_reads_stdin(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("//;\n4;5"))
        main(["-", "1"])
        assert capsys.readouterr().out.strip() == "10"

    def test_error_exit_code_and_stderr(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["//|\\n1|2,-3"])
        assert exc.value.code == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("Error: Negative number(s) not allowed: -3\n")
        assert "found at position 3." in captured.err


class TestParser:

    def test_log_level_case_insensitive(self):
        args = build_parser().parse_args(["--log-level", "debug", "1"])
        assert args.log_level == "DEBUG"

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.inputs == []
        assert args.raw is False


@pytest.fixture
def reload_with_log_level(monkeypatch):
    """Reload config and cli with STRING_CALCULATOR_LOG_LEVEL set."""

    def _reload(value):
        monkeypatch.setenv("STRING_CALCULATOR_LOG_LEVEL", value)
        importlib.reload(config_module)
        return importlib.reload(cli_module)

    yield _reload

    monkeypatch.delenv("STRING_CALCULATOR_LOG_LEVEL", raising=False)
    importlib.reload(config_module)
    importlib.reload(cli_module)


class TestLogLevelFromEnvironment:
    """STRING_CALCULATOR_LOG_LEVEL sets the --log-level default."""

    def test_valid_level_overrides_default(self, reload_with_log_level):
        cli = reload_with_log_level("debug")
        assert cli.build_parser().parse_args([]).log_level == "DEBUG"

    def test_unknown_level_falls_back_to_warning(self, reload_with_log_level):
        cli = reload_with_log_level("loud")
        assert cli.build_parser().parse_args([]).log_level == "WARNING"

    def test_flag_still_wins(self, reload_with_log_level):
        cli = reload_with_log_level("debug")
        assert cli.build_parser().parse_args(["--log-level", "error"]).log_level == "ERROR"
