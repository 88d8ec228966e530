"""
Tests for the txkv command-line entry point.
"""

import io
import pytest
import sys
import os

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from txkv.cli import build_parser, main


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("TXKV_PROMPT", "TXKV_LOG_LEVEL", "TXKV_BANNER"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def feed_stdin(monkeypatch, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))


class TestCommandLine:
    """Test full sessions through main()."""

    def test_session_over_standard_streams(self, clean_env, capsys):
        feed_stdin(clean_env, "WRITE a 1\nSTART\nWRITE a 2\nCOMMIT\nREAD a\nREAD b\nQUIT\n")
        assert main([]) == 0

        captured = capsys.readouterr()
        assert captured.out.endswith("> 2\n> > Exiting...\n")
        assert "Key not found: b\n" in captured.err

    def test_end_of_input_exits_with_status_one(self, clean_env, capsys):
        feed_stdin(clean_env, "START\n")
        assert main([]) == 1
        assert "Error reading standard input" in capsys.readouterr().err

    def test_prompt_flag(self, clean_env, capsys):
        feed_stdin(clean_env, "QUIT\n")
        assert main(["--prompt", "$ "]) == 0
        assert capsys.readouterr().out == "$ Exiting...\n"

    def test_prompt_from_environment(self, clean_env, capsys):
        clean_env.setenv("TXKV_PROMPT", "env> ")
        feed_stdin(clean_env, "QUIT\n")
        assert main([]) == 0
        assert capsys.readouterr().out == "env> Exiting...\n"

    def test_banner_flag(self, clean_env, capsys):
        feed_stdin(clean_env, "QUIT\n")
        assert main(["--banner"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("    Available commands:")
        assert out.endswith("> Exiting...\n")

    def test_invalid_log_level_in_environment(self, clean_env, capsys):
        clean_env.setenv("TXKV_LOG_LEVEL", "chatty")
        assert main([]) == 2
        assert "Invalid log level" in capsys.readouterr().err


class TestArgumentParser:

    def test_defaults_are_unset(self):
        args = build_parser().parse_args([])
        assert args.prompt is None
        assert args.log_level is None
        assert args.banner is None

    def test_log_level_is_case_insensitive(self):
        assert build_parser().parse_args(["--log-level", "debug"]).log_level == "DEBUG"

    def test_unknown_log_level_is_rejected(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--log-level", "chatty"])


if __name__ == "__main__":
    pytest.main([__file__])
