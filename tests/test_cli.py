"""Tests for the command line surface."""

from unittest.mock import patch

import pytest

from bigtimer import cli
from bigtimer.config import Config
from bigtimer.errors import TerminalError


@pytest.fixture(autouse=True)
def _isolated(monkeypatch):
    monkeypatch.setattr("bigtimer.cli.load_defaults", lambda: {})
    monkeypatch.setattr("bigtimer.cli.setup_logging", lambda: None)


class TestParseArgs:
    def test_short_flags(self) -> None:
        args = cli.parse_args(["-h", "1", "-m", "2", "-s", "3", "-k", "-0", "-f", "-z", "-c", "Red"])
        assert (args.hours, args.minutes, args.seconds) == (1, 2, 3)
        assert args.allow_negative and args.hide_zero and args.block_font and args.center
        assert args.color == "Red"

    def test_text_anywhere(self) -> None:
        args = cli.parse_args(["-s", "5", "Tea", "time", "-k"])
        assert args.text == ["Tea", "time"]
        assert args.seconds == 5

    def test_padding_takes_one_or_two(self) -> None:
        args = cli.parse_args(["hi", "-p", "1", "2", "-t", "3"])
        assert args.message_padding == [1, 2]
        assert args.timer_padding == [3]

    def test_help_exits_zero(self, capsys, monkeypatch) -> None:
        monkeypatch.setenv("COLUMNS", "300")
        with pytest.raises(SystemExit) as exc:
            cli.parse_args(["--help"])
        assert exc.value.code == 0
        out = capsys.readouterr().out
        assert "-k" in out
        assert "R G B" in out
        assert "#RRGGBB" in out

    def test_bad_number_exits_two(self) -> None:
        with pytest.raises(SystemExit) as exc:
            cli.parse_args(["-s", "soon"])
        assert exc.value.code == 2


class TestMain:
    def test_no_arguments_prints_usage(self, capsys) -> None:
        with patch("bigtimer.ui.run") as run:
            assert cli.main([]) == 0
        run.assert_not_called()
        assert "usage: bigtimer" in capsys.readouterr().out

    def test_unknown_color(self, capsys) -> None:
        assert cli.main(["-s", "5", "-c", "orange"]) == 2
        assert "orange" in capsys.readouterr().err

    def test_headless(self, capsys) -> None:
        assert cli.main(["Tea", "-m", "5", "-s", "3", "-0", "--headless"]) == 0
        out = capsys.readouterr().out
        assert "Tea" in out
        assert "5:03" in out

    def test_runs_loop(self) -> None:
        with patch("bigtimer.ui.run") as run:
            assert cli.main(["-s", "90", "-k"]) == 0
        config = run.call_args[0][0]
        assert isinstance(config, Config)
        assert config.total_seconds == 90
        assert config.allow_negative

    def test_terminal_error(self, capsys) -> None:
        with patch("bigtimer.ui.run", side_effect=TerminalError("not a tty")):
            assert cli.main(["-s", "1"]) == 1
        assert "not a tty" in capsys.readouterr().err

    def test_interrupt_is_clean(self) -> None:
        with patch("bigtimer.ui.run", side_effect=KeyboardInterrupt):
            assert cli.main(["-s", "1"]) == 0
