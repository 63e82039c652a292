"""Tests for event handling and the producer threads."""

import queue
import threading

from bigtimer.app import KEY, QUIT, RESIZE, TICK, App
from bigtimer.config import Config
from bigtimer.engine import Mode
from bigtimer.glyphs import GLYPH_HEIGHT


def _ticks(app: App, count: int) -> None:
    for _ in range(count):
        assert app.handle((TICK, None))


class TestHandle:
    def test_ninety_seconds_into_stopwatch(self) -> None:
        app = App(Config(seconds=90, allow_negative=True))
        _ticks(app, 90)
        assert app.display_text() == "0:00:00"
        assert app.engine.mode == Mode.COUNTING_UP
        _ticks(app, 1)
        assert app.display_text() == "-0:00:01"
        assert app.engine.mode == Mode.COUNTING_UP

    def test_adjust_keys(self) -> None:
        app = App(Config(minutes=5))
        for ch in "HMS":
            assert app.handle((KEY, ord(ch)))
        assert app.engine.remaining == 300 + 3600 + 60 + 1
        for ch in "hms":
            assert app.handle((KEY, ch))
        assert app.engine.remaining == 300

    def test_unknown_key_is_ignored(self) -> None:
        app = App(Config(seconds=3))
        assert not app.handle((KEY, ord("x")))
        assert not app.handle((KEY, 410))
        assert app.running
        assert app.engine.remaining == 3

    def test_quit_keys(self) -> None:
        for key in (ord("q"), 27, "q", "\x03"):
            app = App(Config(seconds=3))
            assert not app.handle((KEY, key))
            assert not app.running

    def test_quit_event(self) -> None:
        app = App(Config())
        app.handle((QUIT, None))
        assert not app.running

    def test_resize_redraws_without_changing_state(self) -> None:
        app = App(Config(seconds=3))
        assert app.handle((RESIZE, None))
        assert app.engine.remaining == 3


class TestFrame:
    def test_plain(self) -> None:
        app = App(Config(message="Tea", minutes=5, seconds=3, hide_zero=True))
        texts = [placed.text for placed in app.frame(80, 24).lines]
        assert texts == ["Tea", "5:03"]

    def test_block_font(self) -> None:
        app = App(Config(message="Go", seconds=12, block_font=True))
        frame = app.frame(80, 24)
        assert len(frame.lines) == 2 * GLYPH_HEIGHT


class TestTickSource:
    def test_emits_ticks_until_stopped(self) -> None:
        from bigtimer.ui import tick_source

        events = queue.Queue()
        stop = threading.Event()
        thread = threading.Thread(target=tick_source, args=(events, stop, 0.01), daemon=True)
        thread.start()
        assert events.get(timeout=2) == (TICK, None)
        assert events.get(timeout=2) == (TICK, None)
        stop.set()
        thread.join(timeout=2)
        assert not thread.is_alive()
