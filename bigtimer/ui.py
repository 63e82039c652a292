import curses
import logging
import os
import queue
import select
import sys
import threading
import time
from typing import Optional

from .app import KEY, QUIT, RESIZE, TICK, App, Event
from .colors import BASIC_INDEX, RGB, closest_basic, to_curses_scale
from .config import Config
from .errors import TerminalError

log = logging.getLogger(__name__)

TICK_SECONDS = 1.0
KEY_POLL_SECONDS = 0.25
MIN_ROWS = 1
MIN_COLS = 8
CUSTOM_COLOR = 16
TIMER_PAIR = 1


class Screen:
    """Owns curses for the lifetime of a ``with`` block."""

    def __init__(self, color: Optional[RGB] = None) -> None:
        self.color = color
        self.stdscr = None
        self.attr = 0
        self.lock = threading.Lock()

    def __enter__(self) -> "Screen":
        if not sys.stdin.isatty() or not sys.stdout.isatty():
            raise TerminalError("bigtimer needs an interactive terminal")
        os.environ.setdefault("ESCDELAY", "25")
        try:
            self.stdscr = curses.initscr()
        except curses.error as exc:
            raise TerminalError(f"cannot initialise terminal: {exc}") from exc

        try:
            sys.stdout.write("\x1b[?1049h")
            sys.stdout.flush()
            curses.noecho()
            curses.cbreak()
            self.stdscr.keypad(True)
            self.stdscr.nodelay(True)
            try:
                curses.curs_set(0)
            except curses.error:
                pass
            rows, cols = self.stdscr.getmaxyx()
            if rows < MIN_ROWS or cols < MIN_COLS:
                raise TerminalError(f"terminal too small ({cols}x{rows})")
            self.attr = self._init_color()
        except Exception:
            self._release()
            raise
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._release()

    def _init_color(self) -> int:
        if self.color is None:
            return 0
        try:
            curses.start_color()
            curses.use_default_colors()
            if curses.can_change_color() and curses.COLORS > CUSTOM_COLOR:
                curses.init_color(CUSTOM_COLOR, *to_curses_scale(self.color))
                index = CUSTOM_COLOR
            else:
                index = BASIC_INDEX[closest_basic(self.color)]
            curses.init_pair(TIMER_PAIR, index, -1)
        except curses.error as exc:
            log.warning("terminal refused color %s: %s", self.color, exc)
            return 0
        return curses.color_pair(TIMER_PAIR)

    def _release(self) -> None:
        if self.stdscr is None:
            return
        try:
            curses.nocbreak()
            self.stdscr.keypad(False)
            curses.echo()
        finally:
            curses.endwin()
            sys.stdout.write("\x1b[?1049l")
            sys.stdout.flush()
            self.stdscr = None

    def draw(self, app: App) -> None:
        with self.lock:
            rows, cols = self.stdscr.getmaxyx()
            frame = app.frame(cols, rows)
            self.stdscr.erase()
            for placed in frame.lines:
                if placed.row >= rows or placed.col >= cols:
                    continue
                try:
                    self.stdscr.addstr(placed.row, placed.col, placed.text[: cols - placed.col], self.attr)
                except curses.error:
                    pass
            self.stdscr.refresh()

    def read_key(self) -> int:
        with self.lock:
            return self.stdscr.getch()


def tick_source(events: "queue.Queue[Event]", stop: threading.Event, interval: float = TICK_SECONDS) -> None:
    next_at = time.monotonic() + interval
    while not stop.wait(max(0.0, next_at - time.monotonic())):
        events.put((TICK, None))
        next_at += interval


def key_source(screen: Screen, events: "queue.Queue[Event]", stop: threading.Event) -> None:
    fd = sys.stdin.fileno()
    while not stop.is_set():
        try:
            select.select([fd], [], [], KEY_POLL_SECONDS)
        except (OSError, ValueError):
            events.put((QUIT, None))
            return
        while not stop.is_set():
            try:
                ch = screen.read_key()
            except curses.error:
                break
            if ch == -1:
                break
            if ch == curses.KEY_RESIZE:
                events.put((RESIZE, None))
            else:
                events.put((KEY, ch))


def run(config: Config) -> None:
    app = App(config)
    events: "queue.Queue[Event]" = queue.Queue()
    stop = threading.Event()
    log.info("starting at %ds (negative=%s)", config.total_seconds, config.allow_negative)

    with Screen(config.color) as screen:
        producers = [
            threading.Thread(target=tick_source, args=(events, stop), name="bigtimer-ticker", daemon=True),
            threading.Thread(target=key_source, args=(screen, events, stop), name="bigtimer-keys", daemon=True),
        ]
        for thread in producers:
            thread.start()
        try:
            screen.draw(app)
            while app.running:
                if app.handle(events.get()):
                    screen.draw(app)
        except KeyboardInterrupt:
            log.info("interrupted")
        finally:
            stop.set()
            for thread in producers:
                thread.join(timeout=KEY_POLL_SECONDS * 2)
    log.info("stopped at %ds after %d ticks", app.engine.remaining, app.engine.ticks)
