from typing import Any, List, Optional, Tuple

from .config import Config
from .engine import TimerEngine, Unit
from .glyphs import render
from .layout import Frame, format_display, layout

TICK = "tick"
KEY = "key"
RESIZE = "resize"
QUIT = "quit"

Event = Tuple[str, Any]

KEY_ACTIONS = {
    "h": (Unit.HOUR, -1),
    "m": (Unit.MINUTE, -1),
    "s": (Unit.SECOND, -1),
    "H": (Unit.HOUR, 1),
    "M": (Unit.MINUTE, 1),
    "S": (Unit.SECOND, 1),
}
QUIT_KEYS = ("q", "\x1b", "\x03")


def _key_char(key: Any) -> Optional[str]:
    if isinstance(key, str):
        return key
    if isinstance(key, int) and 0 <= key <= 255:
        return chr(key)
    return None


class App:
    """Timer engine plus the config it was built from.

    Only the thread consuming the event queue calls ``handle``.
    """

    def __init__(self, config: Config) -> None:
        self.config = config
        self.engine = TimerEngine(
            config.total_seconds,
            allow_negative=config.allow_negative,
            zero_starts_stopwatch=config.zero_starts_stopwatch,
        )
        self.running = True
        self.message_lines: List[str] = render(config.message, config.block_font) if config.message else []

    def handle(self, event: Event) -> bool:
        kind, value = event
        if kind == TICK:
            self.engine.tick()
            return True
        if kind == RESIZE:
            return True
        if kind == QUIT:
            self.running = False
            return False
        if kind != KEY:
            return False

        ch = _key_char(value)
        if ch in QUIT_KEYS:
            self.running = False
            return False
        action = KEY_ACTIONS.get(ch)
        if action is None:
            return False
        unit, delta = action
        self.engine.adjust(unit, delta)
        return True

    def display_text(self) -> str:
        return format_display(self.engine.current_display(), self.config.hide_zero)

    def frame(self, width: int, height: int) -> Frame:
        timer_lines = render(self.display_text(), self.config.block_font)
        return layout(self.message_lines, timer_lines, width, height, self.config)
