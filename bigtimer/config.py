import json
import logging
import os
import platform
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Sequence, Tuple

from .colors import RGB, parse_color
from .errors import ConfigError
from .timecalc import normalize

log = logging.getLogger(__name__)

Padding = Tuple[int, int]

BOOL_DEFAULTS = ("allow_negative", "hide_zero", "block_font", "center", "zero_starts_stopwatch")


@dataclass(frozen=True)
class Config:
    message: str = ""
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    allow_negative: bool = False
    hide_zero: bool = False
    block_font: bool = False
    center: bool = False
    message_padding: Padding = (0, 0)
    timer_padding: Padding = (0, 0)
    timer_indent: int = 0
    color: Optional[RGB] = None
    zero_starts_stopwatch: bool = True

    @property
    def total_seconds(self) -> int:
        return normalize(self.hours, self.minutes, self.seconds)


def get_config_dir() -> Path:
    system = platform.system().lower()
    if system == "darwin":
        base = Path.home() / "Library" / "Application Support"
    elif system == "windows":
        appdata = os.environ.get("APPDATA")
        if appdata:
            base = Path(appdata)
        else:
            base = Path.home() / "AppData" / "Roaming"
    else:
        base = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
    return base / "bigtimer"


def get_config_path() -> Path:
    return get_config_dir() / "config.json"


def load_defaults(path: Optional[Path] = None) -> Dict[str, Any]:
    if path is None:
        path = get_config_path()
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, json.JSONDecodeError) as exc:
        log.warning("ignoring unreadable config %s: %s", path, exc)
        return {}
    if not isinstance(data, dict):
        log.warning("ignoring config %s: top level is not an object", path)
        return {}
    return data


def _non_negative(name: str, value: Any) -> int:
    if value is None:
        return 0
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{name} must be an integer, got {value!r}")
    if number < 0:
        raise ConfigError(f"{name} must not be negative, got {number}")
    return number


def parse_padding(name: str, values: Optional[Sequence[Any]]) -> Padding:
    if not values:
        return 0, 0
    if len(values) > 2:
        raise ConfigError(f"{name} takes one or two values, got {len(values)}")
    top = _non_negative(name, values[0])
    bottom = _non_negative(name, values[-1])
    return top, bottom


def build_config(args: Any, defaults: Optional[Dict[str, Any]] = None) -> Config:
    defaults = defaults or {}

    flags = {}
    for key in BOOL_DEFAULTS:
        value = defaults.get(key)
        flags[key] = value if isinstance(value, bool) else getattr(Config, key)
    for key in ("allow_negative", "hide_zero", "block_font", "center"):
        if getattr(args, key, False):
            flags[key] = True

    color_text = getattr(args, "color", None)
    if color_text is None and isinstance(defaults.get("color"), str):
        color_text = defaults["color"]
    color = parse_color(color_text) if color_text is not None else None

    words = getattr(args, "text", None) or []
    return Config(
        message=" ".join(words),
        hours=_non_negative("hours", getattr(args, "hours", None)),
        minutes=_non_negative("minutes", getattr(args, "minutes", None)),
        seconds=_non_negative("seconds", getattr(args, "seconds", None)),
        message_padding=parse_padding("message padding", getattr(args, "message_padding", None)),
        timer_padding=parse_padding("timer padding", getattr(args, "timer_padding", None)),
        timer_indent=_non_negative("timer indent", getattr(args, "timer_indent", None)),
        color=color,
        **flags,
    )
