import re
from types import MappingProxyType
from typing import Mapping, Tuple

from .errors import ConfigError

RGB = Tuple[int, int, int]

NAMED_COLORS: Mapping[str, RGB] = MappingProxyType(
    {
        "black": (0, 0, 0),
        "red": (205, 49, 49),
        "green": (13, 188, 121),
        "yellow": (229, 229, 16),
        "blue": (36, 114, 200),
        "purple": (188, 63, 188),
        "cyan": (17, 168, 205),
        "white": (229, 229, 229),
    }
)

ALIASES: Mapping[str, str] = MappingProxyType({"magenta": "purple"})

# curses.COLOR_* numbering for the eight basic colors
BASIC_INDEX: Mapping[str, int] = MappingProxyType(
    {
        "black": 0,
        "red": 1,
        "green": 2,
        "yellow": 3,
        "blue": 4,
        "purple": 5,
        "cyan": 6,
        "white": 7,
    }
)

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6})$")
_SPLIT_RE = re.compile(r"[,\s]+")


def parse_color(text: str) -> RGB:
    raw = text.strip()
    if not raw:
        raise ConfigError("empty color")
    name = ALIASES.get(raw.lower(), raw.lower())
    if name in NAMED_COLORS:
        return NAMED_COLORS[name]

    match = _HEX_RE.match(raw)
    if match and (raw.startswith("#") or not raw.isdigit()):
        value = match.group(1)
        return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)

    parts = [p for p in _SPLIT_RE.split(raw) if p]
    if len(parts) != 3:
        raise ConfigError(f"unknown color {text!r}: expected a name ({', '.join(n.title() for n in NAMED_COLORS)}) or R,G,B")
    channels = []
    for part in parts:
        if not part.isdigit():
            raise ConfigError(f"malformed color channel {part!r} in {text!r}")
        value = int(part)
        if value > 255:
            raise ConfigError(f"color channel {value} out of range 0-255 in {text!r}")
        channels.append(value)
    return channels[0], channels[1], channels[2]


def closest_basic(rgb: RGB) -> str:
    r, g, b = rgb
    best = "white"
    best_distance = float("inf")
    for name, (cr, cg, cb) in NAMED_COLORS.items():
        distance = (r - cr) ** 2 + (g - cg) ** 2 + (b - cb) ** 2
        if distance < best_distance:
            best_distance = distance
            best = name
    return best


def to_curses_scale(rgb: RGB) -> Tuple[int, int, int]:
    return tuple(round(c * 1000 / 255) for c in rgb)
