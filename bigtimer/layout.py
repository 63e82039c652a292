from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .colors import RGB
from .config import Config
from .timecalc import Duration

LEFT_MARGIN = 2


@dataclass(frozen=True)
class Placed:
    row: int
    col: int
    text: str


@dataclass
class Frame:
    lines: List[Placed] = field(default_factory=list)
    color: Optional[RGB] = None
    rows: int = 0

    def as_text(self) -> str:
        rows = {}
        for placed in self.lines:
            row = rows.setdefault(placed.row, [])
            end = placed.col + len(placed.text)
            if len(row) < end:
                row.extend(" " * (end - len(row)))
            row[placed.col:end] = placed.text
        total = max(self.rows, max(rows) + 1 if rows else 0)
        return "\n".join("".join(rows.get(y, [])).rstrip() for y in range(total))


def format_display(duration: Duration, hide_zero: bool = False) -> str:
    sign = "-" if duration.negative else ""
    if hide_zero and duration.hours == 0:
        if duration.minutes == 0:
            return f"{sign}{duration.seconds}"
        return f"{sign}{duration.minutes}:{duration.seconds:02d}"
    return f"{sign}{duration.hours}:{duration.minutes:02d}:{duration.seconds:02d}"


def _block_width(lines: Sequence[str]) -> int:
    return max((len(line) for line in lines), default=0)


def _place(lines: Sequence[str], top: int, col: int) -> List[Placed]:
    return [Placed(top + i, col, line) for i, line in enumerate(lines)]


def _centered_col(width: int, block_width: int) -> int:
    return max(0, (width - block_width) // 2)


def layout(
    message_lines: Sequence[str],
    timer_lines: Sequence[str],
    width: int,
    height: int,
    config: Config,
) -> Frame:
    frame = Frame(color=config.color)
    msg_top, msg_bottom = config.message_padding
    has_message = any(line.strip() for line in message_lines)

    row = msg_top
    if has_message:
        if config.center:
            col = _centered_col(width, _block_width(message_lines))
        else:
            col = LEFT_MARGIN
        frame.lines.extend(_place(message_lines, row, col))
        row += len(message_lines)
    row += msg_bottom

    if config.center:
        col = _centered_col(width, _block_width(timer_lines))
        free = height - row - len(timer_lines)
        row += max(0, free // 2)
        timer_bottom = 0
    else:
        timer_top, timer_bottom = config.timer_padding
        col = LEFT_MARGIN + config.timer_indent
        row += timer_top
    frame.lines.extend(_place(timer_lines, row, col))
    row += len(timer_lines) + timer_bottom
    frame.rows = row
    return frame
