import logging

from .timecalc import Duration, split_seconds

log = logging.getLogger(__name__)


class Mode:
    COUNTING_DOWN = "counting_down"
    COUNTING_UP = "counting_up"
    STOPPED = "stopped"


class Unit:
    HOUR = 3600
    MINUTE = 60
    SECOND = 1


class TimerEngine:
    """Countdown that optionally keeps running past zero as a stopwatch.

    ``remaining`` is signed: once a timer with ``allow_negative`` crosses
    zero it keeps decrementing, and the magnitude below zero is the time
    elapsed since the countdown finished.
    """

    def __init__(self, total_seconds: int, allow_negative: bool = False, zero_starts_stopwatch: bool = True) -> None:
        self._remaining = total_seconds
        self._allow_negative = allow_negative
        self.ticks = 0
        if total_seconds < 0 and not allow_negative:
            self._remaining = 0
        if self._remaining > 0:
            self._mode = Mode.COUNTING_DOWN
        elif self._remaining < 0:
            self._mode = Mode.COUNTING_UP
        elif allow_negative and zero_starts_stopwatch:
            self._mode = Mode.COUNTING_DOWN
        else:
            self._mode = Mode.STOPPED

    @property
    def remaining(self) -> int:
        return self._remaining

    @property
    def mode(self) -> str:
        return self._mode

    @property
    def allow_negative(self) -> bool:
        return self._allow_negative

    def _set_mode(self, mode: str) -> None:
        if mode != self._mode:
            log.debug("mode %s -> %s at %d", self._mode, mode, self._remaining)
            self._mode = mode

    def tick(self) -> None:
        if self._mode == Mode.STOPPED:
            return
        self.ticks += 1
        self._remaining -= 1
        if self._mode == Mode.COUNTING_UP:
            return
        if self._remaining > 0:
            return
        if self._allow_negative:
            self._set_mode(Mode.COUNTING_UP)
        else:
            self._remaining = 0
            self._set_mode(Mode.STOPPED)

    def adjust(self, unit: int, delta: int) -> None:
        previous = self._mode
        self._remaining += unit * delta
        if self._remaining < 0:
            if self._allow_negative:
                self._set_mode(Mode.COUNTING_UP)
            else:
                self._remaining = 0
                self._set_mode(Mode.STOPPED)
        elif self._remaining == 0:
            if not self._allow_negative:
                self._set_mode(Mode.STOPPED)
            elif previous == Mode.COUNTING_DOWN:
                self._set_mode(Mode.COUNTING_UP)
        elif previous == Mode.COUNTING_UP:
            self._set_mode(Mode.COUNTING_DOWN)

    def current_display(self) -> Duration:
        return split_seconds(self._remaining)
