from dataclasses import dataclass


@dataclass(frozen=True)
class Duration:
    hours: int
    minutes: int
    seconds: int
    negative: bool = False

    @property
    def total_seconds(self) -> int:
        total = self.hours * 3600 + self.minutes * 60 + self.seconds
        return -total if self.negative else total


def normalize(hours: int = 0, minutes: int = 0, seconds: int = 0) -> int:
    return hours * 3600 + minutes * 60 + seconds


def split_seconds(total: int) -> Duration:
    negative = total < 0
    total = abs(total)
    hours = total // 3600
    minutes = (total % 3600) // 60
    seconds = total % 60
    return Duration(hours=hours, minutes=minutes, seconds=seconds, negative=negative)


def normalize_parts(hours: int = 0, minutes: int = 0, seconds: int = 0) -> Duration:
    return split_seconds(normalize(hours, minutes, seconds))


def format_hms_seconds(total: int) -> str:
    d = split_seconds(total)
    sign = "-" if d.negative else ""
    return f"{sign}{d.hours}:{d.minutes:02d}:{d.seconds:02d}"
