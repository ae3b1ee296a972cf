from datetime import datetime, timezone
from typing import List, Optional, Protocol


class Logger(Protocol):
    def log(self, message: str) -> None:
        ...


def format_digits(number: int, digits: int) -> str:
    """Left-pad a number with zeros to the given width."""
    return str(number).rjust(digits, "0")


def format_timestamp(moment: datetime) -> str:
    """
    Format a UTC moment as `[YYYY/M/D H:MM:SS.mmm]`.

    The month is zero-based (January is 0). Existing log consumers parse
    this legacy format, so it must not be "fixed" to a 1-based month.
    Example: 2023-05-25 15:05:05.123 UTC -> `[2023/4/25 15:05:05.123]`
    """
    return "[{}/{}/{} {}:{}:{}.{}]".format(
        moment.year,
        moment.month - 1,
        moment.day,
        moment.hour,
        format_digits(moment.minute, 2),
        format_digits(moment.second, 2),
        format_digits(moment.microsecond // 1000, 3),
    )


class ConsoleLogger:
    """Writes timestamped lines to standard output."""

    def log(self, message: str) -> None:
        line = f"{format_timestamp(datetime.now(timezone.utc))} {message}"
        try:
            print(line, flush=True)
        except OSError:
            pass


class RecordingLogger:
    """Keeps log lines in memory, without timestamps."""

    def __init__(self, lines: Optional[List[str]] = None):
        self.lines: List[str] = lines if lines is not None else []

    def log(self, message: str) -> None:
        self.lines.append(message)

    def contains(self, fragment: str) -> bool:
        return any(fragment in line for line in self.lines)


logger = ConsoleLogger()
