"""A process-wide logger that filters messages by severity."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional, Sequence


class LogLevel(IntEnum):
    """Severities, most severe first."""

    EMERGENCY = 0
    ALERT = 1
    CRITICAL = 2
    ERROR = 3
    WARNING = 4
    NOTICE = 5
    INFORMATIONAL = 6
    DEBUG = 7


@dataclass
class Logger:
    """Prints messages at or above its current severity threshold."""

    current_log_level: LogLevel = LogLevel.DEBUG

    def log(self, level: LogLevel, fmt: str, *args: Any) -> Optional[str]:
        """Print the message if ``level`` passes; return the printed line or None."""
        level = LogLevel(level)
        if level > self.current_log_level:
            return None
        message = fmt % args if args else fmt
        line = f"[{level.name}] {message}"
        print(line)
        return line


_instance: Optional[Logger] = None


def get_logger() -> Logger:
    """Return the shared logger, creating it on first use."""
    global _instance
    if _instance is None:
        _instance = Logger()
    return _instance


def set_log_level(level: LogLevel) -> None:
    """Set the shared logger's threshold; does nothing before it exists."""
    if _instance is not None:
        _instance.current_log_level = LogLevel(level)


def reset_logger() -> None:
    """Discard the shared logger."""
    global _instance
    _instance = None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the logger demonstration."""
    del argv
    logger = get_logger()
    set_log_level(LogLevel.WARNING)
    logger.log(LogLevel.EMERGENCY, "This is an emergency message.")
    logger.log(LogLevel.ALERT, "This is an alert message.")
    logger.log(LogLevel.CRITICAL, "This is a critical message.")
    logger.log(LogLevel.ERROR, "This is an error message.")
    logger.log(LogLevel.WARNING, "This is a warning message.")
    logger.log(LogLevel.NOTICE, "This is a notice message.")
    logger.log(LogLevel.INFORMATIONAL, "This is an informational message.")
    logger.log(LogLevel.DEBUG, "This is a debug message.")
    return 0


if __name__ == "__main__":
    sys.exit(main())