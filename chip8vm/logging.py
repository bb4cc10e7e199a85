"""Console logging utilities for the CHIP-8 engine.

Levelled console logger with optional ANSI colours and elapsed-time stamps.
The interpreter reports loads and resets at INFO, no-ops and sound timer
expiry at DEBUG, and every engine error it re-raises at ERROR.
"""

import sys
import time
from typing import Optional, TextIO


LEVEL_ORDER = {
    "DEBUG": 0,
    "INFO": 1,
    "WARNING": 2,
    "ERROR": 3,
    "CRITICAL": 4,
}

LEVEL_COLORS = {
    "DEBUG": "\033[36m",
    "INFO": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[35m",
}

RESET_COLOR = "\033[0m"


class ConsoleLogger:
    """Flexible console logger with level filtering and formatting."""

    def __init__(
        self,
        name: str = "chip8vm",
        log_level: str = "INFO",
        use_colors: bool = True,
        show_timestamps: bool = True,
        stream: Optional[TextIO] = None,
    ):
        self.name = name
        self.stream = stream if stream is not None else sys.stdout
        self.log_level = self._check_level(log_level)
        self.use_colors = (
            use_colors and hasattr(self.stream, "isatty") and self.stream.isatty()
        )
        self.show_timestamps = show_timestamps
        self.start_time = time.time()

    @staticmethod
    def _check_level(level: str) -> str:
        level = level.upper()
        if level not in LEVEL_ORDER:
            raise ValueError(
                f"Unknown log level '{level}'. Available: {list(LEVEL_ORDER.keys())}"
            )
        return level

    def set_level(self, level: str):
        """Change the minimum level that gets printed."""
        self.log_level = self._check_level(level)

    def is_enabled_for(self, level: str) -> bool:
        """Check if a message at ``level`` would be printed."""
        return LEVEL_ORDER.get(level.upper(), 1) >= LEVEL_ORDER[self.log_level]

    def _format_message(self, level: str, message: str) -> str:
        """Format log message with timestamp, level, and colors."""
        timestamp = (
            f"[{time.time() - self.start_time:8.2f}s]" if self.show_timestamps else ""
        )
        level_str = f"[{level:>8s}]"
        name_str = f"[{self.name}]"

        if self.use_colors:
            color = LEVEL_COLORS.get(level.upper(), "")
            level_str = f"{color}{level_str}{RESET_COLOR}"

        return f"{timestamp}{level_str}{name_str} {message}"

    def log(self, level: str, message: str):
        """Log a message at the specified level."""
        if self.is_enabled_for(level):
            print(self._format_message(level.upper(), message), file=self.stream, flush=True)

    def debug(self, message: str):
        """Log debug message."""
        self.log("DEBUG", message)

    def info(self, message: str):
        """Log info message."""
        self.log("INFO", message)

    def warning(self, message: str):
        """Log warning message."""
        self.log("WARNING", message)

    def error(self, message: str):
        """Log error message."""
        self.log("ERROR", message)

    def critical(self, message: str):
        """Log critical message."""
        self.log("CRITICAL", message)
