# logger_utils.py - for logging messages and timing metrics
# stdout belongs to command output, so log lines go to stderr
# (and to a log file when one is configured).

import sys
import time
from datetime import datetime
from typing import Optional, TextIO


class Log:
    """Lightweight logger for writing messages and tracking metrics."""
    COLORS = {
        "DEBUG": "\033[90m",   # gray
        "INFO": "\033[94m",    # blue
        "WARNING": "\033[93m", # yellow
        "ERROR": "\033[91m",   # red
        "RESET": "\033[0m",
    }
    LEVELS = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}

    def __init__(
        self,
        path: Optional[str] = None,
        use_color: bool = True,
        level: str = "INFO",
        stream: Optional[TextIO] = None,
    ):
        self.path = path
        self.use_color = use_color
        self.level = self._check_level(level)
        self._stream = stream

    @classmethod
    def _check_level(cls, level: str) -> str:
        level = level.upper()
        if level not in cls.LEVELS:
            raise ValueError(f"unknown log level: {level}")
        return level

    def configure(self, path=None, use_color=None, level=None, stream=None):
        """Update settings in place so module-level users pick them up."""
        if path is not None:
            self.path = path
        if use_color is not None:
            self.use_color = use_color
        if level is not None:
            self.level = self._check_level(level)
        if stream is not None:
            self._stream = stream

    @property
    def stream(self) -> TextIO:
        # resolved late so redirected/captured stderr is honoured
        return self._stream or sys.stderr

    def enabled(self, level: str) -> bool:
        return self.LEVELS[level] >= self.LEVELS[self.level]

    def write(self, level: str, msg: str):
        """
        Emit one log line if `level` passes the threshold.
        Each entry is written as: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
        """
        if not self.enabled(level):
            return
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {msg}"

        if self.path:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(line + "\n")

        if self.use_color and level in self.COLORS:
            self.stream.write(f"{self.COLORS[level]}{line}{self.COLORS['RESET']}\n")
        else:
            self.stream.write(line + "\n")

    # Public logging methods
    def debug(self, msg: str):
        self.write("DEBUG", msg)

    def info(self, msg: str):
        self.write("INFO", msg)

    def warning(self, msg: str):
        self.write("WARNING", msg)

    def error(self, msg: str):
        self.write("ERROR", msg)

    def metric(self, tag, value, unit=""):
        """
        Record a metric (timing, counts) at DEBUG level.
        Example: ingest done: 0.123s
        """
        self.debug(f"{tag}: {value}{unit}")

    def time_block(self, label):
        """
        Helper for measuring execution time of a code block.
        To use:
            with log.time_block("ingest"):
                do_some_work()
        """
        return _Timer(self, label)


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, logger: Log, label):
        self.logger = logger
        self.label = label
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        """Record elapsed seconds as a metric when the block exits."""
        self.elapsed = time.perf_counter() - self.start
        self.logger.metric(f"{self.label} done", round(self.elapsed, 3), "s")


# shared project logger, configured once by the CLI
log = Log()
