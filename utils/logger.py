"""
Application-wide logger with thread-safe operation and multiple log levels.
File output is opt-in via enable_file_logging(); messages are always kept in memory.
"""

from enum import Enum
from datetime import datetime
from typing import List, Callable, Optional, TextIO
from threading import RLock
from dataclasses import dataclass
from pathlib import Path
import atexit
import sys


class LogLevel(Enum):
    """Log message levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


@dataclass
class LogMessage:
    """Represents a single log message."""
    timestamp: datetime
    level: LogLevel
    message: str
    source: str = ""  # Optional: where the log came from (e.g., "Appearance", "AppSettings")

    def __str__(self) -> str:
        time_str = self.timestamp.strftime("%H:%M:%S")
        source_str = f"[{self.source}] " if self.source else ""
        return f"[{time_str}] [{self.level.value}] {source_str}{self.message}"


class AppLogger:
    """
    Singleton application logger.

    Logs are written to:
    - Memory (for UI display and tests)
    - File (logs/feedreader_YYYYMMDD_HHMMSS.log), once enable_file_logging() is called
    """

    _instance = None
    _lock = RLock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self.messages: List[LogMessage] = []
        self.callbacks: List[Callable[[LogMessage], None]] = []
        self.max_messages = 1000  # Keep last 1000 in memory

        self.log_file: Optional[Path] = None
        self.file_handle: Optional[TextIO] = None

        atexit.register(self.disable_file_logging)

        self._initialized = True

    def enable_file_logging(self, folder: Path = Path("logs")) -> Optional[Path]:
        """
        Start mirroring messages to a timestamped file in folder.

        Returns:
            Path of the log file, or None if it could not be created
        """
        with self._lock:
            if self.file_handle:
                return self.log_file

            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            log_file = folder / f"feedreader_{timestamp}.log"
            try:
                folder.mkdir(parents=True, exist_ok=True)
                self.file_handle = open(log_file, 'w', encoding='utf-8', buffering=1)  # Line buffering
            except OSError as e:
                print(f"WARNING: Could not create log file: {e}", file=sys.stderr)
                return None

            self.log_file = log_file
            self._write_header()
            return log_file

    def _write_header(self):
        """Write log file header."""
        self.file_handle.write("=" * 80 + "\n")
        self.file_handle.write("FeedReader Preferences Log\n")
        self.file_handle.write(f"Started: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n")
        self.file_handle.write("=" * 80 + "\n\n")
        self.file_handle.flush()

    def disable_file_logging(self):
        """Close the log file (also runs at interpreter exit)."""
        with self._lock:
            if not self.file_handle:
                return
            try:
                self.file_handle.write("\n" + "=" * 80 + "\n")
                self.file_handle.write(f"Log ended: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n")
                self.file_handle.write("=" * 80 + "\n")
                self.file_handle.close()
            except (OSError, ValueError) as e:
                print(f"WARNING: Failed to close log file: {e}", file=sys.stderr)
            finally:
                self.file_handle = None

    def log(self, level: LogLevel, message: str, source: str = ""):
        """
        Log a message with specified level.

        Args:
            level: Log level (LogLevel enum)
            message: Log message
            source: Source component (optional)
        """
        with self._lock:
            msg = LogMessage(
                timestamp=datetime.now(),
                level=level,
                message=message,
                source=source
            )

            self.messages.append(msg)
            if len(self.messages) > self.max_messages:
                self.messages = self.messages[-self.max_messages:]

            if self.file_handle:
                try:
                    self.file_handle.write(str(msg) + "\n")
                except OSError as e:
                    print(f"WARNING: Failed to write to log file: {e}", file=sys.stderr)

            callbacks = list(self.callbacks)

        # Callbacks run outside the lock so they may log themselves
        for callback in callbacks:
            callback(msg)

    def debug(self, message: str, source: str = ""):
        """Log a DEBUG message."""
        self.log(LogLevel.DEBUG, message, source)

    def info(self, message: str, source: str = ""):
        """Log an INFO message."""
        self.log(LogLevel.INFO, message, source)

    def warning(self, message: str, source: str = ""):
        """Log a WARNING message."""
        self.log(LogLevel.WARNING, message, source)

    def error(self, message: str, source: str = ""):
        """Log an ERROR message."""
        self.log(LogLevel.ERROR, message, source)

    def add_callback(self, callback: Callable[[LogMessage], None]):
        """
        Register a callback to be notified of new log messages.

        Args:
            callback: Function that accepts a LogMessage
        """
        with self._lock:
            if callback not in self.callbacks:
                self.callbacks.append(callback)

    def remove_callback(self, callback: Callable[[LogMessage], None]):
        """Remove a registered callback."""
        with self._lock:
            if callback in self.callbacks:
                self.callbacks.remove(callback)

    def get_messages(self, level: Optional[LogLevel] = None) -> List[LogMessage]:
        """
        Get all messages, optionally filtered by level.

        Args:
            level: Filter by this level (None = all messages)
        """
        with self._lock:
            if level is None:
                return self.messages.copy()
            return [msg for msg in self.messages if msg.level == level]

    def clear(self):
        """Clear all messages from memory (does not affect log file)."""
        with self._lock:
            self.messages.clear()

    def get_log_file_path(self) -> Optional[Path]:
        """Get the current log file path."""
        if self.log_file and self.log_file.exists():
            return self.log_file
        return None


# Global logger instance
logger = AppLogger()
