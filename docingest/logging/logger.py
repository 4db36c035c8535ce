import logging
import sys
from typing import TextIO


class StructuredFormatter(logging.Formatter):
    """Appends the structured fields of a record as key=value pairs."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        fields: dict[str, object] = getattr(record, "fields", {})
        if not fields:
            return message
        rendered = " ".join(f"{key}={value}" for key, value in fields.items())
        return f"{message} {rendered}"


class Log:
    """Structured logging handle injected into pipeline components."""

    ROOT = "docingest"

    def __init__(self, name: str = "") -> None:
        self._logger = logging.getLogger(f"{self.ROOT}.{name}" if name else self.ROOT)

    @classmethod
    def configure(cls, log_level: str, stream: TextIO = sys.stdout) -> None:
        """Configure the package logger with the level and a stream handler."""
        root = logging.getLogger(cls.ROOT)
        root.setLevel(log_level.upper())
        if not root.handlers:
            handler = logging.StreamHandler(stream)
            handler.setFormatter(
                StructuredFormatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
            )
            root.addHandler(handler)

    @property
    def name(self) -> str:
        return self._logger.name

    def child(self, name: str) -> "Log":
        """Return a handle for a sub-component logging under this one."""
        suffix = self._logger.name.removeprefix(self.ROOT).lstrip(".")
        return Log(f"{suffix}.{name}" if suffix else name)

    def info(self, message: str, **fields: object) -> None:
        """Log an info message."""
        self._logger.info(message, extra={"fields": fields})

    def error(self, message: str, **fields: object) -> None:
        """Log an error message."""
        self._logger.error(message, extra={"fields": fields})

    def warning(self, message: str, **fields: object) -> None:
        """Log a warning message."""
        self._logger.warning(message, extra={"fields": fields})

    def debug(self, message: str, **fields: object) -> None:
        """Log a debug message."""
        self._logger.debug(message, extra={"fields": fields})
