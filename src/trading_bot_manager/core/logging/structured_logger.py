"""Structured JSON logging for the trading bot instance manager."""
import logging
import json
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Sequence
from pathlib import Path


class StructuredLogger:
    """JSON structured logger, one object per line."""

    def __init__(self, name: str, level: str = "INFO",
                 log_file: Optional[Path] = None,
                 include_console: bool = True):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, level.upper()))
        self.logger.handlers.clear()

        formatter = logging.Formatter(
            fmt='%(message)s',
            datefmt='%Y-%m-%dT%H:%M:%S'
        )

        if include_console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        if log_file:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def set_level(self, level: str) -> None:
        """Change the minimum level of the underlying logger."""
        self.logger.setLevel(getattr(logging, level.upper()))

    def _format_log(self, level: str, message: str,
                    context: Optional[Dict[str, Any]] = None,
                    error: Optional[Exception] = None) -> str:
        """Format log entry as JSON."""
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": level,
            "message": message,
            "logger": self.logger.name
        }

        if context:
            log_entry["context"] = context

        if error:
            log_entry["error"] = {
                "type": type(error).__name__,
                "message": str(error),
            }

        return json.dumps(log_entry, default=str)

    def debug(self, message: str, context: Optional[Dict[str, Any]] = None):
        """Log debug message."""
        self.logger.debug(self._format_log("DEBUG", message, context))

    def info(self, message: str, context: Optional[Dict[str, Any]] = None):
        """Log info message."""
        self.logger.info(self._format_log("INFO", message, context))

    def warning(self, message: str, context: Optional[Dict[str, Any]] = None):
        """Log warning message."""
        self.logger.warning(self._format_log("WARNING", message, context))

    def error(self, message: str, context: Optional[Dict[str, Any]] = None,
              error: Optional[Exception] = None):
        """Log error message."""
        self.logger.error(self._format_log("ERROR", message, context, error))

    def critical(self, message: str, context: Optional[Dict[str, Any]] = None,
                 error: Optional[Exception] = None):
        """Log critical message."""
        self.logger.critical(self._format_log("CRITICAL", message, context, error))

    # Process-specific convenience methods
    def log_invocation(self, operation: str, command: Sequence[str],
                       returncode: Optional[int]):
        """Log a finished external invocation."""
        context = {
            "operation": operation,
            "command": " ".join(command),
            "returncode": returncode
        }
        self.debug(f"Invocation {operation} finished", context)

    def log_container_event(self, action: str, instance_slug: str,
                            container: str, container_id: Optional[str] = None):
        """Log container lifecycle event."""
        context = {
            "action": action,
            "instance": instance_slug,
            "container": container,
            "container_id": container_id
        }
        self.info(f"Container {action}", context)


# Global logger factory
def get_logger(name: str, level: str = "INFO",
               log_file: Optional[Path] = None) -> StructuredLogger:
    """Get or create a structured logger."""
    return StructuredLogger(name, level, log_file)
