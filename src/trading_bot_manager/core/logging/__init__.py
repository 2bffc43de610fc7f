"""Structured logging."""

from .structured_logger import StructuredLogger, get_logger

__all__ = ["StructuredLogger", "get_logger"]
