"""Structured logging for treepath."""

from .structured import LogLevel, StructuredLogger, create_logger

__all__ = [
    "StructuredLogger",
    "LogLevel",
    "create_logger",
]
