"""
Structured Logging for regionbox
================================

Bounded Context: Observability

JSON-structured logging for the command-line layer. The geometry package
does not log.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from regionbox_cli.logging import create_logger, LogEvent
    >>> logger = create_logger("session")
    >>> logger.warning(
    ...     event=LogEvent.INPUT_PARSE_FAILED,
    ...     message="Could not parse token",
    ...     metadata={'token': 'abc'}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
