"""
Structured Logging for the Shape Area service
=============================================

Bounded Context: Observability

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from shapearea_control.logging import create_logger, LogEvent
    >>> logger = create_logger("commands")
    >>> logger.info(
    ...     event=LogEvent.AREA_COMPUTED,
    ...     message="calc_rectangle_area succeeded",
    ...     metadata={'request_id': 'a1', 'area': 12}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
