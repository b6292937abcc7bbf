"""Structured errors raised by the graph data model."""

from __future__ import annotations
from typing import Any


class GraphError(Exception):
    """Base class for graph model issues."""

    def __init__(self, message: str, *, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}


class InvalidArgumentError(GraphError, ValueError):
    """Raised when an argument cannot be used to build or query the model."""


class IncompatibleUnitError(InvalidArgumentError):
    """Raised when two periods with different units are combined."""


class IndexOutOfRangeError(InvalidArgumentError, IndexError):
    """Raised when a period index lies beyond a bounded period's duration."""


class NotFoundError(GraphError, LookupError):
    """Raised when a lookup (nearest coordinate, series key) has no result."""
