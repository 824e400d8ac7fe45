"""
Domain exceptions - Semantic error types for programming errors.

Runtime failures (bad user input, network errors, upstream rejections)
are never raised: they are captured as OperationError values. The
exceptions here signal that a caller broke a precondition of the core.
"""


class ConsoleError(Exception):
    """Base class for proxy console domain errors."""

    pass


class InvalidRequestSpec(ConsoleError, ValueError):
    """Outbound request is malformed (bad URL, method, or duplicate headers)."""

    pass
