"""Exception hierarchy for spot.

The query compiler has no error type: malformed shorthand degrades to a
permissive predicate instead of failing.
"""

from __future__ import annotations


class SpotError(Exception):
    """Base class for all spot errors."""


class ConfigurationError(SpotError):
    """Invalid startup configuration (e.g. unknown tool names)."""


class ToolError(SpotError):
    """A tool handler rejected its arguments."""


class GatewayError(SpotError):
    """Spotlight could not run a query or resolve an item."""


class QueryCreationFailed(GatewayError):
    def __init__(self) -> None:
        super().__init__("Failed to create MDQuery")


class ExecutionFailed(GatewayError):
    def __init__(self) -> None:
        super().__init__("Query execution failed")


class InvalidScope(GatewayError):
    def __init__(self, path: str) -> None:
        super().__init__(f"Invalid scope path: {path}")
        self.path = path


class EngineUnavailable(GatewayError):
    """The Spotlight bindings could not be loaded on this platform."""
