"""spot - Spotlight search for AI agents."""

from spot.exceptions import (
    ConfigurationError,
    EngineUnavailable,
    ExecutionFailed,
    GatewayError,
    InvalidScope,
    QueryCreationFailed,
    SpotError,
    ToolError,
)
from spot.gateway import SearchGateway
from spot.models import SearchResult
from spot.query import compile_query, parse_sort_spec

__version__ = "1.0.0"

__all__ = [
    "ConfigurationError",
    "EngineUnavailable",
    "ExecutionFailed",
    "GatewayError",
    "InvalidScope",
    "QueryCreationFailed",
    "SearchGateway",
    "SearchResult",
    "SpotError",
    "ToolError",
    "__version__",
    "compile_query",
    "parse_sort_spec",
]
