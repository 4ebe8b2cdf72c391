"""Tool base class and argument helpers.

A tool declares its parameters once in `params`; the MCP input schema,
the CLI schema and the handler's required-argument checks are all derived
from that declaration.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar

from mcp import types

from spot.exceptions import ToolError
from spot.gateway import SearchGateway


@dataclass(frozen=True)
class ParamSpec:
    """A declared tool parameter."""

    type: str
    description: str
    required: bool = False
    # long name for error messages when the key is terse (q -> query)
    label: str | None = None

    def missing_message(self, key: str) -> str:
        if self.label:
            return f"Missing {self.label} parameter '{key}'"
        return f"Missing {key} parameter"


# ---------------------------------------------------------------------------
# Argument accessors - return None on a missing key or a type mismatch
# ---------------------------------------------------------------------------


def arg_str(args: dict[str, Any], key: str) -> str | None:
    value = args.get(key)
    return value if isinstance(value, str) else None


def arg_int(args: dict[str, Any], key: str) -> int | None:
    value = args.get(key)
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def arg_object(args: Any, key: str) -> dict[str, Any] | None:
    if not isinstance(args, dict):
        return None
    value = args.get(key)
    return value if isinstance(value, dict) else None


class Tool(ABC):
    """Base class for MCP tools.

    Subclasses set the class attributes and implement `run`.
    """

    name: ClassVar[str]
    description: ClassVar[str]
    params: ClassVar[dict[str, ParamSpec]]
    # shorter description and return shape for `spot schema`
    cli_description: ClassVar[str]
    returns: ClassVar[str]

    def __init__(self, gateway: SearchGateway | None = None):
        self.gateway = gateway or SearchGateway()

    @classmethod
    def required_params(cls) -> list[str]:
        return [name for name, spec in cls.params.items() if spec.required]

    @classmethod
    def input_schema(cls) -> dict[str, Any]:
        """JSON Schema for the tool's arguments."""
        return {
            "type": "object",
            "properties": {
                name: {"type": spec.type, "description": spec.description}
                for name, spec in cls.params.items()
            },
            "required": cls.required_params(),
        }

    @classmethod
    def definition(cls) -> types.Tool:
        """Tool entry as listed by tools/list."""
        return types.Tool(
            name=cls.name,
            description=cls.description,
            inputSchema=cls.input_schema(),
        )

    @classmethod
    def cli_schema(cls) -> dict[str, Any]:
        return {
            "description": cls.cli_description,
            "params": {
                name: {
                    "type": spec.type,
                    "description": spec.description,
                    "required": spec.required,
                }
                for name, spec in cls.params.items()
            },
            "returns": cls.returns,
        }

    def check_required(self, args: dict[str, Any]) -> None:
        """Raise ToolError unless every required parameter has its type."""
        for key in self.required_params():
            spec = self.params[key]
            accessor = _ACCESSORS.get(spec.type)
            value = accessor(args, key) if accessor else args.get(key)
            if value is None:
                raise ToolError(spec.missing_message(key))

    def require_str(self, args: dict[str, Any], key: str) -> str:
        value = arg_str(args, key)
        if value is None:
            raise ToolError(self.params[key].missing_message(key))
        return value

    async def execute(self, args: dict[str, Any]) -> str:
        """Validate `args` against the declared parameters and run."""
        self.check_required(args)
        return await self.run(args)

    @abstractmethod
    async def run(self, args: dict[str, Any]) -> str:
        """Handle validated arguments and return the response text."""


_ACCESSORS = {
    "string": arg_str,
    "integer": arg_int,
}
