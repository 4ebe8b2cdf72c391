"""JSON-RPC 2.0 message types and error taxonomy."""

from __future__ import annotations

import json
from typing import Any

from mcp import types
from pydantic import (
    BaseModel,
    ConfigDict,
    StrictInt,
    StrictStr,
    ValidationError,
)

JSONRPC_VERSION = "2.0"

RequestId = StrictInt | StrictStr


class JSONRPCRequest(BaseModel):
    """A decoded request line. `id` is None for notifications."""

    model_config = ConfigDict(extra="ignore")

    jsonrpc: StrictStr
    id: RequestId | None = None
    method: StrictStr
    params: dict[str, Any] | list[Any] | None = None


class ProtocolError(Exception):
    """A failure reported to the client as a JSON-RPC error object."""

    code: int = types.INTERNAL_ERROR

    def __init__(
        self,
        message: str,
        request_id: int | str | None = None,
        data: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.request_id = request_id
        self.data = data

    def to_error(self) -> types.ErrorData:
        return types.ErrorData(
            code=self.code, message=self.message, data=self.data
        )


class ParseError(ProtocolError):
    code = types.PARSE_ERROR


class InvalidRequest(ProtocolError):
    code = types.INVALID_REQUEST


class MethodNotFound(ProtocolError):
    code = types.METHOD_NOT_FOUND

    @classmethod
    def for_method(
        cls, method: str, request_id: int | str | None = None
    ) -> MethodNotFound:
        return cls(f"Method not found: {method}", request_id)


class InvalidParams(ProtocolError):
    code = types.INVALID_PARAMS


class InternalError(ProtocolError):
    code = types.INTERNAL_ERROR


def decode_request(line: str) -> JSONRPCRequest:
    """Decode one input line.

    Raises:
        ParseError: The line is not JSON or not a request object
        InvalidRequest: The request does not declare JSON-RPC 2.0
    """
    try:
        payload = json.loads(line)
    except RecursionError as e:
        raise ParseError("Parse error: nesting too deep") from e
    except ValueError as e:
        raise ParseError(f"Parse error: {e}") from e

    if not isinstance(payload, dict):
        raise ParseError("Parse error: expected a JSON object")

    try:
        request = JSONRPCRequest.model_validate(payload)
    except ValidationError as e:
        fields = ", ".join(
            ".".join(str(p) for p in err["loc"]) or "request"
            for err in e.errors()
        )
        raise ParseError(f"Parse error: invalid {fields}") from e

    if request.jsonrpc != JSONRPC_VERSION:
        raise InvalidRequest(
            f"Unsupported jsonrpc version: {request.jsonrpc}", request.id
        )
    return request


def success_response(request_id: int | str | None, result: Any) -> dict:
    return {"jsonrpc": JSONRPC_VERSION, "id": request_id, "result": result}


def error_response(request_id: int | str | None, error: ProtocolError) -> dict:
    return {
        "jsonrpc": JSONRPC_VERSION,
        "id": request_id,
        "error": error.to_error().model_dump(exclude_none=True),
    }


# written when a response cannot be serialized
ENCODING_ERROR_LINE = json.dumps(
    {
        "jsonrpc": JSONRPC_VERSION,
        "id": None,
        "error": {"code": types.INTERNAL_ERROR, "message": "Encoding error"},
    },
    separators=(",", ":"),
)


def encode_response(response: dict) -> str:
    """Serialize a response as one compact ASCII JSON line (no newline).

    Non-ASCII text, lone surrogates included, is written as \\u escapes.
    """
    try:
        return json.dumps(response, separators=(",", ":"))
    except (TypeError, ValueError):
        return ENCODING_ERROR_LINE
