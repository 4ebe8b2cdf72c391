"""MCP server: newline-delimited JSON-RPC over stdio.

One line in, one line out. Each request is processed to completion
(including the Spotlight query behind a tool call) before the next line is
read, and every response is flushed as soon as it is written.
"""

from __future__ import annotations

import asyncio
import io
import sys
from collections.abc import Awaitable, Callable
from typing import Any, TextIO

from mcp import types

from spot.gateway import SearchGateway
from spot.logging_config import get_logger
from spot.server.config import (
    PROTOCOL_VERSION,
    SERVER_NAME,
    SERVER_VERSION,
    ServerConfig,
)
from spot.server.protocol import (
    InternalError,
    InvalidParams,
    JSONRPCRequest,
    MethodNotFound,
    ProtocolError,
    decode_request,
    encode_response,
    error_response,
    success_response,
)
from spot.tools import TOOL_TYPES, Tool
from spot.tools.base import arg_object

logger = get_logger("mcp_server")

Handler = Callable[[JSONRPCRequest], Awaitable[Any]]


class MCPServer:
    """Request dispatcher for the MCP tool subset.

    Args:
        config: Enabled tools, fixed for the lifetime of the server
        gateway: Shared search gateway (default: Spotlight)
    """

    def __init__(
        self,
        config: ServerConfig | None = None,
        gateway: SearchGateway | None = None,
    ):
        self.config = config or ServerConfig()
        gateway = gateway or SearchGateway()
        self._tools: dict[str, Tool] = {
            name: TOOL_TYPES[name](gateway)
            for name in self.config.enabled_tools
        }
        self._initialized = False
        self._handlers: dict[str, Handler] = {
            "initialize": self._handle_initialize,
            "initialized": self._handle_initialized,
            "notifications/initialized": self._handle_initialized,
            "tools/list": self._handle_tools_list,
            "tools/call": self._handle_tools_call,
        }

    @property
    def enabled_tools(self) -> list[str]:
        return sorted(self._tools)

    async def handle_line(self, line: str) -> dict | None:
        """Process one input line; None for blank lines."""
        line = line.strip()
        if not line:
            return None

        try:
            request = decode_request(line)
        except ProtocolError as e:
            logger.warning("rejected request line: %s", e.message)
            return error_response(e.request_id, e)

        return await self.handle_request(request)

    async def handle_request(self, request: JSONRPCRequest) -> dict:
        """Dispatch a decoded request. Always returns exactly one response."""
        logger.debug("dispatch method=%s id=%s", request.method, request.id)

        handler = self._handlers.get(request.method)
        if handler is None:
            return error_response(
                request.id, MethodNotFound.for_method(request.method)
            )

        try:
            result = await handler(request)
        except ProtocolError as e:
            return error_response(request.id, e)
        return success_response(request.id, result)

    # -----------------------------------------------------------------------
    # Methods
    # -----------------------------------------------------------------------

    async def _handle_initialize(self, request: JSONRPCRequest) -> dict:
        if self._initialized:
            logger.info("repeated initialize request id=%s", request.id)
        self._initialized = True

        server_info = types.Implementation(
            name=SERVER_NAME, version=SERVER_VERSION
        )
        return {
            "protocolVersion": PROTOCOL_VERSION,
            "serverInfo": server_info.model_dump(exclude_none=True),
            "capabilities": {"tools": {}},
        }

    async def _handle_initialized(self, request: JSONRPCRequest) -> dict:
        return {}

    async def _handle_tools_list(self, request: JSONRPCRequest) -> dict:
        tools = [
            self._tools[name]
            .definition()
            .model_dump(by_alias=True, exclude_none=True)
            for name in self.enabled_tools
        ]
        return {"tools": tools}

    async def _handle_tools_call(self, request: JSONRPCRequest) -> dict:
        params = request.params if isinstance(request.params, dict) else {}
        name = params.get("name")
        if not isinstance(name, str):
            raise InvalidParams("Missing tool name")

        tool = self._tools.get(name)
        if tool is None:
            raise MethodNotFound(f"Tool not enabled: {name}")

        args = arg_object(params, "arguments") or {}

        try:
            text = await tool.execute(args)
        except Exception as e:
            logger.warning("tool %s failed: %s", name, e)
            raise InternalError(str(e) or type(e).__name__) from e

        content = types.TextContent(type="text", text=text)
        return {"content": [content.model_dump(exclude_none=True)]}

    # -----------------------------------------------------------------------
    # Transport
    # -----------------------------------------------------------------------

    async def serve(
        self,
        reader: TextIO | None = None,
        writer: TextIO | None = None,
    ) -> None:
        """Read requests line by line until EOF, answering each in turn."""
        reader = reader or sys.stdin
        writer = writer or sys.stdout
        if isinstance(reader, io.TextIOWrapper):
            # undecodable bytes become U+FFFD and then a parse error
            reader.reconfigure(errors="replace")
        logger.info("mcp server started tools=%s", self.enabled_tools)

        while True:
            # blocking read runs off the loop; requests are still serial
            line = await asyncio.to_thread(reader.readline)
            if not line:
                break

            try:
                response = await self.handle_line(line)
            except Exception as e:
                logger.error("unhandled error for line: %s", e)
                response = error_response(
                    None, InternalError(str(e) or type(e).__name__)
                )
            if response is None:
                continue

            writer.write(encode_response(response) + "\n")
            writer.flush()

        logger.info("mcp server input closed")


def run_server(config: ServerConfig | None = None) -> None:
    """Run the MCP server on stdin/stdout until EOF."""
    asyncio.run(MCPServer(config).serve())
