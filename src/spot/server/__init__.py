"""JSON-RPC (MCP) server over stdio."""
