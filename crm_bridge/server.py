"""MCP Server: exposes the tool registry and dispatcher over the MCP stdio protocol.

Invariants:
    - list_tools returns every registry descriptor, in registry order
    - call_tool always answers with exactly one text block (payload or "Error: ...")
    - isError mirrors the envelope: True exactly when ToolResponse.ok is False
    - SDK-side input validation is off: ToolDispatch owns argument checking,
      so error text has one shape whatever the failure

Design Decisions:
    - Low-level Server over FastMCP decorators: schemas come from the data-driven
      registry, not from Python function signatures
    - Conversion helpers are module-level so they can be tested without a session
"""

import logging

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from crm_bridge.config import Settings
from crm_bridge.infrastructure.crm_client import CrmClient
from crm_bridge.services.tool_dispatch import ToolDispatch
from crm_bridge.services.tools_registry import ALL_TOOLS

logger = logging.getLogger(__name__)


def list_tool_descriptors() -> list[types.Tool]:
    return [
        types.Tool(
            name=t["name"],
            description=t["description"],
            inputSchema=t["input_schema"],
        )
        for t in ALL_TOOLS
    ]


async def call_tool_result(
    dispatch: ToolDispatch, name: str, arguments: dict | None,
) -> types.CallToolResult:
    response = await dispatch.execute(name, arguments)
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=response.to_text())],
        isError=not response.ok,
    )


def build_server(dispatch: ToolDispatch, name: str = "crm-bridge") -> Server:
    """Wire list_tools / call_tool handlers onto a fresh low-level Server."""
    server = Server(name)

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        return list_tool_descriptors()

    @server.call_tool(validate_input=False)
    async def handle_call_tool(
        tool_name: str, arguments: dict | None,
    ) -> types.CallToolResult:
        return await call_tool_result(dispatch, tool_name, arguments)

    return server


async def serve(settings: Settings) -> None:
    """Serve over stdio until the host closes the stream."""
    async with CrmClient.from_settings(settings) as client:
        server = build_server(ToolDispatch(client), settings.server_name)
        logger.info(
            f"{settings.server_name} serving {len(ALL_TOOLS)} tools over stdio",
        )
        async with stdio_server() as (read_stream, write_stream):
            await server.run(
                read_stream, write_stream, server.create_initialization_options(),
            )
