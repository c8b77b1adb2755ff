"""
MCP stdio server exposing generate_image and analyze_image.
"""

import logging
import sys
from typing import List, Optional, Union

import anyio
import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError

from .. import __version__
from ..ai_interfaces.exceptions import ImageToolError, OperationFailed, UnknownOperation, ValidationError
from ..ai_interfaces.image.protocols import ModelInvokerInterface
from ..ai_interfaces.image.providers.gemini_image import GeminiImageClient
from ..ai_interfaces.models import GeneratedAsset
from ..config.settings import Settings
from ..schema.registry import list_operations
from .handlers import ImageToolService

logger = logging.getLogger(__name__)

SERVER_NAME = "mcp-gemini-image"

ContentBlock = Union[types.TextContent, types.ImageContent]

def to_content(result: Union[str, List[GeneratedAsset]]) -> List[ContentBlock]:
    """Flatten a handler result into ordered MCP content blocks"""
    if isinstance(result, str):
        return [types.TextContent(type="text", text=result)]

    content: List[ContentBlock] = []
    for asset in result:
        content.append(types.TextContent(type="text", text=str(asset.filepath)))
        content.append(types.ImageContent(
            type="image", data=asset.preview_base64, mimeType=asset.preview_mime_type,
        ))
    return content

def to_mcp_error(error: ImageToolError) -> McpError:
    """Collapse the internal taxonomy into a protocol-level error"""
    if isinstance(error, UnknownOperation):
        code = types.METHOD_NOT_FOUND
    elif isinstance(error, ValidationError):
        code = types.INVALID_PARAMS
    else:
        code = types.INTERNAL_ERROR

    data = {"error_code": error.error_code}
    if isinstance(error, OperationFailed):
        data["cause"] = error.cause.__class__.__name__
    if isinstance(error, ValidationError):
        data["violations"] = [
            {"field": v.field, "message": v.message, "kind": v.kind} for v in error.violations
        ]
    return McpError(types.ErrorData(code=code, message=error.message, data=data))

def build_tools() -> List[types.Tool]:
    return [
        types.Tool(name=spec.name.value, description=spec.description, inputSchema=spec.input_schema)
        for spec in list_operations()
    ]

def create_server(settings: Settings, invoker: Optional[ModelInvokerInterface] = None) -> Server:
    """Wire the tool service into an MCP server; fails if no API key is configured"""
    service = ImageToolService(settings, invoker or GeminiImageClient(api_key=settings.api_key))
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return build_tools()

    # McpError has to propagate as a JSON-RPC error; @server.call_tool() would
    # turn it into an isError result
    async def call_tool(request: types.CallToolRequest) -> types.ServerResult:
        try:
            result = await service.dispatch(request.params.name, request.params.arguments)
        except ImageToolError as e:
            raise to_mcp_error(e) from e
        return types.ServerResult(types.CallToolResult(content=to_content(result), isError=False))

    server.request_handlers[types.CallToolRequest] = call_tool

    logger.info(f"{SERVER_NAME} {__version__} ready, writing images to {settings.images_dir}")
    return server

def configure_logging(level: str = "INFO") -> None:
    # stdout carries the protocol stream
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

async def serve(settings: Settings) -> None:
    server = create_server(settings)
    async with stdio_server() as (read_stream, write_stream):
        await server.run(read_stream, write_stream, server.create_initialization_options())

def main() -> None:
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    anyio.run(serve, settings)

if __name__ == "__main__":
    main()
