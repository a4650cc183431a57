"""MCP server for funclist-mcp."""

import asyncio
import json
import logging
import os
import sys

from mcp.server import Server
from mcp.types import Tool, TextContent

from .tools.get_function_list import get_function_list, get_file_function_list
from .tools.list_languages import list_languages

logger = logging.getLogger(__name__)

LANGUAGE_ENUM = ["javascript", "typescript", "tsx"]


# Create server
server = Server("funclist-mcp")


@server.list_tools()
async def list_tools() -> list[Tool]:
    """List all available tools."""
    return [
        Tool(
            name="get_function_list",
            description="Get the function list of a source string: every function, method and arrow function with its line, category (generator, unnamed, private, class, public), nesting level and parameters.",
            inputSchema={
                "type": "object",
                "properties": {
                    "source": {
                        "type": "string",
                        "description": "Source code to outline"
                    },
                    "language": {
                        "type": "string",
                        "description": "Source language",
                        "enum": LANGUAGE_ENUM,
                        "default": "javascript"
                    },
                    "nested": {
                        "type": "boolean",
                        "description": "Nest functions under their enclosing function instead of returning a flat list",
                        "default": False
                    }
                },
                "required": ["source"]
            }
        ),
        Tool(
            name="get_file_function_list",
            description="Get the function list of a local file. The language is detected from the file extension unless given.",
            inputSchema={
                "type": "object",
                "properties": {
                    "file_path": {
                        "type": "string",
                        "description": "Path to the file (absolute or relative, supports ~ for home directory)"
                    },
                    "language": {
                        "type": "string",
                        "description": "Optional language override",
                        "enum": LANGUAGE_ENUM
                    },
                    "nested": {
                        "type": "boolean",
                        "description": "Nest functions under their enclosing function instead of returning a flat list",
                        "default": False
                    }
                },
                "required": ["file_path"]
            }
        ),
        Tool(
            name="list_languages",
            description="List supported languages and their file extensions.",
            inputSchema={
                "type": "object",
                "properties": {}
            }
        ),
    ]


@server.call_tool()
async def call_tool(name: str, arguments: dict) -> list[TextContent]:
    """Handle tool calls."""
    try:
        if name == "get_function_list":
            result = get_function_list(
                source=arguments["source"],
                language=arguments.get("language", "javascript"),
                nested=arguments.get("nested", False)
            )
        elif name == "get_file_function_list":
            result = get_file_function_list(
                file_path=arguments["file_path"],
                language=arguments.get("language"),
                nested=arguments.get("nested", False)
            )
        elif name == "list_languages":
            result = list_languages()
        else:
            result = {"error": f"Unknown tool: {name}"}

        return [TextContent(type="text", text=json.dumps(result, indent=2))]

    except Exception as e:
        logger.exception("Tool %s failed", name)
        return [TextContent(type="text", text=json.dumps({"error": str(e)}, indent=2))]


async def run_server():
    """Run the MCP server."""
    from mcp.server.stdio import stdio_server

    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options()
        )


def main():
    """Main entry point."""
    # stdout carries the MCP protocol
    logging.basicConfig(
        stream=sys.stderr,
        level=os.environ.get("FUNCLIST_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    asyncio.run(run_server())


if __name__ == "__main__":
    main()
