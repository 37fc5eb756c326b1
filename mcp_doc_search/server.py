"""
mcp-doc-search MCP Server

MCP delivery layer - wraps the search handlers as MCP tools.
Separation of concerns: this file only handles MCP protocol.
"""
import argparse
import logging
from typing import Optional

from mcp.server.fastmcp import FastMCP

from .config import get_context_chars, get_host, get_max_workers, get_port
from .container import Container
from .adapters.mcp import MCPHandlers

# Suppress INFO logs
logging.getLogger("pypdf").setLevel(logging.ERROR)

# Initialize MCP server with HTTP config
mcp = FastMCP("doc-search", host=get_host(), port=get_port())

handlers = MCPHandlers(Container(max_workers=get_max_workers()))


@mcp.tool()
async def search_documents(
    paths: list[str],
    search_strings: str,
    context_chars: Optional[int] = None
) -> dict:
    """
    Search local documents for literal texts and return a full report.

    Supported: .pdf, .docx, .xlsx, .xls, .txt. Other files are listed as ignored.
    Case-insensitive literal matching (no regex). Overlapping matches are all reported.

    Args:
        paths: Files or directories (non-recursive) to search
        search_strings: Texts to find, separated by ';' (e.g. "invoice;total")
        context_chars: Characters of context on each side of a match (0-1000, default 240)

    Returns:
        Dictionary with the rendered report text and summary counts

    Example:
        search_documents(["/data/contracts"], "penalty;termination")
        → {report: "===== INFORME DE BÚSQUEDA =====...", summary: {selected: 12, ...}}
    """
    try:
        return await handlers.search_documents(
            paths=paths,
            search_strings=search_strings,
            context_chars=get_context_chars() if context_chars is None else context_chars
        )
    except Exception as e:
        return {
            "success": False,
            "error": f"Search failed: {str(e)}"
        }


def main():
    """Main entry point for the MCP server."""
    parser = argparse.ArgumentParser(
        description="doc-search: literal text search across PDF, DOCX, XLSX/XLS and TXT files."
    )
    parser.add_argument(
        "--transport",
        default="stdio",
        choices=["stdio", "streamable-http"],
        help="Transport method (default: stdio)"
    )
    args = parser.parse_args()

    # Run the server
    if args.transport == "streamable-http":
        print(f"Starting doc-search on http://{mcp.settings.host}:{mcp.settings.port}")
        mcp.run(transport="streamable-http")
    else:
        mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
