#!/usr/bin/env python3
"""
CLI for mcp-doc-search - run searches without the MCP server

Usage:
  mcp-doc-search list-tools                                # Show MCP tool definitions
  mcp-doc-search search docs/ --terms "invoice;total"      # Print report for every file in docs/
  mcp-doc-search search a.pdf b.xlsx --terms total --context 0
  mcp-doc-search search docs/ --terms total --output informe.txt   # Save report, print summary

Fast iteration: Uses hexagonal core directly (no MCP layer)
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from .config import get_context_chars, get_max_workers
from .container import Container
from .adapters.mcp import TOOL_SCHEMAS, MCPHandlers
from .formatters import format_search_documents, format_summary


async def list_tools_command() -> int:
    """Show MCP tool definitions"""
    print("=" * 80)
    print("MCP TOOL DEFINITIONS")
    print("=" * 80)
    print()

    for tool_name, tool_schema in TOOL_SCHEMAS.items():
        print(f"Tool: {tool_schema['name']}")
        print()
        print("Description:")
        print(tool_schema['description'])
        print()
        print("Input Schema:")
        print(json.dumps(tool_schema['inputSchema'], indent=2))
        print()
        print("-" * 80)
        print()

    return 0


async def search_command(
    paths: list[str],
    terms: str,
    context_chars: int,
    workers: int,
    output: str | None,
) -> int:
    """Search documents and print (or save) the report"""
    try:
        # Initialize container
        container = Container(max_workers=workers)
        handlers = MCPHandlers(container)

        # Call handler
        result = await handlers.search_documents(
            paths=paths,
            search_strings=terms,
            context_chars=context_chars
        )

        if not result["success"]:
            print(format_search_documents(result))
            return 1

        if output:
            Path(output).write_text(result["report"], encoding="utf-8")
            print(format_summary(result, output_path=output))
        else:
            print(format_search_documents(result))

        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        return 1


def main():
    parser = argparse.ArgumentParser(
        description="mcp-doc-search CLI - Search documents and print the report"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log progress to stderr"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # list-tools command
    subparsers.add_parser("list-tools", help="Show MCP tool definitions")

    # search command
    search_parser = subparsers.add_parser("search", help="Search documents")
    search_parser.add_argument("paths", nargs="+", help="Files or directories to search")
    search_parser.add_argument(
        "--terms",
        required=True,
        help="Texts to search for, separated by ';'"
    )
    search_parser.add_argument(
        "--context",
        type=int,
        default=get_context_chars(),
        help="Context characters before/after each match (default: $CONTEXT_CHARS or 240)"
    )
    search_parser.add_argument(
        "--workers",
        type=int,
        default=get_max_workers(),
        help="Threads used to extract documents (default: $MAX_WORKERS or 1)"
    )
    search_parser.add_argument("--output", "-o", help="Write the report to this file")

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(
            level=logging.INFO,
            format="[%(asctime)s] [%(levelname)s] %(message)s",
            datefmt="%Y/%m/%d %H:%M:%S"
        )

    if not args.command:
        parser.print_help()
        return 1

    # Run command
    if args.command == "list-tools":
        return asyncio.run(list_tools_command())
    elif args.command == "search":
        return asyncio.run(search_command(
            paths=args.paths,
            terms=args.terms,
            context_chars=args.context,
            workers=args.workers,
            output=args.output
        ))
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
