"""
MCP Tool Definitions

Single source of truth for tool schemas and descriptions.
Used by both the stdio server and the CLI.
"""

# Tool schemas for MCP
TOOL_SCHEMAS = {
    "search_documents": {
        "name": "search_documents",
        "description": """Search local documents (.pdf, .docx, .xlsx, .xls, .txt) for literal texts. Returns a full text report.

search_documents(["/data/contracts"], "invoice;total") → every occurrence with context, per-file problems, summary
search_documents(["notes.txt"], "Invoice", context_chars=0) → exact occurrences only
""",
        "inputSchema": {
            "type": "object",
            "properties": {
                "paths": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "Files or directories (non-recursive) to search"
                },
                "search_strings": {
                    "type": "string",
                    "description": "Texts to find, separated by ';' (case-insensitive, literal, no regex)"
                },
                "context_chars": {
                    "type": "integer",
                    "description": "Characters of context before/after each match (0-1000)",
                    "default": 240
                }
            },
            "required": ["paths", "search_strings"]
        }
    }
}
