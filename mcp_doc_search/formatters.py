"""
Text formatters for handler results

Format handler results as plain text.
Used by both CLI and MCP adapters for consistent presentation.
"""

from typing import Any


def format_search_documents(result: dict[str, Any]) -> str:
    """Format search_documents result: the report itself, or the error."""
    if not result.get("success"):
        return f"ERROR: {result.get('error', 'Unknown error')}"

    return result["report"]


def format_summary(result: dict[str, Any], output_path: str | None = None) -> str:
    """Format a one-screen summary of a search_documents result.

    Example output:
        SEARCH "invoice; total" | CONTEXT 240

        FILES:       4 selected
        OK:          2
        PROBLEMS:    1
        IGNORED:     1
        FINDINGS:    7

        REPORT: /tmp/informe_busqueda_contexto.txt
    """
    if not result.get("success"):
        return f"ERROR: {result.get('error', 'Unknown error')}"

    summary = result["summary"]
    lines = []

    # Header
    lines.append(f"SEARCH \"{'; '.join(result['terms'])}\" | CONTEXT {result['context_chars']}")
    lines.append("")

    # Counts
    lines.append(f"FILES:       {summary['selected']} selected")
    lines.append(f"OK:          {summary['without_problems']}")
    lines.append(f"PROBLEMS:    {summary['with_problems']}")
    lines.append(f"IGNORED:     {summary['ignored']}")
    lines.append(f"FINDINGS:    {summary['findings']}")

    if output_path:
        lines.append("")
        lines.append(f"REPORT: {output_path}")

    return "\n".join(lines)
