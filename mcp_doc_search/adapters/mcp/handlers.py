"""
MCP Tool Handlers

Shared handlers for MCP tools that use the hexagonal core.
"""
import asyncio
from typing import Any, Sequence

from ...container import Container
from ...core import Document, Report, normalize_context_chars, parse_search_terms, render_report


def _summary(report: Report) -> dict[str, int]:
    return {
        "selected": report.selected,
        "without_problems": report.without_problems,
        "with_problems": report.with_problems,
        "ignored": report.ignored_count,
        "findings": len(report.findings),
    }


class MCPHandlers:
    """Handlers for MCP tools using dependency injection"""

    def __init__(self, container: Container):
        self.container = container

    async def search_documents(
        self,
        paths: Sequence[str],
        search_strings: str,
        context_chars: Any = 240
    ) -> dict[str, Any]:
        """Load files from disk and search them"""
        try:
            documents = await asyncio.to_thread(self.container.loader.load, paths)
        except Exception as e:
            return {
                "success": False,
                "error": f"Failed to read documents: {str(e)}"
            }

        return await self.search_uploads(documents, search_strings, context_chars)

    async def search_uploads(
        self,
        documents: Sequence[Document],
        search_strings: str,
        context_chars: Any = 240
    ) -> dict[str, Any]:
        """Search documents already held in memory"""
        terms = parse_search_terms(search_strings)
        if not documents:
            return {
                "success": False,
                "code": "invalid_input",
                "error": "No se seleccionó ningún archivo."
            }
        if not terms:
            return {
                "success": False,
                "code": "invalid_input",
                "error": "Debes introducir al menos un texto para buscar."
            }

        width = normalize_context_chars(context_chars)

        try:
            report = await asyncio.to_thread(
                self.container.generate_report.build,
                documents,
                terms,
                width
            )
            report_text = render_report(report)

            return {
                "success": True,
                "report": report_text,
                "report_id": self.container.reports.save(report_text),
                "terms": terms,
                "context_chars": width,
                "summary": _summary(report)
            }

        except Exception as e:
            return {
                "success": False,
                "error": f"Failed to generate report: {str(e)}"
            }
