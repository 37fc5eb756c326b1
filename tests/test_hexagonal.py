"""
Minimal tests for hexagonal architecture

Smoke tests for the domain models, the container wiring and the shared
MCP handlers.
"""
import asyncio

from mcp_doc_search.adapters import FilesystemLoader, MemoryReportStore
from mcp_doc_search.adapters.mcp import TOOL_SCHEMAS, MCPHandlers
from mcp_doc_search.container import Container
from mcp_doc_search.core.domain import Document, Report


class TestDomainModels:
    """Test domain models are simple dataclasses."""

    def test_document_extension(self):
        """Test extension is lower-cased and dotted."""
        assert Document("Report.XLSX", b"").extension == ".xlsx"
        assert Document("README", b"").extension == ""

    def test_report_counts(self):
        """Test derived report counts."""
        report = Report(
            terms=("a",),
            context_chars=0,
            ignored=("x.bin",),
            selected=3,
            processed=2,
            files_with_problems=frozenset({"bad.pdf"})
        )
        assert report.with_problems == 1
        assert report.without_problems == 1
        assert report.ignored_count == 1


class TestContainer:
    """Test dependency injection container."""

    def test_container_creates_all_services(self):
        """Test container initializes all dependencies."""
        container = Container()

        # Check adapters exist
        assert isinstance(container.loader, FilesystemLoader)
        assert isinstance(container.reports, MemoryReportStore)
        assert set(container.format_adapters) == {".pdf", ".docx", ".xlsx", ".xls", ".txt"}

        # Check services exist
        assert container.dispatcher is not None
        assert container.generate_report.dispatcher is container.dispatcher

    def test_max_workers(self):
        """Test worker count reaches the service."""
        assert Container(max_workers=3).generate_report.max_workers == 3


class TestToolSchemas:
    """Test MCP tool definitions."""

    def test_search_documents_schema(self):
        """Test the single tool and its required arguments."""
        schema = TOOL_SCHEMAS["search_documents"]
        assert schema["name"] == "search_documents"
        assert schema["inputSchema"]["required"] == ["paths", "search_strings"]


class TestMCPHandlers:
    """Test shared handlers."""

    def test_search_directory(self, tmp_path):
        """Test a directory search returns report, id and summary."""
        (tmp_path / "notes.txt").write_bytes(b"Invoice #123\n")
        (tmp_path / "data.bin").write_bytes(b"\x00")
        handlers = MCPHandlers(Container())

        result = asyncio.run(handlers.search_documents([str(tmp_path)], "invoice; total", 5))

        assert result["success"] is True
        assert result["terms"] == ["invoice", "total"]
        assert result["context_chars"] == 5
        assert result["summary"] == {
            "selected": 2,
            "without_problems": 1,
            "with_problems": 0,
            "ignored": 1,
            "findings": 1,
        }
        assert "Archivo: 'notes.txt', Línea: 1 -> Encontrado: 'invoice'" in result["report"]

    def test_report_is_stored(self, tmp_path):
        """Test the rendered report can be fetched again by id."""
        path = tmp_path / "a.txt"
        path.write_bytes(b"total")
        container = Container()

        result = asyncio.run(MCPHandlers(container).search_documents([str(path)], "total"))

        assert container.reports.get(result["report_id"]) == result["report"]

    def test_missing_path(self, tmp_path):
        """Test a missing path fails before searching."""
        handlers = MCPHandlers(Container())

        result = asyncio.run(handlers.search_documents([str(tmp_path / "nope.txt")], "total"))

        assert result["success"] is False
        assert result["error"].startswith("Failed to read documents:")

    def test_no_terms(self):
        """Test only separators and blanks is invalid input."""
        handlers = MCPHandlers(Container())

        result = asyncio.run(handlers.search_uploads([Document("a.txt", b"x")], " ; ;"))

        assert result == {
            "success": False,
            "code": "invalid_input",
            "error": "Debes introducir al menos un texto para buscar."
        }

    def test_no_files_checked_first(self):
        """Test an empty batch is reported before missing terms."""
        handlers = MCPHandlers(Container())

        result = asyncio.run(handlers.search_uploads([], ""))

        assert result["code"] == "invalid_input"
        assert result["error"] == "No se seleccionó ningún archivo."

    def test_out_of_range_context_uses_default(self):
        """Test context widths outside 0..1000 fall back to 240."""
        handlers = MCPHandlers(Container())

        result = asyncio.run(handlers.search_uploads([Document("a.txt", b"x")], "x", "5000"))

        assert result["context_chars"] == 240
