"""
Tests for the HTTP upload server

Drives the Starlette app through its TestClient.
"""
import pytest
from starlette.testclient import TestClient

from mcp_doc_search.container import Container
from mcp_doc_search.server_http import NO_REPORT, REPORT_FILENAME, create_app


@pytest.fixture
def client():
    return TestClient(create_app(Container(), max_file_size=1024))


class TestPing:
    """Test health check."""

    def test_ping(self, client):
        """Test ping answers ok."""
        response = client.get("/ping")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestSearch:
    """Test the upload endpoint."""

    def test_report_returned_and_downloadable(self, client):
        """Test a search returns the report and stores it for download."""
        response = client.post(
            "/buscar",
            files=[
                ("files", ("notes.txt", b"Invoice #123\n", "text/plain")),
                ("files", ("data.bin", b"\x00", "application/octet-stream")),
            ],
            data={"search_strings": "invoice; total", "context_chars": "5"},
        )

        assert response.status_code == 200
        assert "Archivo: 'notes.txt', Línea: 1 -> Encontrado: 'invoice'" in response.text
        assert "- data.bin" in response.text
        report_id = response.headers["X-Report-Id"]

        download = client.get("/descargar_reporte", params={"id": report_id})

        assert download.status_code == 200
        assert download.text == response.text
        assert download.headers["content-type"].startswith("text/plain")
        assert download.headers["content-disposition"] == f"attachment; filename={REPORT_FILENAME}"

    def test_invalid_context_uses_default(self, client):
        """Test a non-numeric context width falls back to 240."""
        response = client.post(
            "/buscar",
            files=[("files", ("a.txt", b"x", "text/plain"))],
            data={"search_strings": "x", "context_chars": "lots"},
        )

        assert response.status_code == 200
        assert "al texto hallado: 240" in response.text

    def test_no_files(self, client):
        """Test a request without files is rejected."""
        response = client.post("/buscar", data={"search_strings": "total"})

        assert response.status_code == 400
        assert response.json() == {"error": "No se seleccionó ningún archivo."}

    def test_no_terms(self, client):
        """Test a request with only separators is rejected."""
        response = client.post(
            "/buscar",
            files=[("files", ("a.txt", b"x", "text/plain"))],
            data={"search_strings": " ; "},
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Debes introducir al menos un texto para buscar."}

    def test_file_too_large(self):
        """Test an upload over the size limit is refused."""
        client = TestClient(create_app(Container(), max_file_size=10))

        response = client.post(
            "/buscar",
            files=[("files", ("big.txt", b"x" * 11, "text/plain"))],
            data={"search_strings": "x"},
        )

        assert response.status_code == 413
        assert "big.txt" in response.json()["error"]


class TestDownload:
    """Test report download."""

    def test_unknown_id(self, client):
        """Test an unknown id downloads the placeholder text."""
        response = client.get("/descargar_reporte", params={"id": "missing"})

        assert response.status_code == 200
        assert response.text == NO_REPORT

    def test_no_id(self, client):
        """Test a missing id downloads the placeholder text."""
        response = client.get("/descargar_reporte")

        assert response.text == NO_REPORT
        assert "attachment" in response.headers["content-disposition"]
