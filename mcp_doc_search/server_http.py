#!/usr/bin/env python3
"""
HTTP Upload Server - Hexagonal Architecture

Upload documents, get the search report back, download it again later.

Run with: uvicorn mcp_doc_search.server_http:app --host 127.0.0.1 --port 5002
      or: mcp-doc-search-http

Configuration:
- PORT: Server port (default: 5002)
- HOST: Bind address (default: 127.0.0.1)
- MAX_FILE_SIZE_MB: Per-file upload limit (default: 128)
- REPORT_TTL_SECONDS: How long a report stays downloadable (default: 3600)
- MAX_WORKERS: Threads used to extract documents (default: 1)
"""

import logging
import signal
import sys
from datetime import datetime, timezone
from typing import Optional

from starlette.applications import Starlette
from starlette.datastructures import UploadFile
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse, Response
from starlette.routing import Route

from .config import (
    get_host,
    get_max_file_size,
    get_max_workers,
    get_port,
    get_report_ttl,
)
from .container import Container
from .adapters.mcp import MCPHandlers
from .core import Document

logger = logging.getLogger(__name__)

REPORT_FILENAME = "informe_busqueda_contexto.txt"
NO_REPORT = "No hay ningún informe para descargar."
PROCESSING_ERROR = "Ocurrió un error al procesar los archivos."


class MillisecondFormatter(logging.Formatter):
    """Custom formatter with milliseconds as :XXXX format"""
    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: N802
        """Override formatTime to include milliseconds with : separator"""
        ct = datetime.fromtimestamp(record.created, tz=timezone.utc)
        if datefmt:
            s = ct.strftime("%Y/%m/%d %H:%M:%S")
            ms = int((record.created % 1) * 10000)
            return f"{s}:{ms:04d}"
        return super().formatTime(record, datefmt)


def configure_logging() -> None:
    """Root logger with millisecond timestamps"""
    logging.basicConfig(
        level=logging.INFO,
        format="[%(asctime)s] [%(levelname)s] %(message)s",
        datefmt="%Y/%m/%d %H:%M:%S"
    )
    for handler in logging.root.handlers:
        handler.setFormatter(MillisecondFormatter(
            "[%(asctime)s] [%(levelname)s] %(message)s",
            datefmt="%Y/%m/%d %H:%M:%S"
        ))
    logging.getLogger("pypdf").setLevel(logging.ERROR)


def create_app(container: Optional[Container] = None, max_file_size: Optional[int] = None) -> Starlette:
    """Build the Starlette app around a container"""
    container = container or Container(
        max_workers=get_max_workers(),
        report_ttl=get_report_ttl()
    )
    handlers = MCPHandlers(container)
    size_limit = max_file_size if max_file_size is not None else get_max_file_size()

    async def handle_ping(request: Request) -> Response:
        """Health check endpoint"""
        return JSONResponse({"status": "ok"})

    async def handle_search(request: Request) -> Response:
        """Multipart upload: files, search_strings, context_chars"""
        form = await request.form()
        uploads = [f for f in form.getlist("files") if isinstance(f, UploadFile)]

        documents = []
        for upload in uploads:
            content = await upload.read()
            name = upload.filename or ""
            if len(content) > size_limit:
                logger.info(f"search: rejecting {name} ({len(content)} bytes)")
                return JSONResponse(
                    {"error": f"El archivo '{name}' supera el tamaño máximo permitido."},
                    status_code=413
                )
            documents.append(Document(name=name, content=content))

        logger.info(f"search: {len(documents)} files from {request.client.host if request.client else 'unknown'}")

        result = await handlers.search_uploads(
            documents,
            str(form.get("search_strings") or ""),
            form.get("context_chars")
        )

        if not result["success"]:
            if result.get("code") == "invalid_input":
                return JSONResponse({"error": result["error"]}, status_code=400)
            logger.error(f"search: FAILED: {result['error']}")
            return JSONResponse({"error": PROCESSING_ERROR}, status_code=500)

        return PlainTextResponse(result["report"], headers={"X-Report-Id": result["report_id"]})

    async def handle_download(request: Request) -> Response:
        """Previously generated report as a text attachment"""
        report_id = request.query_params.get("id", "")
        report = container.reports.get(report_id) if report_id else None

        return Response(
            content=report or NO_REPORT,
            media_type="text/plain; charset=utf-8",
            headers={"Content-Disposition": f"attachment; filename={REPORT_FILENAME}"}
        )

    routes = [
        Route("/ping", handle_ping),
        Route("/buscar", handle_search, methods=["POST"]),
        Route("/descargar_reporte", handle_download),
    ]

    return Starlette(routes=routes)


app = create_app()


# Graceful shutdown on SIGTERM
def handle_sigterm(signum, frame):
    logger.info("Received SIGTERM, shutting down gracefully...")
    sys.exit(0)


def main():
    import uvicorn

    configure_logging()
    signal.signal(signal.SIGTERM, handle_sigterm)

    port = get_port()
    logger.info(f"Starting HTTP server on port {port}")
    uvicorn.run(app, host=get_host(), port=port)


if __name__ == "__main__":
    main()
