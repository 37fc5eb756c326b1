"""
Adapters - External implementations of ports

This package contains implementations of the core ports:
- text.py: Plain text (.txt) adapter
- pdf.py: pypdf-based PDF adapter
- word.py: python-docx based DOCX adapter
- spreadsheet.py: openpyxl/xlrd based XLSX/XLS adapter
- filesystem.py: Filesystem document loader
- report_store.py: In-memory TTL report store
"""
from .text import PlainTextAdapter
from .pdf import PdfAdapter
from .word import WordAdapter
from .spreadsheet import SpreadsheetAdapter
from .filesystem import FilesystemLoader
from .report_store import MemoryReportStore


def default_format_adapters() -> dict:
    """Static extension -> adapter mapping for every supported format"""
    spreadsheet = SpreadsheetAdapter()
    return {
        ".pdf": PdfAdapter(),
        ".docx": WordAdapter(),
        ".xlsx": spreadsheet,
        ".xls": spreadsheet,
        ".txt": PlainTextAdapter(),
    }


__all__ = [
    "PlainTextAdapter",
    "PdfAdapter",
    "WordAdapter",
    "SpreadsheetAdapter",
    "FilesystemLoader",
    "MemoryReportStore",
    "default_format_adapters",
]
