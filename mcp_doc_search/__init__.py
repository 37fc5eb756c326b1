"""
mcp-doc-search

Literal multi-term search across PDF, DOCX, XLSX/XLS and TXT uploads,
rendered as a fixed-layout text report.
"""
import logging
from typing import Sequence

from .core import DEFAULT_CONTEXT_CHARS, Document

# pypdf warns on every slightly malformed xref table
logging.getLogger("pypdf").setLevel(logging.ERROR)

__version__ = "0.1.0"


def generate_report(
    documents: Sequence[Document],
    search_terms: Sequence[str],
    context_chars: int = DEFAULT_CONTEXT_CHARS
) -> str:
    """Search documents for search_terms and return the rendered report"""
    from .container import Container

    return Container().generate_report.execute(documents, search_terms, context_chars)


__all__ = ["Document", "generate_report", "__version__"]
