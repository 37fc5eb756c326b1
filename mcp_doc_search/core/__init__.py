"""
Core - Domain logic and ports

This package contains:
- domain.py: Pure domain models
- ports.py: Port interfaces (abstractions for external dependencies)
- snippets.py: Context snippet search
- report.py: Report aggregation and rendering
- inputs.py: Caller-side input normalisation
- services.py: Application services (use cases)
"""
from .domain import (
    Document,
    UnitAddress,
    TextUnit,
    Finding,
    Problem,
    ExtractionResult,
    Report,
)
from .ports import FormatAdapter, DocumentSource, ReportRepository
from .snippets import find_snippets
from .report import SUPPORTED_EXTENSIONS, ReportAggregator, render_report
from .inputs import DEFAULT_CONTEXT_CHARS, parse_search_terms, normalize_context_chars
from .services import Dispatcher, GenerateReportService

__all__ = [
    # Domain models
    "Document",
    "UnitAddress",
    "TextUnit",
    "Finding",
    "Problem",
    "ExtractionResult",
    "Report",
    # Ports
    "FormatAdapter",
    "DocumentSource",
    "ReportRepository",
    # Search and report
    "find_snippets",
    "SUPPORTED_EXTENSIONS",
    "ReportAggregator",
    "render_report",
    # Inputs
    "DEFAULT_CONTEXT_CHARS",
    "parse_search_terms",
    "normalize_context_chars",
    # Services
    "Dispatcher",
    "GenerateReportService",
]
