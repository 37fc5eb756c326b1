"""
Application Services - Use cases that orchestrate domain logic

These are the entry points to the core. They coordinate between
domain models and ports, but contain no infrastructure concerns.
"""
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Mapping, Optional, Sequence

from .domain import Document, ExtractionResult, Report
from .inputs import DEFAULT_CONTEXT_CHARS
from .ports import FormatAdapter
from .report import ReportAggregator, render_report

logger = logging.getLogger(__name__)


class Dispatcher:
    """Routes documents to a format adapter by file extension"""

    def __init__(self, adapters: Mapping[str, FormatAdapter]):
        self.adapters = {ext.lower(): adapter for ext, adapter in adapters.items()}

    def route(self, document: Document) -> Optional[FormatAdapter]:
        """Adapter for the document, or None if its extension is unsupported"""
        return self.adapters.get(document.extension)

    def process(
        self,
        document: Document,
        terms: Sequence[str],
        context_chars: int
    ) -> ExtractionResult:
        adapter = self.route(document)
        if adapter is None:
            logger.debug(f"process: ignoring {document.name} (extension {document.extension!r})")
            return ExtractionResult(document=document.name, ignored=True)

        return adapter.extract(document, terms, context_chars)


class GenerateReportService:
    """Use case: search a batch of documents and render the report"""

    def __init__(
        self,
        dispatcher: Dispatcher,
        aggregator: Optional[ReportAggregator] = None,
        max_workers: int = 1
    ):
        self.dispatcher = dispatcher
        self.aggregator = aggregator or ReportAggregator()
        self.max_workers = max_workers

    def build(
        self,
        documents: Sequence[Document],
        terms: Sequence[str],
        context_chars: int = DEFAULT_CONTEXT_CHARS
    ) -> Report:
        """
        Run every document through its adapter and fold the results.

        With max_workers > 1 documents are extracted on a thread pool;
        executor.map yields in input order so the report stays in batch order.
        """
        logger.info(
            f"build: {len(documents)} documents, {len(terms)} terms, "
            f"context={context_chars}, workers={self.max_workers}"
        )

        def process(document: Document) -> ExtractionResult:
            return self.dispatcher.process(document, terms, context_chars)

        if self.max_workers > 1 and len(documents) > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                results = list(executor.map(process, documents))
        else:
            results = [process(document) for document in documents]

        report = self.aggregator.aggregate(terms, context_chars, results)
        logger.info(
            f"build: {len(report.findings)} findings, {report.with_problems} with problems, "
            f"{report.ignored_count} ignored"
        )
        return report

    def execute(
        self,
        documents: Sequence[Document],
        terms: Sequence[str],
        context_chars: int = DEFAULT_CONTEXT_CHARS
    ) -> str:
        """Build the report and render it as text"""
        return render_report(self.build(documents, terms, context_chars))
