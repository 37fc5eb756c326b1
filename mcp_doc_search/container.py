"""
Dependency Injection Container

Wires together the hexagonal architecture by creating and injecting dependencies.
"""
from .adapters import FilesystemLoader, MemoryReportStore, default_format_adapters
from .core import Dispatcher, GenerateReportService, ReportAggregator


class Container:
    """Dependency injection container for the application"""

    def __init__(self, max_workers: int = 1, report_ttl: int = 3600):
        # Adapters (infrastructure)
        self.format_adapters = default_format_adapters()
        self.loader = FilesystemLoader()
        self.reports = MemoryReportStore(ttl_seconds=report_ttl)

        # Services (use cases)
        self.dispatcher = Dispatcher(self.format_adapters)

        self.generate_report = GenerateReportService(
            dispatcher=self.dispatcher,
            aggregator=ReportAggregator(),
            max_workers=max_workers
        )
