"""
Ports - Interfaces for external dependencies

These define HOW the core interacts with the outside world,
but NOT the implementation details.
"""
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, Optional, Sequence

from .domain import Document, ExtractionResult, Finding, Problem, TextUnit
from .snippets import find_snippets

logger = logging.getLogger(__name__)


def describe_error(error: Exception) -> str:
    """Human-readable reason for a decode failure"""
    return str(error) or type(error).__name__


class FormatAdapter(ABC):
    """Port for turning one document format into searchable text units"""

    # Format tag printed next to the document name in finding headers
    label: Optional[str] = None

    @abstractmethod
    def read_units(self, document: Document) -> Iterable[TextUnit]:
        """Decode the document into text units, raising on corrupt content"""
        pass

    def extract(
        self,
        document: Document,
        terms: Sequence[str],
        context_chars: int
    ) -> ExtractionResult:
        """Search every unit of the document for every term.

        Decoding happens up front: it either succeeds for the whole document
        or produces a single Problem and no findings.
        """
        try:
            units = list(self.read_units(document))
        except Exception as e:
            reason = describe_error(e)
            logger.warning(f"extract: {document.name} could not be decoded: {reason}")
            return ExtractionResult(
                document=document.name,
                problems=(Problem(document=document.name, reason=reason),)
            )

        findings = []
        for unit in units:
            for term in terms:
                snippets = find_snippets(unit.text, term, context_chars)
                if snippets:
                    findings.append(Finding(
                        document=document.name,
                        term=term,
                        snippets=tuple(snippets),
                        address=unit.address,
                        label=self.label
                    ))

        return ExtractionResult(document=document.name, findings=tuple(findings))


class DocumentSource(ABC):
    """Port for loading documents from outside the process"""

    @abstractmethod
    def load(self, paths: Sequence[str | Path]) -> list[Document]:
        """Read each path into a Document, preserving order"""
        pass


class ReportRepository(ABC):
    """Port for keeping rendered reports around for later download"""

    @abstractmethod
    def save(self, report_text: str) -> str:
        """Store a report, return its id"""
        pass

    @abstractmethod
    def get(self, report_id: str) -> Optional[str]:
        """Get a stored report, or None if unknown or expired"""
        pass
