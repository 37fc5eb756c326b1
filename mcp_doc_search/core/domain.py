"""
Domain Models - Pure business entities

No external dependencies. These represent the core business concepts.
"""
import os
from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Document:
    """An uploaded document: display name plus raw bytes"""
    name: str
    content: bytes

    @property
    def extension(self) -> str:
        """Lower-cased suffix of the name ("" when there is none)"""
        return os.path.splitext(self.name)[1].lower()


@dataclass(frozen=True)
class UnitAddress:
    """Where a text unit lives inside its document"""
    line: Optional[int] = None  # 1-based, plain text only
    sheet: Optional[str] = None
    cell: Optional[str] = None  # A1-style reference


@dataclass(frozen=True)
class TextUnit:
    """Smallest span of extracted text that is searched on its own"""
    text: str
    address: UnitAddress = UnitAddress()


@dataclass(frozen=True)
class Finding:
    """All occurrences of one search term within one text unit"""
    document: str
    term: str
    snippets: tuple[str, ...]
    address: UnitAddress = UnitAddress()
    label: Optional[str] = None  # format tag shown next to the name, e.g. "PDF"


@dataclass(frozen=True)
class Problem:
    """A document that could not be decoded"""
    document: str
    reason: str


@dataclass(frozen=True)
class ExtractionResult:
    """Outcome of running one document through the pipeline"""
    document: str
    findings: tuple[Finding, ...] = ()
    problems: tuple[Problem, ...] = ()
    ignored: bool = False


@dataclass(frozen=True)
class Report:
    """Aggregate of every document in a batch"""
    terms: tuple[str, ...]
    context_chars: int
    findings: tuple[Finding, ...] = ()
    problems: tuple[Problem, ...] = ()
    ignored: tuple[str, ...] = ()
    selected: int = 0
    processed: int = 0
    files_with_problems: frozenset[str] = field(default_factory=frozenset)

    @property
    def with_problems(self) -> int:
        return len(self.files_with_problems)

    @property
    def without_problems(self) -> int:
        return self.processed - self.with_problems

    @property
    def ignored_count(self) -> int:
        return len(self.ignored)
