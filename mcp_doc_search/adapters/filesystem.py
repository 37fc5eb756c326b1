"""
Filesystem Adapter

Implements DocumentSource port by reading files from local disk.
"""
from pathlib import Path
from typing import Sequence

from ..core.domain import Document
from ..core.ports import DocumentSource


class FilesystemLoader(DocumentSource):
    """Loads files (or the files directly inside a directory) as Documents"""

    def _expand(self, path: Path) -> list[Path]:
        """A file stands for itself; a directory for its files, sorted by name"""
        if path.is_dir():
            return sorted((p for p in path.iterdir() if p.is_file()), key=lambda p: p.name)
        if path.is_file():
            return [path]
        raise FileNotFoundError(f"No such file or directory: {path}")

    def load(self, paths: Sequence[str | Path]) -> list[Document]:
        """Read each path into a Document, preserving order"""
        documents = []
        for raw_path in paths:
            for file_path in self._expand(Path(raw_path)):
                documents.append(Document(name=file_path.name, content=file_path.read_bytes()))
        return documents
