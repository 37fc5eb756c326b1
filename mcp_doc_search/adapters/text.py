"""
Plain Text Adapter

Implements FormatAdapter for .txt files, one text unit per non-blank line.
"""
import re
from typing import Iterator

from ..core.domain import Document, TextUnit, UnitAddress
from ..core.ports import FormatAdapter

_LINE_BREAK = re.compile(r"\r?\n")


class PlainTextAdapter(FormatAdapter):
    """Line-by-line search of UTF-8 text"""

    def read_units(self, document: Document) -> Iterator[TextUnit]:
        # Invalid bytes become U+FFFD rather than failing the whole file
        content = document.content.decode("utf-8", errors="replace")

        for line_number, line in enumerate(_LINE_BREAK.split(content), 1):
            if not line.strip():
                continue
            yield TextUnit(text=line, address=UnitAddress(line=line_number))
