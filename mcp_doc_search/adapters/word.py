"""
Word Processing Adapter

Implements FormatAdapter for .docx files using python-docx.
"""
import io

from docx import Document as open_docx
from docx.table import Table

from ..core.domain import Document, TextUnit
from ..core.ports import FormatAdapter


def _table_paragraphs(table: Table) -> list[str]:
    """Cell paragraphs row by row, nested tables included; merged cells are only read once"""
    texts = []
    seen = set()
    for row in table.rows:
        for cell in row.cells:
            if cell._tc in seen:
                continue
            seen.add(cell._tc)
            for block in cell.iter_inner_content():
                if isinstance(block, Table):
                    texts.extend(_table_paragraphs(block))
                else:
                    texts.append(block.text)
    return texts


class WordAdapter(FormatAdapter):
    """Raw text of a DOCX body as a single text unit"""

    def read_text(self, content: bytes) -> str:
        doc = open_docx(io.BytesIO(content))

        texts = []
        for block in doc.iter_inner_content():
            if isinstance(block, Table):
                texts.extend(_table_paragraphs(block))
            else:
                texts.append(block.text)

        # Every paragraph ends with a blank line, as in mammoth's raw text
        return "".join(f"{text}\n\n" for text in texts)

    def read_units(self, document: Document) -> list[TextUnit]:
        return [TextUnit(text=self.read_text(document.content))]
