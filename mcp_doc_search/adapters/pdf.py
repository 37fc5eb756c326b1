"""
PDF Adapter

Implements FormatAdapter using pypdf. The whole document is one text unit.
"""
import io
import logging

from pypdf import PdfReader

from ..core.domain import Document, TextUnit
from ..core.ports import FormatAdapter

logger = logging.getLogger(__name__)


class PdfAdapter(FormatAdapter):
    """PDF text extraction (all pages concatenated)"""

    label = "PDF"

    def read_text(self, content: bytes) -> str:
        """Extract the text of every page, "" if the PDF cannot be unlocked"""
        reader = PdfReader(io.BytesIO(content))

        if reader.is_encrypted and not reader.decrypt(""):
            # Password protected: nothing searchable, but not an error either
            logger.info("read_text: encrypted PDF without empty password, skipping")
            return ""

        return "\n".join(page.extract_text() or "" for page in reader.pages)

    def read_units(self, document: Document) -> list[TextUnit]:
        text = self.read_text(document.content)

        # Image-only or locked PDFs quietly contribute nothing
        if not text.strip():
            return []

        return [TextUnit(text=text)]
