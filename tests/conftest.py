"""
Shared fixtures: in-memory DOCX/XLSX builders.
"""
import io

import docx
import openpyxl
import pytest


@pytest.fixture
def make_xlsx():
    """Build XLSX bytes from {sheet_name: {"B2": value, ...}} (sheet order kept)"""
    def build(sheets: dict) -> bytes:
        workbook = openpyxl.Workbook()
        workbook.remove(workbook.active)
        for sheet_name, cells in sheets.items():
            sheet = workbook.create_sheet(sheet_name)
            for ref, value in cells.items():
                sheet[ref] = value
        buf = io.BytesIO()
        workbook.save(buf)
        return buf.getvalue()
    return build


@pytest.fixture
def make_docx():
    """Build DOCX bytes from paragraphs and optional table rows"""
    def build(paragraphs: list[str], table: list[list[str]] | None = None) -> bytes:
        document = docx.Document()
        for text in paragraphs:
            document.add_paragraph(text)
        if table:
            t = document.add_table(rows=len(table), cols=len(table[0]))
            for r, row in enumerate(table):
                for c, text in enumerate(row):
                    t.cell(r, c).text = text
        buf = io.BytesIO()
        document.save(buf)
        return buf.getvalue()
    return build
