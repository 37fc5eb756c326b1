"""
Spreadsheet Adapter

Implements FormatAdapter for workbooks, one text unit per non-empty cell.
XLSX (zip container) is read with openpyxl, legacy XLS with xlrd.
"""
import datetime
import io
from typing import Any, Iterator

import openpyxl
import xlrd
from openpyxl.utils import get_column_letter
from openpyxl.utils.datetime import to_excel

from ..core.domain import Document, TextUnit, UnitAddress
from ..core.ports import FormatAdapter

# XLSX files are zip archives; legacy XLS files are OLE2 compound documents
ZIP_MAGIC = b"PK\x03\x04"

_DATE_TYPES = (datetime.datetime, datetime.date, datetime.time, datetime.timedelta)


def cell_to_text(value: Any) -> str:
    """Stringify a cell the way it reads in a spreadsheet"""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class SpreadsheetAdapter(FormatAdapter):
    """Cell-by-cell search of XLSX/XLS workbooks"""

    def read_units(self, document: Document) -> Iterator[TextUnit]:
        # Sniff the container instead of trusting the extension:
        # .xls files saved as xlsx are common
        if document.content.startswith(ZIP_MAGIC):
            rows = self._xlsx_rows(document.content)
        else:
            rows = self._xls_rows(document.content)

        for sheet_name, row_number, col_number, value in rows:
            text = cell_to_text(value)
            if not text.strip():
                continue
            cell_ref = f"{get_column_letter(col_number)}{row_number}"
            yield TextUnit(text=text, address=UnitAddress(sheet=sheet_name, cell=cell_ref))

    def _xlsx_rows(self, content: bytes) -> Iterator[tuple[str, int, int, Any]]:
        """(sheet, row, column, value) for every cell, 1-based, workbook order.

        Dates come back as Excel serial numbers, the same value xlrd reports
        for the legacy format.
        """
        workbook = openpyxl.load_workbook(io.BytesIO(content), read_only=True, data_only=True)
        try:
            for sheet in workbook.worksheets:
                # Stored dimensions can be stale; read every row that is present
                sheet.reset_dimensions()
                for row_number, row in enumerate(
                    sheet.iter_rows(min_row=1, min_col=1, values_only=True), 1
                ):
                    for col_number, value in enumerate(row, 1):
                        if isinstance(value, _DATE_TYPES):
                            value = to_excel(value, workbook.epoch)
                        yield sheet.title, row_number, col_number, value
        finally:
            workbook.close()

    def _xls_rows(self, content: bytes) -> Iterator[tuple[str, int, int, Any]]:
        """Same as _xlsx_rows for the legacy binary format (date cells are already serials)"""
        workbook = xlrd.open_workbook(file_contents=content)
        for sheet in workbook.sheets():
            for row_idx in range(sheet.nrows):
                for col_idx in range(sheet.ncols):
                    cell = sheet.cell(row_idx, col_idx)
                    value = cell.value
                    if cell.ctype == xlrd.XL_CELL_BOOLEAN:
                        value = bool(value)
                    elif cell.ctype == xlrd.XL_CELL_ERROR:
                        value = xlrd.error_text_from_code.get(value, "")
                    yield sheet.name, row_idx + 1, col_idx + 1, value
