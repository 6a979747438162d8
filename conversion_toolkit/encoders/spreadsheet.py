"""
Spreadsheet encoder.

Tabular content is written as one worksheet, rows and cells in order.
Unstructured text is written whole into a single cell under one header row;
no table reconstruction is attempted.
"""

from io import BytesIO

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE

from .. import config
from ..models import Format, IntermediateDocument
from .base import Encoder


class SpreadsheetEncoder(Encoder):
    """Encoder for .xlsx output using openpyxl."""

    format = Format.XLSX
    mime_type = config.MIME_XLSX
    extension = 'xlsx'

    def _encode(self, document: IntermediateDocument, **options) -> bytes:
        wb = Workbook()
        ws = wb.active
        ws.title = config.SPREADSHEET_SHEET_TITLE

        rows = document.table_rows()
        if rows:
            for row in rows:
                ws.append([self._clean(cell) for cell in row.cells])
            self.logger.debug(f"Wrote {len(rows)} rows")
        else:
            ws.append([config.SPREADSHEET_HEADER])
            text = "\n".join("\n".join(self.page_lines(page)) for page in document.pages())
            if text:
                ws.append([self._clean(text)])

        buffer = BytesIO()
        wb.save(buffer)
        return buffer.getvalue()

    @staticmethod
    def _clean(value: str) -> str:
        return ILLEGAL_CHARACTERS_RE.sub('', value)
