"""
Spreadsheet extractor.

Reads the first worksheet only; any further sheets are ignored. Each row
becomes a ``TableRow`` in row order with cells in column order.
"""

from datetime import datetime
from io import BytesIO

import openpyxl

from .. import config
from ..errors import CorruptInput
from ..models import Format, IntermediateDocument, TableRow
from .base import Extractor


class SpreadsheetExtractor(Extractor):
    """
    Extractor for Excel workbooks.

    This class handles:
    - Direct data extraction from .xlsx files
    - First worksheet only
    - Proper handling of formulas, dates, and cell values
    """

    format = Format.XLSX
    SUPPORTED_FORMATS = config.SUPPORTED_SPREADSHEET_FORMATS

    def _extract(self, data: bytes, **options) -> IntermediateDocument:
        wb = self._open_workbook(data)
        try:
            if not wb.worksheets:
                return IntermediateDocument()

            ws = wb.worksheets[0]
            if len(wb.worksheets) > 1:
                self.logger.debug(f"Reading sheet '{ws.title}', ignoring {len(wb.worksheets) - 1} more")

            rows = []
            for row in ws.iter_rows(values_only=True):
                cells = [self._format_cell_value(cell) for cell in row]
                # Trim trailing empty columns
                while cells and cells[-1] == '':
                    cells.pop()
                # Blank rows keep their position as empty rows
                rows.append(TableRow(cells))
        finally:
            wb.close()

        # Blank rows after the last value are not part of the sheet's content
        while rows and not rows[-1].cells:
            rows.pop()

        return IntermediateDocument(rows)

    def _open_workbook(self, data: bytes):
        try:
            # data_only=True extracts formula values instead of formulas
            return openpyxl.load_workbook(BytesIO(data), read_only=True, data_only=True)
        except Exception as e:
            error_msg = str(e).lower()
            if 'password' in error_msg or 'encrypted' in error_msg:
                raise CorruptInput("Cannot process password-protected Excel file") from e
            raise CorruptInput(f"Excel file appears to be corrupted: {e}") from e

    def _format_cell_value(self, cell_value) -> str:
        """
        Format a cell value as text.

        Args:
            cell_value: Cell value from openpyxl

        Returns:
            Formatted string representation
        """
        if cell_value is None:
            return ''

        if isinstance(cell_value, datetime):
            return cell_value.strftime('%Y-%m-%d %H:%M:%S')

        if isinstance(cell_value, bool):
            return str(cell_value).upper()

        if isinstance(cell_value, (int, float)):
            # Whole numbers show without decimals
            if isinstance(cell_value, int) or cell_value == int(cell_value):
                return str(int(cell_value))
            return str(cell_value)

        return str(cell_value)
