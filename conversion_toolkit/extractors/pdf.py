"""
PDF text extractor.

Pages are read in ascending order 1..N. Each page becomes one ``TextLine``
holding all of the page's text fragments joined by a single space, and a
``PageBreak`` separates consecutive pages. Every PDF-sourced conversion
relies on this ordering.
"""

from io import BytesIO

import pypdfium2 as pdfium

from .. import config
from ..errors import CorruptInput
from ..models import Format, Image, IntermediateDocument, PageBreak, TextLine
from .base import Extractor


class PdfExtractor(Extractor):
    """Extractor for PDF documents using pdfium."""

    format = Format.PDF
    SUPPORTED_FORMATS = config.SUPPORTED_PDF_FORMATS

    def _extract(self, data: bytes, rasterize_first_page: bool = False, **options) -> IntermediateDocument:
        pdf = pdfium.PdfDocument(data)
        try:
            if rasterize_first_page:
                return self._render_first_page(pdf)

            blocks = []
            for index in range(len(pdf)):
                if index > 0:
                    blocks.append(PageBreak())
                blocks.append(TextLine(self._page_text(pdf, index)))

            self.logger.debug(f"Read text from {len(pdf)} pages")
            return IntermediateDocument(blocks)
        finally:
            pdf.close()

    def count_pages(self, data: bytes) -> int:
        """
        Count the pages of a PDF.

        Args:
            data: PDF bytes

        Returns:
            Number of pages, 0 for empty input

        Raises:
            CorruptInput: If the bytes are not a PDF
        """
        if not data:
            return 0
        try:
            pdf = pdfium.PdfDocument(data)
        except pdfium.PdfiumError as e:
            raise CorruptInput(f"Input is not a readable pdf file: {e}") from e
        try:
            return len(pdf)
        finally:
            pdf.close()

    def _page_text(self, pdf, index: int) -> str:
        page = pdf[index]
        textpage = page.get_textpage()
        try:
            raw = textpage.get_text_range()
        finally:
            textpage.close()
            page.close()

        fragments = [part.strip() for part in raw.splitlines()]
        return " ".join(part for part in fragments if part)

    def _render_first_page(self, pdf) -> IntermediateDocument:
        """Rasterize page 1 only; later pages are not rendered."""
        if len(pdf) == 0:
            return IntermediateDocument()

        page = pdf[0]
        try:
            bitmap = page.render(scale=config.RENDER_SCALE)
            pil_image = bitmap.to_pil()
        finally:
            page.close()

        buffer = BytesIO()
        pil_image.save(buffer, format=config.IMAGE_OUTPUT_FORMAT)
        self.logger.debug(f"Rendered first page at {pil_image.width}x{pil_image.height}")
        return IntermediateDocument((Image(buffer.getvalue(), config.MIME_PNG),))
