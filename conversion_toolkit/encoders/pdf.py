"""
PDF encoder.

Text is written from a fixed top-left margin and each line is word-wrapped
to a fixed column width. A ``PageBreak`` starts a new page. Images are
scaled to a fixed width, aspect ratio preserved, one image per page.
"""

from io import BytesIO

from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader, simpleSplit
from reportlab.pdfgen import canvas

from .. import config
from ..errors import EncodingFailure
from ..models import Format, Image, IntermediateDocument, PageBreak, TableRow, TextLine
from .base import Encoder


class _PageLayout:
    """Cursor over the pages of a reportlab canvas."""

    def __init__(self, pdf: canvas.Canvas, overflow: str):
        self.pdf = pdf
        self.overflow = overflow
        self.page_width, self.page_height = A4
        self.left = config.PDF_MARGIN_LEFT * mm
        self.top = self.page_height - config.PDF_MARGIN_TOP * mm
        self.bottom = config.PDF_MARGIN_BOTTOM * mm
        self.line_height = config.PDF_LINE_HEIGHT * mm
        self.wrap_width = config.PDF_WRAP_WIDTH * mm
        self.pages = 0
        self.dropped_lines = 0
        self._reset_cursor()

    def _reset_cursor(self):
        # First baseline sits one font size below the top margin
        self.y = self.top - config.PDF_FONT_SIZE
        self.has_content = False
        self.pdf.setFont(config.PDF_FONT_NAME, config.PDF_FONT_SIZE)

    def new_page(self):
        self.pdf.showPage()
        self.pages += 1
        self._reset_cursor()

    def write_text(self, text: str):
        lines = simpleSplit(text, config.PDF_FONT_NAME, config.PDF_FONT_SIZE, self.wrap_width)
        for line in lines or ['']:
            if self.y < self.bottom:
                if self.overflow == 'truncate':
                    self.dropped_lines += 1
                    continue
                self.new_page()
            self.pdf.drawString(self.left, self.y, line)
            self.y -= self.line_height
            self.has_content = True

    def draw_image(self, image: Image):
        if self.has_content:
            self.new_page()

        reader = ImageReader(BytesIO(image.data))
        px_width, px_height = reader.getSize()
        width = config.PDF_IMAGE_WIDTH * mm
        height = px_height * width / px_width

        self.pdf.drawImage(reader, self.left, self.top - height, width=width, height=height)
        self.y = self.top - height - self.line_height
        self.has_content = True

    def finish(self):
        # Always emit at least one page; never emit a trailing empty page
        if self.has_content or self.pages == 0:
            self.new_page()


class PdfEncoder(Encoder):
    """Encoder for PDF output using reportlab."""

    format = Format.PDF
    mime_type = config.MIME_PDF
    extension = 'pdf'

    def _encode(self, document: IntermediateDocument, overflow: str = config.DEFAULT_PDF_OVERFLOW,
                **options) -> bytes:
        if overflow not in config.PDF_OVERFLOW_MODES:
            raise EncodingFailure(f"Unknown overflow mode: {overflow!r}")

        buffer = BytesIO()
        pdf = canvas.Canvas(buffer, pagesize=A4)
        layout = _PageLayout(pdf, overflow)

        for block in document:
            if isinstance(block, PageBreak):
                layout.new_page()
            elif isinstance(block, TextLine):
                layout.write_text(block.text)
            elif isinstance(block, TableRow):
                layout.write_text(block.as_text())
            elif isinstance(block, Image):
                layout.draw_image(block)

        layout.finish()
        pdf.save()

        if layout.dropped_lines:
            self.logger.warning(f"Truncated {layout.dropped_lines} lines that did not fit on their page")
        self.logger.debug(f"Wrote {layout.pages} PDF pages")
        return buffer.getvalue()
