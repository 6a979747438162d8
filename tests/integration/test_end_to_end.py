"""
Integration tests for end-to-end conversions.
"""

import pytest
import os
import sys
from io import BytesIO

import openpyxl
import pypdfium2 as pdfium
from docx import Document
from PIL import Image as PILImage

# Add project root to path
sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))

from conversion_toolkit import ConversionOrchestrator, JobState, SourceFile


def render_pixel(data, page_index, x_mm, y_mm):
    """Colour of a point measured from the top-left corner of a page."""
    pdf = pdfium.PdfDocument(data)
    try:
        page = pdf[page_index]
        img = page.render(scale=1).to_pil().convert('RGB')
        page.close()
    finally:
        pdf.close()
    points_per_mm = 72 / 25.4
    return img.getpixel((int(x_mm * points_per_mm), int(y_mm * points_per_mm)))


class TestEndToEndIntegration:
    """Integration tests for complete conversions."""

    def setup_method(self):
        """Setup test fixtures before each test method."""
        self.orchestrator = ConversionOrchestrator()

    def run(self, descriptor_id, sources):
        status = self.orchestrator.convert(descriptor_id, sources)
        assert status.state is JobState.SUCCEEDED, status.error_message
        return status.artifact

    def test_text_to_pdf(self, pdf_text):
        """Test plain text to PDF."""
        artifact = self.run('text-to-pdf', [SourceFile(b"hello\nworld", "greeting.txt")])
        assert artifact.mime_type == "application/pdf"
        assert artifact.extension == "pdf"
        assert artifact.suggested_filename == "greeting_converted.pdf"
        text = pdf_text(artifact.data)[0]
        assert text.index("hello") < text.index("world")

    def test_excel_to_pdf_row_order(self, sample_xlsx, pdf_text):
        """Test that spreadsheet rows keep their order and the second sheet is ignored."""
        artifact = self.run('excel-to-pdf', [SourceFile(sample_xlsx, "book.xlsx")])
        text = "\n".join(pdf_text(artifact.data))
        assert text.index("a | b") < text.index("c | d")
        assert "x | y" not in text

    @pytest.mark.slow
    def test_images_to_pdf_in_order(self, make_image):
        """Test one page per image in input order."""
        colors = [(255, 0, 0), (0, 255, 0), (0, 0, 255)]
        sources = [SourceFile(make_image(color), f"{i}.png") for i, color in enumerate(colors)]
        artifact = self.run('image-to-pdf', sources)

        pdf = pdfium.PdfDocument(artifact.data)
        assert len(pdf) == 3
        pdf.close()

        # Square images span 10mm..200mm horizontally and vertically
        for index, expected in enumerate(colors):
            pixel = render_pixel(artifact.data, index, 105, 105)
            for channel, value in zip(pixel, expected):
                assert abs(channel - value) < 40

    def test_zero_byte_input_succeeds(self):
        """Test that empty input is a valid conversion."""
        artifact = self.run('text-to-pdf', [SourceFile(b"", "empty.txt")])
        pdf = pdfium.PdfDocument(artifact.data)
        assert len(pdf) == 1
        pdf.close()

    def test_word_to_pdf(self, sample_docx, pdf_text):
        """Test Word to PDF."""
        artifact = self.run('word-to-pdf', [SourceFile(sample_docx, "doc.docx")])
        text = pdf_text(artifact.data)[0]
        assert text.index("Title") < text.index("Body text")

    def test_pdf_to_word_skips_blank_paragraphs(self, sample_pdf):
        """Test PDF to Word keeps page text in order without blank paragraphs."""
        artifact = self.run('pdf-to-word', [SourceFile(sample_pdf, "three.pdf")])
        paragraphs = [p.text for p in Document(BytesIO(artifact.data)).paragraphs]
        assert paragraphs == ["First page second line", "Second page", "Third page"]

    def test_pdf_to_excel(self, sample_pdf):
        """Test PDF text into a single spreadsheet cell."""
        artifact = self.run('pdf-to-excel', [SourceFile(sample_pdf)])
        ws = openpyxl.load_workbook(BytesIO(artifact.data)).active
        assert ws['A1'].value == "Extracted Text"
        assert ws['A2'].value == "First page second line\nSecond page\nThird page"

    def test_pdf_to_text(self, sample_pdf):
        """Test PDF to text keeps page order."""
        artifact = self.run('pdf-to-text', [SourceFile(sample_pdf)])
        assert artifact.data.decode('utf-8') == "First page second line\n\nSecond page\n\nThird page"

    def test_pdf_to_html(self, sample_pdf):
        """Test PDF to HTML page sections."""
        html = self.run('pdf-to-html', [SourceFile(sample_pdf)]).data.decode('utf-8')
        assert html.index("<h2>Page 1</h2>") < html.index("<h2>Page 2</h2>") < html.index("<h2>Page 3</h2>")
        assert "<p>Third page</p>" in html

    def test_pdf_to_ppt_outline(self, sample_pdf):
        """Test the slide outline stub."""
        artifact = self.run('pdf-to-ppt', [SourceFile(sample_pdf, "deck.pdf")])
        assert artifact.suggested_filename == "deck_converted.txt"
        outline = artifact.data.decode('utf-8')
        assert outline.startswith("Slide 1:\nFirst page second line\n---\n")
        assert "Slide 3:\nThird page" in outline

    @pytest.mark.slow
    def test_pdf_to_image_first_page(self, sample_pdf):
        """Test that only page 1 is rendered."""
        artifact = self.run('pdf-to-image', [SourceFile(sample_pdf)])
        assert artifact.mime_type == "image/png"
        with PILImage.open(BytesIO(artifact.data)) as img:
            assert img.format == "PNG"

    def test_html_to_pdf_visible_text(self, pdf_text):
        """Test that markup is not written to the PDF."""
        html = b"<html><head><title>Hidden</title></head><body><p>Shown text</p></body></html>"
        text = pdf_text(self.run('html-to-pdf', [SourceFile(html)]).data)[0]
        assert "Shown text" in text
        assert "<p>" not in text
        assert "Hidden" not in text

    def test_merge_pdfs_summary(self, make_pdf, pdf_text):
        """Test the merge summary lists inputs in order."""
        sources = [SourceFile(make_pdf([["a"]]), "one.pdf"), SourceFile(make_pdf([["b"]]), "two.pdf")]
        text = pdf_text(self.run('merge-pdfs', sources).data)[0]
        assert text.index("1. one.pdf") < text.index("2. two.pdf")

    def test_ppt_to_pdf_summary(self, pdf_text):
        """Test the presentation placeholder names the file."""
        text = pdf_text(self.run('ppt-to-pdf', [SourceFile(b"slides", "talk.pptx")]).data)[0]
        assert "Original file: talk.pptx" in text

    def test_corrupt_spreadsheet_fails(self):
        """Test a failed job leaves no result to download."""
        status = self.orchestrator.convert('excel-to-pdf', [SourceFile(b"not a workbook", "book.xlsx")])
        assert status.state is JobState.FAILED
        assert status.error.kind == "corrupt_input"
        assert self.orchestrator.result.download() is None
