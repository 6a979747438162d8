"""
Unit tests for extractors.
"""

import pytest
import os
import sys
from datetime import datetime
from io import BytesIO

from PIL import Image as PILImage

# Add project root to path
sys.path.append(os.path.join(os.path.dirname(__file__), '..', '..'))

from conversion_toolkit.errors import CorruptInput, UnsupportedPair
from conversion_toolkit.extractors import (
    DocxExtractor,
    ExtractorFactory,
    HtmlExtractor,
    ImageExtractor,
    PdfExtractor,
    SpreadsheetExtractor,
    TextExtractor,
    get_extractor,
)
from conversion_toolkit.models import Format, Image, PageBreak, TableRow, TextLine


class TestPdfExtractor:
    """Test cases for PdfExtractor."""

    def setup_method(self):
        """Setup test fixtures before each test method."""
        self.extractor = PdfExtractor()

    def test_pages_in_order_with_breaks(self, sample_pdf):
        """Test one line per page and a break between consecutive pages."""
        document = self.extractor.extract(sample_pdf)
        assert document.blocks == (
            TextLine("First page second line"),
            PageBreak(),
            TextLine("Second page"),
            PageBreak(),
            TextLine("Third page"),
        )

    def test_single_page_has_no_break(self, make_pdf):
        """Test that no break precedes the first or follows the last page."""
        document = self.extractor.extract(make_pdf([["Only page"]]))
        assert document.blocks == (TextLine("Only page"),)

    def test_empty_input(self):
        """Test that zero bytes give an empty document."""
        assert self.extractor.extract(b"").is_empty

    def test_corrupt_input(self):
        """Test that non-PDF bytes are reported as corrupt."""
        with pytest.raises(CorruptInput) as exc_info:
            self.extractor.extract(b"this is not a pdf")
        assert exc_info.value.__cause__ is not None
        assert exc_info.value.kind == "corrupt_input"

    def test_rasterize_first_page_only(self, sample_pdf):
        """Test rendering of page 1 to a PNG image block."""
        document = self.extractor.extract(sample_pdf, rasterize_first_page=True)
        images = document.images()
        assert len(document) == 1
        assert images[0].mime_type == "image/png"
        with PILImage.open(BytesIO(images[0].data)) as img:
            assert img.format == "PNG"
            # A4 width is 595pt, rendered at scale 1.5
            assert abs(img.width - 595 * 1.5) < 2

    def test_count_pages(self, sample_pdf):
        """Test page counting."""
        assert self.extractor.count_pages(sample_pdf) == 3
        assert self.extractor.count_pages(b"") == 0
        with pytest.raises(CorruptInput):
            self.extractor.count_pages(b"garbage")


class TestSpreadsheetExtractor:
    """Test cases for SpreadsheetExtractor."""

    def setup_method(self):
        """Setup test fixtures before each test method."""
        self.extractor = SpreadsheetExtractor()

    def test_first_sheet_only(self, sample_xlsx):
        """Test that only the first worksheet is read, rows in order."""
        document = self.extractor.extract(sample_xlsx)
        assert document.blocks == (TableRow(("a", "b")), TableRow(("c", "d")))

    def test_cell_formatting(self, make_xlsx):
        """Test formatting of typed cell values."""
        data = make_xlsx({'Sheet': [[datetime(2024, 1, 2, 3, 4, 5), 2.0, 2.5, True, 7]]})
        document = self.extractor.extract(data)
        assert document.table_rows()[0].cells == ("2024-01-02 03:04:05", "2", "2.5", "TRUE", "7")

    def test_inner_empty_cells_kept(self, make_xlsx):
        """Test that empty cells between values keep column positions."""
        document = self.extractor.extract(make_xlsx({'Sheet': [["x", None, "z"]]}))
        assert document.table_rows()[0].cells == ("x", "", "z")

    def test_blank_rows_keep_position(self, make_xlsx):
        """Test that a blank row between values stays as an empty row."""
        data = make_xlsx({'Sheet': [["a", "b"], [None, None], ["c", "d"]]})
        document = self.extractor.extract(data)
        assert document.blocks == (TableRow(("a", "b")), TableRow(()), TableRow(("c", "d")))

    def test_trailing_blank_rows_trimmed(self, make_xlsx):
        """Test that blank rows after the last value are dropped."""
        data = make_xlsx({'Sheet': [["a"], ["", ""], ["", ""]]})
        document = self.extractor.extract(data)
        assert document.blocks == (TableRow(("a",)),)

    def test_empty_input(self):
        """Test that zero bytes give an empty document."""
        assert self.extractor.extract(b"").is_empty

    def test_corrupt_input(self):
        """Test that non-workbook bytes are reported as corrupt."""
        with pytest.raises(CorruptInput):
            self.extractor.extract(b"PK\x03\x04 broken zip")

    def test_format_cell_value_none(self):
        """Test formatting of empty cells."""
        assert self.extractor._format_cell_value(None) == ''


class TestDocxExtractor:
    """Test cases for DocxExtractor."""

    def test_one_line_per_paragraph(self, sample_docx):
        """Test raw text extraction in paragraph order."""
        document = DocxExtractor().extract(sample_docx)
        assert [line.text for line in document.text_lines()] == ["Title", "", "Body text"]

    def test_corrupt_input(self):
        """Test that non-DOCX bytes are reported as corrupt."""
        with pytest.raises(CorruptInput):
            DocxExtractor().extract(b"not a word document")


class TestImageExtractor:
    """Test cases for ImageExtractor."""

    def setup_method(self):
        """Setup test fixtures before each test method."""
        self.extractor = ImageExtractor()

    def test_png_passes_through(self, make_image):
        """Test that image bytes are kept unchanged."""
        data = make_image((255, 0, 0))
        document = self.extractor.extract(data)
        assert document.blocks == (Image(data, "image/png"),)

    def test_jpeg_mime_type(self, make_image):
        """Test identification of JPEG input."""
        document = self.extractor.extract(make_image((0, 0, 255), image_format='JPEG'))
        assert document.images()[0].mime_type == "image/jpeg"

    def test_unidentified_bytes(self):
        """Test that unknown bytes are reported as corrupt."""
        with pytest.raises(CorruptInput):
            self.extractor.extract(b"\x00\x01\x02\x03")


class TestTextExtractors:
    """Test cases for TextExtractor and HtmlExtractor."""

    def test_lines_in_order(self):
        """Test splitting on line breaks."""
        document = TextExtractor().extract(b"hello\r\nworld\n\nend")
        assert [line.text for line in document] == ["hello", "world", "", "end"]

    def test_gbk_fallback(self):
        """Test decoding of GBK input that is not valid UTF-8."""
        document = TextExtractor().extract("中文".encode('gbk'))
        assert document.text_lines() == [TextLine("中文")]

    def test_bom_stripped(self):
        """Test that a UTF-8 byte order mark is dropped."""
        document = TextExtractor().extract(b"\xef\xbb\xbfhi")
        assert document.text_lines() == [TextLine("hi")]

    def test_undecodable_input(self):
        """Test input that no supported encoding can decode."""
        with pytest.raises(CorruptInput):
            TextExtractor().extract(b"\xff\xff")

    def test_html_is_opaque_text_by_default(self):
        """Test that markup is kept when not rendering."""
        document = HtmlExtractor().extract(b"<p>Hi</p>\n<p>There</p>")
        assert [line.text for line in document] == ["<p>Hi</p>", "<p>There</p>"]

    def test_html_render_markup(self):
        """Test visible text extraction."""
        html = (b"<html><head><title>T</title><style>p {}</style></head>"
                b"<body><h1>Hello</h1><p>World <b>bold</b></p><script>run()</script></body></html>")
        document = HtmlExtractor().extract(html, render_markup=True)
        assert [line.text for line in document] == ["Hello", "World", "bold"]

    def test_supported_encodings(self):
        """Test the list of encodings tried."""
        assert TextExtractor().get_supported_encodings() == ["utf-8", "gbk"]


class TestExtractorFactory:
    """Test cases for ExtractorFactory."""

    def test_instances_are_cached(self):
        """Test that one extractor instance is kept per format."""
        factory = ExtractorFactory()
        assert factory.get(Format.PDF) is factory.get(Format.PDF)
        assert isinstance(factory.get(Format.HTML), HtmlExtractor)

    def test_no_presentation_extractor(self):
        """Test that presentations have no extractor."""
        with pytest.raises(UnsupportedPair):
            ExtractorFactory().get(Format.PPTX)

    def test_global_lookup(self):
        """Test the module-level helper."""
        assert isinstance(get_extractor(Format.XLSX), SpreadsheetExtractor)

    def test_supports_format(self):
        """Test extension checks with and without the dot."""
        assert PdfExtractor.supports_format('PDF')
        assert SpreadsheetExtractor.supports_format('.xls')
        assert not SpreadsheetExtractor.supports_format('.xlsm')
        assert DocxExtractor.supports_format('.doc')
        assert not ImageExtractor.supports_format('.gif')
