"""
Pytest configuration and fixtures for conversion toolkit tests.

Sample documents are generated with the same libraries the toolkit reads
and writes, so no binary fixtures are checked in.
"""

import pytest
import os
import sys
import tempfile
import shutil
from io import BytesIO
from pathlib import Path

import openpyxl
import pypdfium2 as pdfium
from docx import Document
from PIL import Image as PILImage
from reportlab.lib.pagesizes import A4
from reportlab.pdfgen import canvas

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


def build_pdf(pages):
    """Create a PDF with one page per entry; each entry is a list of lines."""
    buffer = BytesIO()
    pdf = canvas.Canvas(buffer, pagesize=A4)
    _, height = A4
    for lines in pages:
        y = height - 72
        for line in lines:
            pdf.drawString(72, y, line)
            y -= 18
        pdf.showPage()
    pdf.save()
    return buffer.getvalue()


def build_xlsx(sheets):
    """Create a workbook from an ordered mapping of sheet title to rows."""
    wb = openpyxl.Workbook()
    wb.remove(wb.active)
    for title, rows in sheets.items():
        ws = wb.create_sheet(title)
        for row in rows:
            ws.append(row)
    buffer = BytesIO()
    wb.save(buffer)
    return buffer.getvalue()


def build_docx(paragraphs):
    """Create a Word document with one paragraph per entry."""
    document = Document()
    for text in paragraphs:
        document.add_paragraph(text)
    buffer = BytesIO()
    document.save(buffer)
    return buffer.getvalue()


def build_image(color, size=(20, 20), image_format='PNG'):
    """Create a solid-colour image."""
    buffer = BytesIO()
    PILImage.new('RGB', size, color).save(buffer, format=image_format)
    return buffer.getvalue()


def read_pdf_pages(data):
    """Return the text of each page of a PDF, in page order."""
    pdf = pdfium.PdfDocument(data)
    try:
        pages = []
        for index in range(len(pdf)):
            page = pdf[index]
            textpage = page.get_textpage()
            pages.append(textpage.get_text_range())
            textpage.close()
            page.close()
        return pages
    finally:
        pdf.close()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_dir = tempfile.mkdtemp()
    yield temp_dir
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def make_pdf():
    """Factory for PDF bytes."""
    return build_pdf


@pytest.fixture
def make_xlsx():
    """Factory for XLSX bytes."""
    return build_xlsx


@pytest.fixture
def make_docx():
    """Factory for DOCX bytes."""
    return build_docx


@pytest.fixture
def make_image():
    """Factory for image bytes."""
    return build_image


@pytest.fixture
def pdf_text():
    """Reader returning the text of each page of a PDF."""
    return read_pdf_pages


@pytest.fixture
def sample_pdf():
    """Three-page PDF with known text on each page."""
    return build_pdf([
        ["First page", "second line"],
        ["Second page"],
        ["Third page"],
    ])


@pytest.fixture
def sample_xlsx():
    """Workbook whose second sheet must never be read."""
    return build_xlsx({
        'Data': [["a", "b"], ["c", "d"]],
        'Ignored': [["x", "y"]],
    })


@pytest.fixture
def sample_docx():
    """Word document with three paragraphs."""
    return build_docx(["Title", "", "Body text"])


@pytest.fixture
def sample_text_file(temp_dir):
    """Create a sample text file for testing."""
    file_path = os.path.join(temp_dir, "sample.txt")
    with open(file_path, 'w', encoding='utf-8') as f:
        f.write("hello\nworld")
    return file_path
