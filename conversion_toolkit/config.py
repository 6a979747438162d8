"""
Configuration module for the conversion toolkit.

This module contains default configuration values used across the toolkit,
including PDF page layout, rendering parameters, MIME types, output
directories, and supported file formats.
"""

from typing import Set

# PDF page layout (millimetres, A4 portrait)
PDF_MARGIN_LEFT = 10
"""int: Left margin in millimetres where text and images start."""

PDF_MARGIN_TOP = 10
"""int: Top margin in millimetres where the first line of a page starts."""

PDF_MARGIN_BOTTOM = 10
"""int: Bottom margin in millimetres, used when text overflows a page."""

PDF_WRAP_WIDTH = 180
"""int: Column width in millimetres each text line is word-wrapped to."""

PDF_IMAGE_WIDTH = 190
"""int: Width in millimetres images are scaled to, preserving aspect ratio."""

PDF_FONT_NAME = "Helvetica"
"""str: Built-in PDF font used for all text output."""

PDF_FONT_SIZE = 12
"""int: Font size in points for text output."""

PDF_LINE_HEIGHT = 7
"""int: Vertical distance in millimetres between consecutive text lines."""

PDF_OVERFLOW_MODES = ('paginate', 'truncate')
"""tuple: Accepted values of the PDF encoder's ``overflow`` option."""

DEFAULT_PDF_OVERFLOW = 'paginate'
"""str: Default overflow handling for text that runs past the bottom margin.

'paginate' continues on a new page; 'truncate' drops lines that do not fit.
"""

# Rendering
RENDER_SCALE = 1.5
"""float: Scale factor used when rasterizing a PDF page to an image."""

IMAGE_OUTPUT_FORMAT = "PNG"
"""str: Pillow format name for raster output."""

# Placeholder conversions
COMPRESS_PREVIEW_CHARS = 500
"""int: Number of extracted characters kept by the compress summary."""

# Text decoding
TEXT_ENCODINGS = ("utf-8", "gbk")
"""tuple: Encodings tried in order when decoding text and HTML input."""

HTML_DOCUMENT_TITLE = "Converted PDF"
"""str: Title element of generated HTML documents."""

SPREADSHEET_HEADER = "Extracted Text"
"""str: Header cell written above unstructured text in spreadsheet output."""

SPREADSHEET_SHEET_TITLE = "Extracted Data"
"""str: Worksheet title for spreadsheet output."""

# Default output subdirectory names
DEFAULT_OUTPUT_DIR = "converted_output"
"""str: Default subdirectory name for CLI conversion output."""

# Logging
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
"""str: Log line format for the command line; the logger name shows which extractor or encoder spoke."""

THIRD_PARTY_LOGGERS = ("PIL", "bs4")
"""Tuple[str, ...]: Library loggers kept at WARNING or above even with --verbose."""

# MIME types
MIME_PDF = "application/pdf"
MIME_DOCX = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
MIME_XLSX = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
MIME_PNG = "image/png"
MIME_JPEG = "image/jpeg"
MIME_TEXT = "text/plain"
MIME_HTML = "text/html"

# Supported file formats (centralized)
SUPPORTED_PDF_FORMATS = {'.pdf'}
"""Set[str]: PDF file formats."""

SUPPORTED_WORD_FORMATS = {'.doc', '.docx'}
"""Set[str]: Word formats accepted for Word to PDF; only .docx content can be read."""

SUPPORTED_PRESENTATION_FORMATS = {'.ppt', '.pptx'}
"""Set[str]: Presentation formats accepted by the PowerPoint summary."""

SUPPORTED_SPREADSHEET_FORMATS = {'.xls', '.xlsx'}
"""Set[str]: Spreadsheet formats accepted for Excel to PDF; only .xlsx content can be read."""

SUPPORTED_IMAGE_FORMATS = {'.jpg', '.jpeg', '.png'}
"""Set[str]: Image formats accepted for image to PDF."""

SUPPORTED_TEXT_FORMATS = {'.txt'}
"""Set[str]: Plain text formats."""

SUPPORTED_HTML_FORMATS = {'.html', '.htm'}
"""Set[str]: HTML formats."""


def get_all_supported_formats() -> Set[str]:
    """
    Get the complete set of all supported input file formats.

    Returns:
        Set of all supported file extensions
    """
    return (SUPPORTED_PDF_FORMATS |
            SUPPORTED_WORD_FORMATS |
            SUPPORTED_PRESENTATION_FORMATS |
            SUPPORTED_SPREADSHEET_FORMATS |
            SUPPORTED_IMAGE_FORMATS |
            SUPPORTED_TEXT_FORMATS |
            SUPPORTED_HTML_FORMATS)
