"""
Extractors turning source bytes into an IntermediateDocument.
"""

from .base import Extractor
from .factory import EXTRACTORS, ExtractorFactory, get_extractor, get_extractor_factory
from .image import ImageExtractor
from .pdf import PdfExtractor
from .spreadsheet import SpreadsheetExtractor
from .text import HtmlExtractor, TextExtractor
from .word import DocxExtractor

__all__ = [
    'Extractor',
    'EXTRACTORS',
    'ExtractorFactory',
    'get_extractor',
    'get_extractor_factory',
    'PdfExtractor',
    'DocxExtractor',
    'SpreadsheetExtractor',
    'ImageExtractor',
    'TextExtractor',
    'HtmlExtractor',
]
