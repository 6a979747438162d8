"""
Encoders turning an IntermediateDocument into an output Artifact.
"""

from .base import Encoder
from .factory import ENCODERS, EncoderFactory, get_encoder, get_encoder_factory
from .html import HtmlEncoder
from .image import ImageEncoder
from .outline import SlideOutlineEncoder
from .pdf import PdfEncoder
from .spreadsheet import SpreadsheetEncoder
from .text import TextEncoder
from .word import DocxEncoder

__all__ = [
    'Encoder',
    'ENCODERS',
    'EncoderFactory',
    'get_encoder',
    'get_encoder_factory',
    'PdfEncoder',
    'DocxEncoder',
    'SpreadsheetEncoder',
    'ImageEncoder',
    'HtmlEncoder',
    'TextEncoder',
    'SlideOutlineEncoder',
]
