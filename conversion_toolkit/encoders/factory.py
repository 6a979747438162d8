"""
Encoder factory.

Maps each target ``Format`` to its encoder. The table is resolved once;
adding a format means adding one entry here.
"""

import logging
from typing import Dict, Type

from ..errors import UnsupportedPair
from ..models import Format
from .base import Encoder
from .html import HtmlEncoder
from .image import ImageEncoder
from .outline import SlideOutlineEncoder
from .pdf import PdfEncoder
from .spreadsheet import SpreadsheetEncoder
from .text import TextEncoder
from .word import DocxEncoder

ENCODERS: Dict[Format, Type[Encoder]] = {
    Format.PDF: PdfEncoder,
    Format.DOCX: DocxEncoder,
    Format.PPTX: SlideOutlineEncoder,
    Format.XLSX: SpreadsheetEncoder,
    Format.IMAGE: ImageEncoder,
    Format.TXT: TextEncoder,
    Format.HTML: HtmlEncoder,
}


class EncoderFactory:
    """Creates and caches one encoder instance per format."""

    def __init__(self, table: Dict[Format, Type[Encoder]] = None):
        self._table = dict(ENCODERS if table is None else table)
        self._instances: Dict[Format, Encoder] = {}
        self.logger = logging.getLogger(__name__)

    def get(self, fmt: Format) -> Encoder:
        """
        Get the encoder for a target format.

        Raises:
            UnsupportedPair: If no encoder writes ``fmt``
        """
        if fmt not in self._instances:
            encoder_class = self._table.get(fmt)
            if encoder_class is None:
                raise UnsupportedPair(f"No encoder for {fmt.value} output")
            self._instances[fmt] = encoder_class()
            self.logger.debug(f"Created {encoder_class.__name__} for {fmt.value}")
        return self._instances[fmt]

    def supported_formats(self) -> list[Format]:
        return list(self._table)


# Global factory instance
_global_factory = None


def get_encoder_factory() -> EncoderFactory:
    """Get the global encoder factory instance."""
    global _global_factory
    if _global_factory is None:
        _global_factory = EncoderFactory()
    return _global_factory


def get_encoder(fmt: Format) -> Encoder:
    """Get the encoder for ``fmt`` from the global factory."""
    return get_encoder_factory().get(fmt)
