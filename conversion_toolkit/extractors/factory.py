"""
Extractor factory.

Maps each source ``Format`` to its extractor. The table is resolved once;
adding a format means adding one entry here.
"""

import logging
from typing import Dict, Type

from ..errors import UnsupportedPair
from ..models import Format
from .base import Extractor
from .image import ImageExtractor
from .pdf import PdfExtractor
from .spreadsheet import SpreadsheetExtractor
from .text import HtmlExtractor, TextExtractor
from .word import DocxExtractor

EXTRACTORS: Dict[Format, Type[Extractor]] = {
    Format.PDF: PdfExtractor,
    Format.DOCX: DocxExtractor,
    Format.XLSX: SpreadsheetExtractor,
    Format.IMAGE: ImageExtractor,
    Format.TXT: TextExtractor,
    Format.HTML: HtmlExtractor,
}


class ExtractorFactory:
    """Creates and caches one extractor instance per format."""

    def __init__(self, table: Dict[Format, Type[Extractor]] = None):
        self._table = dict(EXTRACTORS if table is None else table)
        self._instances: Dict[Format, Extractor] = {}
        self.logger = logging.getLogger(__name__)

    def get(self, fmt: Format) -> Extractor:
        """
        Get the extractor for a source format.

        Raises:
            UnsupportedPair: If no extractor reads ``fmt``
        """
        if fmt not in self._instances:
            extractor_class = self._table.get(fmt)
            if extractor_class is None:
                raise UnsupportedPair(f"No extractor for {fmt.value} input")
            self._instances[fmt] = extractor_class()
            self.logger.debug(f"Created {extractor_class.__name__} for {fmt.value}")
        return self._instances[fmt]

    def supported_formats(self) -> list[Format]:
        return list(self._table)


# Global factory instance
_global_factory = None


def get_extractor_factory() -> ExtractorFactory:
    """Get the global extractor factory instance."""
    global _global_factory
    if _global_factory is None:
        _global_factory = ExtractorFactory()
    return _global_factory


def get_extractor(fmt: Format) -> Extractor:
    """Get the extractor for ``fmt`` from the global factory."""
    return get_extractor_factory().get(fmt)
