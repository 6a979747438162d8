"""
Base class for extractors.

An extractor turns the raw bytes of one source format into an
``IntermediateDocument``. The base class owns the behaviour shared by every
format: empty input yields an empty document, and any parser failure is
reported as ``CorruptInput``.
"""

import logging
from abc import ABC, abstractmethod

from ..errors import ConversionError, CorruptInput
from ..models import Format, IntermediateDocument


class Extractor(ABC):
    """
    Abstract base class for all extractors.

    Subclasses implement ``_extract`` for non-empty input and declare the
    format they read and the file extensions they accept.
    """

    format: Format = None
    SUPPORTED_FORMATS: set[str] = set()

    def __init__(self):
        """Initialize the extractor."""
        self.logger = logging.getLogger(self.__class__.__name__)

    def extract(self, data: bytes, **options) -> IntermediateDocument:
        """
        Extract structured content from raw bytes.

        Args:
            data: Source file bytes
            **options: Format-specific extraction options

        Returns:
            IntermediateDocument, empty when ``data`` is empty

        Raises:
            CorruptInput: If the bytes cannot be parsed as this format
        """
        if not data:
            self.logger.debug("Empty input, returning empty document")
            return IntermediateDocument()

        try:
            document = self._extract(data, **options)
        except ConversionError:
            raise
        except Exception as e:
            self.logger.debug(f"{self.__class__.__name__} failed: {e}")
            raise CorruptInput(f"Input is not a readable {self.format.value} file: {e}") from e

        self.logger.debug(f"Extracted {len(document)} blocks from {len(data)} bytes")
        return document

    @abstractmethod
    def _extract(self, data: bytes, **options) -> IntermediateDocument:
        """Extract content from non-empty input."""
        pass

    @classmethod
    def supports_format(cls, file_extension: str) -> bool:
        """
        Check if the given file format is supported.

        Args:
            file_extension: File extension to check (with or without dot)

        Returns:
            True if format is supported, False otherwise
        """
        ext = file_extension.lower()
        if not ext.startswith('.'):
            ext = '.' + ext
        return ext in cls.SUPPORTED_FORMATS

    def get_supported_formats(self) -> list[str]:
        """Get sorted list of supported file extensions."""
        return sorted(self.SUPPORTED_FORMATS)
