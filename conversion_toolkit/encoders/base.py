"""
Base class for encoders.

An encoder turns an ``IntermediateDocument`` into an ``Artifact`` of one
target format. Any failure while building the output is reported as
``EncodingFailure``; no partial artifact is ever returned.
"""

import logging
from abc import ABC, abstractmethod

from ..errors import ConversionError, EncodingFailure
from ..models import Artifact, Format, IntermediateDocument, TableRow, TextLine


class Encoder(ABC):
    """Abstract base class for all encoders."""

    format: Format = None
    mime_type: str = 'application/octet-stream'
    extension: str = 'bin'

    def __init__(self):
        """Initialize the encoder."""
        self.logger = logging.getLogger(self.__class__.__name__)

    def encode(self, document: IntermediateDocument, **options) -> Artifact:
        """
        Encode a document.

        Args:
            document: Content to encode
            **options: Format-specific encoding options

        Returns:
            Artifact with the output bytes

        Raises:
            EncodingFailure: If the output cannot be written
        """
        try:
            data = self._encode(document, **options)
        except ConversionError:
            raise
        except Exception as e:
            self.logger.debug(f"{self.__class__.__name__} failed: {e}")
            raise EncodingFailure(f"Failed to write {self.extension} output: {e}") from e

        self.logger.debug(f"Encoded {len(document)} blocks into {len(data)} bytes")
        return Artifact(data=data, mime_type=self.mime_type, extension=self.extension)

    @abstractmethod
    def _encode(self, document: IntermediateDocument, **options) -> bytes:
        """Produce the output bytes."""
        pass

    @staticmethod
    def page_lines(page) -> list[str]:
        """Text of a page's text lines and table rows, in order."""
        lines = []
        for block in page:
            if isinstance(block, TextLine):
                lines.append(block.text)
            elif isinstance(block, TableRow):
                lines.append(block.as_text())
        return lines
