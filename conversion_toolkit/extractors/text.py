"""
Plain text and HTML extractors.

Input is split on line breaks into ``TextLine`` blocks in original order.
HTML is treated as opaque text unless the conversion asks for the markup to
be rendered, in which case only the visible text is kept.
"""

from bs4 import BeautifulSoup

from .. import config
from ..errors import CorruptInput
from ..models import Format, IntermediateDocument
from .base import Extractor


class TextExtractor(Extractor):
    """
    Extractor for plain text files.

    This class handles:
    - Multiple text encodings (UTF-8, GBK)
    - Line order preservation, blank lines included
    """

    format = Format.TXT
    SUPPORTED_FORMATS = config.SUPPORTED_TEXT_FORMATS

    def _extract(self, data: bytes, **options) -> IntermediateDocument:
        return IntermediateDocument.from_lines(self.decode(data).splitlines())

    def decode(self, data: bytes) -> str:
        """
        Decode bytes with the first encoding that fits.

        Raises:
            CorruptInput: If no supported encoding can decode the bytes
        """
        for encoding in config.TEXT_ENCODINGS:
            try:
                text = data.decode(encoding)
            except UnicodeDecodeError:
                continue
            self.logger.debug(f"Decoded input with {encoding}")
            return text.lstrip('\ufeff')

        raise CorruptInput(f"Text is not valid {' or '.join(config.TEXT_ENCODINGS)}")

    def get_supported_encodings(self) -> list[str]:
        return list(config.TEXT_ENCODINGS)


class HtmlExtractor(TextExtractor):
    """Extractor for HTML files."""

    format = Format.HTML
    SUPPORTED_FORMATS = config.SUPPORTED_HTML_FORMATS

    def _extract(self, data: bytes, render_markup: bool = False, **options) -> IntermediateDocument:
        text = self.decode(data)
        if not render_markup:
            return IntermediateDocument.from_lines(text.splitlines())

        soup = BeautifulSoup(text, 'html.parser')
        for hidden in soup(['script', 'style', 'head']):
            hidden.decompose()

        lines = [line.strip() for line in soup.get_text('\n').splitlines()]
        return IntermediateDocument.from_lines(line for line in lines if line)
