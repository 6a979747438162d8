"""
Plain text encoder.
"""

from .. import config
from ..models import Format, IntermediateDocument
from .base import Encoder

PAGE_SEPARATOR = "\n\n"


class TextEncoder(Encoder):
    """Joins lines with a newline and pages with a blank line, in order."""

    format = Format.TXT
    mime_type = config.MIME_TEXT
    extension = 'txt'

    def _encode(self, document: IntermediateDocument, **options) -> bytes:
        pages = ["\n".join(self.page_lines(page)) for page in document.pages()]
        return PAGE_SEPARATOR.join(pages).encode('utf-8')
