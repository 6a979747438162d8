"""
Word document extractor.

Only unstyled raw text is read: paragraph styles, lists and tables are not
carried over. Each source line becomes one ``TextLine``.
"""

from io import BytesIO

from docx import Document

from .. import config
from ..models import Format, IntermediateDocument
from .base import Extractor


class DocxExtractor(Extractor):
    """Extractor for .docx documents."""

    format = Format.DOCX
    SUPPORTED_FORMATS = config.SUPPORTED_WORD_FORMATS

    def _extract(self, data: bytes, **options) -> IntermediateDocument:
        document = Document(BytesIO(data))

        lines = []
        for paragraph in document.paragraphs:
            # Soft line breaks inside a paragraph come through as newlines
            lines.extend(paragraph.text.splitlines() or [''])

        return IntermediateDocument.from_lines(lines)
