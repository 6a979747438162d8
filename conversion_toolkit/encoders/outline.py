"""
Slide outline encoder for PowerPoint targets.

No presentation file is built. Each page becomes a numbered slide entry in
a plain-text outline, which is what the PDF to PowerPoint conversion has
always delivered.
"""

from .. import config
from ..models import Format, IntermediateDocument
from .base import Encoder


class SlideOutlineEncoder(Encoder):
    """Placeholder encoder producing a text outline, one entry per page."""

    format = Format.PPTX
    mime_type = config.MIME_TEXT
    extension = 'txt'

    def _encode(self, document: IntermediateDocument, **options) -> bytes:
        slides = []
        for number, page in enumerate(document.pages(), start=1):
            content = "\n".join(self.page_lines(page))
            slides.append(f"Slide {number}:\n{content}\n---\n")
        return "\n".join(slides).encode('utf-8')
