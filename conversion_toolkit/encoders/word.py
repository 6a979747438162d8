"""
Word document encoder.

Each ``TextLine`` maps to one paragraph. Blank lines, including the blank
line a ``PageBreak`` renders as, are dropped when ``skip_blank_lines`` is
set.
"""

import re
from io import BytesIO

from docx import Document
from docx.shared import Emu

from .. import config
from ..models import Format, Image, IntermediateDocument, PageBreak, TableRow, TextLine
from .base import Encoder

# Characters python-docx refuses to put into XML
_XML_ILLEGAL_RE = re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f]')


class DocxEncoder(Encoder):
    """Encoder for .docx output using python-docx."""

    format = Format.DOCX
    mime_type = config.MIME_DOCX
    extension = 'docx'

    def _encode(self, document: IntermediateDocument, skip_blank_lines: bool = False, **options) -> bytes:
        output = Document()
        section = output.sections[0]
        content_width = Emu(section.page_width - section.left_margin - section.right_margin)

        for block in document:
            if isinstance(block, Image):
                output.add_picture(BytesIO(block.data), width=content_width)
                continue

            if isinstance(block, TextLine):
                text = block.text
            elif isinstance(block, TableRow):
                text = block.as_text()
            elif isinstance(block, PageBreak):
                text = ''
            else:
                continue

            if skip_blank_lines and not text.strip():
                continue
            output.add_paragraph(_XML_ILLEGAL_RE.sub('', text))

        buffer = BytesIO()
        output.save(buffer)
        return buffer.getvalue()
