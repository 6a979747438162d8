"""
HTML encoder.

Each page becomes a ``<div class="page">`` section headed by its page
number, concatenated in page order inside a minimal document skeleton.
"""

import base64
from html import escape

from .. import config
from ..models import Format, Image, IntermediateDocument, TableRow, TextLine
from .base import Encoder


class HtmlEncoder(Encoder):
    """Encoder for HTML output."""

    format = Format.HTML
    mime_type = config.MIME_HTML
    extension = 'html'

    def _encode(self, document: IntermediateDocument, title: str = config.HTML_DOCUMENT_TITLE,
                **options) -> bytes:
        parts = [
            '<!DOCTYPE html><html><head><meta charset="UTF-8">'
            f'<title>{escape(title)}</title></head><body>'
        ]

        for number, page in enumerate(document.pages(), start=1):
            parts.append(f'<div class="page"><h2>Page {number}</h2>')
            for block in page:
                parts.append(self._render_block(block))
            parts.append('</div>')

        parts.append('</body></html>')
        return ''.join(parts).encode('utf-8')

    def _render_block(self, block) -> str:
        if isinstance(block, TextLine):
            return f'<p>{escape(block.text)}</p>'
        if isinstance(block, TableRow):
            return f'<p>{escape(block.as_text())}</p>'
        if isinstance(block, Image):
            encoded = base64.b64encode(block.data).decode('ascii')
            return f'<img src="data:{block.mime_type};base64,{encoded}" alt="">'
        return ''
