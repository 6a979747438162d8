"""
Image encoder.

Emits the first ``Image`` block of the document as PNG. For PDF input the
extractor has already rasterized page 1 only, so pages 2..N are not part of
the output.
"""

from io import BytesIO

from PIL import Image as PILImage

from .. import config
from ..models import Format, IntermediateDocument
from .base import Encoder


class ImageEncoder(Encoder):
    """Encoder for raster image output using Pillow."""

    format = Format.IMAGE
    mime_type = config.MIME_PNG
    extension = 'png'

    def _encode(self, document: IntermediateDocument, **options) -> bytes:
        images = document.images()
        if not images:
            self.logger.debug("No image content, writing empty artifact")
            return b''

        first = images[0]
        if first.mime_type == config.MIME_PNG:
            return first.data

        buffer = BytesIO()
        with PILImage.open(BytesIO(first.data)) as img:
            if img.mode not in ('1', 'L', 'LA', 'P', 'RGB', 'RGBA'):
                img = img.convert('RGB')
            img.save(buffer, format=config.IMAGE_OUTPUT_FORMAT)
        return buffer.getvalue()
