"""
Image extractor.

The raw bytes are wrapped in a single ``Image`` block without decoding or
re-encoding. Pillow only reads the header to identify the MIME type.
"""

from io import BytesIO

from PIL import Image as PILImage

from .. import config
from ..models import Format, Image, IntermediateDocument
from .base import Extractor


class ImageExtractor(Extractor):
    """Extractor for raster images."""

    format = Format.IMAGE
    SUPPORTED_FORMATS = config.SUPPORTED_IMAGE_FORMATS

    def _extract(self, data: bytes, **options) -> IntermediateDocument:
        # Image.open is lazy: raises UnidentifiedImageError for unknown bytes
        with PILImage.open(BytesIO(data)) as img:
            image_format = img.format

        mime_type = PILImage.MIME.get(image_format, 'application/octet-stream')
        self.logger.debug(f"Identified {image_format} image ({len(data)} bytes)")
        return IntermediateDocument((Image(data, mime_type),))
