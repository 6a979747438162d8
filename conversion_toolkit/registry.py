"""
Format registry: the static catalog of supported conversions.

Each ``ConversionDescriptor`` declares one supported conversion. Descriptors
are keyed by ``(source, target, operation)``; the reverse of a pair is never
inferred, so ``(A, B)`` and ``(B, A)`` are independent entries.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Iterable, Mapping

from . import config
from .errors import NoDescriptor, UnsupportedPair
from .models import Format


class Operation(Enum):
    """Qualifies a format pair; the PDF tools all map PDF to PDF."""

    CONVERT = "convert"
    MERGE = "merge"
    SPLIT = "split"
    COMPRESS = "compress"


@dataclass(frozen=True)
class ConversionDescriptor:
    """Declared support for converting one format to another."""
    id: str
    title: str
    source: Format
    target: Format
    accepted_extensions: tuple[str, ...]
    multiple: bool = False
    description: str = ''
    operation: Operation = Operation.CONVERT
    strategy: str = 'standard'
    extract_options: Mapping[str, Any] = field(default_factory=dict)
    encode_options: Mapping[str, Any] = field(default_factory=dict)

    @property
    def key(self) -> tuple[Format, Format, Operation]:
        return (self.source, self.target, self.operation)

    def accepts(self, filename: str) -> bool:
        """Check a file name against the accepted extensions (case-insensitive)."""
        return Path(filename).suffix.lower() in self.accepted_extensions

    def to_dict(self) -> dict[str, Any]:
        """Summary used to populate a selection UI."""
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'acceptedExtensions': list(self.accepted_extensions),
            'multiple': self.multiple,
        }


def _extensions(formats: Iterable[str]) -> tuple[str, ...]:
    return tuple(sorted(formats))


DEFAULT_DESCRIPTORS: tuple[ConversionDescriptor, ...] = (
    ConversionDescriptor(
        id='word-to-pdf',
        title="Word to PDF Converter",
        description="Convert Word documents (.docx) to PDF files",
        source=Format.DOCX,
        target=Format.PDF,
        accepted_extensions=_extensions(config.SUPPORTED_WORD_FORMATS),
    ),
    ConversionDescriptor(
        id='pdf-to-word',
        title="PDF to Word Converter",
        description="Extract text from PDF to editable Word documents",
        source=Format.PDF,
        target=Format.DOCX,
        accepted_extensions=_extensions(config.SUPPORTED_PDF_FORMATS),
        encode_options={'skip_blank_lines': True},
    ),
    ConversionDescriptor(
        id='pdf-to-ppt',
        title="PDF to PowerPoint",
        description="Convert PDF content into a slide outline",
        source=Format.PDF,
        target=Format.PPTX,
        accepted_extensions=_extensions(config.SUPPORTED_PDF_FORMATS),
    ),
    ConversionDescriptor(
        id='ppt-to-pdf',
        title="PowerPoint to PDF",
        description="Convert presentations to PDF for easy sharing",
        source=Format.PPTX,
        target=Format.PDF,
        accepted_extensions=_extensions(config.SUPPORTED_PRESENTATION_FORMATS),
        strategy='presentation-summary',
    ),
    ConversionDescriptor(
        id='pdf-to-excel',
        title="PDF to Excel",
        description="Extract text from PDF to Excel spreadsheets",
        source=Format.PDF,
        target=Format.XLSX,
        accepted_extensions=_extensions(config.SUPPORTED_PDF_FORMATS),
    ),
    ConversionDescriptor(
        id='excel-to-pdf',
        title="Excel to PDF",
        description="Convert the first sheet of a spreadsheet to PDF",
        source=Format.XLSX,
        target=Format.PDF,
        accepted_extensions=_extensions(config.SUPPORTED_SPREADSHEET_FORMATS),
    ),
    ConversionDescriptor(
        id='pdf-to-image',
        title="PDF to Image",
        description="Convert the first PDF page to a PNG image",
        source=Format.PDF,
        target=Format.IMAGE,
        accepted_extensions=_extensions(config.SUPPORTED_PDF_FORMATS),
        extract_options={'rasterize_first_page': True},
    ),
    ConversionDescriptor(
        id='image-to-pdf',
        title="Image to PDF",
        description="Combine multiple images into a single PDF file",
        source=Format.IMAGE,
        target=Format.PDF,
        accepted_extensions=_extensions(config.SUPPORTED_IMAGE_FORMATS),
        multiple=True,
    ),
    ConversionDescriptor(
        id='pdf-to-text',
        title="PDF to Text",
        description="Extract plain text from PDF files",
        source=Format.PDF,
        target=Format.TXT,
        accepted_extensions=_extensions(config.SUPPORTED_PDF_FORMATS),
    ),
    ConversionDescriptor(
        id='text-to-pdf',
        title="Text to PDF",
        description="Convert plain text files to PDF documents",
        source=Format.TXT,
        target=Format.PDF,
        accepted_extensions=_extensions(config.SUPPORTED_TEXT_FORMATS),
    ),
    ConversionDescriptor(
        id='pdf-to-html',
        title="PDF to HTML",
        description="Convert PDF files to web-friendly HTML format",
        source=Format.PDF,
        target=Format.HTML,
        accepted_extensions=_extensions(config.SUPPORTED_PDF_FORMATS),
    ),
    ConversionDescriptor(
        id='html-to-pdf',
        title="HTML to PDF",
        description="Convert the visible text of HTML files to PDF",
        source=Format.HTML,
        target=Format.PDF,
        accepted_extensions=_extensions(config.SUPPORTED_HTML_FORMATS),
        extract_options={'render_markup': True},
    ),
    ConversionDescriptor(
        id='merge-pdfs',
        title="Merge PDFs",
        description="Combine multiple PDF files into a single document",
        source=Format.PDF,
        target=Format.PDF,
        operation=Operation.MERGE,
        accepted_extensions=_extensions(config.SUPPORTED_PDF_FORMATS),
        multiple=True,
        strategy='merge-summary',
    ),
    ConversionDescriptor(
        id='split-pdf',
        title="Split PDF",
        description="Split a PDF into multiple smaller files",
        source=Format.PDF,
        target=Format.PDF,
        operation=Operation.SPLIT,
        accepted_extensions=_extensions(config.SUPPORTED_PDF_FORMATS),
        strategy='split-summary',
    ),
    ConversionDescriptor(
        id='compress-pdf',
        title="Compress PDF",
        description="Reduce PDF file size",
        source=Format.PDF,
        target=Format.PDF,
        operation=Operation.COMPRESS,
        accepted_extensions=_extensions(config.SUPPORTED_PDF_FORMATS),
        strategy='compress-summary',
    ),
)


class FormatRegistry:
    """
    Immutable catalog of conversion descriptors.

    Lookup by key or id is deterministic; a miss raises a ``ConversionError``
    rather than returning None.
    """

    def __init__(self, descriptors: Iterable[ConversionDescriptor]):
        self._descriptors: tuple[ConversionDescriptor, ...] = tuple(descriptors)
        self._by_key: dict[tuple[Format, Format, Operation], ConversionDescriptor] = {}
        self._by_id: dict[str, ConversionDescriptor] = {}
        self.logger = logging.getLogger(__name__)

        for descriptor in self._descriptors:
            if descriptor.key in self._by_key:
                raise ValueError(f"Duplicate conversion for {descriptor.source.value} -> "
                                 f"{descriptor.target.value} ({descriptor.operation.value})")
            if descriptor.id in self._by_id:
                raise ValueError(f"Duplicate descriptor id: {descriptor.id}")
            self._by_key[descriptor.key] = descriptor
            self._by_id[descriptor.id] = descriptor

        self.logger.debug(f"Registered {len(self._descriptors)} conversions")

    def __len__(self) -> int:
        return len(self._descriptors)

    def __contains__(self, descriptor_id: str) -> bool:
        return descriptor_id in self._by_id

    def list_descriptors(self) -> list[ConversionDescriptor]:
        """Return all descriptors in declaration order."""
        return list(self._descriptors)

    def resolve(self, source: Format, target: Format,
                operation: Operation = Operation.CONVERT) -> ConversionDescriptor:
        """
        Find the descriptor for a format pair.

        Args:
            source: Source format
            target: Target format
            operation: Operation qualifying the pair

        Returns:
            The registered descriptor

        Raises:
            UnsupportedPair: If no descriptor is registered for the key
        """
        try:
            return self._by_key[(source, target, operation)]
        except KeyError:
            raise UnsupportedPair(
                f"No conversion from {source.value} to {target.value} ({operation.value})"
            ) from None

    def get(self, descriptor_id: str) -> ConversionDescriptor:
        """Find a descriptor by id, raising ``NoDescriptor`` on a miss."""
        descriptor = self._by_id.get(descriptor_id)
        if descriptor is None:
            raise NoDescriptor(f"Unknown conversion: {descriptor_id!r}")
        return descriptor

    def accepts(self, descriptor_id: str, filename: str) -> bool:
        return self.get(descriptor_id).accepts(filename)


# Global registry instance
_global_registry = None


def get_registry() -> FormatRegistry:
    """
    Get the global registry built from ``DEFAULT_DESCRIPTORS``.

    Returns:
        Global FormatRegistry instance
    """
    global _global_registry
    if _global_registry is None:
        _global_registry = FormatRegistry(DEFAULT_DESCRIPTORS)
    return _global_registry
