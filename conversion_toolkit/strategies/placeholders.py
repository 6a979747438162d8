"""
Placeholder strategies.

These conversions do not perform a real structural operation on their
input. Each one synthesizes a short descriptive document (for example the
list of merged file names) which is then encoded with the target encoder.
Page-level PDF manipulation is out of scope for the toolkit.
"""

from typing import Sequence

from .. import config
from ..models import Format, IntermediateDocument, SourceFile
from ..registry import ConversionDescriptor
from .base import ConversionStrategy


def _display_name(source: SourceFile, index: int) -> str:
    return source.name or f"file_{index}"


class PresentationSummaryStrategy(ConversionStrategy):
    """PowerPoint to PDF: a page naming the presentation, slides are not read."""

    def extract_source(self, descriptor: ConversionDescriptor, source: SourceFile) -> IntermediateDocument:
        return IntermediateDocument()

    def combine(self, descriptor: ConversionDescriptor, sources: Sequence[SourceFile],
                documents: Sequence[IntermediateDocument]) -> IntermediateDocument:
        return IntermediateDocument.from_lines([
            "PPT to PDF Conversion",
            f"Original file: {_display_name(sources[0], 1)}",
            "This would normally convert PPT slides to PDF pages",
        ])

    def get_method_name(self) -> str:
        return "presentation-summary"


class _PdfSummaryStrategy(ConversionStrategy):
    """Shared behaviour: every input must parse as a PDF."""

    def extract_source(self, descriptor: ConversionDescriptor, source: SourceFile) -> IntermediateDocument:
        return self.extractors.get(Format.PDF).extract(source.data)


class MergeSummaryStrategy(_PdfSummaryStrategy):
    """Merge PDFs: lists the inputs in order instead of merging pages."""

    def combine(self, descriptor: ConversionDescriptor, sources: Sequence[SourceFile],
                documents: Sequence[IntermediateDocument]) -> IntermediateDocument:
        lines = ["Merged PDF Files"]
        for index, (source, document) in enumerate(zip(sources, documents), start=1):
            pages = len(document.pages())
            lines.append(f"{index}. {_display_name(source, index)} ({pages} pages)")
        return IntermediateDocument.from_lines(lines)

    def get_method_name(self) -> str:
        return "merge-summary"


class SplitSummaryStrategy(_PdfSummaryStrategy):
    """Split PDF: explains the split instead of producing one file per page."""

    def combine(self, descriptor: ConversionDescriptor, sources: Sequence[SourceFile],
                documents: Sequence[IntermediateDocument]) -> IntermediateDocument:
        pages = sum(len(document.pages()) for document in documents)
        return IntermediateDocument.from_lines([
            "PDF Split Example",
            "Original file would be split into individual pages",
            "Each page would be saved as a separate PDF file",
            f"Pages found: {pages}",
        ])

    def get_method_name(self) -> str:
        return "split-summary"


class CompressSummaryStrategy(_PdfSummaryStrategy):
    """Compress PDF: rewrites a bounded preview of the extracted text."""

    def combine(self, descriptor: ConversionDescriptor, sources: Sequence[SourceFile],
                documents: Sequence[IntermediateDocument]) -> IntermediateDocument:
        full_text = " ".join(
            line.text for document in documents for line in document.text_lines() if line.text
        )
        return IntermediateDocument.from_lines([
            "Compressed PDF",
            full_text[:config.COMPRESS_PREVIEW_CHARS],
        ])

    def get_method_name(self) -> str:
        return "compress-summary"
