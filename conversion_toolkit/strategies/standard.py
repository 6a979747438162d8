"""
Standard extract-then-encode strategy.
"""

from typing import Sequence

from ..models import IntermediateDocument, SourceFile
from ..registry import ConversionDescriptor
from .base import ConversionStrategy


class StandardStrategy(ConversionStrategy):
    """
    Extract each source with the source format's extractor and encode the
    concatenation with the target format's encoder.

    Multi-file input is concatenated in caller order, each file starting on
    a new page, so page numbering downstream follows input order.
    """

    def extract_source(self, descriptor: ConversionDescriptor, source: SourceFile) -> IntermediateDocument:
        extractor = self.extractors.get(descriptor.source)
        return extractor.extract(source.data, **dict(descriptor.extract_options))

    def combine(self, descriptor: ConversionDescriptor, sources: Sequence[SourceFile],
                documents: Sequence[IntermediateDocument]) -> IntermediateDocument:
        if len(documents) == 1:
            return documents[0]
        return IntermediateDocument.concat(documents)

    def get_method_name(self) -> str:
        return "standard"
