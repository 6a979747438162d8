"""
Base strategy interface for conversions.

A strategy turns the job's source files into one ``IntermediateDocument``
(extraction phase) and that document into an ``Artifact`` (encoding phase).
The phases are separate so the orchestrator can classify failures and
yield between files.
"""

import logging
from abc import ABC, abstractmethod
from typing import Sequence

from ..encoders import EncoderFactory, get_encoder_factory
from ..extractors import ExtractorFactory, get_extractor_factory
from ..models import Artifact, IntermediateDocument, SourceFile
from ..registry import ConversionDescriptor


class ConversionStrategy(ABC):
    """Abstract base class for conversion strategies."""

    def __init__(self, extractors: ExtractorFactory = None, encoders: EncoderFactory = None):
        self.extractors = extractors or get_extractor_factory()
        self.encoders = encoders or get_encoder_factory()
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def extract_source(self, descriptor: ConversionDescriptor, source: SourceFile) -> IntermediateDocument:
        """
        Extract one source file.

        Args:
            descriptor: Conversion being run
            source: One input file

        Returns:
            Content of that file
        """
        pass

    @abstractmethod
    def combine(self, descriptor: ConversionDescriptor, sources: Sequence[SourceFile],
                documents: Sequence[IntermediateDocument]) -> IntermediateDocument:
        """
        Combine per-file documents, given in source order, into one.
        """
        pass

    def extract(self, descriptor: ConversionDescriptor, sources: Sequence[SourceFile]) -> IntermediateDocument:
        """Extract all sources strictly in the given order and combine them."""
        documents = [self.extract_source(descriptor, source) for source in sources]
        return self.combine(descriptor, sources, documents)

    def encode(self, descriptor: ConversionDescriptor, document: IntermediateDocument) -> Artifact:
        """Encode with the descriptor's target encoder and encoding options."""
        encoder = self.encoders.get(descriptor.target)
        return encoder.encode(document, **dict(descriptor.encode_options))

    @abstractmethod
    def get_method_name(self) -> str:
        """
        Get the name of this strategy.

        Returns:
            String identifier descriptors use to select it
        """
        pass
