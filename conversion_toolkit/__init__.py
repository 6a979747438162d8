"""
Conversion toolkit package.

A document conversion engine: a registry of supported format pairs, one
extractor per source format, one encoder per target format, and an
orchestrator running a single conversion job at a time.
"""

from .errors import (
    AlreadyRunning,
    ConversionError,
    CorruptInput,
    EncodingFailure,
    JobInterrupted,
    NoDescriptor,
    UnknownJob,
    UnsupportedPair,
)
from .models import (
    Artifact,
    Format,
    Image,
    IntermediateDocument,
    PageBreak,
    SourceFile,
    TableRow,
    TextLine,
    suggest_filename,
)
from .orchestrator import ConversionOrchestrator, Job, JobHandle, JobState, JobStatus, ResultHolder
from .registry import ConversionDescriptor, FormatRegistry, Operation, get_registry

__version__ = "0.1.0"

__all__ = [
    '__version__',
    'AlreadyRunning',
    'ConversionError',
    'CorruptInput',
    'EncodingFailure',
    'JobInterrupted',
    'NoDescriptor',
    'UnknownJob',
    'UnsupportedPair',
    'Artifact',
    'Format',
    'Image',
    'IntermediateDocument',
    'PageBreak',
    'SourceFile',
    'TableRow',
    'TextLine',
    'suggest_filename',
    'ConversionOrchestrator',
    'Job',
    'JobHandle',
    'JobState',
    'JobStatus',
    'ResultHolder',
    'ConversionDescriptor',
    'FormatRegistry',
    'Operation',
    'get_registry',
]
