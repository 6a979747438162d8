"""
Exception taxonomy for the conversion engine.

Every failure the engine reports is a ``ConversionError`` subclass carrying a
short ``kind`` string, so callers can classify a failed job without
inspecting exception types.
"""


class ConversionError(Exception):
    """Base class for all conversion engine errors."""

    kind = "conversion_error"

    def __init__(self, message: str = ""):
        super().__init__(message or self.__class__.__name__)
        self.message = message or self.__class__.__name__


class UnsupportedPair(ConversionError):
    """No descriptor, extractor or encoder exists for the requested formats."""

    kind = "unsupported_pair"


class NoDescriptor(ConversionError):
    """A conversion was started with a descriptor id the registry does not know."""

    kind = "no_descriptor"


class CorruptInput(ConversionError):
    """Input bytes could not be parsed as the claimed format."""

    kind = "corrupt_input"


class EncodingFailure(ConversionError):
    """The output file could not be constructed."""

    kind = "encoding_failure"


class AlreadyRunning(ConversionError):
    """Another job is running; the engine runs one job at a time."""

    kind = "already_running"


class UnknownJob(ConversionError):
    """The job handle does not refer to the current job."""

    kind = "unknown_job"


class JobInterrupted(ConversionError):
    """The job's runner stopped before the job reached a terminal state."""

    kind = "interrupted"
