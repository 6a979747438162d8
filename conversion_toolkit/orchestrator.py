"""
Conversion orchestrator.

Drives one job at a time through extraction and encoding:

    IDLE --start--> RUNNING --> SUCCEEDED | FAILED

A terminal job returns the engine to IDLE on ``reset()`` or when a new input
is started. Starting while a job is RUNNING is rejected, never queued. There
is no cancel operation; a runner that stops early fails the job with
``JobInterrupted``. Work happens on the caller's thread; the async runner yields
to the event loop between steps.
"""

import asyncio
import logging
import time
import uuid
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Iterable, Iterator, Union

from .encoders import EncoderFactory
from .errors import AlreadyRunning, ConversionError, CorruptInput, EncodingFailure, JobInterrupted, UnknownJob
from .extractors import ExtractorFactory
from .models import Artifact, SourceFile
from .registry import ConversionDescriptor, FormatRegistry, get_registry
from .stats import ConversionStats
from .strategies import get_strategy

InputLike = Union[SourceFile, bytes, bytearray, memoryview]


class JobState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


class Job:
    """
    One conversion attempt.

    The descriptor and input files are fixed at creation. The artifact is
    set only on success and the error only on failure.
    """

    def __init__(self, descriptor: ConversionDescriptor, sources: Iterable[SourceFile],
                 original_name: str | None = None):
        self._id = uuid.uuid4().hex
        self._descriptor = descriptor
        self._sources = tuple(sources)
        self.original_name = original_name
        self.state = JobState.RUNNING
        self.error: ConversionError | None = None
        self.artifact: Artifact | None = None
        self.created_at = _utc_now()
        self.finished_at: str | None = None
        # Set once a runner takes the job; a job is driven by one runner only
        self.claimed = False

    @property
    def id(self) -> str:
        return self._id

    @property
    def descriptor(self) -> ConversionDescriptor:
        return self._descriptor

    @property
    def sources(self) -> tuple[SourceFile, ...]:
        return self._sources

    @property
    def is_terminal(self) -> bool:
        return self.state in (JobState.SUCCEEDED, JobState.FAILED)

    def succeed(self, artifact: Artifact):
        self.artifact = artifact
        self.error = None
        self.state = JobState.SUCCEEDED
        self.finished_at = _utc_now()

    def fail(self, error: ConversionError):
        self.artifact = None
        self.error = error
        self.state = JobState.FAILED
        self.finished_at = _utc_now()


@dataclass(frozen=True)
class JobHandle:
    """Opaque reference to a started job."""
    job_id: str


@dataclass(frozen=True)
class JobStatus:
    """Snapshot of a job returned by ``poll_job``."""
    job_id: str
    descriptor_id: str
    state: JobState
    error: ConversionError | None = None
    artifact: Artifact | None = None

    @property
    def error_message(self) -> str:
        return self.error.message if self.error else ''

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            'job_id': self.job_id,
            'descriptor_id': self.descriptor_id,
            'state': self.state.value,
        }
        if self.error is not None:
            result['error'] = {'kind': self.error.kind, 'message': self.error.message}
        if self.artifact is not None:
            result['artifact'] = {
                'mime_type': self.artifact.mime_type,
                'extension': self.artifact.extension,
                'suggested_filename': self.artifact.suggested_filename,
                'size': self.artifact.size,
            }
        return result


class ResultHolder:
    """Keeps the artifact of the most recently succeeded job."""

    def __init__(self):
        self._artifact: Artifact | None = None
        self.logger = logging.getLogger(__name__)

    @property
    def artifact(self) -> Artifact | None:
        return self._artifact

    def store(self, artifact: Artifact):
        if self._artifact is not None:
            self.logger.debug(f"Replacing held artifact {self._artifact.suggested_filename}")
        self._artifact = artifact

    def download(self) -> Artifact | None:
        """Hand the artifact to the caller and stop holding it."""
        artifact = self._artifact
        self._artifact = None
        return artifact

    def release(self):
        self._artifact = None


class ConversionOrchestrator:
    """
    Runs conversion jobs against a registry of descriptors.

    The UI layer holds descriptor ids and job handles only; all job state is
    owned here and exposed through ``poll_job``.
    """

    def __init__(self, registry: FormatRegistry = None, extractors: ExtractorFactory = None,
                 encoders: EncoderFactory = None, stats: ConversionStats = None):
        self.registry = registry or get_registry()
        self.extractors = extractors
        self.encoders = encoders
        self.stats = stats or ConversionStats()
        self.result = ResultHolder()
        self._current: Job | None = None
        self.logger = logging.getLogger(__name__)

    @property
    def state(self) -> JobState:
        """State of the engine's single job slot."""
        return self._current.state if self._current else JobState.IDLE

    @property
    def current_job(self) -> Job | None:
        return self._current

    def list_descriptors(self) -> list[dict[str, Any]]:
        """Descriptors in declaration order, for populating a selection UI."""
        return [descriptor.to_dict() for descriptor in self.registry.list_descriptors()]

    def start_conversion(self, descriptor_id: str, inputs: Iterable[InputLike],
                         original_name: str | None = None) -> JobHandle | None:
        """
        Create a RUNNING job for the given inputs.

        Args:
            descriptor_id: Id of the conversion to run
            inputs: Input files in the order they must be processed
            original_name: Name used for the artifact's suggested filename;
                defaults to the first input's name

        Returns:
            Handle of the new job, or None for an empty selection

        Raises:
            NoDescriptor: If ``descriptor_id`` is unknown
            AlreadyRunning: If another job is running
            ValueError: If several files are given to a single-file conversion
        """
        descriptor = self.registry.get(descriptor_id)
        sources = tuple(SourceFile.coerce(item) for item in inputs)

        if not sources:
            self.logger.debug("Empty selection, nothing to start")
            return None

        if self._current is not None and self._current.state is JobState.RUNNING:
            raise AlreadyRunning(f"Job {self._current.id} is still running")

        if len(sources) > 1 and not descriptor.multiple:
            raise ValueError(f"{descriptor.title} accepts a single file, got {len(sources)}")

        for source in sources:
            if source.name and not descriptor.accepts(source.name):
                self.logger.warning(f"{source.name} is not one of {', '.join(descriptor.accepted_extensions)}")

        if original_name is None:
            original_name = sources[0].name

        # Supersede the previous job and its result
        self.result.release()
        job = Job(descriptor, sources, original_name)
        self._current = job

        self.logger.info(f"Started {descriptor.id} job {job.id} with {len(sources)} file(s)")
        return JobHandle(job.id)

    def run_job(self, handle: JobHandle) -> JobStatus:
        """
        Run a started job to completion on the caller's thread.

        Raises:
            UnknownJob: If the handle is not the current job
            AlreadyRunning: If another runner is driving the job
        """
        job = self._require(handle)
        if job.state is JobState.RUNNING:
            with self._running(job) as steps:
                for _ in steps:
                    pass
        return self._status(job)

    async def run_job_async(self, handle: JobHandle) -> JobStatus:
        """
        Run a started job, yielding to the event loop between steps.

        Cancelling the awaiting task fails the job with ``JobInterrupted``, so
        a caller-side timeout such as ``asyncio.wait_for`` leaves the engine
        ready for ``reset()``.
        """
        job = self._require(handle)
        if job.state is JobState.RUNNING:
            with self._running(job) as steps:
                for _ in steps:
                    await asyncio.sleep(0)
        return self._status(job)

    def convert(self, descriptor_id: str, inputs: Iterable[InputLike],
                original_name: str | None = None) -> JobStatus | None:
        """Start and run a job in one call."""
        handle = self.start_conversion(descriptor_id, inputs, original_name)
        if handle is None:
            return None
        return self.run_job(handle)

    def poll_job(self, handle: JobHandle) -> JobStatus:
        """
        Get the current status of a job.

        Raises:
            UnknownJob: If the handle is not the current job
        """
        return self._status(self._require(handle))

    def reset(self):
        """
        Return to IDLE, discarding the current job and any held artifact.

        Raises:
            AlreadyRunning: If the current job is still running
        """
        if self._current is not None and self._current.state is JobState.RUNNING:
            raise AlreadyRunning(f"Job {self._current.id} is still running")
        self._current = None
        self.result.release()

    def _require(self, handle: JobHandle) -> Job:
        if self._current is None or self._current.id != handle.job_id:
            raise UnknownJob(f"No current job with id {handle.job_id}")
        return self._current

    def _status(self, job: Job) -> JobStatus:
        return JobStatus(
            job_id=job.id,
            descriptor_id=job.descriptor.id,
            state=job.state,
            error=job.error,
            artifact=job.artifact,
        )

    @contextmanager
    def _running(self, job: Job):
        """
        Claim ``job`` for one runner and hand it the job's step generator.

        If the runner stops before the job is terminal, whether cancelled or
        because of an unclassified error, the job fails with
        ``JobInterrupted`` and the exception propagates.
        """
        if job.claimed:
            raise AlreadyRunning(f"Job {job.id} is already being run")
        job.claimed = True

        start_time = time.time()
        steps = self._steps(job)
        try:
            yield steps
        except BaseException as e:
            if not job.is_terminal:
                self._fail(job, JobInterrupted(f"Job stopped before finishing: {e!r}"),
                           time.time() - start_time)
            raise
        finally:
            steps.close()

    def _fail(self, job: Job, error: ConversionError, processing_time: float):
        job.fail(error)
        self.stats.add_result(job.descriptor.id, False, processing_time, error_kind=error.kind)
        self.logger.error(f"Job {job.id} ({job.descriptor.id}) failed: {error.message}")

    def _steps(self, job: Job) -> Iterator[None]:
        """Run the job, yielding after each input file and after encoding."""
        descriptor = job.descriptor
        start_time = time.time()

        try:
            strategy = get_strategy(descriptor.strategy, extractors=self.extractors, encoders=self.encoders)

            documents = []
            for source in job.sources:
                documents.append(self._classified(CorruptInput, strategy.extract_source, descriptor, source))
                yield

            document = self._classified(CorruptInput, strategy.combine, descriptor, job.sources, documents)
            self.logger.debug(f"Job {job.id} extracted {len(document)} blocks")

            artifact = self._classified(EncodingFailure, strategy.encode, descriptor, document)
            yield
        except ConversionError as e:
            self._fail(job, e, time.time() - start_time)
            return

        artifact = artifact.named_after(job.original_name)
        job.succeed(artifact)
        self.result.store(artifact)
        self.stats.add_result(descriptor.id, True, time.time() - start_time, output_bytes=artifact.size)
        self.logger.info(f"Job {job.id} ({descriptor.id}) succeeded: {artifact.suggested_filename}")

    @staticmethod
    def _classified(error_class, func, *args):
        # Unexpected errors take the classification of the step they came from
        try:
            return func(*args)
        except ConversionError:
            raise
        except Exception as e:
            raise error_class(str(e)) from e
