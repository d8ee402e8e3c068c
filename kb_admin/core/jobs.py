"""
Background job tracking.

Requirement identification, article extraction and legal basis sending all
run as server-side jobs that answer the same status shape: a state message,
an optional progress and an optional error. ``JobTracker`` polls one such
job; subclasses pick the status endpoint, the error catalog and the
localized state descriptions.
"""

from __future__ import annotations

import logging
import time
from enum import Enum
from typing import Callable, Mapping

from pydantic import ValidationError

from .client import ApiClient, ApiRequestError
from .config import get_settings
from .errors import ErrorCatalog, ErrorKind, UserMessage
from .results import Failure, OperationResult, Success
from .schemas import ApiModel

logger = logging.getLogger(__name__)


class JobStatus(ApiModel):
    """Raw job status answer."""
    message: str | None = None
    job_progress: int | float | None = None
    error: str | None = None


class JobState(str, Enum):
    WAITING = "WAITING"
    ACTIVE = "ACTIVE"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    DELAYED = "DELAYED"
    PAUSED = "PAUSED"
    STUCK = "STUCK"
    UNKNOWN = "UNKNOWN"


JOB_STATES: dict[str, JobState] = {
    "The job is waiting to be processed": JobState.WAITING,
    "Job is still processing": JobState.ACTIVE,
    "Job completed successfully": JobState.COMPLETED,
    "Job failed": JobState.FAILED,
    "Job is delayed and will be processed later": JobState.DELAYED,
    "Job is paused and will be resumed once unpaused": JobState.PAUSED,
    "Job is stuck and cannot proceed": JobState.STUCK,
    "Job is in an unknown state": JobState.UNKNOWN,
}

TERMINAL_STATES = frozenset({JobState.COMPLETED, JobState.FAILED})

# Jobs in these states only move again after an administrator steps in.
STALLED_STATES = frozenset({JobState.PAUSED, JobState.STUCK, JobState.UNKNOWN})


def job_descriptions(process: str, feminine: bool = True) -> dict[JobState, str]:
    """Localized state descriptions for a process named ``process``.

    FAILED has no description; the job error carries the message instead.
    """
    ending = "a" if feminine else "o"
    return {
        JobState.WAITING: f"{process} comenzará en un momento.",
        JobState.ACTIVE: f"{process} está en curso...",
        JobState.COMPLETED: f"{process} se completó con éxito.",
        JobState.DELAYED: f"{process} está retrasad{ending} y se procesará más tarde.",
        JobState.PAUSED: (
            f"{process} está en pausa. "
            "Comuníquese con los administradores del sistema para continuar."
        ),
        JobState.STUCK: (
            f"{process} está atascad{ending} y no puede continuar. "
            "Comuníquese con los administradores del sistema."
        ),
        JobState.UNKNOWN: (
            f"{process} está en un estado desconocido. "
            "Comuníquese con los administradores del sistema."
        ),
    }


class JobTracker:
    """Progress of one background job, as last reported by the server.

    Attributes:
        progress: Server-reported progress, None when unknown
        message: Description of ``status`` for the user
        status: Last ``JobState``, None before the first poll or on failure
        error: ``UserMessage`` for a failed poll or a failed job
        error_status: ``ErrorKind`` behind ``error``
    """

    status_endpoint: str
    catalog: ErrorCatalog
    descriptions: Mapping[JobState, str]
    label = "job"

    def __init__(self, client: ApiClient):
        self.client = client
        self.reset()

    def reset(self) -> None:
        self.progress: int | float | None = None
        self.message: str | None = None
        self.status: JobState | None = None
        self.error: UserMessage | None = None
        self.error_status: ErrorKind | None = None

    def clear_error(self) -> None:
        self.error = None
        self.error_status = None

    @property
    def finished(self) -> bool:
        return self.error is not None or self.status in TERMINAL_STATES

    @property
    def stalled(self) -> bool:
        return self.status in STALLED_STATES

    def fetch_job_status(self, job_id: str | int) -> OperationResult:
        """Poll the job once and update the tracker state."""
        try:
            data = self.client.get(self.status_endpoint.format(job_id=job_id))
            job = JobStatus.model_validate(data)
        except ApiRequestError as exc:
            kind = self.catalog.classify(
                code=exc.status_code,
                error=exc.server_message,
                http_error=exc.client_message,
            )
            return self._fail(kind, status=None)
        except ValidationError as exc:
            logger.error("%s %s returned a malformed status: %s", self.label, job_id, exc)
            return self._fail(ErrorKind.UNEXPECTED_ERROR, status=None)

        state = JOB_STATES.get(job.message) if job.message else None
        if job.error:
            logger.info("%s %s reported error: %s", self.label, job_id, job.error)
            return self._fail(self.catalog.classify(error=job.error), status=state)

        self.progress = job.job_progress
        self.message = self.descriptions.get(state) if state else None
        self.status = state
        self.error = None
        self.error_status = None
        return Success(state)

    def wait_for_completion(
        self,
        job_id: str | int,
        interval: float | None = None,
        timeout: float | None = None,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ) -> OperationResult:
        """Poll until the job completes, fails, stalls or a poll errors.

        A paused, stuck or unknown job is returned as soon as it is seen;
        its ``message`` asks the user to contact the administrators.

        Args:
            job_id: Job to poll
            interval: Seconds between polls (defaults to settings)
            timeout: Give up after this many seconds (defaults to settings)
            sleep: Sleep function, replaceable in tests
            clock: Monotonic clock, replaceable in tests

        Returns:
            The result of the last poll

        Raises:
            TimeoutError: If the job is still running after ``timeout``
        """
        settings = get_settings()
        interval = settings.job_poll_interval if interval is None else interval
        timeout = settings.job_poll_timeout if timeout is None else timeout
        deadline = clock() + timeout

        while True:
            result = self.fetch_job_status(job_id)
            if self.finished:
                return result
            if self.stalled:
                logger.warning("%s %s is %s; stopped polling", self.label, job_id, self.status.value)
                return result
            if clock() >= deadline:
                raise TimeoutError(f"{self.label} {job_id} still {self.status} after {timeout}s")
            sleep(interval)

    def _fail(self, kind: ErrorKind, status: JobState | None) -> Failure:
        self.progress = None
        self.message = None
        self.status = status
        self.error = self.catalog.render(kind)
        self.error_status = kind
        return Failure(error=self.error, kind=kind)
