"""Core client, configuration, error handling and job tracking."""

from .config import Settings, get_settings
from .client import ApiClient, ApiRequestError
from .errors import ErrorCatalog, ErrorKind, MessageTemplate, UserMessage
from .results import Failure, OperationResult, Success
from .jobs import JobState, JobStatus, JobTracker, job_descriptions
from .logging_config import setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "ApiClient",
    "ApiRequestError",
    "ErrorCatalog",
    "ErrorKind",
    "MessageTemplate",
    "UserMessage",
    "Failure",
    "OperationResult",
    "Success",
    "JobState",
    "JobStatus",
    "JobTracker",
    "job_descriptions",
    "setup_logging",
]
