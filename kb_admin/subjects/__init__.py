"""Subject domain: schemas, endpoints, error messages and manager."""

from .schemas import Subject
from .api import SubjectsApi
from .errors import SUBJECT_ERRORS
from .service import SubjectManager

__all__ = [
    "Subject",
    "SubjectsApi",
    "SUBJECT_ERRORS",
    "SubjectManager",
]
