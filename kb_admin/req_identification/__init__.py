"""Requirement identification domain: records, endpoints, errors, manager and job tracking."""

from .schemas import CreatedReqIdentification, IdentificationStatus, ReqIdentification
from .api import ReqIdentificationApi
from .errors import REQ_IDENTIFICATION_ERRORS, REQ_IDENTIFY_JOB_ERRORS
from .service import IdentificationJobTracker, ReqIdentificationManager

__all__ = [
    "CreatedReqIdentification",
    "IdentificationStatus",
    "ReqIdentification",
    "ReqIdentificationApi",
    "REQ_IDENTIFICATION_ERRORS",
    "REQ_IDENTIFY_JOB_ERRORS",
    "IdentificationJobTracker",
    "ReqIdentificationManager",
]
