"""Legal basis domain: schemas, endpoints, error messages, manager and send jobs."""

from .schemas import LegalBasis, PendingJobs, SavedLegalBasis
from .api import LegalBasisApi
from .errors import LEGAL_BASIS_ERRORS, SEND_LEGAL_BASIS_ERRORS
from .service import SEARCHES, LegalBasisManager, SendLegalBasisTracker

__all__ = [
    "LegalBasis",
    "PendingJobs",
    "SavedLegalBasis",
    "LegalBasisApi",
    "LEGAL_BASIS_ERRORS",
    "SEND_LEGAL_BASIS_ERRORS",
    "SEARCHES",
    "LegalBasisManager",
    "SendLegalBasisTracker",
]
