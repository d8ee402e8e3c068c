"""Legal verb domain: schemas, endpoints, error messages and manager."""

from .schemas import LegalVerb
from .api import LegalVerbsApi
from .errors import LEGAL_VERB_ERRORS
from .service import SEARCHES, LegalVerbManager

__all__ = [
    "LegalVerb",
    "LegalVerbsApi",
    "LEGAL_VERB_ERRORS",
    "SEARCHES",
    "LegalVerbManager",
]
