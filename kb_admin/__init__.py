"""Admin client for the legal-compliance knowledge base."""

__version__ = "0.1.0"

from kb_admin.core import (
    ApiClient,
    ApiRequestError,
    ErrorKind,
    Failure,
    JobState,
    JobTracker,
    OperationResult,
    Settings,
    Success,
    UserMessage,
    get_settings,
    setup_logging,
)
from kb_admin.articles import ArticleExtractionTracker, ArticleManager
from kb_admin.aspects import AspectManager
from kb_admin.legal_basis import LegalBasisManager, SendLegalBasisTracker
from kb_admin.legal_verbs import LegalVerbManager
from kb_admin.req_identification import IdentificationJobTracker, ReqIdentificationManager
from kb_admin.requirement_types import RequirementTypeManager
from kb_admin.requirements import RequirementManager
from kb_admin.subjects import SubjectManager
from kb_admin.utils import Debouncer, InvalidKeyError, Page, insert_sorted, paginate

__all__ = [
    "ApiClient",
    "ApiRequestError",
    "ErrorKind",
    "Failure",
    "JobState",
    "JobTracker",
    "OperationResult",
    "Settings",
    "Success",
    "UserMessage",
    "get_settings",
    "setup_logging",
    "ArticleExtractionTracker",
    "ArticleManager",
    "AspectManager",
    "LegalBasisManager",
    "SendLegalBasisTracker",
    "LegalVerbManager",
    "IdentificationJobTracker",
    "ReqIdentificationManager",
    "RequirementTypeManager",
    "RequirementManager",
    "SubjectManager",
    "Debouncer",
    "InvalidKeyError",
    "Page",
    "insert_sorted",
    "paginate",
]
