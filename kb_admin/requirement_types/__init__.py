"""Requirement type domain: schemas, endpoints, error messages and manager."""

from .schemas import RequirementType
from .api import RequirementTypesApi
from .errors import REQUIREMENT_TYPE_ERRORS
from .service import SEARCHES, RequirementTypeManager

__all__ = [
    "RequirementType",
    "RequirementTypesApi",
    "REQUIREMENT_TYPE_ERRORS",
    "SEARCHES",
    "RequirementTypeManager",
]
