"""Requirement domain: schemas, endpoints, error messages and manager."""

from .schemas import Requirement
from .api import TEXT_SEARCHES, RequirementsApi
from .errors import REQUIREMENT_ERRORS
from .service import COMPOSITE_SEARCHES, RequirementManager

__all__ = [
    "Requirement",
    "RequirementsApi",
    "TEXT_SEARCHES",
    "REQUIREMENT_ERRORS",
    "COMPOSITE_SEARCHES",
    "RequirementManager",
]
