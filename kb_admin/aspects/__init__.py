"""Aspect domain: schemas, endpoints, error messages and manager."""

from .schemas import Aspect
from .api import AspectsApi
from .errors import ASPECT_ERRORS
from .service import AspectManager

__all__ = [
    "Aspect",
    "AspectsApi",
    "ASPECT_ERRORS",
    "AspectManager",
]
