"""Small helpers shared by the managers."""

from .sorting import InvalidKeyError, insert_sorted, key_value
from .pagination import Page, paginate, total_pages
from .debounce import Debouncer

__all__ = [
    "InvalidKeyError",
    "insert_sorted",
    "key_value",
    "Page",
    "paginate",
    "total_pages",
    "Debouncer",
]
