"""
Shared state handling for the domain managers.

A manager keeps the records currently on screen for one domain, a
``loading`` flag and the last list-level ``error``, and wraps every API
call so callers get an ``OperationResult`` instead of an exception.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Generic, Sequence, TypeVar

from pydantic import ValidationError

from .client import ApiClient, ApiRequestError
from .config import get_settings
from .errors import ErrorCatalog, ErrorKind, UserMessage
from .results import Failure, OperationResult, Success
from ..utils.debounce import Debouncer
from ..utils.pagination import Page, paginate

logger = logging.getLogger(__name__)

T = TypeVar("T")

# A success answer whose records or envelope keys are not what the API documents.
MALFORMED_RESPONSE = (ValidationError, KeyError)


class ResourceManager(Generic[T]):
    """Base class for the per-domain managers."""

    catalog: ErrorCatalog

    def __init__(self, client: ApiClient, debounce_seconds: float | None = None):
        settings = get_settings()
        self.client = client
        self.records: list[T] = []
        self.loading = False
        self.error: UserMessage | None = None
        self.rows_per_page = settings.rows_per_page
        if debounce_seconds is None:
            debounce_seconds = settings.search_debounce_seconds
        self._debouncer = Debouncer(debounce_seconds)

    # =========================================================================
    # Result plumbing
    # =========================================================================

    def _failure(self, exc: ApiRequestError, items: Sequence[Any] | None = None) -> Failure:
        kind = self.catalog.classify(
            code=exc.status_code,
            error=exc.server_message,
            http_error=exc.client_message,
            items=items,
        )
        logger.info("%s request failed as %s (status=%s)", self.catalog.name, kind.value, exc.status_code)
        return Failure(error=self.catalog.render(kind, items), kind=kind)

    def _malformed(self, exc: Exception) -> Failure:
        logger.error("%s response did not match the expected records: %s", self.catalog.name, exc)
        kind = ErrorKind.UNEXPECTED_ERROR
        return Failure(error=self.catalog.render(kind), kind=kind)

    def _load(
        self,
        call: Callable[[], Any],
        apply: Callable[[Any], None] | None = None,
        items: Sequence[Any] | None = None,
    ) -> OperationResult:
        """Run a read that drives ``loading`` and ``error``."""
        self.loading = True
        self.error = None
        try:
            value = call()
        except ApiRequestError as exc:
            failure = self._failure(exc, items)
        except MALFORMED_RESPONSE as exc:
            failure = self._malformed(exc)
        else:
            if apply is not None:
                apply(value)
            return Success(value)
        finally:
            self.loading = False
        self.error = failure.error
        return failure

    def _mutate(
        self,
        call: Callable[[], Any],
        apply: Callable[[Any], None] | None = None,
        items: Sequence[Any] | None = None,
    ) -> OperationResult:
        """Run a write; failures are returned, list-level state is untouched."""
        try:
            value = call()
        except ApiRequestError as exc:
            return self._failure(exc, items)
        except MALFORMED_RESPONSE as exc:
            return self._malformed(exc)
        if apply is not None:
            apply(value)
        return Success(value)

    def _replace_records(self, records: list[T]) -> None:
        self.records = list(records)

    # =========================================================================
    # Search and paging
    # =========================================================================

    def search(self, field: str, value: Any) -> OperationResult:
        """Filter the records on the server by ``field``."""
        raise NotImplementedError

    def schedule_search(self, field: str, value: Any) -> None:
        """Debounced ``search``: only the last call within the delay runs."""
        self._debouncer.call(self.search, field, value)

    def flush_search(self) -> OperationResult | None:
        """Run a scheduled search immediately."""
        return self._debouncer.flush()

    def cancel_search(self) -> None:
        self._debouncer.cancel()

    def page(self, number: int = 1, rows_per_page: int | None = None) -> Page[T]:
        """Current records sliced for a table page."""
        if rows_per_page is None:
            rows_per_page = self.rows_per_page
        return paginate(self.records, number, rows_per_page)


def associated_names(exc: ApiRequestError, field: str) -> list[str]:
    """Names of the records the server reports in ``errors[field]``."""
    entries = exc.details.get(field) or []
    names = []
    for entry in entries:
        if isinstance(entry, dict):
            name = entry.get("name")
            if name is not None:
                names.append(str(name))
        elif entry is not None:
            names.append(str(entry))
    return names
