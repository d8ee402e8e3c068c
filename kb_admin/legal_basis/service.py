"""
Legal basis manager.

The table shows the newest legal bases first: fetched lists are reversed,
new records are prepended and updated records keep their position.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from kb_admin.core.client import ApiClient, ApiRequestError
from kb_admin.core.jobs import JobTracker, job_descriptions
from kb_admin.core.manager import ResourceManager, associated_names
from kb_admin.core.results import OperationResult, Success

from .api import LegalBasisApi
from .errors import LEGAL_BASIS_ERRORS, SEND_LEGAL_BASIS_ERRORS
from .schemas import LegalBasis, SavedLegalBasis

# Filter field -> LegalBasisApi method. Multi-parameter filters take a
# mapping of keyword arguments as their value.
SEARCHES: dict[str, str] = {
    "name": "find_by_name",
    "abbreviation": "find_by_abbreviation",
    "classification": "find_by_classification",
    "jurisdiction": "find_by_jurisdiction",
    "state": "find_by_state",
    "state_municipalities": "find_by_state_and_municipalities",
    "subject": "find_by_subject",
    "subject_aspects": "find_by_subject_and_aspects",
    "subject_filters": "find_by_subject_and_filters",
    "criteria": "find_by_criteria",
    "last_reform": "find_by_last_reform",
}


class LegalBasisManager(ResourceManager[LegalBasis]):
    """Legal basis list state, filters and CRUD operations."""

    catalog = LEGAL_BASIS_ERRORS

    def __init__(self, client: ApiClient, debounce_seconds: float | None = None):
        super().__init__(client, debounce_seconds)
        self.api = LegalBasisApi(client)
        self.classifications: list[str] = []
        self.jurisdictions: list[str] = []

    @property
    def legal_basis(self) -> list[LegalBasis]:
        return self.records

    def _show_newest_first(self, records: list[LegalBasis]) -> None:
        self._replace_records(list(reversed(records)))

    # =========================================================================
    # Reads
    # =========================================================================

    def fetch_legal_basis(self) -> OperationResult:
        return self._load(self.api.get_all, apply=self._show_newest_first)

    def fetch_legal_basis_by_id(self, legal_basis_id: int) -> OperationResult:
        return self._load(lambda: self.api.get(legal_basis_id), items=[legal_basis_id])

    def search(self, field: str, value: Any) -> OperationResult:
        """Replace the table with the legal bases matching one filter.

        Args:
            field: Key of ``SEARCHES``
            value: Filter value, or a mapping of keyword arguments for the
                multi-parameter filters. An empty value reloads everything.
        """
        if field not in SEARCHES:
            raise ValueError(f"Unsupported legal basis filter: {field}")
        if value is None or value == "" or (isinstance(value, (Mapping, list)) and not value):
            return self.fetch_legal_basis()

        method = getattr(self.api, SEARCHES[field])
        args, kwargs = ((), dict(value)) if isinstance(value, Mapping) else ((value,), {})
        return self._load(lambda: method(*args, **kwargs), apply=self._show_newest_first)

    def fetch_classifications(self) -> OperationResult:
        def apply(classifications: list[str]) -> None:
            self.classifications = list(classifications)

        return self._mutate(self.api.get_classifications, apply=apply)

    def fetch_jurisdictions(self) -> OperationResult:
        def apply(jurisdictions: list[str]) -> None:
            self.jurisdictions = list(jurisdictions)

        return self._mutate(self.api.get_jurisdictions, apply=apply)

    def check_pending_jobs(self, legal_basis_id: int) -> OperationResult:
        """Look up the article-extraction job of a legal basis."""
        return self._mutate(lambda: self.api.pending_jobs(legal_basis_id), items=[legal_basis_id])

    # =========================================================================
    # Writes
    # =========================================================================

    def add_legal_basis(self, **fields: Any) -> OperationResult:
        """Create a legal basis; see ``LegalBasisApi.create`` for the fields."""

        def apply(saved: SavedLegalBasis) -> None:
            self.records = [saved.legal_basis, *self.records]

        return self._mutate(lambda: self.api.create(**fields), apply=apply)

    def modify_legal_basis(self, legal_basis_id: int, **fields: Any) -> OperationResult:
        def apply(saved: SavedLegalBasis) -> None:
            self.records = [
                saved.legal_basis if record.id == legal_basis_id else record
                for record in self.records
            ]

        return self._mutate(
            lambda: self.api.update(legal_basis_id, **fields),
            apply=apply,
            items=[legal_basis_id],
        )

    def remove_legal_basis(self, legal_basis_id: int) -> OperationResult:
        return self._mutate(
            lambda: self.api.delete(legal_basis_id),
            apply=lambda _: self._drop([legal_basis_id]),
            items=[legal_basis_id],
        )

    def send_legal_basis(self, legal_basis_ids: list[int]) -> OperationResult:
        """Start sending legal bases out; ``Success(job_id)`` for the tracker."""
        return self._mutate(lambda: self.api.send(legal_basis_ids), items=legal_basis_ids)

    def remove_legal_basis_batch(self, legal_basis_ids: list[int]) -> OperationResult:
        try:
            self.api.delete_batch(legal_basis_ids)
        except ApiRequestError as exc:
            return self._failure(exc, associated_names(exc, "legalBases") or legal_basis_ids)
        self._drop(legal_basis_ids)
        return Success()

    def _drop(self, legal_basis_ids: list[int]) -> None:
        removed = set(legal_basis_ids)
        self.records = [record for record in self.records if record.id not in removed]


class SendLegalBasisTracker(JobTracker):
    """Progress of the job started by ``LegalBasisManager.send_legal_basis``."""

    status_endpoint = "/jobs/legalBasis/{job_id}"
    catalog = SEND_LEGAL_BASIS_ERRORS
    descriptions = job_descriptions("El envío de fundamentos legales", feminine=False)
    label = "send legal basis job"
