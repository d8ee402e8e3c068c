"""
Requirement identification manager and job tracker.

Creating an identification starts a background job on the server;
``IdentificationJobTracker`` follows it.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from kb_admin.core.client import ApiClient
from kb_admin.core.jobs import JobTracker, job_descriptions
from kb_admin.core.manager import ResourceManager
from kb_admin.core.results import OperationResult

from .api import TEXT_SEARCHES, ReqIdentificationApi
from .errors import REQ_IDENTIFICATION_ERRORS, REQ_IDENTIFY_JOB_ERRORS
from .schemas import ReqIdentification

# Filters that take a mapping of keyword arguments instead of a single value.
COMPOSITE_SEARCHES: dict[str, str] = {
    "created_at": "find_by_created_at",
    "subject_aspects": "find_by_subject_and_aspects",
    "state_municipalities": "find_by_state_and_municipalities",
}

# Filters whose single value is a path id.
ID_SEARCHES: dict[str, str] = {
    "user": "find_by_user",
    "subject": "find_by_subject",
}


class ReqIdentificationManager(ResourceManager[ReqIdentification]):
    """Requirement identification list state and CRUD operations."""

    catalog = REQ_IDENTIFICATION_ERRORS

    def __init__(self, client: ApiClient, debounce_seconds: float | None = None):
        super().__init__(client, debounce_seconds)
        self.api = ReqIdentificationApi(client)

    @property
    def req_identifications(self) -> list[ReqIdentification]:
        return self.records

    def add_req_identification(
        self,
        req_identification_name: str,
        legal_basis_ids: list[int],
        req_identification_description: str | None = None,
        intelligence_level: str | None = None,
    ) -> OperationResult:
        """Start an identification. The value holds its id and job id."""
        return self._mutate(
            lambda: self.api.create(
                req_identification_name,
                legal_basis_ids,
                req_identification_description,
                intelligence_level,
            )
        )

    def fetch_req_identifications(self) -> OperationResult:
        return self._load(self.api.get_all, apply=self._replace_records)

    def fetch_req_identification_by_id(self, req_identification_id: int) -> OperationResult:
        return self._load(lambda: self.api.get(req_identification_id), items=[req_identification_id])

    def search(self, field: str, value: Any) -> OperationResult:
        """Replace the list with the identifications matching one filter.

        ``field`` is a key of ``TEXT_SEARCHES``, ``ID_SEARCHES`` or
        ``COMPOSITE_SEARCHES`` (mapping value). An empty value reloads all.
        """
        if field not in TEXT_SEARCHES and field not in ID_SEARCHES and field not in COMPOSITE_SEARCHES:
            raise ValueError(f"Unsupported identification filter: {field}")
        if value is None or value == "" or (isinstance(value, (Mapping, list)) and not value):
            return self.fetch_req_identifications()

        def call() -> list[ReqIdentification]:
            if field in ID_SEARCHES:
                return getattr(self.api, ID_SEARCHES[field])(value)
            if field in COMPOSITE_SEARCHES:
                return getattr(self.api, COMPOSITE_SEARCHES[field])(**value)
            return self.api.search(field, value)

        return self._load(call, apply=self._replace_records)

    def modify_req_identification(
        self,
        req_identification_id: int,
        req_identification_name: str | None = None,
        req_identification_description: str | None = None,
        new_user_id: int | None = None,
    ) -> OperationResult:
        def apply(updated: ReqIdentification) -> None:
            self.records = [updated if r.id == req_identification_id else r for r in self.records]

        return self._mutate(
            lambda: self.api.update(
                req_identification_id,
                req_identification_name,
                req_identification_description,
                new_user_id,
            ),
            apply=apply,
            items=[req_identification_id],
        )

    def remove_req_identification(self, req_identification_id: int) -> OperationResult:
        return self._mutate(
            lambda: self.api.delete(req_identification_id),
            apply=lambda _: self._drop([req_identification_id]),
            items=[req_identification_id],
        )

    def remove_req_identifications(self, req_identification_ids: list[int]) -> OperationResult:
        return self._mutate(
            lambda: self.api.delete_batch(req_identification_ids),
            apply=lambda _: self._drop(req_identification_ids),
            items=req_identification_ids,
        )

    def _drop(self, req_identification_ids: list[int]) -> None:
        removed = set(req_identification_ids)
        self.records = [r for r in self.records if r.id not in removed]


class IdentificationJobTracker(JobTracker):
    """Progress of one requirement-identification job."""

    status_endpoint = "/jobs/req-identification/{job_id}"
    catalog = REQ_IDENTIFY_JOB_ERRORS
    descriptions = job_descriptions("La identificación de requerimientos")
    label = "identification job"
