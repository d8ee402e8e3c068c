"""Requirement manager. New requirements are shown first."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from kb_admin.core.client import ApiClient, ApiRequestError
from kb_admin.core.manager import ResourceManager, associated_names
from kb_admin.core.results import OperationResult, Success

from .api import TEXT_SEARCHES, RequirementsApi
from .errors import REQUIREMENT_ERRORS
from .schemas import Requirement

# Filters that take a mapping of keyword arguments instead of a single value.
COMPOSITE_SEARCHES: dict[str, str] = {
    "state_municipalities": "find_by_state_and_municipalities",
    "subject_aspects": "find_by_subject_and_aspects",
}


class RequirementManager(ResourceManager[Requirement]):
    """Requirement list state, filters and CRUD operations."""

    catalog = REQUIREMENT_ERRORS

    def __init__(self, client: ApiClient, debounce_seconds: float | None = None):
        super().__init__(client, debounce_seconds)
        self.api = RequirementsApi(client)

    @property
    def requirements(self) -> list[Requirement]:
        return self.records

    def _show_newest_first(self, records: list[Requirement]) -> None:
        self._replace_records(list(reversed(records)))

    def fetch_requirements(self) -> OperationResult:
        return self._load(self.api.get_all, apply=self._show_newest_first)

    def fetch_requirement_by_id(self, requirement_id: int) -> OperationResult:
        return self._load(lambda: self.api.get(requirement_id), items=[requirement_id])

    def search(self, field: str, value: Any) -> OperationResult:
        """Replace the table with requirements matching one filter.

        ``field`` is a key of ``TEXT_SEARCHES``, ``"subject"`` (subject id),
        or a key of ``COMPOSITE_SEARCHES`` with a mapping value. An empty
        value reloads everything.
        """
        if field not in TEXT_SEARCHES and field not in COMPOSITE_SEARCHES and field != "subject":
            raise ValueError(f"Unsupported requirement filter: {field}")
        if value is None or value == "" or (isinstance(value, (Mapping, list)) and not value):
            return self.fetch_requirements()

        def call() -> list[Requirement]:
            if field == "subject":
                return self.api.find_by_subject(value)
            if field in COMPOSITE_SEARCHES:
                return getattr(self.api, COMPOSITE_SEARCHES[field])(**value)
            return self.api.search(field, value)

        return self._load(call, apply=self._show_newest_first)

    def add_requirement(self, **fields: Any) -> OperationResult:
        """Create a requirement; see ``RequirementsApi.create`` for the fields."""

        def apply(requirement: Requirement) -> None:
            self.records = [requirement, *self.records]

        return self._mutate(lambda: self.api.create(**fields), apply=apply)

    def modify_requirement(self, requirement_id: int, **fields: Any) -> OperationResult:
        def apply(updated: Requirement) -> None:
            self.records = [updated if r.id == requirement_id else r for r in self.records]

        return self._mutate(
            lambda: self.api.update(requirement_id, **fields),
            apply=apply,
            items=[requirement_id],
        )

    def remove_requirement(self, requirement_id: int) -> OperationResult:
        return self._mutate(
            lambda: self.api.delete(requirement_id),
            apply=lambda _: self._drop([requirement_id]),
            items=[requirement_id],
        )

    def remove_requirements(self, requirement_ids: list[int]) -> OperationResult:
        try:
            self.api.delete_batch(requirement_ids)
        except ApiRequestError as exc:
            return self._failure(exc, associated_names(exc, "requirements") or requirement_ids)
        self._drop(requirement_ids)
        return Success()

    def _drop(self, requirement_ids: list[int]) -> None:
        removed = set(requirement_ids)
        self.records = [r for r in self.records if r.id not in removed]
