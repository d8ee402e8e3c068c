"""Requirement type manager; new types are shown first."""

from __future__ import annotations

from typing import Any

from kb_admin.core.client import ApiClient, ApiRequestError
from kb_admin.core.manager import ResourceManager
from kb_admin.core.results import OperationResult, Success

from .api import RequirementTypesApi
from .errors import REQUIREMENT_TYPE_ERRORS
from .schemas import RequirementType

SEARCHES: dict[str, str] = {
    "name": "find_by_name",
    "description": "find_by_description",
    "classification": "find_by_classification",
}


class RequirementTypeManager(ResourceManager[RequirementType]):
    """Requirement type list state, filters and CRUD operations."""

    catalog = REQUIREMENT_TYPE_ERRORS

    def __init__(self, client: ApiClient, debounce_seconds: float | None = None):
        super().__init__(client, debounce_seconds)
        self.api = RequirementTypesApi(client)

    @property
    def requirement_types(self) -> list[RequirementType]:
        return self.records

    def fetch_requirement_types(self) -> OperationResult:
        return self._load(self.api.get_all, apply=self._replace_records)

    def fetch_requirement_type_by_id(self, requirement_type_id: int) -> OperationResult:
        return self._load(lambda: self.api.get(requirement_type_id), items=[requirement_type_id])

    def search(self, field: str, value: Any) -> OperationResult:
        if field not in SEARCHES:
            raise ValueError(f"Unsupported requirement type filter: {field}")
        if not value:
            return self.fetch_requirement_types()
        method = getattr(self.api, SEARCHES[field])
        return self._load(lambda: method(value), apply=self._replace_records)

    def add_requirement_type(self, name: str, description: str, classification: str) -> OperationResult:
        return self._mutate(
            lambda: self.api.create(name, description, classification),
            apply=lambda created: self._replace_records([created, *self.records]),
        )

    def modify_requirement_type(
        self,
        requirement_type_id: int,
        name: str | None = None,
        description: str | None = None,
        classification: str | None = None,
    ) -> OperationResult:
        def apply(updated: RequirementType) -> None:
            self.records = [updated if t.id == requirement_type_id else t for t in self.records]

        return self._mutate(
            lambda: self.api.update(requirement_type_id, name, description, classification),
            apply=apply,
            items=[requirement_type_id],
        )

    def remove_requirement_type(self, requirement_type_id: int) -> OperationResult:
        return self._mutate(
            lambda: self.api.delete(requirement_type_id),
            apply=lambda _: self._drop([requirement_type_id]),
            items=[requirement_type_id],
        )

    def remove_requirement_types(self, requirement_type_ids: list[int]) -> OperationResult:
        try:
            self.api.delete_batch(requirement_type_ids)
        except ApiRequestError as exc:
            return self._failure(exc, requirement_type_ids)
        self._drop(requirement_type_ids)
        return Success()

    def _drop(self, requirement_type_ids: list[int]) -> None:
        removed = set(requirement_type_ids)
        self.records = [t for t in self.records if t.id not in removed]
