"""Aspect manager, scoped to the subject whose aspects are on screen."""

from __future__ import annotations

from typing import Any

from kb_admin.core.client import ApiClient, ApiRequestError
from kb_admin.core.manager import ResourceManager, associated_names
from kb_admin.core.results import OperationResult, Success
from kb_admin.utils.sorting import insert_sorted

from .api import AspectsApi
from .errors import ASPECT_ERRORS
from .schemas import Aspect


def display_order(aspect: Aspect) -> int:
    return aspect.order_index or 0


class AspectManager(ResourceManager[Aspect]):
    """Aspect list state and CRUD operations for one subject at a time."""

    catalog = ASPECT_ERRORS

    def __init__(self, client: ApiClient, debounce_seconds: float | None = None):
        super().__init__(client, debounce_seconds)
        self.api = AspectsApi(client)
        self.subject_id: int | None = None

    @property
    def aspects(self) -> list[Aspect]:
        return self.records

    def clear_aspects(self) -> None:
        """Forget the current subject's aspects and any list error."""
        self.records = []
        self.error = None

    def fetch_aspects(self, subject_id: int) -> OperationResult:
        self.subject_id = subject_id
        return self._load(
            lambda: self.api.get_by_subject(subject_id),
            apply=lambda aspects: self._replace_records(sorted(aspects, key=display_order)),
            items=[subject_id],
        )

    def fetch_aspect_by_id(self, aspect_id: int) -> OperationResult:
        return self._load(lambda: self.api.get(aspect_id), items=[aspect_id])

    def search_by_name(self, aspect_name: str, subject_id: int | None = None) -> OperationResult:
        """Filter the current subject's aspects by name; empty reloads all."""
        subject_id = self._subject(subject_id)
        if not aspect_name:
            return self.fetch_aspects(subject_id)
        return self._load(
            lambda: self.api.find_by_name(subject_id, aspect_name),
            apply=lambda aspects: self._replace_records(sorted(aspects, key=display_order)),
            items=[subject_id],
        )

    def search(self, field: str, value: Any) -> OperationResult:
        if field != "name":
            raise ValueError(f"Unsupported aspect filter: {field}")
        return self.search_by_name(value)

    def add_aspect(
        self,
        aspect_name: str,
        subject_id: int | None = None,
        order_index: int | None = None,
        abbreviation: str | None = None,
    ) -> OperationResult:
        subject_id = self._subject(subject_id)
        return self._mutate(
            lambda: self.api.create(subject_id, aspect_name, order_index, abbreviation),
            apply=self._insert,
            items=[subject_id],
        )

    def modify_aspect(
        self,
        aspect_id: int,
        aspect_name: str | None = None,
        order_index: int | None = None,
        abbreviation: str | None = None,
    ) -> OperationResult:
        def apply(aspect: Aspect) -> None:
            self.records = [a for a in self.records if a.id != aspect_id]
            self._insert(aspect)

        return self._mutate(
            lambda: self.api.update(aspect_id, aspect_name, order_index, abbreviation),
            apply=apply,
            items=[aspect_id],
        )

    def remove_aspect(self, aspect_id: int) -> OperationResult:
        return self._mutate(
            lambda: self.api.delete(aspect_id),
            apply=lambda _: self._drop([aspect_id]),
            items=[aspect_id],
        )

    def remove_aspects(self, aspect_ids: list[int]) -> OperationResult:
        try:
            self.api.delete_batch(aspect_ids)
        except ApiRequestError as exc:
            return self._failure(exc, associated_names(exc, "associatedAspects") or aspect_ids)
        self._drop(aspect_ids)
        return Success()

    def _subject(self, subject_id: int | None) -> int:
        subject_id = subject_id if subject_id is not None else self.subject_id
        if subject_id is None:
            raise ValueError("No subject selected; call fetch_aspects first or pass subject_id")
        return subject_id

    def _insert(self, aspect: Aspect) -> None:
        self.records = insert_sorted(self.records, aspect, display_order)

    def _drop(self, aspect_ids: list[int]) -> None:
        removed = set(aspect_ids)
        self.records = [a for a in self.records if a.id not in removed]
