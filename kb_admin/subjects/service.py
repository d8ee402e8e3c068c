"""
Subject manager.

Keeps the subject table ordered by ``order_index`` and maps every failure
through ``SUBJECT_ERRORS``.
"""

from __future__ import annotations

from typing import Any

from kb_admin.core.client import ApiClient, ApiRequestError
from kb_admin.core.manager import ResourceManager, associated_names
from kb_admin.core.results import OperationResult, Success
from kb_admin.utils.sorting import insert_sorted

from .api import SubjectsApi
from .errors import SUBJECT_ERRORS
from .schemas import Subject


def display_order(subject: Subject) -> int:
    """Sort key for the subject table; unordered subjects show as 0."""
    return subject.order_index or 0


class SubjectManager(ResourceManager[Subject]):
    """Subject list state and CRUD operations."""

    catalog = SUBJECT_ERRORS

    def __init__(self, client: ApiClient, debounce_seconds: float | None = None):
        super().__init__(client, debounce_seconds)
        self.api = SubjectsApi(client)

    @property
    def subjects(self) -> list[Subject]:
        return self.records

    def fetch_subjects(self) -> OperationResult:
        return self._load(
            self.api.get_all,
            apply=lambda subjects: self._replace_records(sorted(subjects, key=display_order)),
        )

    def fetch_subject_by_id(self, subject_id: int) -> OperationResult:
        return self._load(lambda: self.api.get(subject_id), items=[subject_id])

    def search_by_name(self, subject_name: str) -> OperationResult:
        """Replace the table with subjects matching ``subject_name``.

        An empty name reloads the full list.
        """
        if not subject_name:
            return self.fetch_subjects()
        return self._load(
            lambda: self.api.find_by_name(subject_name),
            apply=lambda subjects: self._replace_records(sorted(subjects, key=display_order)),
        )

    def search(self, field: str, value: Any) -> OperationResult:
        if field != "name":
            raise ValueError(f"Unsupported subject filter: {field}")
        return self.search_by_name(value)

    def add_subject(
        self,
        subject_name: str,
        order_index: int | None = None,
        abbreviation: str | None = None,
    ) -> OperationResult:
        return self._mutate(
            lambda: self.api.create(subject_name, order_index, abbreviation),
            apply=self._insert,
        )

    def modify_subject(
        self,
        subject_id: int,
        subject_name: str | None = None,
        order_index: int | None = None,
        abbreviation: str | None = None,
    ) -> OperationResult:
        def apply(subject: Subject) -> None:
            self.records = [s for s in self.records if s.id != subject_id]
            self._insert(subject)

        return self._mutate(
            lambda: self.api.update(subject_id, subject_name, order_index, abbreviation),
            apply=apply,
            items=[subject_id],
        )

    def remove_subject(self, subject_id: int) -> OperationResult:
        return self._mutate(
            lambda: self.api.delete(subject_id),
            apply=lambda _: self._drop([subject_id]),
            items=[subject_id],
        )

    def remove_subjects(self, subject_ids: list[int]) -> OperationResult:
        try:
            self.api.delete_batch(subject_ids)
        except ApiRequestError as exc:
            return self._failure(exc, associated_names(exc, "associatedSubjects") or subject_ids)
        self._drop(subject_ids)
        return Success()

    def _insert(self, subject: Subject) -> None:
        self.records = insert_sorted(self.records, subject, display_order)

    def _drop(self, subject_ids: list[int]) -> None:
        removed = set(subject_ids)
        self.records = [s for s in self.records if s.id not in removed]
