"""
Legal verb manager.

New legal verbs are shown first; updated ones keep their position.
"""

from __future__ import annotations

from typing import Any

from kb_admin.core.client import ApiClient, ApiRequestError
from kb_admin.core.manager import ResourceManager, associated_names
from kb_admin.core.results import OperationResult, Success

from .api import LegalVerbsApi
from .errors import LEGAL_VERB_ERRORS
from .schemas import LegalVerb

# Filter field -> LegalVerbsApi method.
SEARCHES: dict[str, str] = {
    "name": "find_by_name",
    "description": "find_by_description",
    "translation": "find_by_translation",
}


class LegalVerbManager(ResourceManager[LegalVerb]):
    """Legal verb list state, filters and CRUD operations."""

    catalog = LEGAL_VERB_ERRORS

    def __init__(self, client: ApiClient, debounce_seconds: float | None = None):
        super().__init__(client, debounce_seconds)
        self.api = LegalVerbsApi(client)

    @property
    def legal_verbs(self) -> list[LegalVerb]:
        return self.records

    def fetch_legal_verbs(self) -> OperationResult:
        return self._load(self.api.get_all, apply=self._replace_records)

    def fetch_legal_verb_by_id(self, legal_verb_id: int) -> OperationResult:
        return self._load(lambda: self.api.get(legal_verb_id), items=[legal_verb_id])

    def search(self, field: str, value: Any) -> OperationResult:
        """Filter by name, description or translation; empty reloads all."""
        if field not in SEARCHES:
            raise ValueError(f"Unsupported legal verb filter: {field}")
        if not value:
            return self.fetch_legal_verbs()
        method = getattr(self.api, SEARCHES[field])
        return self._load(lambda: method(value), apply=self._replace_records)

    def add_legal_verb(self, name: str, description: str, translation: str) -> OperationResult:
        return self._mutate(
            lambda: self.api.create(name, description, translation),
            apply=lambda verb: self._replace_records([verb, *self.records]),
        )

    def modify_legal_verb(
        self,
        legal_verb_id: int,
        name: str | None = None,
        description: str | None = None,
        translation: str | None = None,
    ) -> OperationResult:
        def apply(verb: LegalVerb) -> None:
            self.records = [verb if v.id == legal_verb_id else v for v in self.records]

        return self._mutate(
            lambda: self.api.update(legal_verb_id, name, description, translation),
            apply=apply,
            items=[legal_verb_id],
        )

    def remove_legal_verb(self, legal_verb_id: int) -> OperationResult:
        return self._mutate(
            lambda: self.api.delete(legal_verb_id),
            apply=lambda _: self._drop([legal_verb_id]),
            items=[legal_verb_id],
        )

    def remove_legal_verbs(self, legal_verb_ids: list[int]) -> OperationResult:
        try:
            self.api.delete_batch(legal_verb_ids)
        except ApiRequestError as exc:
            return self._failure(exc, associated_names(exc, "legalVerbs") or legal_verb_ids)
        self._drop(legal_verb_ids)
        return Success()

    def _drop(self, legal_verb_ids: list[int]) -> None:
        removed = set(legal_verb_ids)
        self.records = [v for v in self.records if v.id not in removed]
