"""Legal verb endpoints."""

from __future__ import annotations

from kb_admin.core.client import ApiClient

from .schemas import LegalVerb


class LegalVerbsApi:
    """Client for the legal verb endpoints."""

    def __init__(self, client: ApiClient):
        self.client = client

    def _records(self, endpoint: str, params: dict | None = None) -> list[LegalVerb]:
        data = self.client.get(endpoint, params=params)
        return [LegalVerb.model_validate(item) for item in data["legalVerbs"]]

    def get_all(self) -> list[LegalVerb]:
        return self._records("/legal-verbs")

    def get(self, legal_verb_id: int) -> LegalVerb:
        data = self.client.get(f"/legal-verbs/{legal_verb_id}")
        return LegalVerb.model_validate(data["legalVerb"])

    def find_by_name(self, name: str) -> list[LegalVerb]:
        return self._records("/legal-verbs/search/name", {"name": name})

    def find_by_description(self, description: str) -> list[LegalVerb]:
        return self._records("/legal-verbs/search/description", {"description": description})

    def find_by_translation(self, translation: str) -> list[LegalVerb]:
        return self._records("/legal-verbs/search/translation", {"translation": translation})

    def create(self, name: str, description: str, translation: str) -> LegalVerb:
        data = self.client.post(
            "/legal-verbs",
            json={"name": name, "description": description, "translation": translation},
        )
        return LegalVerb.model_validate(data["legalVerb"])

    def update(
        self,
        legal_verb_id: int,
        name: str | None = None,
        description: str | None = None,
        translation: str | None = None,
    ) -> LegalVerb:
        data = self.client.patch(
            f"/legal-verbs/{legal_verb_id}",
            json={"name": name, "description": description, "translation": translation},
        )
        return LegalVerb.model_validate(data["legalVerb"])

    def delete(self, legal_verb_id: int) -> None:
        self.client.delete(f"/legal-verbs/{legal_verb_id}")

    def delete_batch(self, legal_verb_ids: list[int]) -> None:
        self.client.delete("/legal-verbs/delete/batch", json={"legalVerbsIds": legal_verb_ids})
