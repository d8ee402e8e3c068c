"""Requirement endpoints."""

from __future__ import annotations

from typing import Any

from kb_admin.core.client import ApiClient, json_ids

from .schemas import Requirement

# Single-value searches: field -> (endpoint, query parameter)
TEXT_SEARCHES: dict[str, tuple[str, str]] = {
    "number": ("/requirements/search/number", "number"),
    "name": ("/requirements/search/name", "name"),
    "mandatory_description": ("/requirements/search/mandatory-description", "description"),
    "complementary_description": ("/requirements/search/complementary-description", "description"),
    "mandatory_sentences": ("/requirements/search/mandatory-sentences", "sentence"),
    "complementary_sentences": ("/requirements/search/complementary-sentences", "sentence"),
    "mandatory_keywords": ("/requirements/search/mandatory-keywords", "keyword"),
    "complementary_keywords": ("/requirements/search/complementary-keywords", "keyword"),
    "condition": ("/requirements/search/condition", "condition"),
    "evidence": ("/requirements/search/evidence", "evidence"),
    "periodicity": ("/requirements/search/periodicity", "periodicity"),
    "requirement_type": ("/requirements/search/type", "requirementType"),
    "jurisdiction": ("/requirements/search/jurisdiction", "jurisdiction"),
    "state": ("/requirements/search/state", "state"),
    "acceptance_criteria": ("/requirements/search/acceptance-criteria", "acceptanceCriteria"),
}

# Body keys sent on update when the matching argument is set.
UPDATE_FIELDS: dict[str, str] = {
    "subject_id": "subjectId",
    "requirement_number": "requirementNumber",
    "requirement_name": "requirementName",
    "mandatory_description": "mandatoryDescription",
    "complementary_description": "complementaryDescription",
    "mandatory_sentences": "mandatorySentences",
    "complementary_sentences": "complementarySentences",
    "mandatory_keywords": "mandatoryKeywords",
    "complementary_keywords": "complementaryKeywords",
    "condition": "condition",
    "evidence": "evidence",
    "specify_evidence": "specifyEvidence",
    "periodicity": "periodicity",
    "specify_periodicity": "specifyPeriodicity",
    "requirement_type": "requirementType",
    "jurisdiction": "jurisdiction",
    "state": "state",
    "municipality": "municipality",
    "acceptance_criteria": "acceptanceCriteria",
}


class RequirementsApi:
    """Client for the requirement endpoints."""

    def __init__(self, client: ApiClient):
        self.client = client

    def _records(self, endpoint: str, params: dict | None = None) -> list[Requirement]:
        data = self.client.get(endpoint, params=params)
        return [Requirement.model_validate(item) for item in data["requirements"]]

    def get_all(self) -> list[Requirement]:
        return self._records("/requirements")

    def get(self, requirement_id: int) -> Requirement:
        data = self.client.get(f"/requirement/{requirement_id}")
        return Requirement.model_validate(data["requirement"])

    def search(self, field: str, value: str) -> list[Requirement]:
        """Run one of the ``TEXT_SEARCHES`` (partial matches on the server)."""
        try:
            endpoint, param = TEXT_SEARCHES[field]
        except KeyError:
            raise ValueError(f"Unsupported requirement filter: {field}") from None
        return self._records(endpoint, {param: value})

    def find_by_state_and_municipalities(
        self, state: str, municipalities: list[str] | None = None
    ) -> list[Requirement]:
        return self._records(
            "/requirements/search/state/municipalities",
            {"state": state, "municipalities": municipalities or []},
        )

    def find_by_subject(self, subject_id: int) -> list[Requirement]:
        return self._records(f"/requirements/subject/{subject_id}")

    def find_by_subject_and_aspects(
        self, subject_id: int, aspect_ids: list[int] | None = None
    ) -> list[Requirement]:
        return self._records(
            f"/requirements/subject/{subject_id}/aspects",
            {"aspectIds": aspect_ids or []},
        )

    def create(
        self,
        subject_id: int,
        aspects_ids: list[int],
        requirement_number: str,
        requirement_name: str,
        mandatory_description: str,
        condition: str,
        evidence: str,
        periodicity: str,
        requirement_type: str,
        jurisdiction: str,
        complementary_description: str | None = None,
        mandatory_sentences: str | None = None,
        complementary_sentences: str | None = None,
        mandatory_keywords: str | None = None,
        complementary_keywords: str | None = None,
        specify_evidence: str | None = None,
        specify_periodicity: str | None = None,
        state: str | None = None,
        municipality: str | None = None,
        acceptance_criteria: str | None = None,
    ) -> Requirement:
        body = {
            "subjectId": subject_id,
            "aspectsIds": json_ids(aspects_ids),
            "requirementNumber": requirement_number,
            "requirementName": requirement_name,
            "mandatoryDescription": mandatory_description,
            "complementaryDescription": complementary_description,
            "mandatorySentences": mandatory_sentences,
            "complementarySentences": complementary_sentences,
            "mandatoryKeywords": mandatory_keywords,
            "complementaryKeywords": complementary_keywords,
            "condition": condition,
            "evidence": evidence,
            "periodicity": periodicity,
            "requirementType": requirement_type,
            "jurisdiction": jurisdiction,
            "state": state,
            "municipality": municipality,
        }
        # Optional extras the server only accepts when present
        extras = {
            "specifyEvidence": specify_evidence,
            "specifyPeriodicity": specify_periodicity,
            "acceptanceCriteria": acceptance_criteria,
        }
        body.update({key: value for key, value in extras.items() if value})
        data = self.client.post("/requirements", json=body)
        return Requirement.model_validate(data["requirement"])

    def update(self, requirement_id: int, aspects_ids: list[int] | None = None, **fields: Any) -> Requirement:
        """Send only the fields that are set.

        Args:
            requirement_id: Requirement to update
            aspects_ids: New aspect ids, JSON-encoded in the body
            **fields: Any key of ``UPDATE_FIELDS``
        """
        unknown = set(fields) - set(UPDATE_FIELDS)
        if unknown:
            raise TypeError(f"Unexpected requirement fields: {', '.join(sorted(unknown))}")
        body = {UPDATE_FIELDS[name]: value for name, value in fields.items() if value}
        if aspects_ids:
            body["aspectsIds"] = json_ids(aspects_ids)
        data = self.client.patch(f"/requirement/{requirement_id}", json=body)
        return Requirement.model_validate(data["requirement"])

    def delete(self, requirement_id: int) -> None:
        self.client.delete(f"/requirement/{requirement_id}")

    def delete_batch(self, requirement_ids: list[int]) -> None:
        self.client.delete("/requirements/batch", json={"requirementIds": requirement_ids})
