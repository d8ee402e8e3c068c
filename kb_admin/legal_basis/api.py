"""
Legal basis endpoints.

Create and update go out as multipart forms so a document can travel with
the record; both return the saved record and the article-extraction job id.
"""

from __future__ import annotations

from typing import Any

from kb_admin.core.client import ApiClient, json_ids, multipart_fields

from .schemas import LegalBasis, PendingJobs, SavedLegalBasis


class LegalBasisApi:
    """Client for the legal basis endpoints."""

    def __init__(self, client: ApiClient):
        self.client = client

    def _records(self, endpoint: str, params: dict | None = None) -> list[LegalBasis]:
        data = self.client.get(endpoint, params=params)
        return [LegalBasis.model_validate(item) for item in data["legalBasis"]]

    # =========================================================================
    # Reads
    # =========================================================================

    def get_all(self) -> list[LegalBasis]:
        return self._records("/legalBasis")

    def get(self, legal_basis_id: int) -> LegalBasis:
        data = self.client.get(f"/legalBasis/{legal_basis_id}")
        return LegalBasis.model_validate(data["legalBasis"])

    def find_by_name(self, legal_name: str) -> list[LegalBasis]:
        return self._records("/legalBasis/name/name", {"legalName": legal_name})

    def find_by_abbreviation(self, abbreviation: str) -> list[LegalBasis]:
        return self._records("/legalBasis/abbreviation/abbreviation", {"abbreviation": abbreviation})

    def find_by_classification(self, classification: str) -> list[LegalBasis]:
        return self._records(
            "/legalBasis/classification/classification", {"classification": classification}
        )

    def find_by_jurisdiction(self, jurisdiction: str) -> list[LegalBasis]:
        return self._records("/legalBasis/jurisdiction/jurisdiction", {"jurisdiction": jurisdiction})

    def find_by_state(self, state: str) -> list[LegalBasis]:
        return self._records("/legalBasis/state/state", {"state": state})

    def find_by_state_and_municipalities(
        self, state: str, municipalities: list[str] | None = None
    ) -> list[LegalBasis]:
        return self._records(
            "/legalBasis/state/municipalities/query",
            {"state": state, "municipalities": municipalities or []},
        )

    def find_by_subject(self, subject_id: int) -> list[LegalBasis]:
        return self._records(f"/legalBasis/subject/{subject_id}")

    def find_by_subject_and_aspects(
        self, subject_id: int, aspect_ids: list[int] | None = None
    ) -> list[LegalBasis]:
        return self._records(
            f"/legalBasis/subject/{subject_id}/aspects",
            {"aspectIds": aspect_ids or []},
        )

    def find_by_subject_and_filters(
        self,
        subject_id: int,
        aspect_ids: list[int] | None = None,
        jurisdiction: str | None = None,
        state: str | None = None,
        municipalities: list[str] | None = None,
    ) -> list[LegalBasis]:
        return self._records(
            "/legalBasis/subject/aspects/state/municipalities/query",
            {
                "subjectId": subject_id,
                "aspectIds": aspect_ids or [],
                "jurisdiction": jurisdiction,
                "state": state,
                "municipalities": municipalities or [],
            },
        )

    def find_by_criteria(
        self,
        subject_id: int | None = None,
        aspect_ids: list[int] | None = None,
        jurisdiction: str | None = None,
        state: str | None = None,
        municipalities: list[str] | None = None,
    ) -> list[LegalBasis]:
        return self._records(
            "/legalBasis/criteria/query",
            {
                "jurisdiction": jurisdiction,
                "state": state,
                "municipalities": municipalities or [],
                "subjectId": subject_id,
                "aspectIds": aspect_ids or [],
            },
        )

    def find_by_last_reform(self, date_from: str | None = None, date_to: str | None = None) -> list[LegalBasis]:
        return self._records("/legalBasis/lastReform/lastReform", {"from": date_from, "to": date_to})

    def get_classifications(self) -> list[str]:
        return self.client.get("/legalBasis/classification/classification/all")["classifications"]

    def get_jurisdictions(self) -> list[str]:
        return self.client.get("/legalBasis/jurisdiction/jurisdiction/all")["jurisdictions"]

    def pending_jobs(self, legal_basis_id: int) -> PendingJobs:
        data = self.client.get(f"/jobs/articles/legalBasis/{legal_basis_id}")
        return PendingJobs.model_validate(data)

    # =========================================================================
    # Writes
    # =========================================================================

    def create(
        self,
        legal_name: str,
        abbreviation: str,
        subject_id: int,
        aspects_ids: list[int],
        classification: str,
        jurisdiction: str,
        last_reform: str,
        state: str | None = None,
        municipality: str | None = None,
        extract_articles: bool = False,
        intelligence_level: str | None = None,
        document: Any = None,
    ) -> SavedLegalBasis:
        files = multipart_fields(
            {
                "legalName": legal_name,
                "abbreviation": abbreviation,
                "subjectId": subject_id,
                "aspectsIds": json_ids(aspects_ids),
                "classification": classification,
                "jurisdiction": jurisdiction,
                "state": state or None,
                "municipality": municipality or None,
                "lastReform": last_reform,
                "extractArticles": extract_articles,
                "intelligenceLevel": intelligence_level or None,
            },
            document=document,
        )
        data = self.client.post("/legalBasis", files=files)
        return SavedLegalBasis.model_validate(data)

    def update(
        self,
        legal_basis_id: int,
        legal_name: str | None = None,
        abbreviation: str | None = None,
        subject_id: int | None = None,
        aspects_ids: list[int] | None = None,
        classification: str | None = None,
        jurisdiction: str | None = None,
        state: str | None = None,
        municipality: str | None = None,
        last_reform: str | None = None,
        extract_articles: bool = False,
        intelligence_level: str | None = None,
        remove_document: bool | None = None,
        document: Any = None,
    ) -> SavedLegalBasis:
        """Send only the fields that are set; ``extractArticles`` always goes."""
        files = multipart_fields(
            {
                "legalName": legal_name or None,
                "abbreviation": abbreviation or None,
                "subjectId": subject_id or None,
                "aspectsIds": json_ids(aspects_ids) if aspects_ids else None,
                "classification": classification or None,
                "jurisdiction": jurisdiction or None,
                "state": state or None,
                "municipality": municipality or None,
                "lastReform": last_reform or None,
                "extractArticles": extract_articles,
                "intelligenceLevel": intelligence_level or None,
                "removeDocument": remove_document,
            },
            document=document,
        )
        data = self.client.patch(f"/legalBasis/{legal_basis_id}", files=files)
        return SavedLegalBasis.model_validate(data)

    def delete(self, legal_basis_id: int) -> None:
        self.client.delete(f"/legalBasis/{legal_basis_id}")

    def delete_batch(self, legal_basis_ids: list[int]) -> None:
        self.client.delete("/legalBasis/delete/batch", json={"legalBasisIds": legal_basis_ids})

    def send(self, legal_basis_ids: list[int]) -> str | int:
        """Start the job that sends legal bases out; returns its job id."""
        data = self.client.post("/jobs/legalBasis/", json={"legalBasisIds": legal_basis_ids})
        return data["jobId"]
