"""Requirement identification endpoints."""

from __future__ import annotations

from kb_admin.core.client import ApiClient, multipart_fields

from .schemas import CreatedReqIdentification, ReqIdentification

BASE = "/req-identification"

# Single-value searches: field -> (endpoint, query parameter)
TEXT_SEARCHES: dict[str, tuple[str, str]] = {
    "name": (f"{BASE}/search/name", "name"),
    "description": (f"{BASE}/search/description", "description"),
    "status": (f"{BASE}/search/status", "status"),
    "state": (f"{BASE}/search/state", "state"),
}


class ReqIdentificationApi:
    """Client for the requirement identification endpoints."""

    def __init__(self, client: ApiClient):
        self.client = client

    def _records(self, endpoint: str, params: dict | None = None) -> list[ReqIdentification]:
        data = self.client.get(endpoint, params=params)
        return [ReqIdentification.model_validate(item) for item in data["reqIdentifications"]]

    def create(
        self,
        req_identification_name: str,
        legal_basis_ids: list[int],
        req_identification_description: str | None = None,
        intelligence_level: str | None = None,
    ) -> CreatedReqIdentification:
        data = self.client.post(
            BASE,
            json={
                "reqIdentificationName": req_identification_name,
                "reqIdentificationDescription": req_identification_description,
                "legalBasisIds": [int(value) for value in legal_basis_ids],
                "intelligenceLevel": intelligence_level,
            },
        )
        return CreatedReqIdentification.model_validate(data)

    def get_all(self) -> list[ReqIdentification]:
        return self._records(BASE)

    def get(self, req_identification_id: int) -> ReqIdentification:
        data = self.client.get(f"{BASE}/{req_identification_id}")
        return ReqIdentification.model_validate(data["reqIdentification"])

    def search(self, field: str, value: str) -> list[ReqIdentification]:
        try:
            endpoint, param = TEXT_SEARCHES[field]
        except KeyError:
            raise ValueError(f"Unsupported identification filter: {field}") from None
        return self._records(endpoint, {param: value})

    def find_by_user(self, user_id: int) -> list[ReqIdentification]:
        return self._records(f"{BASE}/search/user/{user_id}")

    def find_by_created_at(self, date_from: str | None = None, date_to: str | None = None) -> list[ReqIdentification]:
        return self._records(
            f"{BASE}/search/created-at",
            {"from": date_from or None, "to": date_to or None},
        )

    def find_by_subject(self, subject_id: int) -> list[ReqIdentification]:
        return self._records(f"{BASE}/search/subject/{subject_id}")

    def find_by_subject_and_aspects(
        self, subject_id: int, aspect_ids: list[int] | None = None
    ) -> list[ReqIdentification]:
        return self._records(
            f"{BASE}/search/subject/{subject_id}/aspects",
            {"aspectIds": aspect_ids or []},
        )

    def find_by_state_and_municipalities(
        self, state: str, municipalities: list[str] | None = None
    ) -> list[ReqIdentification]:
        return self._records(
            f"{BASE}/search/state-municipalities",
            {"state": state, "municipalities": municipalities or []},
        )

    def update(
        self,
        req_identification_id: int,
        req_identification_name: str | None = None,
        req_identification_description: str | None = None,
        new_user_id: int | None = None,
    ) -> ReqIdentification:
        files = multipart_fields(
            {
                "reqIdentificationName": req_identification_name or None,
                "reqIdentificationDescription": req_identification_description or None,
                "newUserId": new_user_id or None,
            }
        )
        data = self.client.patch(f"{BASE}/{req_identification_id}", files=files)
        return ReqIdentification.model_validate(data["reqIdentification"])

    def delete(self, req_identification_id: int) -> None:
        self.client.delete(f"{BASE}/{req_identification_id}")

    def delete_batch(self, req_identification_ids: list[int]) -> None:
        self.client.delete(
            f"{BASE}/delete/batch",
            json={"reqIdentificationIds": req_identification_ids},
        )

