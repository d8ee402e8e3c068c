"""Subject endpoints."""

from __future__ import annotations

from kb_admin.core.client import ApiClient

from .schemas import Subject


class SubjectsApi:
    """Client for the subject endpoints."""

    def __init__(self, client: ApiClient):
        self.client = client

    def get_all(self) -> list[Subject]:
        data = self.client.get("/subjects")
        return [Subject.model_validate(item) for item in data["subjects"]]

    def get(self, subject_id: int) -> Subject:
        data = self.client.get(f"/subject/{subject_id}")
        return Subject.model_validate(data["subject"])

    def find_by_name(self, subject_name: str) -> list[Subject]:
        data = self.client.get("/subjects/name", params={"subjectName": subject_name})
        return [Subject.model_validate(item) for item in data["subjects"]]

    def create(
        self,
        subject_name: str,
        order_index: int | None = None,
        abbreviation: str | None = None,
    ) -> Subject:
        data = self.client.post(
            "/subjects",
            json={
                "subjectName": subject_name,
                "orderIndex": order_index,
                "abbreviation": abbreviation,
            },
        )
        return Subject.model_validate(data["subject"])

    def update(
        self,
        subject_id: int,
        subject_name: str | None = None,
        order_index: int | None = None,
        abbreviation: str | None = None,
    ) -> Subject:
        data = self.client.patch(
            f"/subject/{subject_id}",
            json={
                "subjectName": subject_name,
                "orderIndex": order_index,
                "abbreviation": abbreviation,
            },
        )
        return Subject.model_validate(data["subject"])

    def delete(self, subject_id: int) -> None:
        self.client.delete(f"/subject/{subject_id}")

    def delete_batch(self, subject_ids: list[int]) -> None:
        self.client.delete("/subjects/batch", json={"subjectIds": subject_ids})
