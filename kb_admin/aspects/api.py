"""Aspect endpoints. Aspects are always listed and created under a subject."""

from __future__ import annotations

from kb_admin.core.client import ApiClient

from .schemas import Aspect


class AspectsApi:
    """Client for the aspect endpoints."""

    def __init__(self, client: ApiClient):
        self.client = client

    def get_by_subject(self, subject_id: int) -> list[Aspect]:
        data = self.client.get(f"/subjects/{subject_id}/aspects")
        return [Aspect.model_validate(item) for item in data["aspects"]]

    def find_by_name(self, subject_id: int, aspect_name: str) -> list[Aspect]:
        data = self.client.get(
            f"/subjects/{subject_id}/aspects/name",
            params={"aspectName": aspect_name},
        )
        return [Aspect.model_validate(item) for item in data["aspects"]]

    def get(self, aspect_id: int) -> Aspect:
        data = self.client.get(f"/aspect/{aspect_id}")
        return Aspect.model_validate(data["aspect"])

    def create(
        self,
        subject_id: int,
        aspect_name: str,
        order_index: int | None = None,
        abbreviation: str | None = None,
    ) -> Aspect:
        body = {"aspectName": aspect_name}
        if order_index is not None:
            body["orderIndex"] = order_index
        if abbreviation is not None:
            body["abbreviation"] = abbreviation
        data = self.client.post(f"/subjects/{subject_id}/aspects", json=body)
        return Aspect.model_validate(data["aspect"])

    def update(
        self,
        aspect_id: int,
        aspect_name: str | None = None,
        order_index: int | None = None,
        abbreviation: str | None = None,
    ) -> Aspect:
        data = self.client.patch(
            f"/aspect/{aspect_id}",
            json={
                "aspectName": aspect_name,
                "orderIndex": order_index,
                "abbreviation": abbreviation,
            },
        )
        return Aspect.model_validate(data["aspect"])

    def delete(self, aspect_id: int) -> None:
        self.client.delete(f"/aspect/{aspect_id}")

    def delete_batch(self, aspect_ids: list[int]) -> None:
        self.client.delete("/aspects/batch", json={"aspectIds": aspect_ids})
