"""Requirement type endpoints."""

from __future__ import annotations

from kb_admin.core.client import ApiClient

from .schemas import RequirementType


class RequirementTypesApi:
    """Client for the requirement type endpoints."""

    def __init__(self, client: ApiClient):
        self.client = client

    def _records(self, endpoint: str, params: dict | None = None) -> list[RequirementType]:
        data = self.client.get(endpoint, params=params)
        return [RequirementType.model_validate(item) for item in data["requirementTypes"]]

    def get_all(self) -> list[RequirementType]:
        return self._records("/requirement-types")

    def get(self, requirement_type_id: int) -> RequirementType:
        data = self.client.get(f"/requirement-type/{requirement_type_id}")
        return RequirementType.model_validate(data["requirementType"])

    def find_by_name(self, name: str) -> list[RequirementType]:
        return self._records("/requirement-types/name", {"name": name})

    def find_by_description(self, description: str) -> list[RequirementType]:
        return self._records("/requirement-types/search/description", {"description": description})

    def find_by_classification(self, classification: str) -> list[RequirementType]:
        return self._records("/requirement-types/classification", {"classification": classification})

    def create(self, name: str, description: str, classification: str) -> RequirementType:
        data = self.client.post(
            "/requirement-types",
            json={"name": name, "description": description, "classification": classification},
        )
        return RequirementType.model_validate(data["requirementType"])

    def update(
        self,
        requirement_type_id: int,
        name: str | None = None,
        description: str | None = None,
        classification: str | None = None,
    ) -> RequirementType:
        data = self.client.patch(
            f"/requirement-type/{requirement_type_id}",
            json={"name": name, "description": description, "classification": classification},
        )
        return RequirementType.model_validate(data["requirementType"])

    def delete(self, requirement_type_id: int) -> None:
        self.client.delete(f"/requirement-types/{requirement_type_id}")

    def delete_batch(self, requirement_type_ids: list[int]) -> None:
        self.client.delete(
            "/requirement-types/delete/batch",
            json={"requirementTypesIds": requirement_type_ids},
        )
