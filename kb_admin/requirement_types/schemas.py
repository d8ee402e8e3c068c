"""Requirement type schemas."""

from kb_admin.core.schemas import ApiModel


class RequirementType(ApiModel):
    id: int
    name: str
    description: str | None = None
    classification: str | None = None
