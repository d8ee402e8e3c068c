"""Requirement schemas."""

from pydantic import Field

from kb_admin.core.schemas import ApiModel, AspectRef, SubjectRef


class Requirement(ApiModel):
    """A legal requirement and the texts used to identify it in documents."""
    id: int
    requirement_number: str | None = None
    requirement_name: str
    mandatory_description: str | None = None
    complementary_description: str | None = None
    mandatory_sentences: str | None = None
    complementary_sentences: str | None = None
    mandatory_keywords: str | None = None
    complementary_keywords: str | None = None
    condition: str | None = None
    evidence: str | None = None
    specify_evidence: str | None = None
    formatted_evidence: str | None = None
    periodicity: str | None = None
    specify_periodicity: str | None = None
    requirement_type: str | None = None
    jurisdiction: str | None = None
    state: str | None = None
    municipality: str | None = None
    acceptance_criteria: str | None = None
    subject: SubjectRef | None = None
    aspects: list[AspectRef] = Field(default_factory=list)
