"""Requirement identification schemas."""

from enum import Enum

from pydantic import Field

from kb_admin.core.schemas import ApiModel, AspectRef, SubjectRef


class IdentificationStatus(str, Enum):
    """Status values the server stores on an identification."""
    ACTIVE = "Activo"
    FAILED = "Fallido"
    COMPLETED = "Completado"


class ReqIdentification(ApiModel):
    """A requirement-identification run over a set of legal bases."""
    id: int
    name: str | None = None
    description: str | None = None
    status: IdentificationStatus | None = None
    user_id: int | None = None
    created_at: str | None = None
    jurisdiction: str | None = None
    state: str | None = None
    municipality: str | None = None
    subject: SubjectRef | None = None
    aspects: list[AspectRef] = Field(default_factory=list)


class CreatedReqIdentification(ApiModel):
    """Result of starting an identification: its id and background job."""
    req_identification_id: int
    job_id: str | int | None = None

