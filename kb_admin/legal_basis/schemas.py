"""Legal basis schemas."""

from pydantic import Field

from kb_admin.core.schemas import ApiModel, AspectRef, SubjectRef


class LegalBasis(ApiModel):
    """A law, regulation or norm (fundamento legal) and its document."""
    id: int
    legal_name: str
    abbreviation: str | None = None
    classification: str | None = None
    jurisdiction: str | None = None
    state: str | None = None
    municipality: str | None = None
    last_reform: str | None = None
    url: str | None = None
    subject: SubjectRef | None = None
    aspects: list[AspectRef] = Field(default_factory=list)


class SavedLegalBasis(ApiModel):
    """Result of a create or update: the record plus its extraction job, if any."""
    job_id: str | int | None = None
    legal_basis: LegalBasis


class PendingJobs(ApiModel):
    """Article-extraction job state for one legal basis."""
    has_pending_jobs: bool = False
    job_id: str | int | None = None
    progress: int | float | None = None
