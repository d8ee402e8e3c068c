"""Subject schemas."""

from kb_admin.core.schemas import ApiModel


class Subject(ApiModel):
    """A subject (materia) grouping aspects, legal bases and requirements."""
    id: int
    subject_name: str
    order_index: int | None = None
    abbreviation: str | None = None
