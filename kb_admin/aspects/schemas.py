"""Aspect schemas."""

from kb_admin.core.schemas import ApiModel


class Aspect(ApiModel):
    """An aspect of a subject (e.g. a compliance area within a materia)."""
    id: int
    aspect_name: str
    subject_id: int | None = None
    subject_name: str | None = None
    order_index: int | None = None
    abbreviation: str | None = None
