"""Legal verb schemas."""

from kb_admin.core.schemas import ApiModel


class LegalVerb(ApiModel):
    """A verb used to phrase legal obligations, with its translation."""
    id: int
    name: str
    description: str | None = None
    translation: str | None = None
