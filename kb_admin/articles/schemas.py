"""Article schemas."""

from kb_admin.core.schemas import ApiModel


class Article(ApiModel):
    """An article of a legal basis, in document order."""
    id: int
    legal_basis_id: int | None = None
    article_name: str
    description: str | None = None
    article_order: int | None = None
