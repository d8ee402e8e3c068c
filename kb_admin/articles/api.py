"""
Article endpoints.

Articles are listed, searched and created under their legal basis. The
article-extraction job that fills them from the legal basis document is
cancelled here as well.
"""

from __future__ import annotations

from kb_admin.core.client import ApiClient

from .schemas import Article


class ArticlesApi:
    """Client for the article endpoints."""

    def __init__(self, client: ApiClient):
        self.client = client

    def _records(self, endpoint: str, params: dict | None = None) -> list[Article]:
        data = self.client.get(endpoint, params=params)
        return [Article.model_validate(item) for item in data["articles"]]

    def get_by_legal_basis(self, legal_basis_id: int) -> list[Article]:
        return self._records(f"/articles/legalBasis/{legal_basis_id}")

    def find_by_name(self, legal_basis_id: int, name: str) -> list[Article]:
        return self._records(f"/articles/{legal_basis_id}/name", {"name": name})

    def find_by_description(self, legal_basis_id: int, description: str) -> list[Article]:
        return self._records(f"/articles/{legal_basis_id}/description", {"description": description})

    def create(self, legal_basis_id: int, title: str, article: str, order: int) -> Article:
        data = self.client.post(
            f"/articles/legalBasis/{legal_basis_id}",
            json={"title": title, "article": article, "order": order},
        )
        return Article.model_validate(data["article"])

    def update(
        self,
        article_id: int,
        title: str | None = None,
        article: str | None = None,
        order: int | None = None,
    ) -> Article:
        data = self.client.patch(
            f"/article/{article_id}",
            json={"title": title, "article": article, "order": order},
        )
        return Article.model_validate(data["updatedArticle"])

    def delete(self, article_id: int) -> None:
        self.client.delete(f"/article/{article_id}")

    def delete_batch(self, article_ids: list[int]) -> None:
        self.client.delete("/articles/batch", json={"articleIds": article_ids})

    def cancel_extraction(self, job_id: str | int) -> None:
        self.client.delete(f"/jobs/articles/{job_id}")
