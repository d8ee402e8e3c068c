"""
Article manager and article-extraction job tracking.

Articles are shown in document order (``article_order``); new and updated
articles are placed with a sorted insert.
"""

from __future__ import annotations

from typing import Any

from kb_admin.core.client import ApiClient, ApiRequestError
from kb_admin.core.errors import ErrorKind, UserMessage
from kb_admin.core.jobs import JobTracker, job_descriptions
from kb_admin.core.manager import MALFORMED_RESPONSE, ResourceManager, associated_names
from kb_admin.core.results import Failure, OperationResult, Success
from kb_admin.legal_basis.api import LegalBasisApi
from kb_admin.utils.sorting import insert_sorted

from .api import ArticlesApi
from .errors import ARTICLE_ERRORS, EXTRACT_ARTICLES_ERRORS
from .schemas import Article


def display_order(article: Article) -> int:
    return article.article_order or 0


class ArticleManager(ResourceManager[Article]):
    """Article list state and CRUD operations for one legal basis at a time."""

    catalog = ARTICLE_ERRORS

    def __init__(self, client: ApiClient, debounce_seconds: float | None = None):
        super().__init__(client, debounce_seconds)
        self.api = ArticlesApi(client)
        self.legal_basis_id: int | None = None

    @property
    def articles(self) -> list[Article]:
        return self.records

    def clear_articles(self) -> None:
        self.records = []
        self.error = None

    def _show_in_order(self, articles: list[Article]) -> None:
        self._replace_records(sorted(articles, key=display_order))

    def fetch_articles(self, legal_basis_id: int) -> OperationResult:
        self.legal_basis_id = legal_basis_id
        return self._load(
            lambda: self.api.get_by_legal_basis(legal_basis_id),
            apply=self._show_in_order,
            items=[legal_basis_id],
        )

    def search_by_name(self, name: str, legal_basis_id: int | None = None) -> OperationResult:
        """Filter the legal basis' articles by name; empty reloads all."""
        legal_basis_id = self._legal_basis(legal_basis_id)
        if not name:
            return self.fetch_articles(legal_basis_id)
        return self._load(lambda: self.api.find_by_name(legal_basis_id, name), apply=self._show_in_order)

    def search_by_description(self, description: str, legal_basis_id: int | None = None) -> OperationResult:
        legal_basis_id = self._legal_basis(legal_basis_id)
        if not description:
            return self.fetch_articles(legal_basis_id)
        return self._load(
            lambda: self.api.find_by_description(legal_basis_id, description),
            apply=self._show_in_order,
        )

    def search(self, field: str, value: Any) -> OperationResult:
        if field == "name":
            return self.search_by_name(value)
        if field == "description":
            return self.search_by_description(value)
        raise ValueError(f"Unsupported article filter: {field}")

    def add_article(
        self,
        title: str,
        article: str,
        order: int,
        legal_basis_id: int | None = None,
    ) -> OperationResult:
        legal_basis_id = self._legal_basis(legal_basis_id)
        return self._mutate(
            lambda: self.api.create(legal_basis_id, title, article, order),
            apply=self._insert,
            items=[legal_basis_id],
        )

    def modify_article(
        self,
        article_id: int,
        title: str | None = None,
        article: str | None = None,
        order: int | None = None,
    ) -> OperationResult:
        def apply(updated: Article) -> None:
            self.records = [a for a in self.records if a.id != article_id]
            self._insert(updated)

        return self._mutate(
            lambda: self.api.update(article_id, title, article, order),
            apply=apply,
            items=[article_id],
        )

    def remove_article(self, article_id: int) -> OperationResult:
        return self._mutate(
            lambda: self.api.delete(article_id),
            apply=lambda _: self._drop([article_id]),
            items=[article_id],
        )

    def remove_articles(self, article_ids: list[int]) -> OperationResult:
        try:
            self.api.delete_batch(article_ids)
        except ApiRequestError as exc:
            return self._failure(exc, associated_names(exc, "articles") or article_ids)
        self._drop(article_ids)
        return Success()

    def _legal_basis(self, legal_basis_id: int | None) -> int:
        legal_basis_id = legal_basis_id if legal_basis_id is not None else self.legal_basis_id
        if legal_basis_id is None:
            raise ValueError("No legal basis selected; call fetch_articles first or pass legal_basis_id")
        return legal_basis_id

    def _insert(self, article: Article) -> None:
        self.records = insert_sorted(self.records, article, display_order)

    def _drop(self, article_ids: list[int]) -> None:
        removed = set(article_ids)
        self.records = [a for a in self.records if a.id not in removed]


class ArticleExtractionTracker(JobTracker):
    """Progress of the job that extracts articles from a legal basis document.

    Besides polling, the tracker finds the running job of a legal basis
    and cancels it.

    Attributes:
        legal_basis_job_loading: True while the legal basis lookup runs
        legal_basis_job_error: ``UserMessage`` of the last failed lookup
    """

    status_endpoint = "/jobs/articles/{job_id}"
    catalog = EXTRACT_ARTICLES_ERRORS
    descriptions = job_descriptions("El proceso de extracción de artículos", feminine=False)
    label = "article extraction job"

    def __init__(self, client: ApiClient):
        super().__init__(client)
        self.api = ArticlesApi(client)
        self.legal_basis_api = LegalBasisApi(client)
        self.legal_basis_job_loading = False
        self.legal_basis_job_error: UserMessage | None = None

    def fetch_job_by_legal_basis(self, legal_basis_id: int) -> OperationResult:
        """Look up the extraction job running for a legal basis.

        Returns:
            ``Success(PendingJobs)``; ``job_id`` is None when nothing runs
        """
        self.legal_basis_job_loading = True
        self.legal_basis_job_error = None
        try:
            jobs = self.legal_basis_api.pending_jobs(legal_basis_id)
        except ApiRequestError as exc:
            failure = self._failure(
                self.catalog.classify(
                    code=exc.status_code,
                    error=exc.server_message,
                    http_error=exc.client_message,
                )
            )
        except MALFORMED_RESPONSE:
            failure = self._failure(ErrorKind.UNEXPECTED_ERROR)
        else:
            return Success(jobs)
        finally:
            self.legal_basis_job_loading = False
        self.legal_basis_job_error = failure.error
        return failure

    def cancel_job(self, job_id: str | int) -> OperationResult:
        """Cancel a running extraction; the tracker state is left as is."""
        try:
            self.api.cancel_extraction(job_id)
        except ApiRequestError as exc:
            kind = self.catalog.classify(
                code=exc.status_code,
                error=exc.server_message,
                http_error=exc.client_message,
            )
            return self._failure(kind)
        return Success()

    def _failure(self, kind: ErrorKind) -> Failure:
        return Failure(error=self.catalog.render(kind), kind=kind)
