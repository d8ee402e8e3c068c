"""Article domain: schemas, endpoints, error messages, manager and extraction jobs."""

from .schemas import Article
from .api import ArticlesApi
from .errors import ARTICLE_ERRORS, EXTRACT_ARTICLES_ERRORS
from .service import ArticleExtractionTracker, ArticleManager

__all__ = [
    "Article",
    "ArticlesApi",
    "ARTICLE_ERRORS",
    "EXTRACT_ARTICLES_ERRORS",
    "ArticleExtractionTracker",
    "ArticleManager",
]
