"""Loader for JSON blog documents."""

import logging

from pydantic import ValidationError

from blog_renderer.exceptions import DataSourceError
from schemas import Article, Author, BlogDocument

from .loader import FileLoader, index_authors

logger = logging.getLogger(__name__)


class JsonLoader(FileLoader):
    """Load articles from a JSON file.

    The document holds two arrays:

        {
          "authors": [{"id": 1, "firstname": "Bob", "lastname": "Lee"}],
          "articles": [{"id": 1, "title": "...", "content": "...",
                        "authorId": 1, "date": "2020-01-02"}]
        }

    Authors are read first; each article then points at the author whose
    id matches its authorId.
    """

    name = "json"

    def parse(self, raw_data: str, source: str | None = None) -> list[Article]:
        try:
            document = BlogDocument.model_validate_json(raw_data)
        except ValidationError as e:
            raise DataSourceError(
                f"Malformed JSON blog document: {e}", source=source
            ) from e

        authors = index_authors(
            Author(record.id, record.firstname, record.lastname)
            for record in document.authors
        )

        articles = [
            self._build_article(
                authors,
                record.id,
                record.title,
                record.content,
                record.author_id,
                record.date,
            )
            for record in document.articles
        ]
        logger.info(
            f"Loaded {len(articles)} articles and {len(authors)} authors from {source}"
        )
        return articles
