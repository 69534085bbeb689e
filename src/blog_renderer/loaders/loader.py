"""Base class and shared helpers for loaders.

A loader turns an external representation (JSON file, CSV file, database)
into Author and Article objects. Every loader resolves article authors the
same way: authors are indexed by id once per load and each article looks its
author up by key. When several authors share an id, the first one wins.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from datetime import date, datetime
from pathlib import Path

from blog_renderer.exceptions import DataSourceError
from schemas import Article, Author

logger = logging.getLogger(__name__)


def index_authors(authors: Iterable[Author]) -> dict[int, Author]:
    """Map author ids to authors, keeping the first author seen for each id."""
    index: dict[int, Author] = {}
    for author in authors:
        index.setdefault(author.id, author)
    return index


def resolve_author(
    index: dict[int, Author],
    author_id: int,
    article_id: int,
    strict: bool = False,
) -> Author | None:
    """Look up an article's author.

    Args:
        index: Author index built by index_authors
        author_id: Author id referenced by the article
        article_id: Id of the referencing article, for diagnostics
        strict: Raise instead of returning None when the author is missing

    Returns:
        The matching Author, or None when there is no match and strict is False

    Raises:
        DataSourceError: If strict is True and no author matches
    """
    author = index.get(author_id)
    if author is None:
        message = f"Article {article_id} references unknown author {author_id}"
        if strict:
            raise DataSourceError(message)
        logger.warning(message)
    return author


def parse_publication_date(value: object) -> date:
    """Normalise a raw publication date.

    Accepts ISO-8601 date or datetime strings, as well as date and datetime
    objects returned by database drivers.

    Raises:
        DataSourceError: If the value cannot be read as a date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip()).date()
        except ValueError as e:
            raise DataSourceError(f"Invalid publication date: {value!r}") from e
    raise DataSourceError(f"Invalid publication date: {value!r}")


class Loader(ABC):
    """Abstract base class for article loaders.

    Attributes:
        strict_authors: Fail the load when an article names an unknown author
            instead of keeping the article without one
    """

    name = "loader"

    def __init__(self, strict_authors: bool = False):
        self.strict_authors = strict_authors

    @abstractmethod
    def load(self, source_locator: str) -> list[Article]:
        """Load articles from a source.

        Args:
            source_locator: File path or database name

        Returns:
            Articles in source order

        Raises:
            DataSourceError: If the source is unreachable or malformed
        """
        pass

    def _build_article(
        self,
        index: dict[int, Author],
        article_id: int,
        title: str,
        content: str,
        author_id: int,
        raw_date: object,
    ) -> Article:
        return Article(
            id=article_id,
            title=title,
            content=content,
            author=resolve_author(index, author_id, article_id, self.strict_authors),
            publication_date=parse_publication_date(raw_date),
        )


class FileLoader(Loader):
    """Base class for loaders reading a whole text file before parsing it."""

    encoding = "utf-8"

    def load(self, source_locator: str) -> list[Article]:
        path = Path(source_locator)
        try:
            raw_data = path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise DataSourceError(f"Cannot read {path}: {e}", source=str(path)) from e

        try:
            return self.parse(raw_data, source=str(path))
        except DataSourceError as e:
            if e.source is None:
                e.source = str(path)
            raise

    @abstractmethod
    def parse(self, raw_data: str, source: str | None = None) -> list[Article]:
        """Convert the file content into articles.

        Args:
            raw_data: Text content of the file
            source: Locator used in log and error messages

        Returns:
            Articles in file order
        """
        pass
