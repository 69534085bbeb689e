"""Loader reading authors and articles from a relational database."""

import logging

from pydantic import ValidationError
from sqlalchemy import create_engine, literal_column, select
from sqlalchemy import table as sql_table
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError

from blog_renderer.config import DatabaseConfig
from blog_renderer.exceptions import DataSourceError
from schemas import Article, Author, DbArticleRow, DbAuthorRow

from .loader import Loader, index_authors

logger = logging.getLogger(__name__)


class DatabaseLoader(Loader):
    """Load articles from the ``author`` and ``article`` tables.

    Connection settings are injected through DatabaseConfig; the source
    locator passed to load() names the database (or the file, for SQLite).
    The engine is disposed once the load finishes, whether it succeeded
    or not.

    Example:
        config = DatabaseConfig(host="db.local", username="blog", password="s3cret")
        articles = DatabaseLoader(config).load("blog")
    """

    name = "database"

    def __init__(
        self,
        config: DatabaseConfig | None = None,
        strict_authors: bool = False,
    ):
        super().__init__(strict_authors=strict_authors)
        self.config = config or DatabaseConfig()

    def load(self, source_locator: str) -> list[Article]:
        url = self.config.url(source_locator)
        logger.debug(f"Connecting to {url.render_as_string(hide_password=True)}")

        try:
            engine = create_engine(url, connect_args=self.config.connect_args())
        except (SQLAlchemyError, ImportError) as e:
            raise DataSourceError(
                f"Cannot configure database {source_locator}: {e}",
                source=source_locator,
            ) from e

        try:
            with engine.connect() as connection:
                author_rows = self._fetch(connection, self.config.author_table)
                article_rows = self._fetch(connection, self.config.article_table)
        except SQLAlchemyError as e:
            raise DataSourceError(
                f"Database error for {source_locator}: {e}", source=source_locator
            ) from e
        finally:
            engine.dispose()

        try:
            authors = index_authors(
                Author(row.id, row.firstname, row.lastname)
                for row in (DbAuthorRow.model_validate(r) for r in author_rows)
            )
            records = [DbArticleRow.model_validate(r) for r in article_rows]
        except ValidationError as e:
            raise DataSourceError(
                f"Unexpected row in {source_locator}: {e}", source=source_locator
            ) from e

        try:
            articles = [
                self._build_article(
                    authors,
                    record.id,
                    record.title,
                    record.content,
                    record.author_id,
                    record.date,
                )
                for record in records
            ]
        except DataSourceError as e:
            if e.source is None:
                e.source = source_locator
            raise

        logger.info(
            f"Loaded {len(articles)} articles and {len(authors)} authors "
            f"from database {source_locator}"
        )
        return articles

    def _fetch(self, connection: Connection, table: str) -> list[dict]:
        """Return every row of a table as a column-name mapping."""
        query = select(literal_column("*")).select_from(sql_table(table))
        result = connection.execute(query)
        return [dict(row) for row in result.mappings()]
