"""Loader for CSV blog exports."""

import csv
import io
import logging

from pydantic import ValidationError

from blog_renderer.exceptions import DataSourceError
from schemas import Article, Author, CsvArticleRow

from .loader import FileLoader, index_authors

logger = logging.getLogger(__name__)


class CsvLoader(FileLoader):
    """Load articles from a CSV file.

    The first row is a header and is skipped. Every other row describes one
    article together with its author:

        id,title,content,date,authorId,firstname,lastname

    Authors are not de-duplicated: each row yields its own Author. Articles
    sharing an author id all resolve to the author of the first such row.
    """

    name = "csv"

    def __init__(self, strict_authors: bool = False, delimiter: str = ","):
        super().__init__(strict_authors=strict_authors)
        self.delimiter = delimiter

    def parse(self, raw_data: str, source: str | None = None) -> list[Article]:
        rows = self._read_rows(raw_data, source)

        authors = [Author(row.author_id, row.firstname, row.lastname) for row in rows]
        index = index_authors(authors)

        articles = [
            self._build_article(
                index, row.id, row.title, row.content, row.author_id, row.date
            )
            for row in rows
        ]
        logger.info(f"Loaded {len(articles)} articles from {source}")
        return articles

    def _read_rows(self, raw_data: str, source: str | None) -> list[CsvArticleRow]:
        """Parse and validate the data rows, skipping the header and blank lines."""
        reader = csv.reader(io.StringIO(raw_data, newline=""), delimiter=self.delimiter)
        rows: list[CsvArticleRow] = []
        try:
            next(reader, None)
            for raw_row in reader:
                if not any(field.strip() for field in raw_row):
                    continue
                if len(raw_row) != len(CsvArticleRow.COLUMNS):
                    raise DataSourceError(
                        f"Line {reader.line_num}: expected "
                        f"{len(CsvArticleRow.COLUMNS)} columns, got {len(raw_row)}",
                        source=source,
                    )
                try:
                    rows.append(CsvArticleRow.from_row(raw_row))
                except ValidationError as e:
                    raise DataSourceError(
                        f"Line {reader.line_num}: invalid row: {e}", source=source
                    ) from e
        except csv.Error as e:
            raise DataSourceError(f"Malformed CSV: {e}", source=source) from e
        return rows
