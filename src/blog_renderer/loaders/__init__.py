"""Loaders converting JSON, CSV and database sources into articles."""

from blog_renderer.config import BlogConfig

from .csv_loader import CsvLoader
from .database_loader import DatabaseLoader
from .json_loader import JsonLoader
from .loader import (
    FileLoader,
    Loader,
    index_authors,
    parse_publication_date,
    resolve_author,
)

LOADERS = {
    JsonLoader.name: JsonLoader,
    CsvLoader.name: CsvLoader,
    DatabaseLoader.name: DatabaseLoader,
}


def create_loader(kind: str, config: BlogConfig | None = None) -> Loader:
    """Instantiate the loader registered under a source kind.

    Args:
        kind: One of "json", "csv" or "database"
        config: Blog settings supplying loader options (defaults if None)

    Raises:
        ValueError: If the kind is unknown
    """
    config = config or BlogConfig()
    if kind == JsonLoader.name:
        return JsonLoader(strict_authors=config.strict_authors)
    if kind == CsvLoader.name:
        return CsvLoader(
            strict_authors=config.strict_authors, delimiter=config.csv_delimiter
        )
    if kind == DatabaseLoader.name:
        return DatabaseLoader(config.database, strict_authors=config.strict_authors)
    raise ValueError(f"Unknown source {kind!r}, expected one of {sorted(LOADERS)}")


__all__ = [
    "LOADERS",
    "CsvLoader",
    "DatabaseLoader",
    "FileLoader",
    "JsonLoader",
    "Loader",
    "create_loader",
    "index_authors",
    "parse_publication_date",
    "resolve_author",
]
