"""Schema definitions for the blog renderer."""

from .article import Article
from .author import Author
from .records import (
    BlogDocument,
    CsvArticleRow,
    DbArticleRow,
    DbAuthorRow,
    JsonArticleRecord,
    JsonAuthorRecord,
)

__all__ = [
    "Article",
    "Author",
    "BlogDocument",
    "CsvArticleRow",
    "DbArticleRow",
    "DbAuthorRow",
    "JsonArticleRecord",
    "JsonAuthorRecord",
]
