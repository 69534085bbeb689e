"""Custom exceptions for loading and displaying blog content."""


class BlogError(Exception):
    """Base exception for all blog errors."""

    def __init__(self, message: str, *args, **kwargs):
        self.message = message
        super().__init__(message, *args, **kwargs)


class DataSourceError(BlogError):
    """Raised when a data source is unreachable or malformed."""

    def __init__(self, message: str, source: str | None = None, *args, **kwargs):
        self.source = source
        super().__init__(message, *args, **kwargs)


class NotFoundError(BlogError):
    """Raised when a requested article does not exist."""

    def __init__(self, article_id: int, message: str | None = None):
        self.article_id = article_id
        super().__init__(message or f"Article {article_id} not found")
