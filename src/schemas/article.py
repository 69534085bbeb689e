"""Article domain object."""

from dataclasses import dataclass
from datetime import date

from .author import Author


@dataclass(frozen=True)
class Article:
    """Represents a single blog article.

    Attributes:
        id: Article identifier, unique within a load
        title: Article title
        content: Article body text
        author: Author from the same load, or None when the source
            referenced an author id that does not exist
        publication_date: Calendar date the article was published
    """

    id: int
    title: str
    content: str
    author: Author | None
    publication_date: date
