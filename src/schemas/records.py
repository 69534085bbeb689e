"""Raw record schemas for the supported data sources.

Each loader validates what it reads against one of these models before
converting it into Author and Article objects. Identifiers are coerced to
int since CSV files and some database drivers hand them over as strings.
Dates stay untyped here; the loaders normalise them.
"""

from typing import Any, ClassVar

from pydantic import AliasChoices, BaseModel, Field


class JsonAuthorRecord(BaseModel):
    """An entry of the ``authors`` array in a JSON blog document."""

    id: int
    firstname: str = Field(min_length=1)
    lastname: str = Field(min_length=1)


class JsonArticleRecord(BaseModel):
    """An entry of the ``articles`` array in a JSON blog document."""

    id: int
    title: str
    content: str
    author_id: int = Field(alias="authorId")
    date: str

    model_config = {"populate_by_name": True}


class BlogDocument(BaseModel):
    """Top-level JSON blog document."""

    authors: list[JsonAuthorRecord]
    articles: list[JsonArticleRecord]


class CsvArticleRow(BaseModel):
    """A data row of a CSV blog export.

    Columns: id, title, content, date, authorId, firstname, lastname.
    """

    id: int
    title: str
    content: str
    date: str
    author_id: int
    firstname: str = Field(min_length=1)
    lastname: str = Field(min_length=1)

    COLUMNS: ClassVar[tuple[str, ...]] = (
        "id",
        "title",
        "content",
        "date",
        "author_id",
        "firstname",
        "lastname",
    )

    @classmethod
    def from_row(cls, row: list[str]) -> "CsvArticleRow":
        """Build a record from a positional CSV row."""
        return cls.model_validate(dict(zip(cls.COLUMNS, row)))


class DbAuthorRow(BaseModel):
    """A row of the ``author`` table."""

    id: int = Field(validation_alias=AliasChoices("id_author", "id"))
    firstname: str = Field(min_length=1)
    lastname: str = Field(min_length=1)

    model_config = {"extra": "ignore"}


class DbArticleRow(BaseModel):
    """A row of the ``article`` table."""

    id: int = Field(validation_alias=AliasChoices("id_article", "id"))
    title: str
    content: str
    author_id: int = Field(validation_alias=AliasChoices("authorId", "author_id"))
    date: Any

    model_config = {"extra": "ignore"}
