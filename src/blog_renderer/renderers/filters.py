"""Jinja2 filters for blog template rendering."""

from datetime import date

from schemas import Author

UNKNOWN_AUTHOR = "Unknown author"


def format_date(value: date | None) -> str:
    """Format a publication date as DD-MM-YYYY.

    Examples:
        >>> format_date(date(2020, 1, 2))
        '02-01-2020'
    """
    if value is None:
        return ""
    return value.strftime("%d-%m-%Y")


def format_short_date(value: date | None) -> str:
    """Format a date as DD-MM-YY.

    Examples:
        >>> format_short_date(date(2026, 10, 19))
        '19-10-26'
    """
    if value is None:
        return ""
    return value.strftime("%d-%m-%y")


def byline(author: Author | None) -> str:
    """Return the author's short name, or a placeholder for a missing author.

    Examples:
        >>> byline(Author(1, "Bob", "Lee"))
        'B.Lee'
        >>> byline(None)
        'Unknown author'
    """
    if author is None:
        return UNKNOWN_AUTHOR
    return author.short_name()


# Registry of all filters for easy registration with Jinja2
FILTERS = {
    "format_date": format_date,
    "format_short_date": format_short_date,
    "byline": byline,
}
