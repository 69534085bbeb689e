"""Renderers turning articles into HTML."""

from .article_renderer import ArticleRenderer
from .blog import Blog
from .environment import TEMPLATES_DIR, create_environment
from .filters import FILTERS, byline, format_date, format_short_date

__all__ = [
    "ArticleRenderer",
    "Blog",
    "FILTERS",
    "TEMPLATES_DIR",
    "byline",
    "create_environment",
    "format_date",
    "format_short_date",
]
