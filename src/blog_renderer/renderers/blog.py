"""Blog aggregate and its display methods."""

import logging
from collections.abc import Sequence
from datetime import date
from pathlib import Path

from blog_renderer.exceptions import NotFoundError
from schemas import Article

from .article_renderer import ArticleRenderer
from .environment import create_environment

logger = logging.getLogger(__name__)


class Blog:
    """A titled, ordered collection of articles.

    The blog is built once from loaded articles and only read afterwards.
    Every display method returns an HTML fragment; render_page() assembles
    them into a complete document.

    Attributes:
        title: Blog title
        articles: Articles in load order
        language: Value of the page's lang attribute
    """

    def __init__(
        self,
        title: str,
        articles: Sequence[Article],
        language: str = "fr",
        renderer: ArticleRenderer | None = None,
        templates_dir: Path | None = None,
    ):
        self.title = title
        self.articles = tuple(articles)
        self.language = language
        self._env = create_environment(templates_dir)
        self.renderer = renderer or ArticleRenderer(env=self._env)

    def display_header(self) -> str:
        """Return the blog title as a level-1 heading."""
        return self._render("header.html.j2", title=self.title)

    def display_article_list(self, request_path: str = "") -> str:
        """Return links to every article, separated by horizontal rules.

        Args:
            request_path: Path the links point back to; each link adds an
                articleId query parameter

        Returns:
            The joined links, or an empty string when there are no articles
        """
        return self._render(
            "article_list.html.j2",
            articles=self.articles,
            request_path=request_path,
        )

    def get_article(self, article_id: int) -> Article:
        """Return the first article with the given id.

        Raises:
            NotFoundError: If no article has that id
        """
        for article in self.articles:
            if article.id == article_id:
                return article
        raise NotFoundError(article_id)

    def display_article(self, article_id: int) -> str:
        """Return the rendered article, or a "not found" message."""
        try:
            article = self.get_article(article_id)
        except NotFoundError as e:
            logger.warning(e.message)
            return self._render("not_found.html.j2", article_id=article_id)
        return self.renderer.render(article)

    def display_footer(self, today: date | None = None) -> str:
        """Return a footer holding the date as DD-MM-YY (today by default)."""
        return self._render("footer.html.j2", today=today or date.today())

    def render_page(
        self,
        article_id: int | None = None,
        request_path: str = "",
        today: date | None = None,
    ) -> str:
        """Render a full HTML document.

        Without an article id the page lists every article; with one it shows
        that article (or the "not found" message).

        Args:
            article_id: Article to display, or None for the list view
            request_path: Path used by the list view links
            today: Date shown in the footer (default: today)

        Returns:
            The HTML document
        """
        if article_id is None:
            body = self.display_article_list(request_path)
        else:
            body = self.display_article(article_id)

        return self._render(
            "page.html.j2",
            language=self.language,
            title=self.title,
            header=self.display_header(),
            body=body,
            footer=self.display_footer(today),
        )

    def _render(self, template_name: str, **context) -> str:
        return self._env.get_template(template_name).render(**context)
