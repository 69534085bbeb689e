"""Render a single article as an HTML fragment."""

from pathlib import Path

from jinja2 import Environment

from schemas import Article

from .environment import create_environment


class ArticleRenderer:
    """Render an article as a heading, its content and a byline.

    Output shape:

        <h2>{title}</h2><p>{content}</p><p>by {short name}, on {DD-MM-YYYY}</p>

    Title, content and author name are HTML-escaped. Articles without an
    author are credited to "Unknown author".

    Attributes:
        template_name: Name of the Jinja2 template file
    """

    def __init__(
        self,
        template_name: str = "article.html.j2",
        templates_dir: Path | None = None,
        env: Environment | None = None,
    ):
        self.template_name = template_name
        self._env = env or create_environment(templates_dir)

    def render(self, article: Article) -> str:
        """Return the HTML fragment for an article."""
        template = self._env.get_template(self.template_name)
        return template.render(article=article)
