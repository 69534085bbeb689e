"""WSGI application serving the blog.

A single optional query parameter selects the view: without ``articleId``
the list of articles is shown, with it the matching article.
"""

import logging
from urllib.parse import parse_qsl

from blog_renderer.exceptions import NotFoundError
from blog_renderer.renderers import Blog

logger = logging.getLogger(__name__)

ARTICLE_ID_PARAM = "articleId"

HTML_CONTENT_TYPE = "text/html; charset=utf-8"
TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"


def create_app(blog: Blog):
    """Create a WSGI callable rendering pages of the given blog.

    Responses:
        200: list view, or detail view for a known article id
        400: articleId is not an integer
        404: articleId names no article (the page shows a "not found" message)
    """

    def app(environ, start_response):
        request_path = environ.get("SCRIPT_NAME", "") + environ.get("PATH_INFO", "")
        query = dict(parse_qsl(environ.get("QUERY_STRING", ""), keep_blank_values=True))

        status = "200 OK"
        article_id = None
        if ARTICLE_ID_PARAM in query:
            try:
                article_id = int(query[ARTICLE_ID_PARAM])
            except ValueError:
                logger.warning(f"Invalid {ARTICLE_ID_PARAM}: {query[ARTICLE_ID_PARAM]!r}")
                body = f"Invalid {ARTICLE_ID_PARAM}: must be an integer\n".encode()
                start_response(
                    "400 Bad Request",
                    [("Content-Type", TEXT_CONTENT_TYPE), ("Content-Length", str(len(body)))],
                )
                return [body]

            try:
                blog.get_article(article_id)
            except NotFoundError:
                status = "404 Not Found"

        logger.debug(f"{status} {request_path}?{environ.get('QUERY_STRING', '')}")
        body = blog.render_page(article_id=article_id, request_path=request_path).encode()
        start_response(
            status,
            [("Content-Type", HTML_CONTENT_TYPE), ("Content-Length", str(len(body)))],
        )
        return [body]

    return app
