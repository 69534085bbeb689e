"""Command-line interface for blog-renderer."""

import argparse
import logging
import sys
from pathlib import Path
from wsgiref.simple_server import make_server

from pydantic import ValidationError

from blog_renderer.app import create_app
from blog_renderer.config import BlogConfig, load_config
from blog_renderer.exceptions import BlogError, NotFoundError
from blog_renderer.loaders import LOADERS, create_loader
from blog_renderer.renderers import Blog

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def build_config(args: argparse.Namespace) -> BlogConfig:
    """Load the config file (if any) and apply command-line overrides.

    Args:
        args: Parsed command-line arguments

    Returns:
        The effective BlogConfig
    """
    config = load_config(args.config)

    if args.source is not None:
        config.source = args.source
    if args.locator is not None:
        config.locator = args.locator
    if args.title is not None:
        config.title = args.title
    if args.strict_authors:
        config.strict_authors = True
    if args.db_driver is not None:
        config.database.driver = args.db_driver
    if args.db_host is not None:
        config.database.host = args.db_host
    if args.db_port is not None:
        config.database.port = args.db_port
    if args.db_user is not None:
        config.database.username = args.db_user

    return config


def build_blog(config: BlogConfig) -> Blog:
    """Load articles with the configured loader and wrap them in a Blog.

    Raises:
        DataSourceError: If the articles cannot be loaded
        ValueError: If no locator is configured
    """
    if not config.locator:
        raise ValueError("No data source locator given (use --locator or the config file)")

    loader = create_loader(config.source, config)
    articles = loader.load(config.locator)
    return Blog(config.title, articles, language=config.language)


def _prepare(args: argparse.Namespace, logger: logging.Logger) -> Blog | None:
    try:
        config = build_config(args)
    except (OSError, UnicodeDecodeError, ValidationError) as e:
        logger.error(f"Invalid configuration: {e}")
        return None

    try:
        return build_blog(config)
    except (BlogError, ValueError) as e:
        logger.error(f"Failed to load articles: {e}")
        return None


def render(args: argparse.Namespace) -> int:
    """Execute the render command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    blog = _prepare(args, logger)
    if blog is None:
        return 1

    page = blog.render_page(article_id=args.article_id, request_path=args.request_path)

    if args.output is None:
        sys.stdout.write(page)
    else:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(page, encoding="utf-8")
        logger.info(f"Wrote {args.output}")

    if args.article_id is not None:
        try:
            blog.get_article(args.article_id)
        except NotFoundError as e:
            logger.error(e.message)
            return 1
    return 0


def serve(args: argparse.Namespace) -> int:
    """Execute the serve command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging(args.verbose)
    logger = logging.getLogger(__name__)

    blog = _prepare(args, logger)
    if blog is None:
        return 1

    app = create_app(blog)
    with make_server(args.host, args.port, app) as server:
        logger.info(f"Serving {len(blog.articles)} articles on http://{args.host}:{args.port}/")
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            logger.info("Stopped")
    return 0


def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file",
    )
    parser.add_argument(
        "--source",
        choices=sorted(LOADERS),
        default=None,
        help="Data source type (default: json, or the config file's value)",
    )
    parser.add_argument(
        "--locator",
        type=str,
        default=None,
        help="File path (json/csv) or database name (database)",
    )
    parser.add_argument(
        "--title",
        type=str,
        default=None,
        help="Blog title",
    )
    parser.add_argument(
        "--strict-authors",
        action="store_true",
        help="Fail when an article references an unknown author",
    )
    parser.add_argument("--db-driver", type=str, default=None, help="SQLAlchemy driver name")
    parser.add_argument("--db-host", type=str, default=None, help="Database host")
    parser.add_argument("--db-port", type=int, default=None, help="Database port")
    parser.add_argument("--db-user", type=str, default=None, help="Database user")


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(
        prog="blog-renderer",
        description="Render blog articles loaded from JSON, CSV or a database",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    render_parser = subparsers.add_parser(
        "render",
        help="Render the blog page as HTML",
        description="Load articles and write the list page, or a single article page with --article-id.",
    )
    _add_source_arguments(render_parser)
    render_parser.add_argument(
        "--article-id",
        type=int,
        default=None,
        help="Render this article instead of the article list",
    )
    render_parser.add_argument(
        "--request-path",
        type=str,
        default="",
        help="Path used in article links of the list view",
    )
    render_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output HTML file (default: stdout)",
    )
    render_parser.set_defaults(func=render)

    serve_parser = subparsers.add_parser(
        "serve",
        help="Serve the blog over HTTP",
        description="Load articles once and serve list and article pages with a WSGI server.",
    )
    _add_source_arguments(serve_parser)
    serve_parser.add_argument(
        "--host",
        type=str,
        default=DEFAULT_HOST,
        help=f"Interface to bind (default: {DEFAULT_HOST})",
    )
    serve_parser.add_argument(
        "--port",
        type=int,
        default=DEFAULT_PORT,
        help=f"Port to listen on (default: {DEFAULT_PORT})",
    )
    serve_parser.set_defaults(func=serve)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
