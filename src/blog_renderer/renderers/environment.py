"""Jinja2 environment shared by the renderers."""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from .filters import FILTERS

# templates/ sits next to renderers/ inside the blog_renderer package
TEMPLATES_DIR = Path(__file__).parent.parent / "templates"


def create_environment(templates_dir: Path | None = None) -> Environment:
    """Create an autoescaping environment with the blog filters registered.

    Args:
        templates_dir: Directory containing templates (default: blog_renderer/templates)
    """
    env = Environment(
        loader=FileSystemLoader(str(templates_dir or TEMPLATES_DIR)),
        autoescape=True,
    )
    for name, func in FILTERS.items():
        env.filters[name] = func
    return env
