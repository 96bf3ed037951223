"""Kida environment setup.

Creates a kida Environment from ``MarkupConfig``. The environment is
created once per application and shared by every per-request
``Components`` instance; per-request state (the asset registry) is passed
through the render context, never through environment globals.
"""

from collections.abc import Callable, Mapping
from typing import Any

from kida import Environment, FileSystemLoader
from kida.template import Markup

from markupkit.config import MarkupConfig


def create_environment(config: MarkupConfig) -> Environment:
    """Create a kida Environment rooted at ``config.templates_dir``."""
    return Environment(
        loader=FileSystemLoader(str(config.templates_path)),
        autoescape=config.autoescape,
        auto_reload=config.debug,
    )


def render_file(env: Environment, name: str, context: Mapping[str, Any]) -> str:
    """Render the template *name* (templates-relative, ``/``-separated)."""
    template = env.get_template(name)
    return template.render(dict(context))


def safe(fn: Callable[..., str | None]) -> Callable[..., Markup]:
    """Wrap a helper so kida neither escapes its output nor prints ``None``."""

    def wrapper(*args: Any, **kwargs: Any) -> Markup:
        return Markup(fn(*args, **kwargs) or "")

    wrapper.__name__ = getattr(fn, "__name__", "helper")
    wrapper.__doc__ = fn.__doc__
    return wrapper
