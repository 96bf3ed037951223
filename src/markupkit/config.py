"""Renderer configuration.

MarkupConfig is a frozen dataclass: immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass
from pathlib import Path

from markupkit.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class MarkupConfig:
    """Renderer configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = MarkupConfig(templates_dir="site/templates", templates_url="/site/templates/")
    """

    # Templates
    templates_dir: str | Path = "templates"
    templates_url: str = "/templates/"
    components_dir: str = "components"
    snippets_dir: str = "snippets"
    template_suffix: str = ".html"
    autoescape: bool = True
    debug: bool = False  # kida auto_reload

    # Assets
    version_param: str = "v"  # Cache-busting query parameter (?v=<mtime>)
    mirror_assets: bool = False  # Also append every src to the host's HostAssets lists

    def __post_init__(self) -> None:
        if not self.components_dir or not self.snippets_dir:
            msg = "components_dir and snippets_dir must be non-empty"
            raise ConfigurationError(msg)
        if not self.template_suffix.startswith("."):
            msg = f"template_suffix must start with '.', got {self.template_suffix!r}"
            raise ConfigurationError(msg)
        if not self.version_param:
            msg = "version_param must be non-empty"
            raise ConfigurationError(msg)

    @property
    def templates_path(self) -> Path:
        """Templates directory as a resolved ``Path``."""
        return Path(self.templates_dir).resolve()

    @property
    def templates_base_url(self) -> str:
        """Templates URL, always ending with a single ``/``."""
        return self.templates_url.rstrip("/") + "/"
