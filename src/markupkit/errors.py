"""markupkit exception hierarchy.

Shared by the renderer, the page helpers, and the client navigator so
callers can catch ``MarkupKitError`` for anything raised here.

Missing *optional* assets are never errors; only a missing component
template and a failed client navigation raise.
"""

from pathlib import Path


class MarkupKitError(Exception):
    """Base for all markupkit-specific errors."""


class ConfigurationError(MarkupKitError):
    """Raised when ``MarkupConfig`` values are invalid."""


class ComponentNotFound(MarkupKitError):  # noqa: N818
    """The resolved template file for a component or snippet does not exist."""

    def __init__(self, name: str, path: Path) -> None:
        super().__init__(name, path)
        self.name = name
        self.path = path

    def __str__(self) -> str:
        return f"Component {self.name!r} not found (looked for {self.path})"


class NavigationError(MarkupKitError):
    """A client navigation failed to fetch or parse its payload.

    The target document is left untouched when this is raised.
    """

    def __init__(self, href: str, detail: str = "") -> None:
        super().__init__(href, detail)
        self.href = href
        self.detail = detail

    def __str__(self) -> str:
        if self.detail:
            return f"Navigation to {self.href!r} failed: {self.detail}"
        return f"Navigation to {self.href!r} failed"
