"""markupkit: file-backed components with deduplicated CSS/JS assets.

Renders reusable markup fragments from disk, registers the stylesheets
and scripts that sit next to them, and emits each tag exactly once.

Basic usage::

    from markupkit import Components, MarkupConfig

    components = Components(MarkupConfig(templates_dir="templates"))
    html = components.component("cards/product", {"title": "Lamp"})
    head = components.styles() + components.scripts(head=True)
    tail = components.scripts()

Partial-page navigation (``markupkit.client``)::

    from markupkit.client import Document, Navigator
    await Navigator(Document(), client=http).load("/about", "#content")
"""

__version__ = "0.1.0"
__all__ = [
    "AssetDescriptor",
    "AssetRegistry",
    "ComponentNotFound",
    "Components",
    "ConfigurationError",
    "HostAssets",
    "MarkupConfig",
    "MarkupKitError",
    "NavigationError",
    "create_environment",
    "inject_assets",
    "respond",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import markupkit`` fast (kida and httpx load on first use).
    """
    if name == "Components":
        from markupkit.components import Components

        return Components

    if name == "MarkupConfig":
        from markupkit.config import MarkupConfig

        return MarkupConfig

    if name in ("AssetDescriptor", "AssetRegistry", "HostAssets"):
        from markupkit import assets as _assets

        return getattr(_assets, name)

    if name in ("inject_assets", "respond"):
        from markupkit import page as _page

        return getattr(_page, name)

    if name == "create_environment":
        from markupkit.templating import create_environment

        return create_environment

    if name in ("ComponentNotFound", "ConfigurationError", "MarkupKitError", "NavigationError"):
        from markupkit import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
