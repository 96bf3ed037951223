"""Component renderer and asset registration.

``Components`` is the per-request entry point. It owns (or is handed) an
``AssetRegistry`` and renders component and snippet templates through a
shared kida environment, registering each component's co-located
``.js`` / ``.css`` files the first time the component is rendered.

Usage::

    env = create_environment(config)            # once per app

    components = Components(config, env=env)    # once per request
    body = components.component("cards/product", {"title": "Lamp"})
    page = inject_assets(layout_html(body), components.registry)

Asset registration is best effort: a missing script or stylesheet is
skipped silently. Only a missing component template raises
``ComponentNotFound``.
"""

import logging
from collections.abc import Mapping
from typing import Any

from kida import Environment

from markupkit.assets import AssetBucket, AssetDescriptor, AssetRegistry, Attributes, HostAssets
from markupkit.config import MarkupConfig
from markupkit.errors import ComponentNotFound
from markupkit.paths import ComponentKey, PathResolver
from markupkit.tags import render_scripts, render_styles
from markupkit.templating import create_environment, render_file, safe

logger = logging.getLogger("markupkit.components")

ATTR_SCRIPT = "attrScript"
ATTR_STYLE = "attrStyle"


def is_absolute_url(filename: str) -> bool:
    return "://" in filename or filename.startswith("//")


class Components:
    """Renders components/snippets and collects their assets.

    Everything is injected: the configuration, the kida environment
    (created from the configuration when omitted), the registry (fresh
    when omitted), and the optional host asset lists used when
    ``config.mirror_assets`` is enabled.
    """

    __slots__ = ("config", "env", "host", "registry", "resolver")

    def __init__(
        self,
        config: MarkupConfig | None = None,
        *,
        env: Environment | None = None,
        registry: AssetRegistry | None = None,
        host: HostAssets | None = None,
    ) -> None:
        self.config = config or MarkupConfig()
        self.env = env if env is not None else create_environment(self.config)
        self.registry = registry if registry is not None else AssetRegistry()
        self.host = host if host is not None else HostAssets()
        self.resolver = PathResolver(self.config)

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def script(
        self,
        filename: str,
        head: bool | Attributes = False,
        attr: Attributes = None,
    ) -> None:
        """Register a ``<script>`` for the head or end of body.

        A mapping passed as *head* is taken as *attr* and the script goes
        to the body, so ``script("app", {"type": "module"})`` works.
        """
        if isinstance(head, (Mapping, list, tuple, str)):
            attr, head = head, False
        src = self._resolve_src(filename, ".js")
        if src is None:
            return
        bucket = self.registry.scripts(head=bool(head))
        self._add(bucket, AssetDescriptor.build(src, attr))
        if self.config.mirror_assets:
            self.host.add_script(src)

    def js(self, filename: str, head: bool | Attributes = False, attr: Attributes = None) -> None:
        """Shorthand for :meth:`script`."""
        self.script(filename, head, attr)

    def style(self, filename: str, attr: Attributes = None) -> None:
        """Register a stylesheet ``<link>``."""
        src = self._resolve_src(filename, ".css")
        if src is None:
            return
        self._add(self.registry.styles, AssetDescriptor.build(src, attr))
        if self.config.mirror_assets:
            self.host.add_style(src)

    def css(self, filename: str, attr: Attributes = None) -> None:
        """Shorthand for :meth:`style`."""
        self.style(filename, attr)

    def _resolve_src(self, filename: str, ext: str) -> str | None:
        if not filename:
            return None
        if is_absolute_url(filename):
            return filename
        if not filename.endswith(ext):
            filename += ext
        path, url = self.resolver.path_and_url(filename)
        if not path.is_file():
            logger.debug("Skipping missing asset %s", path)
            return None
        mtime = int(path.stat().st_mtime)
        return f"{url}?{self.config.version_param}={mtime}"

    @staticmethod
    def _add(bucket: AssetBucket, descriptor: AssetDescriptor) -> None:
        if not bucket.add(descriptor):
            logger.debug("Asset already registered: %s", descriptor.src)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def component(
        self,
        name: str,
        variables: Mapping[str, Any] | None = None,
        is_snippet: bool = False,
    ) -> str:
        """Render a component and register its same-named assets once.

        ``variables["attrScript"]`` / ``variables["attrStyle"]`` become the
        tag attributes of the co-located script and stylesheet.

        Raises:
            ComponentNotFound: the resolved template file does not exist.
        """
        key = self.resolver.resolve(name, snippet=is_snippet)
        if key is None:
            return ""
        variables = dict(variables or {})

        template = self.resolver.template_path(key)
        if not template.is_file():
            raise ComponentNotFound(name, template)

        if not self.registry.has_component(key.key):
            self._register_colocated(key, variables)
            self.registry.add_component(key.key)

        return render_file(self.env, key.relative(self.config.template_suffix), self._context(variables))

    def snippet(self, name: str, variables: Mapping[str, Any] | None = None) -> str:
        """Render a snippet (a component from the snippets root)."""
        if not name:
            return ""
        return self.component(name, variables, is_snippet=True)

    def render(self, template: str, /, **variables: Any) -> str:
        """Render any templates-relative file (e.g. a page layout).

        The same helpers as in components are available, so a page can
        call ``component()`` and ``styles()`` directly.
        """
        return render_file(self.env, template, self._context(variables))

    def _register_colocated(self, key: ComponentKey, variables: Mapping[str, Any]) -> None:
        if self.resolver.asset_path(key, ".js").is_file():
            self.script(key.relative(".js"), False, variables.get(ATTR_SCRIPT))
        if self.resolver.asset_path(key, ".css").is_file():
            self.style(key.relative(".css"), variables.get(ATTR_STYLE))

    def _context(self, variables: Mapping[str, Any]) -> dict[str, Any]:
        context: dict[str, Any] = {
            "component": safe(self.component),
            "snippet": safe(self.snippet),
            "script": safe(self.script),
            "js": safe(self.js),
            "style": safe(self.style),
            "css": safe(self.css),
            "scripts": safe(self.scripts),
            "styles": safe(self.styles),
        }
        context.update(variables)
        return context

    # ------------------------------------------------------------------
    # Accessors and tag output
    # ------------------------------------------------------------------

    def get_components(self) -> tuple[str, ...]:
        return self.registry.components

    def list_components(self, **options: str) -> str:
        """See :meth:`AssetRegistry.list_components`."""
        return self.registry.list_components(**options)

    def get_scripts(self, head: bool = False) -> AssetBucket:
        return self.registry.scripts(head=head)

    def get_styles(self) -> AssetBucket:
        return self.registry.styles

    def print_scripts(self, head: bool = False) -> str:
        """Return the ``<script>`` tags of the head or body bucket."""
        return render_scripts(self.registry.scripts(head=head))

    def scripts(self, head: bool = False) -> str:
        """Shorthand for :meth:`print_scripts`."""
        return self.print_scripts(head)

    def print_styles(self) -> str:
        """Return the stylesheet ``<link>`` tags."""
        return render_styles(self.registry.styles)

    def styles(self) -> str:
        """Shorthand for :meth:`print_styles`."""
        return self.print_styles()
