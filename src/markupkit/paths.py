"""Logical component names to on-disk paths and public URLs.

A logical name such as ``"cards/product"`` (or ``"cards.product"``)
resolves under the components root to folder ``components/cards`` and
leaf ``product``. When a wrapper folder named after the leaf holds the
template (``components/cards/product/product.html``), resolution
descends into it so the template, script, and style can live together.

Resolution never raises: missing optional files simply resolve to paths
that do not exist.
"""

from dataclasses import dataclass
from pathlib import Path

from markupkit.config import MarkupConfig


@dataclass(frozen=True, slots=True)
class ComponentKey:
    """A resolved component location, relative to the templates directory."""

    folder: str
    name: str

    @property
    def key(self) -> str:
        """Normalized ``folder/name`` string, used as the registry dedup key."""
        return f"{self.folder}/{self.name}"

    def relative(self, ext: str) -> str:
        return f"{self.key}{ext}"

    def __str__(self) -> str:
        return self.key


def split_name(name: str) -> list[str]:
    """Split a dotted or slashed logical name into non-empty segments."""
    return [seg for seg in name.replace(".", "/").split("/") if seg]


class PathResolver:
    """Maps logical names and template-relative filenames to (path, url)."""

    __slots__ = ("_config", "_root", "_url")

    def __init__(self, config: MarkupConfig) -> None:
        self._config = config
        self._root = config.templates_path
        self._url = config.templates_base_url

    @property
    def root(self) -> Path:
        return self._root

    def resolve(self, name: str, *, snippet: bool = False) -> ComponentKey | None:
        """Resolve *name* under the components (or snippets) root.

        Returns ``None`` for an empty name.
        """
        segments = split_name(name)
        if not segments:
            return None
        *folders, leaf = segments
        base = self._config.snippets_dir if snippet else self._config.components_dir
        folder = "/".join([base, *folders])

        # Same-name wrapper folder: components/a/b/b.html
        wrapper = ComponentKey(f"{folder}/{leaf}", leaf)
        if self.template_path(wrapper).is_file():
            return wrapper
        return ComponentKey(folder, leaf)

    def template_path(self, key: ComponentKey) -> Path:
        return self._root / key.relative(self._config.template_suffix)

    def asset_path(self, key: ComponentKey, ext: str) -> Path:
        """Path of the co-located asset with extension *ext* (e.g. ``".js"``)."""
        return self._root / key.relative(ext)

    def path_and_url(self, filename: str) -> tuple[Path, str]:
        """Map a filename to its on-disk path and public URL.

        Accepts a path already inside the templates directory, a URL
        already under the templates URL, or a templates-relative name.
        """
        root = str(self._root)
        if filename.startswith(root + "/"):
            relative = filename[len(root) + 1 :]
            return Path(filename), self._url + relative
        if filename.startswith(self._url):
            relative = filename[len(self._url) :]
            return self._root / relative, filename
        relative = filename.lstrip("/")
        return self._root / relative, self._url + relative
