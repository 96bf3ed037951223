"""Deduplicating asset registry.

One ``AssetRegistry`` lives for one render context (typically one
request). It records which components have already registered their
co-located assets and holds three ordered buckets of descriptors:
head scripts, body scripts, and styles.

Attribute maps follow the HTML shorthand used throughout markupkit::

    {"type": "module"}         -> type="module"
    {0: "defer"}               -> defer
    ["defer", "nomodule"]      -> defer nomodule
    "async"                    -> async=""
"""

from __future__ import annotations

import html
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

type AttributeItems = tuple[tuple[int | str, str], ...]
type Attributes = Mapping[int | str, Any] | Sequence[str] | str | None


def normalize_attributes(attr: Attributes) -> AttributeItems:
    """Convert any accepted attribute form to ordered ``(key, value)`` pairs.

    Integer keys mark bare boolean attributes whose name is the value.
    """
    if not attr:
        return ()
    if isinstance(attr, str):
        return ((attr, ""),)
    if isinstance(attr, Mapping):
        return tuple((k if isinstance(k, int) else str(k), str(v)) for k, v in attr.items())
    return tuple((i, str(name)) for i, name in enumerate(attr))


def attr_to_string(items: AttributeItems) -> str:
    """Serialize attribute pairs into tag attribute text (values escaped)."""
    parts: list[str] = []
    for key, value in items:
        if isinstance(key, int):
            parts.append(html.escape(value, quote=True))
        else:
            parts.append(f'{key}="{html.escape(value, quote=True)}"')
    return " ".join(parts)


@dataclass(frozen=True, slots=True)
class AssetDescriptor:
    """A script or stylesheet reference. Immutable once created."""

    src: str
    attr: str = ""
    attributes: AttributeItems = ()

    @classmethod
    def build(cls, src: str, attr: Attributes = None) -> AssetDescriptor:
        items = normalize_attributes(attr)
        return cls(src=src, attr=attr_to_string(items), attributes=items)

    def to_dict(self) -> dict[str, Any]:
        """JSON shape consumed by the client navigator."""
        return {"src": self.src, "attr": {str(k): v for k, v in self.attributes}}


class AssetBucket:
    """Ordered set of descriptors keyed by ``src``.

    Insertion order is emission order. Adding an empty ``src`` or one
    already present is a no-op.
    """

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: dict[str, AssetDescriptor] = {}

    def add(self, descriptor: AssetDescriptor) -> bool:
        """Add *descriptor*; return ``False`` when it was skipped."""
        if not descriptor.src or descriptor.src in self._items:
            return False
        self._items[descriptor.src] = descriptor
        return True

    @property
    def srcs(self) -> tuple[str, ...]:
        return tuple(self._items)

    def __contains__(self, src: object) -> bool:
        return src in self._items

    def __iter__(self) -> Iterator[AssetDescriptor]:
        return iter(self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"AssetBucket({list(self._items)!r})"


@dataclass(slots=True)
class HostAssets:
    """Host-managed asset lists, filled when ``mirror_assets`` is enabled.

    For hosts that emit their own tags from plain URL lists.
    """

    scripts: list[str] = field(default_factory=list)
    styles: list[str] = field(default_factory=list)

    def add_script(self, src: str) -> None:
        if src not in self.scripts:
            self.scripts.append(src)

    def add_style(self, src: str) -> None:
        if src not in self.styles:
            self.styles.append(src)


class AssetRegistry:
    """Per-render-context store of registered components and assets."""

    __slots__ = ("_components", "body_scripts", "head_scripts", "styles")

    def __init__(self) -> None:
        self._components: dict[str, None] = {}
        self.head_scripts = AssetBucket()
        self.body_scripts = AssetBucket()
        self.styles = AssetBucket()

    # -- Components -------------------------------------------------------

    def has_component(self, key: str) -> bool:
        return key in self._components

    def add_component(self, key: str) -> None:
        self._components.setdefault(key, None)

    @property
    def components(self) -> tuple[str, ...]:
        """Registered component keys, in first-render order."""
        return tuple(self._components)

    def list_components(
        self,
        *,
        separator: str = ",",
        quote: str = '"',
        closing_quote: str = "",
        prepend: str = "",
        append: str = "",
    ) -> str:
        """Join component keys into one quoted string.

        ``closing_quote`` defaults to ``quote``. With no components the
        result is an empty string.
        """
        if not self._components:
            return ""
        closing = closing_quote or quote
        joined = (closing + separator + quote).join(self._components)
        return f"{prepend}{quote}{joined}{closing}{append}"

    # -- Scripts / styles -------------------------------------------------

    def scripts(self, head: bool = False) -> AssetBucket:
        return self.head_scripts if head else self.body_scripts

    def __repr__(self) -> str:
        return (
            f"AssetRegistry(components={len(self._components)}, "
            f"head_scripts={len(self.head_scripts)}, "
            f"body_scripts={len(self.body_scripts)}, styles={len(self.styles)})"
        )
