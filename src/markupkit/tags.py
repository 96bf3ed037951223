"""Serialize asset buckets into HTML tags.

Pure functions over the registry: output reflects the bucket contents
exactly, in insertion order. Attribute text is already escaped by
``attr_to_string``; nothing else is escaped here.
"""

from collections.abc import Iterable

from markupkit.assets import AssetDescriptor


def _attrs(descriptor: AssetDescriptor) -> str:
    return f" {descriptor.attr}" if descriptor.attr else ""


def script_tag(descriptor: AssetDescriptor) -> str:
    return f'<script src="{descriptor.src}"{_attrs(descriptor)}></script>'


def style_tag(descriptor: AssetDescriptor) -> str:
    return f'<link rel="stylesheet" type="text/css" href="{descriptor.src}"{_attrs(descriptor)}>'


def render_scripts(descriptors: Iterable[AssetDescriptor]) -> str:
    """Concatenate ``<script>`` tags for *descriptors*."""
    return "".join(script_tag(d) for d in descriptors)


def render_styles(descriptors: Iterable[AssetDescriptor]) -> str:
    """Concatenate stylesheet ``<link>`` tags for *descriptors*."""
    return "".join(style_tag(d) for d in descriptors)
