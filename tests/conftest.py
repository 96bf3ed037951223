"""Shared fixtures: a small templates tree on disk."""

import os
from pathlib import Path

import pytest

from markupkit.config import MarkupConfig

MTIME = 1_700_000_000
TEMPLATES_URL = "/site/templates/"

FILES = {
    "components/card.html": '<div class="card">{{ title }}</div>',
    "components/card.js": "console.log('card');",
    "components/card.css": ".card { color: red; }",
    "components/plain.html": "<p>plain</p>",
    "components/badge.html": '<span class="badge">new</span>',
    "components/badge.css": ".badge { color: blue; }",
    "components/nested.html": '<section>{{ component("badge") }}</section>',
    "components/gallery/gallery.html": '<div class="gallery"></div>',
    "components/gallery/gallery.js": "console.log('gallery');",
    "components/shop/product.html": "<article>{{ name }}</article>",
    "components/shop/product.css": "article { margin: 0; }",
    "components/shop/cart/cart.html": "<aside>cart</aside>",
    "components/shop/cart/cart.js": "console.log('cart');",
    "snippets/footer.html": "<footer>{{ year }}</footer>",
    "snippets/footer.css": "footer { padding: 0; }",
    "js/app.js": "console.log('app');",
    "css/site.css": "body { margin: 0; }",
    "page.html": (
        "<html><head><title>{{ title }}</title></head>"
        '<body>{{ component("badge") }}</body></html>'
    ),
}


@pytest.fixture
def templates_dir(tmp_path: Path) -> Path:
    root = tmp_path / "templates"
    for name, content in FILES.items():
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        os.utime(path, (MTIME, MTIME))
    return root


@pytest.fixture
def config(templates_dir: Path) -> MarkupConfig:
    return MarkupConfig(templates_dir=templates_dir, templates_url=TEMPLATES_URL)


def asset_url(name: str) -> str:
    """Expected cache-busted URL of a fixture asset."""
    return f"{TEMPLATES_URL}{name}?v={MTIME}"
