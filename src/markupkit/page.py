"""Page assembly and AJAX payloads.

The server half of the navigation contract. A normal request gets the
full page with the registry's tags injected; a request sent by the
client navigator (``X-Requested-With: XMLHttpRequest``) gets a JSON
payload instead::

    {"html": "...", "scripts": [{"src": ..., "attr": {...}}], "styles": [...]}

Injection mirrors an HTML-inject middleware: tags go before the first
``</head>`` / ``</body>`` marker, or are appended when it is missing.
"""

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from markupkit.assets import AssetRegistry
from markupkit.tags import render_scripts, render_styles

AJAX_HEADER = "X-Requested-With"
AJAX_VALUE = "XMLHttpRequest"


@dataclass(frozen=True, slots=True)
class Rendered:
    """A response body with its content type."""

    body: str
    content_type: str = "text/html; charset=utf-8"


def is_ajax(headers: Mapping[str, str]) -> bool:
    """True if *headers* mark a programmatic (navigator) request."""
    target = AJAX_HEADER.lower()
    for name, value in headers.items():
        if name.lower() == target:
            return value.strip().lower() == AJAX_VALUE.lower()
    return False


def fragment_payload(registry: AssetRegistry, html: str) -> dict[str, Any]:
    """Build the navigator's JSON payload.

    Head and body scripts are merged (head first); the client appends
    every new script to its document head.
    """
    scripts = [*registry.head_scripts, *registry.body_scripts]
    return {
        "html": html,
        "scripts": [d.to_dict() for d in scripts],
        "styles": [d.to_dict() for d in registry.styles],
    }


def _insert_before(body: str, snippet: str, target: str) -> str:
    if not snippet:
        return body
    if target in body:
        return body.replace(target, snippet + target, 1)
    return body + snippet


def inject_assets(html: str, registry: AssetRegistry) -> str:
    """Insert the registry's tags into a full HTML page.

    Styles then head scripts go before ``</head>``, body scripts before
    ``</body>``.
    """
    head = render_styles(registry.styles) + render_scripts(registry.head_scripts)
    body = render_scripts(registry.body_scripts)
    if head and "</head>" not in html:
        # No head: keep head assets ahead of the body scripts
        return _insert_before(html, head + body, "</body>")
    html = _insert_before(html, head, "</head>")
    return _insert_before(html, body, "</body>")


def respond(registry: AssetRegistry, html: str, headers: Mapping[str, str]) -> Rendered:
    """JSON payload for navigator requests, full page otherwise."""
    if is_ajax(headers):
        return Rendered(
            body=json.dumps(fragment_payload(registry, html)),
            content_type="application/json",
        )
    return Rendered(body=inject_assets(html, registry))
