"""Client-side navigation: fetch fragments, dedupe assets, re-run scripts.

Python model of the browser runtime plus the runtime itself::

    from markupkit.client import Document, Navigator

    document = Document()
    document.add_target(Element("main", {"id": "content"}))

    async with httpx.AsyncClient(base_url="https://example.test") as http:
        navigator = Navigator(document, client=http)
        await navigator.load("/about", "#content", history=True)
"""

from markupkit.client.document import Document, Element
from markupkit.client.extraction import extract_scripts, parse_attributes
from markupkit.client.listeners import Listeners
from markupkit.client.navigator import NavigationResult, NavigationState, Navigator
from markupkit.client.runtime import NAVIGATOR_JS, navigator_snippet

__all__ = [
    "NAVIGATOR_JS",
    "Document",
    "Element",
    "Listeners",
    "NavigationResult",
    "NavigationState",
    "Navigator",
    "extract_scripts",
    "navigator_snippet",
    "parse_attributes",
]
