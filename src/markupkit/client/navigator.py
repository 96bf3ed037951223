"""Partial-page (AJAX) navigation.

``Navigator.load()`` fetches a page fragment as JSON, injects the
stylesheets and scripts the document does not reference yet, replaces
the target's markup, and re-inserts the fragment's inline scripts so
they execute in order::

    idle -> fetching -> extracting -> injecting-assets
         -> splicing-dom -> executing-scripts -> idle

The document itself is the source of truth for asset deduplication on
the client: a URL is skipped when any element (or spliced markup)
already references it.

Concurrent ``load()`` calls are not coordinated; whichever finishes last
wins the target. A failed fetch or malformed payload is logged and
raised as ``NavigationError`` before the document is touched.
"""

import asyncio
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

import httpx

from markupkit.client.document import Document, Element
from markupkit.client.extraction import extract_scripts
from markupkit.client.listeners import AJAX, Listeners
from markupkit.errors import NavigationError
from markupkit.page import AJAX_HEADER, AJAX_VALUE

logger = logging.getLogger("markupkit.client")

HEADERS = {AJAX_HEADER: AJAX_VALUE}


class NavigationState(Enum):
    IDLE = "idle"
    FETCHING = "fetching"
    EXTRACTING = "extracting"
    INJECTING_ASSETS = "injecting-assets"
    SPLICING_DOM = "splicing-dom"
    EXECUTING_SCRIPTS = "executing-scripts"


@dataclass(frozen=True, slots=True)
class AssetRef:
    """A stylesheet or script entry of the JSON payload."""

    kind: str  # "styles" | "scripts"
    src: str
    attr: tuple[tuple[str, str], ...] = ()


@dataclass(frozen=True, slots=True)
class NavigationResult:
    href: str
    html: str
    scripts: tuple[Element, ...]
    injected: tuple[str, ...]
    skipped: tuple[str, ...]
    history_url: str | None = None


def _parse_assets(payload: Mapping[str, Any]) -> list[AssetRef]:
    refs: list[AssetRef] = []
    for kind in ("styles", "scripts"):
        for entry in payload.get(kind) or ():
            src = entry["src"]
            if not isinstance(src, str) or not src:
                msg = f"invalid {kind} entry: {entry!r}"
                raise ValueError(msg)
            attr = entry.get("attr") or {}
            if isinstance(attr, list):
                attr = dict(enumerate(attr))
            refs.append(AssetRef(kind, src, tuple((str(k), str(v)) for k, v in attr.items())))
    return refs


def _asset_element(ref: AssetRef) -> Element:
    if ref.kind == "scripts":
        element = Element("script", {"src": ref.src})
        # load in order, later scripts may depend on earlier ones
        element.properties["async"] = False
    else:
        element = Element("link", {"href": ref.src, "rel": "stylesheet", "type": "text/css"})
    for name, value in ref.attr:
        if name.isdigit():
            element.set_attribute(value, "")
        else:
            element.set_attribute(name, value)
    return element


def history_url(href: str, ignore_segment: str = "") -> str:
    """Trim *href* at the last occurrence of *ignore_segment*, if present."""
    if ignore_segment:
        index = href.rfind(ignore_segment)
        if index != -1:
            return href[:index]
    return href


class Navigator:
    """Loads page fragments into a ``Document``.

    Uses the injected ``httpx.AsyncClient`` when given (the caller owns
    it); otherwise a client is opened per navigation.
    """

    __slots__ = ("_client", "_state", "document", "listeners")

    def __init__(
        self,
        document: Document,
        *,
        client: httpx.AsyncClient | None = None,
        listeners: Listeners | None = None,
    ) -> None:
        self.document = document
        self.listeners = listeners if listeners is not None else Listeners(document)
        self._client = client
        self._state = NavigationState.IDLE

    @property
    def state(self) -> NavigationState:
        return self._state

    async def load(
        self,
        href: str,
        target: Element | str = "body",
        *,
        delay: float = 0.0,
        history: bool = False,
        history_ignore_segment: str = "",
    ) -> NavigationResult | None:
        """Navigate *target* to *href*.

        Args:
            href: URL of the page to load.
            target: Element or selector (``"body"``, ``"#id"``).
            delay: Minimum seconds between fetch start and the splice.
            history: Push the (optionally trimmed) URL onto the history.
            history_ignore_segment: Trim from the last occurrence of this
                segment before pushing.

        Returns ``None`` without fetching when *href* is empty or the
        target does not resolve.

        Raises:
            NavigationError: the fetch failed or the payload is malformed.
        """
        if not href or target is None:
            return None
        element = self.document.query(target) if isinstance(target, str) else target
        if element is None:
            return None

        loop = asyncio.get_running_loop()
        started = loop.time()

        try:
            self._state = NavigationState.FETCHING
            payload = await self._fetch(href)
            self._state = NavigationState.EXTRACTING
            raw = payload["html"]
            if not isinstance(raw, str):
                msg = f"expected html to be a string, got {type(raw).__name__}"
                raise TypeError(msg)
            html, scripts = extract_scripts(raw)
            refs = _parse_assets(payload)
        except (httpx.HTTPError, ValueError, KeyError, TypeError, AttributeError) as exc:
            self._state = NavigationState.IDLE
            logger.exception("Navigation to %s failed", href)
            raise NavigationError(href, str(exc)) from exc

        self._state = NavigationState.INJECTING_ASSETS
        injected: list[str] = []
        skipped: list[str] = []
        for ref in refs:
            attribute = "src" if ref.kind == "scripts" else "href"
            if self.document.references(attribute, ref.src):
                skipped.append(ref.src)
                continue
            self.document.append_child(self.document.head, _asset_element(ref))
            injected.append(ref.src)

        pushed = None
        if history:
            pushed = history_url(href, history_ignore_segment)
            self.document.push_state(pushed)

        remaining = delay - (loop.time() - started)
        if remaining > 0:
            await asyncio.sleep(remaining)

        self._state = NavigationState.SPLICING_DOM
        element.clear()
        element.insert_html(html)

        self._state = NavigationState.EXECUTING_SCRIPTS
        for script in scripts:
            self.document.append_child(element, script)

        # next frame
        await asyncio.sleep(0)
        self.listeners.trigger(AJAX)
        self._state = NavigationState.IDLE

        return NavigationResult(
            href=href,
            html=html,
            scripts=tuple(scripts),
            injected=tuple(injected),
            skipped=tuple(skipped),
            history_url=pushed,
        )

    async def _fetch(self, href: str) -> Mapping[str, Any]:
        if self._client is not None:
            response = await self._client.get(href, headers=HEADERS)
        else:
            async with httpx.AsyncClient() as client:
                response = await client.get(href, headers=HEADERS)
        response.raise_for_status()
        payload = response.json()
        if not isinstance(payload, Mapping):
            msg = f"expected a JSON object, got {type(payload).__name__}"
            raise TypeError(msg)
        return payload
