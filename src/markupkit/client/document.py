"""Minimal in-memory document for the navigator.

Models just what partial-page navigation touches: a head that assets
are appended to, addressable target elements whose markup is replaced,
script execution order, the history stack, and the window load event.

Script "execution" is delegated to an optional runner callable, invoked
once for every script element appended to the document, in order.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any

type ScriptRunner = Callable[[Element], Any]


@dataclass(slots=True, eq=False)
class Element:
    """A document element. Compared by identity."""

    tag: str
    attributes: dict[str, str] = field(default_factory=dict)
    text: str = ""
    html: str = ""
    children: list[Element] = field(default_factory=list)
    properties: dict[str, Any] = field(default_factory=dict)

    def get_attribute(self, name: str) -> str | None:
        return self.attributes.get(name)

    def set_attribute(self, name: str, value: str = "") -> None:
        self.attributes[name] = value

    @property
    def id(self) -> str | None:
        return self.attributes.get("id")

    def clear(self) -> None:
        """Drop inner markup and child elements (``innerHTML = ""``)."""
        self.html = ""
        self.children.clear()

    def insert_html(self, html: str) -> None:
        """Append markup at the end (``insertAdjacentHTML("beforeend")``)."""
        self.html += html

    def iter(self) -> Iterator[Element]:
        """This element and all descendants, depth first."""
        yield self
        for child in self.children:
            yield from child.iter()


def _reference_re(attribute: str, url: str) -> re.Pattern[str]:
    return re.compile(rf"""(?:^|\s){re.escape(attribute)}\s*=\s*(["']){re.escape(url)}\1""")


class Document:
    """The page a navigator operates on."""

    __slots__ = ("_load_listeners", "_runner", "_targets", "body", "executed", "head", "history", "ready_state")

    def __init__(
        self,
        *,
        ready_state: str = "complete",
        script_runner: ScriptRunner | None = None,
    ) -> None:
        self.head = Element("head")
        self.body = Element("body")
        self.ready_state = ready_state
        self.history: list[str] = []
        self.executed: list[Element] = []
        self._runner = script_runner
        self._targets: dict[str, Element] = {}
        self._load_listeners: list[Callable[[], Any]] = []

    # -- Structure ----------------------------------------------------------

    def add_target(self, element: Element) -> Element:
        """Make *element* addressable as ``#<id>`` (it is placed in the body)."""
        if not element.id:
            msg = "target elements need an id"
            raise ValueError(msg)
        self._targets[element.id] = element
        self.body.children.append(element)
        return element

    def query(self, selector: str) -> Element | None:
        """Resolve ``"head"``, ``"body"`` or ``"#id"``; anything else is ``None``."""
        if selector == "head":
            return self.head
        if selector == "body":
            return self.body
        if selector.startswith("#"):
            return self._targets.get(selector[1:])
        return None

    def elements(self) -> Iterator[Element]:
        yield from self.head.iter()
        yield from self.body.iter()

    def references(self, attribute: str, url: str) -> bool:
        """True if any element or spliced markup has ``attribute="url"``.

        Equivalent of ``document.querySelector('[attribute="url"]')``.
        """
        pattern = _reference_re(attribute, url)
        for element in self.elements():
            if element.attributes.get(attribute) == url:
                return True
            if element.html and pattern.search(element.html):
                return True
        return False

    def append_child(self, parent: Element, child: Element) -> None:
        """Append *child*; script elements execute on insertion."""
        parent.children.append(child)
        if child.tag == "script":
            self.executed.append(child)
            if self._runner is not None:
                self._runner(child)

    # -- History ------------------------------------------------------------

    def push_state(self, url: str) -> None:
        self.history.append(url)

    @property
    def location(self) -> str | None:
        return self.history[-1] if self.history else None

    # -- Load event ---------------------------------------------------------

    def add_load_listener(self, listener: Callable[[], Any]) -> None:
        self._load_listeners.append(listener)

    def remove_load_listener(self, listener: Callable[[], Any]) -> None:
        self._load_listeners = [fn for fn in self._load_listeners if fn is not listener]

    def finish_loading(self) -> None:
        """Mark the document complete and fire the load event once."""
        if self.ready_state == "complete":
            return
        self.ready_state = "complete"
        for listener in list(self._load_listeners):
            listener()
