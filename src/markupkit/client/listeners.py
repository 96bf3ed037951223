"""Page-ready and after-navigation hooks.

Two events are supported:

- ``"load"``: fires immediately when the document is already complete,
  otherwise on the document's load event.
- ``"ajax"``: fires after every completed navigation.

``on("load", fn, trigger_after_ajax=True)`` requests both: fire now (or
on load) and again after each navigation. Unknown events are ignored.
An exception from an ajax listener is logged on ``markupkit.client``;
the remaining listeners still run.
"""

import logging
from collections.abc import Callable
from typing import Any

from markupkit.client.document import Document

logger = logging.getLogger("markupkit.client")

type Listener = Callable[[], Any]

LOAD = "load"
AJAX = "ajax"


class Listeners:
    """Listener registry bound to one document."""

    __slots__ = ("_ajax", "_document")

    def __init__(self, document: Document) -> None:
        self._document = document
        self._ajax: list[Listener] = []

    def on(self, event: str, listener: Listener, trigger_after_ajax: bool = False) -> None:
        if event == LOAD:
            if self._document.ready_state == "complete":
                listener()
            else:
                self._document.add_load_listener(listener)
            if trigger_after_ajax:
                self.on(AJAX, listener)
        elif event == AJAX:
            self._ajax.append(listener)

    def off(self, event: str, listener: Listener) -> None:
        """Unregister *listener* (matched by identity)."""
        if event == LOAD:
            self._document.remove_load_listener(listener)
        elif event == AJAX:
            self._ajax = [fn for fn in self._ajax if fn is not listener]

    def trigger(self, event: str) -> None:
        """Call every listener of *event*; a failing listener is logged and skipped."""
        if event == AJAX:
            for listener in list(self._ajax):
                try:
                    listener()
                except Exception:
                    logger.exception("ajax listener %r failed", listener)

    @property
    def ajax_listeners(self) -> tuple[Listener, ...]:
        return tuple(self._ajax)
