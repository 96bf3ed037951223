"""Tests for markupkit.page: AJAX detection, payloads, and tag injection."""

import json

import pytest

from markupkit.assets import AssetDescriptor, AssetRegistry
from markupkit.page import fragment_payload, inject_assets, is_ajax, respond

PAGE = "<html><head><title>T</title></head><body><main>hi</main></body></html>"


@pytest.fixture
def registry() -> AssetRegistry:
    registry = AssetRegistry()
    registry.head_scripts.add(AssetDescriptor.build("/head.js"))
    registry.body_scripts.add(AssetDescriptor.build("/b.js", {0: "defer"}))
    registry.body_scripts.add(AssetDescriptor.build("/c.js"))
    registry.styles.add(AssetDescriptor.build("/s.css"))
    return registry


class TestIsAjax:
    def test_header_present(self) -> None:
        assert is_ajax({"X-Requested-With": "XMLHttpRequest"})

    def test_case_insensitive(self) -> None:
        assert is_ajax({"x-requested-with": "xmlhttprequest"})

    def test_absent_or_other(self) -> None:
        assert not is_ajax({})
        assert not is_ajax({"X-Requested-With": "fetch"})
        assert not is_ajax({"HX-Request": "true"})


class TestFragmentPayload:
    def test_shape(self, registry: AssetRegistry) -> None:
        payload = fragment_payload(registry, "<p>x</p>")
        assert payload == {
            "html": "<p>x</p>",
            "scripts": [
                {"src": "/head.js", "attr": {}},
                {"src": "/b.js", "attr": {"0": "defer"}},
                {"src": "/c.js", "attr": {}},
            ],
            "styles": [{"src": "/s.css", "attr": {}}],
        }

    def test_empty_registry(self) -> None:
        assert fragment_payload(AssetRegistry(), "") == {"html": "", "scripts": [], "styles": []}


class TestInjectAssets:
    def test_head_and_body_placement(self, registry: AssetRegistry) -> None:
        html = inject_assets(PAGE, registry)
        head, body = html.split("</head>")
        assert '<link rel="stylesheet" type="text/css" href="/s.css">' in head
        assert '<script src="/head.js"></script>' in head
        assert head.index("/s.css") < head.index("/head.js")
        assert body.endswith('<script src="/b.js" defer></script><script src="/c.js"></script></body></html>')

    def test_each_tag_once(self, registry: AssetRegistry) -> None:
        html = inject_assets(PAGE, registry)
        for src in ("/head.js", "/b.js", "/c.js", "/s.css"):
            assert html.count(f'"{src}"') == 1

    def test_no_markers_appends(self, registry: AssetRegistry) -> None:
        html = inject_assets("<p>fragment</p>", registry)
        assert html.startswith("<p>fragment</p>")
        assert html.index("/s.css") < html.index("/head.js") < html.index("/b.js")

    def test_empty_registry_unchanged(self) -> None:
        assert inject_assets(PAGE, AssetRegistry()) == PAGE


class TestRespond:
    def test_full_page(self, registry: AssetRegistry) -> None:
        rendered = respond(registry, PAGE, {})
        assert "text/html" in rendered.content_type
        assert '<script src="/c.js"></script></body>' in rendered.body

    def test_ajax_payload(self, registry: AssetRegistry) -> None:
        rendered = respond(registry, "<p>x</p>", {"X-Requested-With": "XMLHttpRequest"})
        assert rendered.content_type == "application/json"
        payload = json.loads(rendered.body)
        assert payload["html"] == "<p>x</p>"
        assert [s["src"] for s in payload["scripts"]] == ["/head.js", "/b.js", "/c.js"]
