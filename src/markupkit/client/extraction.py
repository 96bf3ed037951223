"""Inline ``<script>`` extraction from fetched HTML.

Markup inserted as HTML never executes its inline scripts, so the
navigator pulls them out first and re-inserts them as real script
elements after the splice. ``<script src="...">`` references with an
empty body are left in the markup untouched.

Matching is regex based and therefore approximate: a literal
``</script>`` inside a JavaScript string ends the match early. Full HTML
parsing is deliberately not attempted.
"""

import re

from markupkit.client.document import Element

SCRIPT_RE = re.compile(
    r"<script\b(?P<attributes>[^>]*)>(?P<content>.*?)</script\s*>",
    re.IGNORECASE | re.DOTALL,
)

ATTRIBUTE_RE = re.compile(
    r"""(?P<name>[^\s=/>"']+)(?:\s*=\s*(?P<quote>["'])(?P<value>.*?)(?P=quote))?""",
    re.DOTALL,
)


def parse_attributes(text: str) -> dict[str, str]:
    """Parse tag attribute text; bare attributes map to ``""``."""
    return {m["name"]: m["value"] or "" for m in ATTRIBUTE_RE.finditer(text)}


def extract_scripts(html: str) -> tuple[str, list[Element]]:
    """Remove inline scripts from *html*.

    Returns the cleaned markup and one detached ``script`` element per
    inline script, in document order.
    """
    scripts: list[Element] = []

    def take(match: re.Match[str]) -> str:
        content = match["content"]
        if not content.strip():
            return match[0]
        scripts.append(Element("script", parse_attributes(match["attributes"]), text=content))
        return ""

    cleaned = SCRIPT_RE.sub(take, html)
    return cleaned, scripts
