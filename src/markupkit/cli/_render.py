"""``markupkit render``: render one component and print it with its tags.

Exits with code 1 when the component template does not exist or a
``--var`` argument is malformed.
"""

import argparse
import json
import sys

from markupkit.components import Components
from markupkit.config import MarkupConfig
from markupkit.errors import ComponentNotFound
from markupkit.page import fragment_payload


def parse_vars(pairs: list[str]) -> dict[str, str]:
    """Parse ``KEY=VALUE`` strings. Raises ``ValueError`` on a missing ``=``."""
    variables: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            msg = f"expected KEY=VALUE, got {pair!r}"
            raise ValueError(msg)
        variables[key] = value
    return variables


def run_render(args: argparse.Namespace) -> None:
    """Render ``args.name`` and print markup plus tags (or the JSON payload)."""
    try:
        variables = parse_vars(args.var)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    components = Components(MarkupConfig(templates_dir=args.templates, templates_url=args.url))
    try:
        html = components.component(args.name, variables, is_snippet=args.snippet)
    except ComponentNotFound as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if args.ajax:
        print(json.dumps(fragment_payload(components.registry, html), indent=2))
        return

    print(components.styles() + components.scripts(head=True))
    print(html)
    print(components.scripts())
