"""markupkit CLI: render components from the command line.

Entry point registered as ``markupkit`` in ``pyproject.toml``::

    [project.scripts]
    markupkit = "markupkit.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``markupkit`` command."""
    parser = argparse.ArgumentParser(
        prog="markupkit",
        description="markupkit: file-backed components with deduplicated assets.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- markupkit render -------------------------------------------------
    render_parser = subparsers.add_parser("render", help="Render a component or snippet")
    render_parser.add_argument("name", help="Component name (e.g. cards/product)")
    render_parser.add_argument("--templates", default="templates", help="Templates directory")
    render_parser.add_argument("--url", default="/templates/", help="Public URL of the templates directory")
    render_parser.add_argument(
        "--snippet",
        action="store_true",
        help="Resolve from the snippets root instead of components",
    )
    render_parser.add_argument(
        "--var",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Template variable (repeatable)",
    )
    render_parser.add_argument(
        "--ajax",
        action="store_true",
        help="Print the navigator JSON payload instead of markup and tags",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "render":
        from markupkit.cli._render import run_render

        run_render(args)
