"""Wingbeat CLI — inspect how an app routes requests.

Entry point registered as ``wingbeat`` in ``pyproject.toml``::

    [project.scripts]
    wingbeat = "wingbeat.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``wingbeat`` command."""
    parser = argparse.ArgumentParser(
        prog="wingbeat",
        description="Wingbeat — directory-routed controllers with load-once components.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- wingbeat resolve -------------------------------------------------
    resolve_parser = subparsers.add_parser(
        "resolve", help="Show which controller and action serve a path"
    )
    resolve_parser.add_argument("app", help="Import string or app file (e.g. site:app, app.py)")
    resolve_parser.add_argument("path", help="Request path (e.g. /admin/users/edit/3)")
    resolve_parser.add_argument(
        "--method",
        "-X",
        default="GET",
        help="HTTP method (default: GET)",
    )

    # -- wingbeat routes --------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered pattern routes")
    routes_parser.add_argument("app", help="Import string or app file (e.g. site:app, app.py)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "resolve":
        from wingbeat.cli._paths import run_resolve

        run_resolve(args)
    elif args.command == "routes":
        from wingbeat.cli._routes import run_routes

        run_routes(args)
