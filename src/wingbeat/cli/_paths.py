"""``wingbeat resolve`` — show how a path resolves.

Runs only the path resolver, so controller files are loaded (to check
home-fallback methods) but no controller is instantiated.
"""

import argparse
import sys

from wingbeat.cli._resolve import resolve_app
from wingbeat.errors import NotFound


def run_resolve(args: argparse.Namespace) -> None:
    """Print the controller, action and params serving ``args.path``."""
    try:
        app = resolve_app(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    method = args.method.upper()
    try:
        resolution = app.resolve(args.path, method)
    except NotFound as exc:
        print(f"404 {method} {args.path}: {exc.detail}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(f"controller  {resolution.controller}")
    print(f"action      {resolution.action}")
    print(f"params      {', '.join(resolution.params) or '-'}")
