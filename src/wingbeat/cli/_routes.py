"""``wingbeat routes`` — list registered pattern routes.

Resolves an import string to a wingbeat App and prints its pattern
routes in evaluation order with verb, pattern, halt flag and action.
"""

import argparse
import sys

from wingbeat.cli._resolve import resolve_app


def run_routes(args: argparse.Namespace) -> None:
    """List the pattern routes of a wingbeat app."""
    try:
        app = resolve_app(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    routes = app.patterns.routes
    if not routes:
        print("No pattern routes registered.")
        return

    # Build rows: (verb, pattern, halt, action_name)
    rows: list[tuple[str, str, str, str]] = [
        (
            route.verb,
            route.pattern,
            "halt" if route.halt else "",
            getattr(route.action, "__name__", str(route.action)),
        )
        for route in routes
    ]

    max_verb = max(max(len(r[0]) for r in rows), 4)  # "VERB" header
    max_pattern = max(max(len(r[1]) for r in rows), 7)  # "PATTERN" header

    fmt = f"{{:<{max_verb}}}  {{:<{max_pattern}}}  {{:<4}}  {{}}"
    print(fmt.format("VERB", "PATTERN", "HALT", "ACTION"))
    sep_len = max_verb + max_pattern + 10 + max(len(r[3]) for r in rows)
    print("-" * min(sep_len, 80))
    for verb, pattern, halt, action in rows:
        print(fmt.format(verb, pattern, halt, action))
