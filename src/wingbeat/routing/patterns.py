"""Pattern routes — literal or regex matches against the live request.

Independent of the controllers directory. Routes are registered first
and evaluated later, in registration order::

    routes = PatternRouter()

    @routes.get("/")
    def index():
        return "home"

    @routes.any("/api/.*", halt=True)
    def api():
        return "api"

    outcome = routes.evaluate("GET", "/api/users")

A matching route runs its action immediately. A match on a route with
``halt=True`` stops evaluation: later routes are never tried and the
outcome reports ``halted`` so the caller can skip all remaining work.
"""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from wingbeat.routing.paths import sanitize_path

logger = logging.getLogger("wingbeat.routing")

ANY = "ANY"

type Action = Callable[[], Any]


@dataclass(frozen=True, slots=True)
class PatternMatch:
    """Record of a pattern route that matched the current request."""

    verb: str
    pattern: str


@dataclass(frozen=True, slots=True)
class PatternRoute:
    """A registered pattern route. Immutable once created."""

    verb: str
    pattern: str
    action: Action
    halt: bool = False
    regex: re.Pattern[str] | None = field(default=None, compare=False, repr=False)

    def matches(self, method: str, path: str) -> bool:
        """True when the route accepts *method* and the sanitized *path*."""
        if self.verb != ANY and self.verb != method.upper():
            return False
        url = sanitize_path(path) or "/"
        if self.pattern == url:
            return True
        return self.regex is not None and self.regex.fullmatch(url) is not None


@dataclass(frozen=True, slots=True)
class PatternOutcome:
    """What happened while evaluating the pattern routes for a request."""

    matches: tuple[PatternMatch, ...] = ()
    outputs: tuple[Any, ...] = ()
    halted: bool = False


def _compile(pattern: str) -> re.Pattern[str] | None:
    try:
        return re.compile(pattern)
    except re.error as exc:
        logger.warning("pattern %r is not a valid regex (%s); matching literally", pattern, exc)
        return None


class PatternRouter:
    """Ordered registry of pattern routes."""

    __slots__ = ("_routes",)

    def __init__(self) -> None:
        self._routes: list[PatternRoute] = []

    @property
    def routes(self) -> tuple[PatternRoute, ...]:
        return tuple(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    # -- Registration --

    def register(
        self,
        verb: str,
        pattern: str,
        action: Action | None = None,
        *,
        halt: bool = False,
    ) -> Any:
        """Register *action* for *verb* (or ``"ANY"``) and *pattern*.

        Verbs are free-form, so custom methods work too. Without
        *action* this returns a decorator.
        """
        if action is None:

            def decorator(func: Action) -> Action:
                self.register(verb, pattern, func, halt=halt)
                return func

            return decorator

        route = PatternRoute(
            verb=verb.upper(),
            pattern=pattern,
            action=action,
            halt=halt,
            regex=_compile(pattern),
        )
        self._routes.append(route)
        return route

    def get(self, pattern: str, action: Action | None = None, *, halt: bool = False) -> Any:
        return self.register("GET", pattern, action, halt=halt)

    def post(self, pattern: str, action: Action | None = None, *, halt: bool = False) -> Any:
        return self.register("POST", pattern, action, halt=halt)

    def put(self, pattern: str, action: Action | None = None, *, halt: bool = False) -> Any:
        return self.register("PUT", pattern, action, halt=halt)

    def patch(self, pattern: str, action: Action | None = None, *, halt: bool = False) -> Any:
        return self.register("PATCH", pattern, action, halt=halt)

    def delete(self, pattern: str, action: Action | None = None, *, halt: bool = False) -> Any:
        return self.register("DELETE", pattern, action, halt=halt)

    def any(self, pattern: str, action: Action | None = None, *, halt: bool = False) -> Any:
        return self.register(ANY, pattern, action, halt=halt)

    # -- Evaluation --

    def evaluate(
        self,
        method: str,
        path: str,
        *,
        record: Callable[[PatternMatch], None] | None = None,
    ) -> PatternOutcome:
        """Try every route in registration order against the request.

        *record* is called with each match before its action runs, so
        actions can see the matches made so far.
        """
        matches: list[PatternMatch] = []
        outputs: list[Any] = []

        for route in self._routes:
            if not route.matches(method, path):
                continue

            match = PatternMatch(verb=route.verb, pattern=route.pattern)
            matches.append(match)
            if record is not None:
                record(match)
            logger.debug("pattern %s %r matched %s", route.verb, route.pattern, path)

            result = route.action()
            if result is not None:
                outputs.append(result)

            if route.halt:
                return PatternOutcome(tuple(matches), tuple(outputs), halted=True)

        return PatternOutcome(tuple(matches), tuple(outputs))
