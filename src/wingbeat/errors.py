"""Wingbeat exception hierarchy.

Shared across the component factory, the path resolver, the hook
dispatcher, and the request pipeline so every module raises and catches
the same types.
"""

from dataclasses import dataclass


class WingbeatError(Exception):
    """Base for all wingbeat-specific errors."""


class ConfigurationError(WingbeatError):
    """Raised when app configuration is invalid.

    Typically raised while the ``App`` is being created.
    """


@dataclass(frozen=True, slots=True)
class HTTPError(WingbeatError):
    """An error that maps directly to an HTTP status code.

    Raised by the resolver, the factory, or controllers. The request
    pipeline catches these and turns them into a response.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """404 — nothing can serve the request path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class RouteNotFoundError(NotFound):
    """404 — path resolution or hook lookup found nothing to run.

    Raised when a path token names no directory, no controller file and
    no ``home`` method, or when the mandatory ``<verb>_<action>`` hook is
    missing from the resolved controller.
    """


class ResourceNotFoundError(NotFound):
    """404 — a component's backing definition could not be located."""

    def __init__(self, kind: str, name: str, detail: str = "") -> None:
        super().__init__(detail or f"No {kind} component named {name!r}")
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "name", name)
