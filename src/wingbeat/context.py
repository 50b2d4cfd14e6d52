"""Request-scoped context via ContextVar.

Provides:
- ``request_var``: The current ``Request`` for this task/thread.
- ``state_var``: The current ``RequestState`` (route + pattern matches).
- ``registry_var``: The ``Registry`` of the app serving the request.

All three are set by the request pipeline and reset after each request.
Accessing them outside a request raises ``LookupError``.
"""

from __future__ import annotations

from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from wingbeat.http.request import Request

if TYPE_CHECKING:
    from wingbeat.components.registry import Registry
    from wingbeat.routing.patterns import PatternMatch


@dataclass(slots=True)
class RequestState:
    """Routing facts gathered while serving one request."""

    controller: str = ""
    action: str = ""
    params: tuple[str, ...] = ()
    matches: list[PatternMatch] = field(default_factory=list)

    @property
    def route(self) -> str:
        """``controller/action`` of the resolved route, or ``""``."""
        if not self.controller:
            return ""
        return f"{self.controller}/{self.action}"

    def as_dict(self) -> dict[str, Any]:
        return {
            "controller": self.controller,
            "action": self.action,
            "params": list(self.params),
            "matches": [{m.verb: m.pattern} for m in self.matches],
        }


request_var: ContextVar[Request] = ContextVar("wingbeat_request")
"""The current request. Set by the pipeline before dispatch."""

state_var: ContextVar[RequestState] = ContextVar("wingbeat_state")
"""Routing state of the current request."""

registry_var: ContextVar[Registry] = ContextVar("wingbeat_registry")
"""Component registry of the app serving the current request."""


def get_request() -> Request:
    """Return the current request.

    Raises ``LookupError`` if called outside a request context.
    """
    return request_var.get()


def get_state() -> RequestState:
    """Return the routing state of the current request."""
    return state_var.get()


def current_state() -> RequestState | None:
    """Like :func:`get_state` but returns None outside a request."""
    return state_var.get(None)


def get_registry() -> Registry:
    """Return the component registry serving the current request."""
    return registry_var.get()
