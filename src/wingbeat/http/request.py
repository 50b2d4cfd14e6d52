"""Immutable HTTP request.

Frozen metadata handed over by the external server. The query string is
kept as received; wingbeat never parses it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    ``path`` is the raw request path as received (before sanitizing);
    ``method`` is upper-cased on construction.
    """

    method: str
    path: str
    query_string: str = ""
    headers: tuple[tuple[bytes, bytes], ...] = ()
    http_version: str = "1.1"

    def __post_init__(self) -> None:
        object.__setattr__(self, "method", self.method.upper())

    @property
    def url(self) -> str:
        """Request path plus query string."""
        if self.query_string:
            return f"{self.path}?{self.query_string}"
        return self.path

    def header(self, name: str, default: str | None = None) -> str | None:
        """Return the first value of header *name* (case-insensitive)."""
        key = name.lower().encode("latin-1")
        for raw_name, value in self.headers:
            if raw_name.lower() == key:
                return value.decode("latin-1")
        return default

    # -- Factories --

    @classmethod
    def from_uri(
        cls,
        method: str,
        uri: str,
        headers: tuple[tuple[bytes, bytes], ...] = (),
    ) -> Request:
        """Split a request URI (``/path?query``) into path and query string."""
        path, _, query = uri.partition("?")
        return cls(method=method, path=path, query_string=query, headers=headers)

    @classmethod
    def from_asgi(cls, scope: dict[str, Any]) -> Request:
        """Create a Request from an ASGI HTTP scope."""
        return cls(
            method=scope["method"],
            path=scope["path"],
            query_string=scope.get("query_string", b"").decode("latin-1"),
            headers=tuple(scope.get("headers", ())),
            http_version=scope.get("http_version", "1.1"),
        )
