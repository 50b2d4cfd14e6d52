"""Immutable HTTP response.

Controllers and pattern actions usually return plain strings, which the
pipeline joins into a ``Response``. Returning a ``Response`` directly
sets the status and headers::

    return Response("created", status=201).with_header("Location", "/posts/7")
"""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class Response:
    """An HTTP response. ``with_*()`` calls return modified copies."""

    body: str | bytes = ""
    status: int = 200
    content_type: str = "text/html; charset=utf-8"
    headers: tuple[tuple[str, str], ...] = ()

    def with_status(self, status: int) -> Response:
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> Response:
        """Append a header; earlier headers with the same name are kept."""
        return replace(self, headers=(*self.headers, (name, value)))

    def with_content_type(self, content_type: str) -> Response:
        return replace(self, content_type=content_type)

    @property
    def body_bytes(self) -> bytes:
        """Body encoded as UTF-8."""
        return self.body.encode("utf-8") if isinstance(self.body, str) else self.body

    @property
    def text(self) -> str:
        """Body decoded as UTF-8."""
        return self.body.decode("utf-8") if isinstance(self.body, bytes) else self.body
