"""Response -> ASGI messages."""

from typing import Any

from wingbeat._internal.asgi import Send
from wingbeat.http.response import Response

# Statuses that never carry a message body
_NO_BODY = frozenset({204, 304})


def response_messages(response: Response) -> tuple[dict[str, Any], dict[str, Any]]:
    """Build the ``http.response.start`` and ``http.response.body`` messages."""
    informational = 100 <= response.status < 200
    body = b"" if informational or response.status in _NO_BODY else response.body_bytes

    headers = [(b"content-type", response.content_type.encode("latin-1"))]
    headers.extend(
        (name.lower().encode("latin-1"), value.encode("latin-1"))
        for name, value in response.headers
    )
    headers.append((b"content-length", str(len(body)).encode("latin-1")))

    start = {"type": "http.response.start", "status": response.status, "headers": headers}
    return start, {"type": "http.response.body", "body": body}


async def send_response(response: Response, send: Send) -> None:
    """Send *response* through the ASGI ``send`` callable."""
    for message in response_messages(response):
        await send(message)
