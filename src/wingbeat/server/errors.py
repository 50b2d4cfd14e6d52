"""Error handling pipeline for wingbeat requests.

Maps not-found errors to the static 404 document, other HTTPErrors to
their status, and unexpected failures to a plain 500.
"""

import logging
import traceback

from wingbeat.config import AppConfig
from wingbeat.errors import HTTPError, NotFound
from wingbeat.http.request import Request
from wingbeat.http.response import Response

logger = logging.getLogger("wingbeat.server")


def not_found_body(config: AppConfig) -> str:
    """Contents of the configured 404 document, or ``""`` without one."""
    path = config.not_found_path
    if path is None or not path.is_file():
        return ""
    return path.read_text(encoding="utf-8")


def handle_not_found(exc: NotFound, request: Request, config: AppConfig) -> Response:
    """Build the 404 response. Output produced before the error is dropped."""
    logger.debug("404 %s %s: %s", request.method, request.path, exc.detail)
    return Response(body=not_found_body(config), status=404)


def handle_http_error(exc: HTTPError, request: Request, config: AppConfig) -> Response:
    """Map an HTTPError to a Response carrying its status and headers."""
    if isinstance(exc, NotFound):
        return handle_not_found(exc, request, config)

    logger.debug("%d %s %s: %s", exc.status, request.method, request.path, exc.detail)
    resp = Response(body=exc.detail or f"Error {exc.status}").with_status(exc.status)
    for name, value in exc.headers:
        resp = resp.with_header(name, value)
    return resp


def handle_internal_error(exc: Exception, request: Request, config: AppConfig) -> Response:
    """Handle unexpected exceptions as 500 errors."""
    logger.exception("500 %s %s", request.method, request.path)

    if config.debug:
        body = "".join(traceback.format_exception(exc))
        return Response(body=body, status=500, content_type="text/plain; charset=utf-8")

    return Response(body="Internal Server Error", status=500)
