"""Request pipeline — pattern routes, path resolution, hooks, errors.

One request runs start to finish, synchronously:

1. Pattern routes are evaluated in registration order. A halting match
   ends the request with the output gathered so far.
2. The path is resolved to a controller, action and params.
3. The controller is created (or reused) through the component factory.
4. The before/verb/after hooks run.

Any ``NotFound`` along the way discards the gathered output and returns
the 404 document instead.
"""

from collections.abc import Sequence
from contextvars import Token
from typing import Any

from wingbeat.components.registry import Registry
from wingbeat.config import AppConfig
from wingbeat.context import RequestState, registry_var, request_var, state_var
from wingbeat.errors import HTTPError
from wingbeat.http.request import Request
from wingbeat.http.response import Response
from wingbeat.routing.hooks import HookDispatcher
from wingbeat.routing.patterns import PatternRouter
from wingbeat.routing.resolver import PathResolver
from wingbeat.server.errors import handle_http_error, handle_internal_error


def handle_request(
    request: Request,
    *,
    config: AppConfig,
    registry: Registry,
    patterns: PatternRouter,
    resolver: PathResolver,
    hooks: HookDispatcher,
) -> Response:
    """Process a single request through the full pipeline."""
    state = RequestState()
    request_token: Token[Request] = request_var.set(request)
    state_token: Token[RequestState] = state_var.set(state)
    registry_token: Token[Registry] = registry_var.set(registry)

    try:
        if config.per_request_components:
            registry.factory.clear_instances()

        outcome = patterns.evaluate(request.method, request.path, record=state.matches.append)
        outputs: list[Any] = list(outcome.outputs)

        if not outcome.halted:
            resolution = resolver.resolve(request.path, request.method)
            state.controller = resolution.controller
            state.action = resolution.action
            state.params = resolution.params

            controller = registry.factory.resolve("controllers", resolution.controller)
            outputs.extend(hooks.dispatch(controller, request.method, resolution.action))

        response = build_response(outputs)

    except HTTPError as exc:
        response = handle_http_error(exc, request, config)
    except Exception as exc:
        response = handle_internal_error(exc, request, config)
    finally:
        registry_var.reset(registry_token)
        state_var.reset(state_token)
        request_var.reset(request_token)

    return response


def build_response(outputs: Sequence[Any]) -> Response:
    """Join collected outputs into a response body.

    A hook that returns a ``Response`` on its own is sent unchanged.
    """
    if len(outputs) == 1 and isinstance(outputs[0], Response):
        return outputs[0]
    parts: list[str] = []
    for output in outputs:
        if isinstance(output, Response):
            parts.append(output.text)
        elif isinstance(output, bytes):
            parts.append(output.decode("utf-8"))
        else:
            parts.append(str(output))
    return Response(body="".join(parts))
