"""Wingbeat application class.

Owns the configuration, the component registry (and with it the
per-process caches), the pattern routes, and the view environment.
An external server hands requests in through ``handle()`` or the ASGI
``__call__``; wingbeat never listens on a socket itself.
"""

import logging
from collections.abc import Callable, Iterable
from typing import Any

from wingbeat._internal.asgi import Receive, Scope, Send
from wingbeat.components.factory import ComponentEntry, Lifetime
from wingbeat.components.kinds import KINDS, Kind
from wingbeat.components.registry import Registry
from wingbeat.config import AppConfig
from wingbeat.errors import ConfigurationError
from wingbeat.http.request import Request
from wingbeat.http.response import Response
from wingbeat.routing.hooks import HookDispatcher
from wingbeat.routing.patterns import PatternRouter
from wingbeat.routing.resolver import PathResolver, Resolution
from wingbeat.server.handler import handle_request
from wingbeat.server.sender import send_response
from wingbeat.templating.views import ViewRenderer, create_environment

logger = logging.getLogger("wingbeat.server")


class App:
    """The wingbeat application.

    Usage::

        app = App(AppConfig(root="site"))

        @app.get("/health", halt=True)
        def health():
            return "ok"

        response = app.handle("GET", "/blog/post/7")

    Component caches live as long as the App. Under a long-running
    server that means they are shared by every request the process
    serves. Instances are keyed by the last segment of the component
    name, so nested controllers such as ``admin/home`` and ``home`` get
    one shared instance. Set ``per_request_components=True`` to give
    every request fresh transient instances; singletons stay shared.
    """

    __slots__ = ("_hooks", "_resolver", "_views", "config", "patterns", "registry")

    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        kinds: Iterable[Kind] = KINDS,
        template_globals: dict[str, Any] | None = None,
    ) -> None:
        self.config: AppConfig = config or AppConfig()
        app_path = self.config.app_path
        if not app_path.is_dir():
            msg = f"Application directory not found: {app_path}"
            raise ConfigurationError(msg)

        self.registry = Registry(app_path, kinds=kinds)
        self._views: ViewRenderer | None = None
        views_dir = self.registry.paths.get("views")
        if views_dir is not None and views_dir.is_dir():
            env = create_environment(
                self.config,
                views_dir,
                {"io": self.registry, **(template_globals or {})},
            )
            self._views = ViewRenderer(env, views_dir, self.config.view_extension)
            self.registry.bind_renderer(self._views)

        self.patterns = PatternRouter()
        self._resolver = PathResolver(self.registry.factory)
        self._hooks = HookDispatcher()

    # -- Pattern routes --

    def route(
        self,
        verb: str,
        pattern: str,
        action: Callable[[], Any] | None = None,
        *,
        halt: bool = False,
    ) -> Any:
        """Register a pattern route; returns a decorator without *action*."""
        return self.patterns.register(verb, pattern, action, halt=halt)

    def get(self, pattern: str, action: Callable[[], Any] | None = None, *, halt: bool = False) -> Any:
        return self.patterns.get(pattern, action, halt=halt)

    def post(self, pattern: str, action: Callable[[], Any] | None = None, *, halt: bool = False) -> Any:
        return self.patterns.post(pattern, action, halt=halt)

    def put(self, pattern: str, action: Callable[[], Any] | None = None, *, halt: bool = False) -> Any:
        return self.patterns.put(pattern, action, halt=halt)

    def delete(self, pattern: str, action: Callable[[], Any] | None = None, *, halt: bool = False) -> Any:
        return self.patterns.delete(pattern, action, halt=halt)

    def any(self, pattern: str, action: Callable[[], Any] | None = None, *, halt: bool = False) -> Any:
        return self.patterns.any(pattern, action, halt=halt)

    # -- Components --

    def component(
        self,
        kind: str,
        name: str,
        target: Callable[..., Any] | None = None,
        *,
        lifetime: Lifetime | None = None,
    ) -> Any:
        """Register a component statically, bypassing file discovery.

        Works as a decorator too::

            @app.component("libraries", "session")
            class Session: ...
        """
        self.registry.aliases.get(kind)
        if target is None:

            def decorator(cls: Callable[..., Any]) -> Callable[..., Any]:
                self.registry.factory.register(kind, name, cls, lifetime=lifetime)
                return cls

            return decorator

        entry: ComponentEntry = self.registry.factory.register(
            kind, name, target, lifetime=lifetime
        )
        return entry

    # -- Request handling --

    def resolve(self, path: str, method: str = "GET") -> Resolution:
        """Resolve *path* without running anything but the resolver."""
        return self._resolver.resolve(path, method.upper())

    def handle(
        self,
        method: str,
        uri: str,
        *,
        headers: Iterable[tuple[bytes, bytes]] = (),
    ) -> Response:
        """Serve a request given its method and URI (``/path?query``)."""
        return self.handle_request(Request.from_uri(method, uri, tuple(headers)))

    def handle_request(self, request: Request) -> Response:
        return handle_request(
            request,
            config=self.config,
            registry=self.registry,
            patterns=self.patterns,
            resolver=self._resolver,
            hooks=self._hooks,
        )

    # -- ASGI --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI entry point for an external server."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return
        if scope["type"] != "http":
            return

        response = self.handle_request(Request.from_asgi(scope))
        await send_response(response, send)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                logger.debug("lifespan startup: %s", self.config.app_path)
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return
