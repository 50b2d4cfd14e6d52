"""Wingbeat — directory-routed controllers with load-once components.

Request paths resolve to controllers by the shape of the ``controllers/``
directory; models, libraries and helpers are created lazily, once, and
cached by name. Pattern routes add literal or regex matches on top.

Basic usage::

    from wingbeat import App, AppConfig

    app = App(AppConfig(root="site"))

    @app.get("/ping", halt=True)
    def ping():
        return "pong"

    response = app.handle("GET", "/blog/post/7")

Inside controllers::

    from wingbeat import get_registry, get_state

    class Blog:
        def get_post(self):
            io = get_registry()
            post = io.model("posts").find(get_state().params[0])
            return io.view("post", {"post": post})
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "ConfigurationError",
    "HTTPError",
    "Lifetime",
    "NotFound",
    "Request",
    "ResourceNotFoundError",
    "Response",
    "RouteNotFoundError",
    "WingbeatError",
    "get_registry",
    "get_request",
    "get_state",
    "singleton",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wingbeat`` fast while providing a clean top-level API.
    """
    if name == "App":
        from wingbeat.app import App

        return App

    if name == "AppConfig":
        from wingbeat.config import AppConfig

        return AppConfig

    if name == "Request":
        from wingbeat.http.request import Request

        return Request

    if name == "Response":
        from wingbeat.http.response import Response

        return Response

    if name in ("Lifetime", "singleton"):
        from wingbeat.components import factory as _factory

        return getattr(_factory, name)

    if name in ("get_registry", "get_request", "get_state"):
        from wingbeat import context as _ctx

        return getattr(_ctx, name)

    if name in (
        "ConfigurationError",
        "HTTPError",
        "NotFound",
        "ResourceNotFoundError",
        "RouteNotFoundError",
        "WingbeatError",
    ):
        from wingbeat import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
