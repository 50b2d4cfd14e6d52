"""Directory-shaped path resolution.

Turns a request path into a controller, an action and positional
params by looking at how the controllers directory is laid out::

    controllers/
        home.py            GET /          -> home.get_index()
                           GET /info      -> home.get_info()  (home fallback)
        blog.py            GET /blog/post/7 -> blog.get_post("7")
        admin/
            home.py        GET /admin     -> admin/home.get_index()
            users.py       GET /admin/users/edit/3 -> admin/users.get_edit("3")

At each path token the resolver tries, in this order:

1. a subdirectory named by the token (consumed, walking continues);
2. a controller file named by the token (walking stops);
3. a ``<verb>_<token>`` method on the ``home`` controller at the
   current prefix (walking stops; 404 when the method is missing).

A directory therefore shadows a same-named controller file, and a
controller file shadows the home fallback.

Resolution only loads controller definitions. Instances come from the
factory, whose cache is keyed by the last name segment: ``home`` and
``admin/home`` above share one instance unless the app runs with
``per_request_components=True``, where each request creates its own.
"""

import logging
from dataclasses import dataclass

from wingbeat.components.factory import ComponentFactory
from wingbeat.components.loader import is_component_dir, public_methods
from wingbeat.errors import RouteNotFoundError
from wingbeat.routing.paths import hook_name, sanitize_path, split_path

logger = logging.getLogger("wingbeat.routing")

HOME = "home"
INDEX = "index"


@dataclass(frozen=True, slots=True)
class Resolution:
    """Result of resolving a request path."""

    controller: str
    action: str
    params: tuple[str, ...] = ()


class PathResolver:
    """Resolves request paths against the controllers of a factory.

    Usage::

        resolver = PathResolver(registry.factory)
        resolver.resolve("/admin/users/edit/3", "GET")
        # Resolution(controller="admin/users", action="edit", params=("3",))
    """

    __slots__ = ("_factory", "_kind")

    def __init__(self, factory: ComponentFactory, kind: str = "controllers") -> None:
        self._factory = factory
        self._kind = kind

    def resolve(self, raw_path: str, method: str = "GET") -> Resolution:
        """Resolve *raw_path* for an HTTP *method*.

        Raises ``RouteNotFoundError`` when a token names no directory,
        no controller, and no ``home`` method.
        """
        tokens = split_path(sanitize_path(raw_path))
        prefix = ""

        while tokens:
            token = tokens[0]
            if self._is_directory(prefix, token):
                prefix += tokens.pop(0) + "/"
                continue

            if self._is_controller(prefix + token):
                break

            home = prefix + HOME
            if not self._is_controller(home):
                msg = f"Nothing to route {token!r} to under {prefix or '/'}"
                raise RouteNotFoundError(msg)
            if hook_name(method, token) not in self.actions(home):
                msg = f"{home} has no {hook_name(method, token)}()"
                raise RouteNotFoundError(msg)
            tokens.insert(0, HOME)
            break

        controller = prefix + (tokens.pop(0) if tokens else HOME)
        action = tokens.pop(0) if tokens else INDEX
        resolution = Resolution(controller=controller, action=action, params=tuple(tokens))
        logger.debug("%s %s -> %s", method, raw_path, resolution)
        return resolution

    def actions(self, controller: str) -> frozenset[str]:
        """Public method names of *controller*, loading it if needed."""
        return public_methods(self._factory.load(self._kind, controller).target)

    def _is_directory(self, prefix: str, token: str) -> bool:
        directory = self._factory.directory(self._kind)
        if directory is None or token.startswith((".", "_")):
            return False
        return is_component_dir(directory / prefix / token)

    def _is_controller(self, name: str) -> bool:
        if name.rsplit("/", 1)[-1].startswith((".", "_")):
            return False
        return self._factory.exists(self._kind, name)
