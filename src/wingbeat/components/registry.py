"""Registry — the component context owned by an App.

Ties together the kind table, the per-kind directories, the component
factory, and the view renderer, and exposes the shortcut dispatch table
that application code uses to reach them::

    from wingbeat import get_registry

    io = get_registry()
    io.model("demo").hello()
    io.load("h", "time").context(stamp)
    io.view("welcome", {"name": "Corey"})

The registry outlives requests: loaded files and cached instances are
kept for the life of the App unless the app runs with
``per_request_components=True``.
"""

from collections.abc import Callable, Iterable, Mapping
from functools import partial
from pathlib import Path
from typing import Any

from wingbeat.components.factory import ComponentFactory
from wingbeat.components.kinds import KINDS, AliasTable, Kind
from wingbeat.components.loader import public_methods
from wingbeat.context import current_state
from wingbeat.errors import ConfigurationError

# (template name, variables) -> rendered text
type ViewRenderer = Callable[[str, Mapping[str, Any]], str]


class Registry:
    """Component kinds, directories, factory, and shortcut table."""

    __slots__ = ("_renderer", "_shortcuts", "aliases", "factory", "paths")

    def __init__(
        self,
        app_path: str | Path,
        *,
        kinds: Iterable[Kind] = KINDS,
        renderer: ViewRenderer | None = None,
    ) -> None:
        root = Path(app_path)
        self.aliases = AliasTable(kinds)
        self.paths: dict[str, Path] = {
            kind.name: root / kind.directory for kind in self.aliases.kinds
        }
        # Views are templates, not classes; the renderer owns that directory
        self.factory = ComponentFactory(
            {name: path for name, path in self.paths.items() if name != "views"}
        )
        self._renderer = renderer

        self._shortcuts: dict[str, tuple[Kind, Callable[..., Any]]] = {}
        for kind in self.aliases.kinds:
            handler = self.view if kind.name == "views" else partial(self._create, kind.name)
            self._shortcuts[kind.code] = (kind, handler)
            self._shortcuts[kind.method] = (kind, handler)

    def _create(self, kind: str, name: str, *args: Any) -> Any:
        return self.factory.resolve(kind, name, args)

    # -- Shortcut dispatch --

    def load(self, shortcut: str, name: str, *args: Any) -> Any:
        """Dispatch through the shortcut table (``"m"``, ``"model"``, ...).

        Raises ``KeyError`` for an unknown shortcut.
        """
        try:
            _kind, handler = self._shortcuts[shortcut]
        except KeyError:
            msg = f"No component shortcut named {shortcut!r}"
            raise KeyError(msg) from None
        return handler(name, *args)

    def model(self, name: str, *args: Any) -> Any:
        return self._create("models", name, *args)

    def controller(self, name: str, *args: Any) -> Any:
        return self._create("controllers", name, *args)

    def library(self, name: str, *args: Any) -> Any:
        return self._create("libraries", name, *args)

    def helper(self, name: str, *args: Any) -> Any:
        return self._create("helpers", name, *args)

    def vendor(self, name: str, *args: Any) -> Any:
        return self._create("vendors", name, *args)

    def view(self, name: str, variables: Mapping[str, Any] | None = None, **kwargs: Any) -> str:
        """Render the view *name* with *variables* and return the text."""
        if self._renderer is None:
            msg = "No view renderer is configured for this registry."
            raise ConfigurationError(msg)
        return self._renderer(name, {**(variables or {}), **kwargs})

    def bind_renderer(self, renderer: ViewRenderer) -> None:
        self._renderer = renderer

    # -- Method aliases --

    def alias(self, kind: str, name: str, methods: Iterable[str] | None = None) -> None:
        """Expose a component's methods as bare names for :meth:`call`.

        Without *methods*, every public method of the component is aliased.
        """
        self.aliases.get(kind)
        if methods is None:
            methods = public_methods(self.factory.load(kind, name).target)
        self.aliases.alias(kind, name, methods)

    def call(self, method: str, *args: Any, **kwargs: Any) -> Any:
        """Call an aliased method on the component that owns it."""
        owner = self.aliases.owner(method)
        if owner is None:
            msg = f"No component method aliased as {method!r}"
            raise AttributeError(msg)
        kind, name = owner
        return getattr(self.factory.resolve(kind, name), method)(*args, **kwargs)

    # -- Introspection --

    def describe(self) -> dict[str, Any]:
        """Snapshot of loaded files, cached instances, and request state."""
        state = current_state()
        return {
            "paths": {name: str(path) for name, path in self.paths.items()},
            "files": {
                f"{kind}/{name}": str(path) if path is not None else None
                for (kind, name), path in self.factory.loaded_files.items()
            },
            "instances": sorted(self.factory.instances),
            "aliases": {method: "/".join(owner) for method, owner in self.aliases.methods.items()},
            "route": state.as_dict() if state is not None else None,
        }
