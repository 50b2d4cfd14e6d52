"""Component kinds and alias tables.

A kind names a category of component, the directory it lives in, and
the two shortcut identifiers (a one- or two-letter code and a method
name) that load it. ``AliasTable`` is the pure lookup structure built
from the kind table plus the bare-method alias map.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from wingbeat.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class Kind:
    """A recognised component category.

    ``name`` doubles as the registry key, ``directory`` is relative to
    the application directory.
    """

    name: str
    code: str
    method: str
    directory: str


KINDS: tuple[Kind, ...] = (
    Kind("models", "m", "model", "models"),
    Kind("views", "v", "view", "views"),
    Kind("controllers", "c", "controller", "controllers"),
    Kind("libraries", "l", "library", "libraries"),
    Kind("helpers", "h", "helper", "helpers"),
    Kind("vendors", "v3", "vendor", "vendor-components"),
)


class AliasTable:
    """Shortcut identifiers -> kinds, and bare method names -> components.

    Usage::

        table = AliasTable(KINDS)
        table.kind("m")          # Kind("models", ...)
        table.kind("library")    # Kind("libraries", ...)
        table.alias("libraries", "session", ["get", "set"])
        table.owner("set")       # ("libraries", "session")
    """

    __slots__ = ("_kinds", "_methods", "_shortcuts")

    def __init__(self, kinds: Iterable[Kind] = KINDS) -> None:
        self._kinds: dict[str, Kind] = {}
        self._shortcuts: dict[str, Kind] = {}
        self._methods: dict[str, tuple[str, str]] = {}
        for kind in kinds:
            if kind.name in self._kinds:
                msg = f"Duplicate component kind {kind.name!r}"
                raise ConfigurationError(msg)
            self._kinds[kind.name] = kind
            for shortcut in (kind.code, kind.method):
                if shortcut in self._shortcuts:
                    msg = f"Shortcut {shortcut!r} is claimed by two component kinds"
                    raise ConfigurationError(msg)
                self._shortcuts[shortcut] = kind

    @property
    def kinds(self) -> tuple[Kind, ...]:
        return tuple(self._kinds.values())

    def get(self, name: str) -> Kind:
        """Return the kind registered under *name* (e.g. ``"models"``)."""
        try:
            return self._kinds[name]
        except KeyError:
            msg = f"Unknown component kind {name!r}"
            raise ConfigurationError(msg) from None

    def kind(self, shortcut: str) -> Kind | None:
        """Return the kind for a code or method shortcut, or None."""
        return self._shortcuts.get(shortcut)

    def alias(self, kind: str, component: str, methods: Iterable[str]) -> None:
        """Point each bare method name at *component*, skipping dunders."""
        for method in methods:
            if method.startswith("__"):
                continue
            self._methods[method] = (kind, component)

    def owner(self, method: str) -> tuple[str, str] | None:
        """Return the ``(kind, name)`` owning an aliased method, or None."""
        return self._methods.get(method)

    @property
    def methods(self) -> dict[str, tuple[str, str]]:
        return dict(self._methods)
