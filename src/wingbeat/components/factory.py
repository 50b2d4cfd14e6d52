"""Component factory with load-once files and a name-keyed instance cache.

Every component is looked up by ``(kind, name)``. The backing file is
executed at most once per factory; the resulting class is stored as a
``ComponentEntry`` whose lifetime is fixed at registration time.
Instances are cached by normalized name alone, so asking for the same
name twice (under any kind) returns the same object.

Usage::

    factory = ComponentFactory({"models": Path("application/models")})
    demo = factory.resolve("models", "demo")
    assert factory.resolve("models", "demo") is demo
"""

import logging
import re
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from wingbeat.components.loader import (
    component_path,
    find_definition,
    is_component_file,
    load_module,
    normalize_name,
)
from wingbeat.errors import ResourceNotFoundError

logger = logging.getLogger("wingbeat.components")

_MODULE_NAME_RE = re.compile(r"\W")

# Attribute set by @singleton
_LIFETIME_ATTR = "__wingbeat_lifetime__"


class Lifetime(Enum):
    """How many instances a component may have."""

    SINGLETON = "singleton"
    TRANSIENT = "transient"


def singleton[T](cls: T) -> T:
    """Mark a component class as a singleton.

    The factory creates it once, without arguments, and ignores
    constructor arguments passed on later requests::

        @singleton
        class Session:
            ...
    """
    setattr(cls, _LIFETIME_ATTR, Lifetime.SINGLETON)
    return cls


def lifetime_of(target: Callable[..., Any]) -> Lifetime:
    """Decide a component's lifetime from its definition.

    Singleton when marked with ``@singleton`` or when the class exposes
    an ``instance()`` shared-instance factory.
    """
    if getattr(target, _LIFETIME_ATTR, None) is Lifetime.SINGLETON:
        return Lifetime.SINGLETON
    if callable(getattr(target, "instance", None)):
        return Lifetime.SINGLETON
    return Lifetime.TRANSIENT


@dataclass(frozen=True, slots=True)
class ComponentEntry:
    """A registered component definition."""

    kind: str
    name: str
    target: Callable[..., Any]
    lifetime: Lifetime
    path: Path | None = None

    def create(self, args: Sequence[Any] = ()) -> Any:
        """Build a new instance according to the entry's lifetime."""
        if self.lifetime is Lifetime.SINGLETON:
            shared = getattr(self.target, "instance", None)
            if callable(shared):
                return shared()
            return self.target()
        return self.target(*args)


class ComponentFactory:
    """Loads component definitions once and caches their instances.

    ``directories`` maps a kind name to the directory its files live in.
    Kinds without a directory can still be served by static registration.
    """

    __slots__ = (
        "_directories",
        "_entries",
        "_instances",
        "_load_count",
        "_loaded",
        "_owners",
        "_shared_keys",
    )

    def __init__(self, directories: Mapping[str, Path] | None = None) -> None:
        self._directories: dict[str, Path] = dict(directories or {})
        self._entries: dict[tuple[str, str], ComponentEntry] = {}
        self._loaded: dict[tuple[str, str], Path | None] = {}
        self._instances: dict[str, Any] = {}
        # Cache key -> the (kind, name) pair whose entry created the instance
        self._owners: dict[str, tuple[str, str]] = {}
        self._shared_keys: set[tuple[str, str, str]] = set()
        self._load_count = 0

    # -- Registration --

    def register(
        self,
        kind: str,
        name: str,
        target: Callable[..., Any],
        *,
        lifetime: Lifetime | None = None,
    ) -> ComponentEntry:
        """Register a definition without touching the filesystem.

        The pair then counts as loaded; a file with the same name is
        never executed.
        """
        entry = ComponentEntry(
            kind=kind,
            name=name,
            target=target,
            lifetime=lifetime or lifetime_of(target),
        )
        self._entries[(kind, name)] = entry
        self._loaded[(kind, name)] = None
        return entry

    # -- Lookup --

    def load(self, kind: str, name: str) -> ComponentEntry:
        """Return the entry for ``(kind, name)``, loading its file if needed.

        Raises ``ResourceNotFoundError`` when no file exists or the file
        defines no matching class.
        """
        key = (kind, name)
        entry = self._entries.get(key)
        if entry is not None:
            return entry

        directory = self._directories.get(kind)
        if directory is None:
            raise ResourceNotFoundError(kind, name)

        path = component_path(directory, name)
        if not path.resolve().is_relative_to(directory.resolve()):
            raise ResourceNotFoundError(kind, name)

        module_name = "_wingbeat_" + _MODULE_NAME_RE.sub("_", f"{kind}_{name}")
        module = load_module(path, module_name)
        if module is None:
            raise ResourceNotFoundError(kind, name)
        self._load_count += 1

        definition = find_definition(module, name)
        if definition is None:
            raise ResourceNotFoundError(
                kind, name, f"{path} does not define a {normalize_name(name)!r} class"
            )

        entry = ComponentEntry(
            kind=kind,
            name=name,
            target=definition,
            lifetime=lifetime_of(definition),
            path=path,
        )
        self._entries[key] = entry
        self._loaded[key] = path
        logger.debug("loaded %s %r from %s (%s)", kind, name, path, entry.lifetime.value)
        return entry

    def resolve(self, kind: str, name: str, args: Sequence[Any] = ()) -> Any:
        """Return the cached instance for *name*, creating it on first use.

        The cache key is the normalized last name segment, so
        ``controllers/admin/home`` and ``controllers/home`` share one
        instance. The first time a pair is served an instance created for
        a different pair, a warning is logged.
        """
        entry = self.load(kind, name)

        key = normalize_name(name)
        if key in self._instances:
            owner = self._owners[key]
            if owner != (kind, name) and (key, kind, name) not in self._shared_keys:
                self._shared_keys.add((key, kind, name))
                logger.warning(
                    "%s %r shares cached instance %r created for %s %r",
                    kind,
                    name,
                    key,
                    *owner,
                )
            return self._instances[key]

        instance = entry.create(args)
        self._instances[key] = instance
        self._owners[key] = (kind, name)
        return instance

    def exists(self, kind: str, name: str) -> bool:
        """True when ``(kind, name)`` is registered or has a file on disk."""
        if (kind, name) in self._entries:
            return True
        directory = self._directories.get(kind)
        return directory is not None and is_component_file(component_path(directory, name))

    def directory(self, kind: str) -> Path | None:
        return self._directories.get(kind)

    # -- Cache state --

    @property
    def loaded_files(self) -> dict[tuple[str, str], Path | None]:
        """``(kind, name)`` pairs loaded so far and their source paths."""
        return dict(self._loaded)

    @property
    def instances(self) -> dict[str, Any]:
        return dict(self._instances)

    @property
    def load_count(self) -> int:
        """Number of component files executed by this factory."""
        return self._load_count

    def clear_instances(self) -> None:
        """Drop cached transient instances.

        Singleton instances and loaded definitions are kept, so singletons
        stay shared for the life of the factory.
        """
        for key, owner in list(self._owners.items()):
            if self._entries[owner].lifetime is Lifetime.SINGLETON:
                continue
            del self._instances[key]
            del self._owners[key]
