"""Component file discovery and loading.

Component files live under kind directories, one class per file::

    application/
        controllers/
            home.py          -> class Home
            admin/
                users.py     -> class Users
        models/
            blog-post.py     -> class BlogPost

A file is executed once in its own module namespace. The class whose
name matches the file stem (case-insensitive, ignoring ``-`` and ``_``)
is the component definition.
"""

import importlib.util
import inspect
from pathlib import Path
from types import ModuleType

SOURCE_SUFFIX = ".py"


def normalize_name(name: str) -> str:
    """Reduce a component name to its identifier.

    Nested names keep only their last segment, and hyphens are dropped
    since identifiers cannot contain them::

        "admin/user-list" -> "userlist"
    """
    return name.rsplit("/", 1)[-1].replace("-", "")


def _fold(identifier: str) -> str:
    return identifier.replace("_", "").replace("-", "").lower()


def component_path(directory: Path, name: str) -> Path:
    """Path of the source file backing component *name* in *directory*."""
    return directory / f"{name}{SOURCE_SUFFIX}"


def is_component_dir(path: Path) -> bool:
    """True for a directory that may hold nested components."""
    return path.is_dir() and not path.name.startswith(("_", "."))


def is_component_file(path: Path) -> bool:
    """True for a visible ``.py`` file that may define a component."""
    return path.is_file() and not path.name.startswith(("_", "."))


def load_module(path: Path, module_name: str) -> ModuleType | None:
    """Execute the file at *path* as a fresh module.

    Returns None when *path* does not exist or cannot be loaded.
    Exceptions raised by the module body propagate.
    """
    if not path.is_file():
        return None
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        return None

    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def find_definition(module: ModuleType, name: str) -> type | None:
    """Return the class in *module* that defines component *name*.

    Only classes defined by the module itself are considered; imported
    classes are skipped so ``from models.base import Base`` never wins.
    """
    wanted = _fold(normalize_name(name))
    for attr, value in vars(module).items():
        if not inspect.isclass(value) or value.__module__ != module.__name__:
            continue
        if _fold(attr) == wanted:
            return value
    return None


def public_methods(cls: type) -> frozenset[str]:
    """Names of the callable, non-private attributes on *cls*."""
    return frozenset(
        attr
        for attr in dir(cls)
        if not attr.startswith("_") and callable(getattr(cls, attr, None))
    )
