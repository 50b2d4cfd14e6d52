"""Locate the App a CLI command should inspect.

Targets are either an import string (``"site.main:app"``) or the path of
a Python file defining ``app`` (``"examples/demo/app.py"``).
"""

import importlib
from pathlib import Path
from types import ModuleType

from wingbeat.app import App
from wingbeat.components.loader import SOURCE_SUFFIX, load_module


def _import_target(target: str) -> tuple[ModuleType, str]:
    location, _, attr_name = target.partition(":")
    attr_name = attr_name or "app"

    if location.endswith(SOURCE_SUFFIX):
        path = Path(location)
        module = load_module(path, f"_wingbeat_cli_{path.stem}")
        if module is None:
            msg = f"No such app file: {location}"
            raise ModuleNotFoundError(msg)
        return module, attr_name

    return importlib.import_module(location), attr_name


def resolve_app(target: str) -> App:
    """Return the wingbeat App named by *target*.

    The attribute defaults to ``app``.

    Raises:
        ModuleNotFoundError: The module or file cannot be found.
        AttributeError: The module has no such attribute.
        TypeError: The attribute is not a wingbeat ``App``.
    """
    module, attr_name = _import_target(target)
    obj = getattr(module, attr_name)
    if not isinstance(obj, App):
        msg = f"{target!r} is a {type(obj).__name__}, not a wingbeat.App"
        raise TypeError(msg)
    return obj
