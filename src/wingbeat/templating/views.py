"""Kida environment setup and the view renderer.

Views live in the application's ``views/`` directory. Controllers and
models render them through the registry::

    io.view("welcome", {"name": "Corey"})   # renders views/welcome.html

The environment is created once per App and shared by every request.
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from kida import Environment, FileSystemLoader

from wingbeat.config import AppConfig
from wingbeat.context import current_state, request_var
from wingbeat.errors import ResourceNotFoundError
from wingbeat.routing.paths import sanitize_path


def nav(target: str, value: str = "current") -> str:
    """Return *value* when *target* is the page being served, else ``""``.

    *target* is compared with the resolved ``controller/action`` and
    with the request path minus its leading slash::

        <a class="{{ nav('home/info') }}" href="/info">Info</a>
    """
    state = current_state()
    if state is not None and state.route == target:
        return value
    request = request_var.get(None)
    if request is not None and sanitize_path(request.path).lstrip("/") == target:
        return value
    return ""


def create_environment(
    config: AppConfig,
    views_dir: Path,
    globals_: Mapping[str, Any] | None = None,
) -> Environment:
    """Create a kida Environment over *views_dir*.

    Called once when the App is created.
    """
    env = Environment(
        loader=FileSystemLoader(str(views_dir)),
        autoescape=config.autoescape,
        auto_reload=config.debug,
        trim_blocks=config.trim_blocks,
        lstrip_blocks=config.lstrip_blocks,
    )
    env.add_global("nav", nav)
    for name, value in (globals_ or {}).items():
        env.add_global(name, value)
    return env


class ViewRenderer:
    """Renders view templates by name.

    A name without a suffix gets the configured extension appended.
    Missing templates raise ``ResourceNotFoundError``.
    """

    __slots__ = ("_env", "_extension", "_views_dir")

    def __init__(self, env: Environment, views_dir: Path, extension: str = ".html") -> None:
        self._env = env
        self._views_dir = views_dir
        self._extension = extension

    def template_name(self, name: str) -> str:
        return name if Path(name).suffix else f"{name}{self._extension}"

    def __call__(self, name: str, variables: Mapping[str, Any]) -> str:
        template_name = self.template_name(name)
        if not (self._views_dir / template_name).is_file():
            raise ResourceNotFoundError("views", name)
        template = self._env.get_template(template_name)
        return template.render(dict(variables))
