"""Lifecycle hooks around a controller action.

For action ``show`` on a GET request the dispatcher runs, in order::

    before_show()   optional
    get_show()      required, 404 when missing
    after_show()    optional

Hooks take no arguments. Whatever a hook returns (other than None) is
collected as part of the response body.
"""

import logging
from typing import Any

from wingbeat.errors import RouteNotFoundError
from wingbeat.routing.paths import hook_name

logger = logging.getLogger("wingbeat.routing")


class HookDispatcher:
    """Runs before/verb/after hooks on a controller instance."""

    __slots__ = ()

    def hooks(self, method: str, action: str) -> tuple[str, str, str]:
        """Names of the three hooks for *action*, in call order."""
        return (
            hook_name("before", action),
            hook_name(method, action),
            hook_name("after", action),
        )

    def dispatch(self, controller: Any, method: str, action: str) -> list[Any]:
        """Run the hooks for *action* and return their non-None results.

        Raises ``RouteNotFoundError`` when the verb hook is missing; a
        ``before_`` hook that exists has already run by then, an
        ``after_`` hook never does.
        """
        before, main, after = self.hooks(method, action)
        outputs: list[Any] = []

        for name in (before, main, after):
            hook = getattr(controller, name, None)
            if not callable(hook):
                if name == main:
                    msg = f"{type(controller).__name__} has no {main}()"
                    raise RouteNotFoundError(msg)
                continue
            logger.debug("hook %s.%s", type(controller).__name__, name)
            result = hook()
            if result is not None:
                outputs.append(result)

        return outputs
