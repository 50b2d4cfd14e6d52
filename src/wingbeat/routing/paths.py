"""Request path helpers shared by the resolver and the pattern router."""

import re

# Anything outside letters, digits and : ~ / . - _
_DISALLOWED_RE = re.compile(r"[^A-Za-z0-9:~/.\-_]")

# Runs of ":" or "." (protocol smuggling, "../" traversal)
_RUN_RE = re.compile(r":{2,}|\.{2,}")


def sanitize_path(raw: str) -> str:
    """Strip disallowed characters and collapse ``::``/``..`` runs.

    Idempotent: sanitizing a sanitized path returns it unchanged::

        sanitize_path("a//b/../c::d")  -> "a//b/./c:d"
        sanitize_path("/hello%20world") -> "/hello20world"
    """
    cleaned = _DISALLOWED_RE.sub("", raw)
    return _RUN_RE.sub(lambda m: m.group(0)[0], cleaned)


def split_path(path: str) -> list[str]:
    """Split a sanitized path on ``/``, dropping empty segments."""
    return [part for part in path.split("/") if part]


def hook_name(prefix: str, action: str) -> str:
    """Method name of a hook: ``hook_name("GET", "show") -> "get_show"``.

    Hyphens in URL tokens become underscores.
    """
    return f"{prefix}_{action}".lower().replace("-", "_")
