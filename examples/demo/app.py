"""Demo — a small wingbeat site.

Demonstrates directory routing (``controllers/``), the home fallback,
nested controllers, load-once models and singleton libraries, kida
views, and pattern routes evaluated before the directory flow.

``controllers/home.py`` and ``controllers/admin/home.py`` share the
instance cache key ``home``, so the demo creates controllers per request.
The ``visits`` library is a singleton and keeps counting across requests.

Run behind any ASGI server, e.g.:
    uvicorn app:app
"""

from pathlib import Path

from wingbeat import App, AppConfig, get_registry

app = App(AppConfig(root=Path(__file__).parent, per_request_components=True))


@app.any("/.*", halt=False)
def count_visit():
    get_registry().library("visits").hit()


@app.get("/sample", halt=True)
def sample():
    return "<h1>Alternative routing</h1>"


@app.get("/api/[0-9]+", halt=True)
def api_item():
    return '{"kind": "item"}'
