"""Tests for wingbeat.templating.views — kida rendering and the nav global."""

from pathlib import Path

import pytest

from wingbeat.config import AppConfig
from wingbeat.context import RequestState, request_var, state_var
from wingbeat.errors import ResourceNotFoundError
from wingbeat.http.request import Request
from wingbeat.templating.views import ViewRenderer, create_environment, nav


@pytest.fixture
def views_dir(app_dir: Path) -> Path:
    return app_dir / "views"


@pytest.fixture
def renderer(views_dir: Path) -> ViewRenderer:
    env = create_environment(AppConfig(), views_dir, {"site": "Wingbeat"})
    return ViewRenderer(env, views_dir)


class TestRender:
    def test_render_by_name(self, renderer: ViewRenderer, write) -> None:
        write("views/hello.html", "Hello {{ name }}")
        assert renderer("hello", {"name": "Ada"}) == "Hello Ada"

    def test_explicit_suffix(self, renderer: ViewRenderer, write) -> None:
        write("views/feed.xml", "<feed>{{ site }}</feed>")
        assert renderer.template_name("feed.xml") == "feed.xml"
        assert renderer("feed.xml", {}) == "<feed>Wingbeat</feed>"

    def test_missing_view(self, renderer: ViewRenderer) -> None:
        with pytest.raises(ResourceNotFoundError) as exc_info:
            renderer("ghost", {})
        assert exc_info.value.kind == "views"

    def test_autoescape(self, renderer: ViewRenderer, write) -> None:
        write("views/raw.html", "{{ value }}")
        assert renderer("raw", {"value": "<b>"}) == "&lt;b&gt;"

    def test_custom_extension(self, views_dir: Path, write) -> None:
        write("views/page.tpl", "tpl")
        config = AppConfig(view_extension=".tpl")
        renderer = ViewRenderer(create_environment(config, views_dir), views_dir, ".tpl")
        assert renderer("page", {}) == "tpl"


class TestNav:
    def test_outside_request(self) -> None:
        assert nav("home/index") == ""

    def test_matches_resolved_route(self) -> None:
        token = state_var.set(RequestState(controller="home", action="info"))
        try:
            assert nav("home/info") == "current"
            assert nav("home/info", "active") == "active"
            assert nav("blog/index") == ""
        finally:
            state_var.reset(token)

    def test_matches_request_path(self) -> None:
        token = request_var.set(Request("GET", "/sample"))
        try:
            assert nav("sample") == "current"
            assert nav("other") == ""
        finally:
            request_var.reset(token)

    def test_available_in_templates(self, renderer: ViewRenderer, write) -> None:
        write("views/menu.html", "[{{ nav('blog/index') }}]")
        token = state_var.set(RequestState(controller="blog", action="index"))
        try:
            assert renderer("menu", {}) == "[current]"
        finally:
            state_var.reset(token)
