"""Tests for wingbeat.errors — exception hierarchy and error messages."""

import pytest

from wingbeat.errors import (
    ConfigurationError,
    HTTPError,
    NotFound,
    ResourceNotFoundError,
    RouteNotFoundError,
    WingbeatError,
)


class TestHierarchy:
    def test_http_error_is_wingbeat_error(self) -> None:
        assert issubclass(HTTPError, WingbeatError)

    def test_not_found_is_http_error(self) -> None:
        assert issubclass(NotFound, HTTPError)

    def test_route_and_resource_errors_are_not_found(self) -> None:
        assert issubclass(RouteNotFoundError, NotFound)
        assert issubclass(ResourceNotFoundError, NotFound)

    def test_configuration_error_is_wingbeat_error(self) -> None:
        assert issubclass(ConfigurationError, WingbeatError)


class TestHTTPError:
    def test_status_and_detail(self) -> None:
        err = HTTPError(status=400, detail="Bad request body")
        assert err.status == 400
        assert err.detail == "Bad request body"

    def test_str_with_detail(self) -> None:
        assert str(HTTPError(status=400, detail="Bad request body")) == "400: Bad request body"

    def test_str_without_detail(self) -> None:
        assert str(HTTPError(status=500)) == "500"

    def test_frozen(self) -> None:
        err = HTTPError(status=400)
        with pytest.raises(AttributeError):
            err.status = 500  # type: ignore[misc]


class TestNotFound:
    def test_defaults(self) -> None:
        err = NotFound()
        assert err.status == 404
        assert err.detail == "Not Found"

    def test_route_not_found_detail(self) -> None:
        err = RouteNotFoundError("home has no get_info()")
        assert err.status == 404
        assert err.detail == "home has no get_info()"

    def test_resource_not_found_carries_kind_and_name(self) -> None:
        err = ResourceNotFoundError("models", "demo")
        assert err.status == 404
        assert err.kind == "models"
        assert err.name == "demo"
        assert "demo" in err.detail

    def test_resource_not_found_custom_detail(self) -> None:
        err = ResourceNotFoundError("models", "demo", "demo.py defines no class")
        assert err.detail == "demo.py defines no class"

    def test_raise_and_catch_as_not_found(self) -> None:
        with pytest.raises(NotFound):
            raise ResourceNotFoundError("helpers", "time")
