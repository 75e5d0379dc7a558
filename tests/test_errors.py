"""Tests for wren.errors — exception hierarchy and error messages."""

import pytest

from wren.errors import (
    ConfigurationError,
    HTTPError,
    InvalidHandler,
    MethodNotSupported,
    NotFound,
    WrenError,
)


class TestHierarchy:
    def test_http_error_is_wren_error(self) -> None:
        assert issubclass(HTTPError, WrenError)

    @pytest.mark.parametrize("error", [NotFound, MethodNotSupported, InvalidHandler])
    def test_dispatch_errors_are_http_errors(self, error: type[HTTPError]) -> None:
        assert issubclass(error, HTTPError)

    def test_configuration_error_is_wren_error(self) -> None:
        assert issubclass(ConfigurationError, WrenError)
        assert not issubclass(ConfigurationError, HTTPError)


class TestHTTPError:
    def test_str_with_detail(self) -> None:
        assert str(HTTPError(status=400, detail="Bad path")) == "400: Bad path"

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

    def test_custom_detail(self) -> None:
        assert NotFound("No route matches GET '/x'").detail == "No route matches GET '/x'"


class TestMethodNotSupported:
    def test_status(self) -> None:
        assert MethodNotSupported("DELETE").status == 405

    def test_detail_names_method(self) -> None:
        assert "'DELETE'" in MethodNotSupported("DELETE").detail

    def test_allow_header(self) -> None:
        err = MethodNotSupported("DELETE", frozenset({"POST", "GET"}))
        assert err.headers == (("Allow", "GET, POST"),)
        assert "Allowed methods: GET, POST" in err.detail

    def test_no_allow_header_without_methods(self) -> None:
        assert MethodNotSupported("DELETE").headers == ()

    def test_custom_detail(self) -> None:
        assert MethodNotSupported("DELETE", detail="nope").detail == "nope"


class TestInvalidHandler:
    def test_defaults(self) -> None:
        err = InvalidHandler()
        assert err.status == 500
        assert err.detail == "Invalid route handler"
