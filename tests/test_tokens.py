"""Tests for validated HTTP primitives."""

from http import HTTPMethod

import pytest

from gwroute import (
    HeaderName,
    HeaderValue,
    InvalidHeaderNameError,
    InvalidHeaderValueError,
    InvalidMethodError,
    InvalidRegexError,
    InvalidRouteError,
    InvalidStatusCodeError,
    Regex,
    RouteError,
    Scheme,
    UnsupportedSchemeError,
)
from gwroute._tokens import parse_method, parse_scheme, parse_status_code


class TestHeaderName:
    def test_valid_token(self) -> None:
        assert str(HeaderName("x-request-id")) == "x-request-id"

    def test_lowercased(self) -> None:
        assert HeaderName("X-Request-ID").value == "x-request-id"

    def test_case_insensitive_equality(self) -> None:
        assert HeaderName("Content-Type") == HeaderName("content-type")

    def test_hashable(self) -> None:
        assert len({HeaderName("A"), HeaderName("a")}) == 1

    def test_all_token_punctuation(self) -> None:
        assert HeaderName("!#$%&'*+-.^_`|~").value == "!#$%&'*+-.^_`|~"

    @pytest.mark.parametrize("name", ["", "X-Bad Name", "x:y", "x\ny", "café", "(x)"])
    def test_invalid(self, name: str) -> None:
        with pytest.raises(InvalidHeaderNameError) as exc_info:
            HeaderName(name)
        assert exc_info.value.value == name
        assert repr(name) in str(exc_info.value)

    def test_error_is_route_error(self) -> None:
        with pytest.raises(RouteError):
            HeaderName("bad name")


class TestHeaderValue:
    def test_plain(self) -> None:
        assert str(HeaderValue("text/html; charset=utf-8")) == "text/html; charset=utf-8"

    def test_empty_allowed(self) -> None:
        assert HeaderValue("").value == ""

    def test_tab_allowed(self) -> None:
        assert HeaderValue("a\tb").value == "a\tb"

    def test_case_preserved(self) -> None:
        assert HeaderValue("Bearer ABC").value == "Bearer ABC"

    @pytest.mark.parametrize("value", ["a\nb", "a\rb", "\x00", "a\x7fb"])
    def test_control_characters_rejected(self, value: str) -> None:
        with pytest.raises(InvalidHeaderValueError):
            HeaderValue(value)


class TestRegex:
    def test_compiles(self) -> None:
        r = Regex("^/users/[0-9]+$")
        assert r.compiled.search("/users/42") is not None
        assert r.compiled.search("/users/me") is None

    def test_equality_by_pattern(self) -> None:
        assert Regex("a+") == Regex("a+")
        assert Regex("a+") != Regex("a*")
        assert hash(Regex("a+")) == hash(Regex("a+"))

    def test_repr_hides_compiled(self) -> None:
        assert repr(Regex("a+")) == "Regex(pattern='a+')"

    @pytest.mark.parametrize("pattern", ["(", "[a-", "foo(?=bar)", r"(a)\1"])
    def test_invalid_pattern(self, pattern: str) -> None:
        with pytest.raises(InvalidRegexError) as exc_info:
            Regex(pattern)
        assert exc_info.value.value == pattern
        assert exc_info.value.cause
        assert isinstance(exc_info.value.__cause__, Exception)


class TestParseMethod:
    @pytest.mark.parametrize("method", list(HTTPMethod))
    def test_standard_methods(self, method: HTTPMethod) -> None:
        assert parse_method(method.value) is method

    @pytest.mark.parametrize("token", ["get", "FETCH", "", "GET "])
    def test_unknown(self, token: str) -> None:
        with pytest.raises(InvalidMethodError) as exc_info:
            parse_method(token)
        assert exc_info.value.field == "method"


class TestParseScheme:
    def test_http(self) -> None:
        assert parse_scheme("http") is Scheme.HTTP

    def test_case_insensitive(self) -> None:
        assert parse_scheme("HTTPS") is Scheme.HTTPS

    @pytest.mark.parametrize("scheme", ["ftp", "", "https:"])
    def test_unsupported(self, scheme: str) -> None:
        with pytest.raises(UnsupportedSchemeError):
            parse_scheme(scheme)


class TestParseStatusCode:
    @pytest.mark.parametrize("code", [100, 301, 302, 308, 999])
    def test_valid(self, code: int) -> None:
        assert parse_status_code(code) == code

    @pytest.mark.parametrize("code", [0, 99, 1000, -301, True])
    def test_invalid(self, code: int) -> None:
        with pytest.raises(InvalidStatusCodeError) as exc_info:
            parse_status_code(code)
        assert isinstance(exc_info.value, InvalidRouteError)
