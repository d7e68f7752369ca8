"""Validated HTTP primitives used by the canonical route model.

Each type validates at construction time, so holding an instance is proof
the value is well formed. Header names follow the RFC 9110 token grammar
and are stored lower-cased; header values reject control characters other
than horizontal tab.

Regex uses ``google-re2`` for guaranteed linear-time matching. RE2 does not
support backreferences or lookahead/lookbehind, so patterns using them are
rejected when the route is converted rather than when traffic arrives.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from http import HTTPMethod

import re2

from gwroute._errors import (
    InvalidHeaderNameError,
    InvalidHeaderValueError,
    InvalidMethodError,
    InvalidRegexError,
    InvalidStatusCodeError,
    UnsupportedSchemeError,
)

# RFC 9110 tchar
_TOKEN_CHARS = frozenset(
    "!#$%&'*+-.^_`|~"
    "0123456789"
    "abcdefghijklmnopqrstuvwxyz"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)

MIN_STATUS_CODE = 100
MAX_STATUS_CODE = 999


def _is_field_value_char(c: str) -> bool:
    o = ord(c)
    return c == "\t" or (o >= 0x20 and o != 0x7F)


@dataclass(frozen=True, slots=True)
class HeaderName:
    """An HTTP header name, normalized to lower case.

    Raises:
        InvalidHeaderNameError: If the name is empty or not a valid token.
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value or not _TOKEN_CHARS.issuperset(self.value):
            raise InvalidHeaderNameError(self.value)
        object.__setattr__(self, "value", self.value.lower())

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class HeaderValue:
    """An HTTP header field value.

    Raises:
        InvalidHeaderValueError: If the value contains control characters.
    """

    value: str

    def __post_init__(self) -> None:
        if not all(_is_field_value_char(c) for c in self.value):
            raise InvalidHeaderValueError(self.value)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Regex:
    """A compiled RE2 pattern.

    Equality and hashing use the pattern text only.

    Raises:
        InvalidRegexError: If the pattern is not valid RE2 syntax.
    """

    pattern: str
    _compiled: re2.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        try:
            compiled = re2.compile(self.pattern)
        except re2.error as e:
            raise InvalidRegexError(self.pattern, str(e)) from e
        object.__setattr__(self, "_compiled", compiled)

    @property
    def compiled(self) -> re2.Pattern[str]:
        return self._compiled

    def __str__(self) -> str:
        return self.pattern


class Scheme(StrEnum):
    """URI schemes a redirect may switch to."""

    HTTP = "http"
    HTTPS = "https"


def parse_scheme(value: str) -> Scheme:
    """Parse a redirect scheme, case-insensitively.

    Raises:
        UnsupportedSchemeError: If the scheme is not http or https.
    """
    try:
        return Scheme(value.lower())
    except ValueError:
        raise UnsupportedSchemeError(value) from None


def parse_method(value: str) -> HTTPMethod:
    """Parse a method token against the standard HTTP method set.

    Tokens are case-sensitive: ``get`` is not ``GET``.

    Raises:
        InvalidMethodError: If the token is not a standard method.
    """
    try:
        return HTTPMethod(value)
    except ValueError:
        raise InvalidMethodError(value) from None


def parse_status_code(value: int) -> int:
    """Validate a status code as a three-digit integer.

    Raises:
        InvalidStatusCodeError: If the code is not an int in 100-999.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidStatusCodeError(value)
    if not MIN_STATUS_CODE <= value <= MAX_STATUS_CODE:
        raise InvalidStatusCodeError(value)
    return value
