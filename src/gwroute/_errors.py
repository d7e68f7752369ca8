"""Error taxonomy for route conversion.

Recoverable failures derive from RouteError and are reported to the caller,
which decides whether to skip the route, wait for the next resource version,
or surface the failure in the route's status.

MissingNamespaceError is a RuntimeError, not a RouteError: a namespaced
resource without a namespace is a broken precondition, not bad user input.
"""

from __future__ import annotations


class RouteError(Exception):
    """Base class for recoverable route conversion errors."""


class ParseError(RouteError):
    """A raw resource object could not be parsed into the wire schema."""


class InvalidRouteError(RouteError):
    """A wire field holds a value the canonical model cannot represent."""

    def __init__(self, field: str, value: object, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"invalid {field} {value!r}: {reason}")


class NonAbsolutePathError(InvalidRouteError):
    """A path match or path modifier does not begin with '/'."""

    def __init__(self, field: str, value: str) -> None:
        super().__init__(
            field,
            value,
            "paths must be absolute (begin with '/'); "
            f"{value!r} is not an absolute path",
        )


class InvalidHeaderNameError(InvalidRouteError):
    """A header name is not a valid HTTP token."""

    def __init__(self, value: str) -> None:
        super().__init__("header name", value, "not a valid HTTP header name token")


class InvalidHeaderValueError(InvalidRouteError):
    """A header value contains characters not allowed in a field value."""

    def __init__(self, value: str) -> None:
        super().__init__("header value", value, "contains control characters")


class InvalidMethodError(InvalidRouteError):
    """A method token is not one of the known HTTP methods."""

    def __init__(self, value: str) -> None:
        super().__init__("method", value, "not a known HTTP method")


class InvalidRegexError(InvalidRouteError):
    """A regular expression failed to compile under RE2."""

    def __init__(self, value: str, cause: str) -> None:
        self.cause = cause
        super().__init__("regex", value, cause)


class InvalidStatusCodeError(InvalidRouteError):
    """A redirect status code is outside 100-999."""

    def __init__(self, value: object) -> None:
        super().__init__("status code", value, "must be an integer in 100-999")


class UnsupportedSchemeError(InvalidRouteError):
    """A redirect scheme is not http or https."""

    def __init__(self, value: str) -> None:
        super().__init__("scheme", value, "only 'http' and 'https' are supported")


class UnsupportedFilterError(InvalidRouteError):
    """A rule carries a filter kind that has no canonical counterpart."""

    def __init__(self, value: str) -> None:
        super().__init__("filter type", value, "filter type is not supported")


class MissingNamespaceError(RuntimeError):
    """A namespaced resource has no namespace.

    Raised instead of guessing a default; indicates malformed watch data.
    """

    def __init__(self, kind: str, name: str) -> None:
        self.kind = kind
        self.name = name
        super().__init__(f"{kind} {name!r} must have a namespace")
