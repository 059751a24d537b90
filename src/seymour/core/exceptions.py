"""Custom exceptions.

Seymour uses a small hierarchy of exceptions so callers can tell local
mistakes apart from server rejections:

Example:
    >>> from seymour.core.exceptions import ApiError, SeymourError
    >>> err = ApiError("Unauthorized", 401)
    >>> isinstance(err, SeymourError)
    True
    >>> err.status
    401

Transport failures (``httpx.RequestError`` and subclasses) are not
wrapped and reach the caller unchanged.
"""

from __future__ import annotations


class SeymourError(Exception):
    """Base exception for Seymour.

    Example:
        >>> from seymour.core.exceptions import SeymourError
        >>> str(SeymourError("something went wrong"))
        'something went wrong'
    """


class InvalidArgumentError(SeymourError, ValueError):
    """A local precondition failed; no request was sent.

    Example:
        >>> from seymour.core.exceptions import InvalidArgumentError
        >>> raise InvalidArgumentError("streamId required")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        InvalidArgumentError: streamId required
    """


class ConfigurationError(SeymourError):
    """Configuration is invalid."""


class ApiError(SeymourError):
    """The server answered with a non-success HTTP status.

    The raw response body is kept verbatim so callers can inspect or log it.

    Example:
        >>> from seymour.core.exceptions import ApiError
        >>> err = ApiError("Error=BadAuthentication", 403)
        >>> err.body
        'Error=BadAuthentication'
        >>> str(err)
        'Error=BadAuthentication'
    """

    def __init__(self, body: str, status: int) -> None:
        super().__init__(body)
        self.body = body
        self.status = status

    def __repr__(self) -> str:
        return f"ApiError(status={self.status}, body={self.body!r})"
