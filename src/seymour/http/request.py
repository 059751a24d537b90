"""Request descriptors and parameter encoding.

A :class:`RequestDescriptor` describes one logical API call. It is built
by a :class:`~seymour.reader.Reader` method, consumed by
:meth:`~seymour.http.client.HttpClient.execute`, and never stored.

Example:
    >>> from seymour.http.request import encode_params
    >>> encode_params({"s": "feed/x", "c": None, "n": 10})
    [('s', 'feed/x'), ('n', '10')]
    >>> encode_params({"i": ["1", "2"], "async": True})
    [('i', '1'), ('i', '2'), ('async', 'true')]
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union

Params = Union[Mapping[str, Any], Iterable[tuple[str, Any]]]


class HttpMethod(str, Enum):
    """HTTP methods used by the GReader API."""

    GET = "GET"
    POST = "POST"


class ResponseType(str, Enum):
    """How a successful response body is decoded.

    Example:
        >>> ResponseType.JSON.value
        'json'
    """

    JSON = "json"
    TEXT = "text"
    RAW = "raw"  # the httpx.Response itself


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def encode_params(params: Params | None) -> list[tuple[str, str]]:
    """Flatten parameters into ordered ``(key, value)`` string pairs.

    Mappings and pair sequences are both accepted. A list or tuple value
    repeats its key once per element, in order. ``None`` values are
    dropped entirely.

    Args:
        params: Mapping or iterable of ``(key, value)`` pairs.

    Returns:
        List of string pairs ready for URL or form encoding.
    """
    if not params:
        return []

    items = params.items() if isinstance(params, Mapping) else params
    encoded: list[tuple[str, str]] = []
    for key, value in items:
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            encoded.extend((key, _stringify(v)) for v in value if v is not None)
        else:
            encoded.append((key, _stringify(value)))
    return encoded


@dataclass(frozen=True)
class RequestDescriptor:
    """One logical API call.

    Attributes:
        url: Absolute endpoint URL.
        method: GET or POST.
        params: Query (GET) or form body (POST) parameters.
        response_type: How to decode a 2xx body.
        is_retry: Set on the single re-issue after a post-token refresh.
        no_auth: Skip the ``Authorization`` header.
    """

    url: str
    method: HttpMethod = HttpMethod.GET
    params: Params | None = field(default=None, compare=False)
    response_type: ResponseType = ResponseType.JSON
    is_retry: bool = False
    no_auth: bool = False

    @property
    def is_post(self) -> bool:
        return self.method is HttpMethod.POST

    def __post_init__(self) -> None:
        # Accept plain strings ("POST", "text") as well as the enums
        object.__setattr__(self, "method", HttpMethod(self.method))
        object.__setattr__(self, "response_type", ResponseType(self.response_type))
