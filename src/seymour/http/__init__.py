"""Seymour HTTP layer.

Provides the request engine that every API operation goes through.

Example:
    >>> from seymour.http import HttpClient, RequestDescriptor, ResponseType
    >>>
    >>> async with HttpClient(client_id="my-app") as client:
    ...     text = await client.execute(
    ...         RequestDescriptor(url=url, method="POST", params={"s": "feed/x"},
    ...                           response_type=ResponseType.TEXT)
    ...     )
"""

from seymour.http.client import HttpClient, gather_requests
from seymour.http.request import (
    HttpMethod,
    RequestDescriptor,
    ResponseType,
    encode_params,
)

__all__ = [
    "HttpClient",
    "HttpMethod",
    "RequestDescriptor",
    "ResponseType",
    "encode_params",
    "gather_requests",
]
