"""REST runtime abstractions."""

from .http_client import HTTPClient, HttpResponse, parse_body
from .runner import RestRunner
from .transport import (
    RESTTransport,
    append_query,
    encode_query,
    qualify_url,
    transform_response,
)

__all__ = [
    "HTTPClient",
    "HttpResponse",
    "RESTTransport",
    "RestRunner",
    "append_query",
    "encode_query",
    "parse_body",
    "qualify_url",
    "transform_response",
]
