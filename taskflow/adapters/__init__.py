"""
Adapters for external services and third-party libraries.
"""
from taskflow.adapters.http_client import (
    HTTPClientAdapter,
    HTTPClientAdapterFactory,
    HTTPResponse,
    RequestError,
)

__all__ = [
    "HTTPClientAdapter",
    "HTTPClientAdapterFactory",
    "HTTPResponse",
    "RequestError",
]
