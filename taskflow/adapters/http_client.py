"""
httpx wrapper used by the command line client.

The CLI only sees HTTPResponse and RequestError, and tests replace the
client by patching HTTPClientAdapterFactory.create_client.
"""
from abc import ABC, abstractmethod
from typing import Any, Optional

import httpx

RequestError = httpx.RequestError


class HTTPResponse:
    """Read-only view of a response: status, body and decoded JSON."""

    def __init__(self, response: httpx.Response):
        self._response = response

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def content(self) -> bytes:
        return self._response.content

    @property
    def text(self) -> str:
        return self._response.text

    def json(self) -> Any:
        """Decode the body; raises ValueError when it is not JSON."""
        return self._response.json()


class HTTPClientAdapter(ABC):
    """A closeable client issuing requests against the API."""

    @abstractmethod
    def request(self, method: str, url: str, **kwargs) -> HTTPResponse:
        ...

    @abstractmethod
    def close(self) -> None:
        ...

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


class HttpxClientAdapter(HTTPClientAdapter):
    def __init__(self, timeout: Optional[float] = None, **kwargs):
        self._client = httpx.Client(timeout=timeout, **kwargs)

    def request(self, method: str, url: str, **kwargs) -> HTTPResponse:
        return HTTPResponse(self._client.request(method, url, **kwargs))

    def close(self) -> None:
        self._client.close()


class HTTPClientAdapterFactory:
    @staticmethod
    def create_client(timeout: Optional[float] = None, **kwargs) -> HTTPClientAdapter:
        return HttpxClientAdapter(timeout=timeout, **kwargs)
