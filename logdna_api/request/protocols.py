"""Protocol interfaces for the replaceable request strategies."""

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

import httpx


@runtime_checkable
class RequestBuilder(Protocol):
    """Constructs the transport request for a call."""

    def build_request(self, method: str, url: str, payload: bytes) -> httpx.Request:
        """Build a transport request.

        Args:
            method: HTTP method, passed through unvalidated.
            url: Absolute request URL.
            payload: Marshalled request body, empty when there is none.

        Returns:
            Request ready for header attachment and execution.
        """
        ...


@runtime_checkable
class HttpExecutor(Protocol):
    """Performs a transport request.

    ``httpx.Client`` satisfies this protocol as-is, so a configured client
    can be dropped into the executor slot directly.
    """

    def send(self, request: httpx.Request) -> httpx.Response:
        """Send the request and return the response.

        Raises:
            Exception: Any failure; the pipeline reports it as a transport error.
        """
        ...


@runtime_checkable
class BodyReader(Protocol):
    """Reads a response body stream into memory."""

    def read_body(self, stream: Iterable[bytes]) -> bytes:
        """Drain the stream.

        Args:
            stream: Iterable of body chunks.

        Returns:
            Full body bytes.
        """
        ...


@runtime_checkable
class Marshaller(Protocol):
    """Serializes request payloads to the wire format."""

    def marshal(self, value: object) -> bytes:
        """Serialize a value to bytes."""
        ...
