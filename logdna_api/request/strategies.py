"""Production implementations of the request strategies."""

import json
import threading
from collections.abc import Iterable
from io import BytesIO

import httpx
from pydantic import BaseModel

from logdna_api.request.constants import DEFAULT_TIMEOUT_SECONDS


class HttpxRequestBuilder:
    """Builds requests with ``httpx.Request``."""

    def build_request(self, method: str, url: str, payload: bytes) -> httpx.Request:
        """Construct an httpx request carrying the payload as its content."""
        return httpx.Request(method, url, content=payload)


_shared_client: httpx.Client | None = None
_shared_client_lock = threading.Lock()


def get_shared_client() -> httpx.Client:
    """Return the pooled client used by default executors, creating it once."""
    global _shared_client  # noqa: PLW0603
    with _shared_client_lock:
        if _shared_client is None:
            _shared_client = httpx.Client()
        return _shared_client


class HttpxExecutor:
    """Sends requests through httpx.

    Responses are streamed: ``send`` returns once the status line and headers
    arrive and the body stays on the connection until it is read. Whoever
    reads the body must close the response to release the connection.
    """

    def __init__(
        self,
        client: httpx.Client | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize the executor.

        Args:
            client: Optional caller-owned client. Its lifecycle stays with
                the caller. Defaults to the shared pooled client.
            timeout: Timeout in seconds for requests that carry none.
        """
        self._client = client
        self._timeout = timeout

    @property
    def timeout(self) -> float:
        """Timeout applied to requests without their own."""
        return self._timeout

    def send(self, request: httpx.Request) -> httpx.Response:
        """Send the request and return a response with an unread body."""
        # httpx reads timeouts from the request, not the client, on send()
        request.extensions.setdefault(
            "timeout", httpx.Timeout(self._timeout).as_dict()
        )
        client = self._client if self._client is not None else get_shared_client()
        return client.send(request, stream=True)


class StreamBodyReader:
    """Drains a chunk stream fully into memory."""

    def read_body(self, stream: Iterable[bytes]) -> bytes:
        """Read every chunk of the stream.

        Args:
            stream: Iterable of body chunks.

        Returns:
            Concatenated body bytes.
        """
        buffer = BytesIO()
        for chunk in stream:
            buffer.write(chunk)
        return buffer.getvalue()


class JsonMarshaller:
    """Serializes payloads to compact JSON.

    Pydantic models are dumped by alias with unset (``None``) fields left
    out, so the model's field aliases define the wire keys.
    """

    def marshal(self, value: object) -> bytes:
        """Serialize a value to JSON bytes.

        Raises:
            TypeError: If the value is not JSON serializable.
        """
        if isinstance(value, BaseModel):
            return value.model_dump_json(by_alias=True, exclude_none=True).encode(
                "utf-8"
            )
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False).encode(
            "utf-8"
        )
