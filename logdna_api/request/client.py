"""Request configuration and the make-request pipeline."""

import time
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

import httpx
import structlog

from logdna_api.request.constants import (
    CONTENT_TYPE_HEADER,
    DEFAULT_CHUNK_SIZE,
    HTTP_STATUS_OK,
    JSON_CONTENT_TYPE,
    SERVICE_KEY_HEADER,
)
from logdna_api.request.errors import (
    BodyReadError,
    LogdnaRequestError,
    MarshalError,
    RequestBuildError,
    StatusError,
    TransportError,
)
from logdna_api.request.metrics import RequestMetrics
from logdna_api.request.protocols import (
    BodyReader,
    HttpExecutor,
    Marshaller,
    RequestBuilder,
)
from logdna_api.request.redact import redact_headers, redact_url_credentials
from logdna_api.request.strategies import (
    HttpxExecutor,
    HttpxRequestBuilder,
    JsonMarshaller,
    StreamBodyReader,
)


if TYPE_CHECKING:
    from logdna_api.provider import ProviderConfig


logger = structlog.get_logger()


def build_url(host: str, path: str) -> str:
    """Join host and path with a single separating slash.

    No normalisation happens: a leading slash on ``path`` or a trailing
    slash on ``host`` yields a double slash.
    """
    return f"{host}/{path}"


@dataclass(frozen=True)
class RequestConfig:
    """A single API call and the strategies used to perform it.

    Built with :func:`new_request_config`. Instances are immutable, and
    :meth:`make_request` invokes each strategy at most once per call.

    Attributes:
        provider_config: Shared credentials and host.
        method: HTTP method, passed through unvalidated.
        path: Resource path relative to the provider host.
        body: Payload to marshal; ``None`` sends an empty body.
        request_builder: Constructs the transport request.
        executor: Sends the transport request.
        body_reader: Reads the response body stream.
        marshaller: Serializes ``body``.
    """

    provider_config: "ProviderConfig"
    method: str
    path: str
    body: object = None
    request_builder: RequestBuilder = field(default_factory=HttpxRequestBuilder)
    executor: HttpExecutor = field(default_factory=HttpxExecutor)
    body_reader: BodyReader = field(default_factory=StreamBodyReader)
    marshaller: Marshaller = field(default_factory=JsonMarshaller)

    @property
    def url(self) -> str:
        """Absolute request URL."""
        return build_url(self.provider_config.host, self.path)

    def make_request(self) -> bytes:
        """Run the pipeline and return the raw response body.

        Steps run in order and the first failure aborts the call:
        marshal, build request, attach headers, execute, read body,
        check for status 200.

        Returns:
            Response body bytes of a 200 response.

        Raises:
            MarshalError: Marshaller failed; message is the marshaller's.
            RequestBuildError: Builder failed; message is the builder's.
            TransportError: Executor failed.
            BodyReadError: Body reader failed.
            StatusError: Status was not exactly 200.
        """
        start_time_ns = time.perf_counter_ns()
        metrics = RequestMetrics.get_instance()
        log = logger.bind(
            component="request",
            method=self.method,
            url=redact_url_credentials(self.url),
        )

        try:
            status_code, body = self._run(log, metrics)
        except LogdnaRequestError as exc:
            metrics.record_failure(exc.error_class)
            log.warning(
                "request_failed",
                error_class=exc.error_class.value,
                error=str(exc),
            )
            raise
        finally:
            duration_ms = (time.perf_counter_ns() - start_time_ns) / 1_000_000
            metrics.record_duration(duration_ms)

        log.info(
            "request_complete",
            status_code=status_code,
            bytes=len(body),
            duration_ms=round(duration_ms, 2),
        )
        return body

    def _run(
        self,
        log: structlog.stdlib.BoundLogger,
        metrics: RequestMetrics,
    ) -> tuple[int, bytes]:
        """Execute the pipeline steps.

        Returns:
            Status code and body of a successful response.
        """
        payload = self._marshal_payload()
        request = self._build_request(payload)
        log.debug("request_started", headers=redact_headers(dict(request.headers)))

        response = self._execute(request)
        body = self._read_body(response)
        metrics.record_response(response.status_code, len(body))

        if response.status_code != HTTP_STATUS_OK:
            raise StatusError(response.status_code)

        return response.status_code, body

    def _marshal_payload(self) -> bytes:
        """Marshal the body, or return an empty payload when there is none."""
        if self.body is None:
            return b""
        try:
            return self.marshaller.marshal(self.body)
        except Exception as exc:
            raise MarshalError(str(exc)) from exc

    def _build_request(self, payload: bytes) -> httpx.Request:
        """Build the transport request and attach the API headers."""
        try:
            request = self.request_builder.build_request(
                self.method, self.url, payload
            )
        except Exception as exc:
            raise RequestBuildError(str(exc)) from exc

        request.headers[SERVICE_KEY_HEADER] = self.provider_config.service_key
        request.headers[CONTENT_TYPE_HEADER] = JSON_CONTENT_TYPE
        return request

    def _execute(self, request: httpx.Request) -> httpx.Response:
        try:
            return self.executor.send(request)
        except Exception as exc:
            raise TransportError(str(exc)) from exc

    def _read_body(self, response: httpx.Response) -> bytes:
        """Drain the response through the body reader, then close it."""
        try:
            return self.body_reader.read_body(
                response.iter_bytes(chunk_size=DEFAULT_CHUNK_SIZE)
            )
        except Exception as exc:
            raise BodyReadError(str(exc)) from exc
        finally:
            response.close()


RequestOption = Callable[[RequestConfig], RequestConfig]


def with_request_builder(builder: RequestBuilder) -> RequestOption:
    """Replace the transport-request builder."""

    def _apply(config: RequestConfig) -> RequestConfig:
        return replace(config, request_builder=builder)

    return _apply


def with_executor(executor: HttpExecutor) -> RequestOption:
    """Replace the executor, e.g. with a preconfigured ``httpx.Client``."""

    def _apply(config: RequestConfig) -> RequestConfig:
        return replace(config, executor=executor)

    return _apply


def with_body_reader(reader: BodyReader) -> RequestOption:
    """Replace the response body reader."""

    def _apply(config: RequestConfig) -> RequestConfig:
        return replace(config, body_reader=reader)

    return _apply


def with_marshaller(marshaller: Marshaller) -> RequestOption:
    """Replace the payload marshaller."""

    def _apply(config: RequestConfig) -> RequestConfig:
        return replace(config, marshaller=marshaller)

    return _apply


def new_request_config(
    provider_config: "ProviderConfig",
    method: str,
    path: str,
    body: object = None,
    *options: RequestOption,
) -> RequestConfig:
    """Create a request configuration with production strategies.

    Options are applied in the order given; later options win when two
    replace the same slot. No I/O happens here.

    Args:
        provider_config: Shared credentials and host.
        method: HTTP method.
        path: Resource path relative to the host, without a leading slash.
        body: Optional payload to marshal.
        *options: Strategy overrides.

    Returns:
        Fully configured RequestConfig.
    """
    config = RequestConfig(
        provider_config=provider_config,
        method=method,
        path=path,
        body=body,
        executor=HttpxExecutor(timeout=provider_config.timeout_seconds),
    )
    for option in options:
        config = option(config)
    return config
