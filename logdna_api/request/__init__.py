"""Authenticated request pipeline for the LogDNA API.

This module provides:
- RequestConfig with replaceable builder, executor, body reader and marshaller
- A fail-fast make_request pipeline with stage-specific errors
- Servicekey redaction for logging
- Metrics collection for observability
"""

from logdna_api.request.client import (
    RequestConfig,
    RequestOption,
    build_url,
    new_request_config,
    with_body_reader,
    with_executor,
    with_marshaller,
    with_request_builder,
)
from logdna_api.request.constants import (
    CONTENT_TYPE_HEADER,
    JSON_CONTENT_TYPE,
    SERVICE_KEY_HEADER,
)
from logdna_api.request.errors import (
    BodyReadError,
    LogdnaRequestError,
    MarshalError,
    RequestBuildError,
    RequestErrorClass,
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


__all__ = [
    # Pipeline
    "RequestConfig",
    "RequestOption",
    "build_url",
    "new_request_config",
    "with_body_reader",
    "with_executor",
    "with_marshaller",
    "with_request_builder",
    # Strategies
    "BodyReader",
    "HttpExecutor",
    "Marshaller",
    "RequestBuilder",
    "HttpxExecutor",
    "HttpxRequestBuilder",
    "JsonMarshaller",
    "StreamBodyReader",
    # Errors
    "LogdnaRequestError",
    "RequestErrorClass",
    "MarshalError",
    "RequestBuildError",
    "TransportError",
    "BodyReadError",
    "StatusError",
    # Constants
    "SERVICE_KEY_HEADER",
    "CONTENT_TYPE_HEADER",
    "JSON_CONTENT_TYPE",
    # Metrics
    "RequestMetrics",
    # Redaction
    "redact_headers",
    "redact_url_credentials",
]
