"""Domain-specific error types for the request pipeline."""

from enum import Enum


class RequestErrorClass(str, Enum):
    """Classification of pipeline failures, one per stage.

    - MARSHAL: Payload marshaller failed
    - REQUEST_BUILD: Transport request could not be constructed
    - TRANSPORT: Executor failed to perform the HTTP request
    - BODY_READ: Response body could not be read
    - STATUS: Server answered with a status other than 200
    """

    MARSHAL = "MARSHAL"
    REQUEST_BUILD = "REQUEST_BUILD"
    TRANSPORT = "TRANSPORT"
    BODY_READ = "BODY_READ"
    STATUS = "STATUS"


TRANSPORT_ERROR_PREFIX = "Error during HTTP request: "
BODY_READ_ERROR_PREFIX = "Error parsing HTTP response: "
STATUS_ERROR_PREFIX = "status NOT OK: "


class LogdnaRequestError(Exception):
    """Base error for a failed LogDNA API call.

    Attributes:
        error_class: Pipeline stage that failed.
    """

    error_class: RequestErrorClass

    def __init__(self, message: str, error_class: RequestErrorClass) -> None:
        super().__init__(message)
        self.error_class = error_class

    @property
    def message(self) -> str:
        """Human-readable message identifying the failed stage."""
        return str(self)


class MarshalError(LogdnaRequestError):
    """Request payload could not be marshalled.

    Carries the marshaller's message unchanged.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message, RequestErrorClass.MARSHAL)


class RequestBuildError(LogdnaRequestError):
    """Transport request construction failure."""

    def __init__(self, message: str) -> None:
        super().__init__(message, RequestErrorClass.REQUEST_BUILD)


class TransportError(LogdnaRequestError):
    """Executor failure while performing the HTTP request."""

    def __init__(self, message: str) -> None:
        super().__init__(TRANSPORT_ERROR_PREFIX + message, RequestErrorClass.TRANSPORT)


class BodyReadError(LogdnaRequestError):
    """Response body read failure."""

    def __init__(self, message: str) -> None:
        super().__init__(BODY_READ_ERROR_PREFIX + message, RequestErrorClass.BODY_READ)


class StatusError(LogdnaRequestError):
    """Non-200 response from the API.

    Attributes:
        status_code: HTTP status code from the API response.
    """

    def __init__(self, status_code: int) -> None:
        super().__init__(f"{STATUS_ERROR_PREFIX}{status_code}", RequestErrorClass.STATUS)
        self.status_code = status_code
