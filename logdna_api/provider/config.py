"""Provider-level configuration shared by every request of a client."""

from typing import TYPE_CHECKING, Annotated

from pydantic import BaseModel, ConfigDict, Field

from logdna_api.request.constants import DEFAULT_HOST, DEFAULT_TIMEOUT_SECONDS


if TYPE_CHECKING:
    from logdna_api.settings import AppSettings


class ProviderConfig(BaseModel):
    """Credentials and target host for the LogDNA API.

    Created once per client session and shared read-only by all requests.
    The host is joined with request paths as ``host + "/" + path``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    service_key: str = Field(repr=False, description="Sent as the Servicekey header")
    host: str = Field(default=DEFAULT_HOST, description="Base API URL")
    timeout_seconds: Annotated[float, Field(gt=0.0, le=300.0)] = (
        DEFAULT_TIMEOUT_SECONDS
    )

    @classmethod
    def from_settings(cls, settings: "AppSettings") -> "ProviderConfig":
        """Build a provider config from environment settings.

        Args:
            settings: Loaded application settings.

        Returns:
            ProviderConfig carrying the configured key, host and timeout.
        """
        return cls(
            service_key=settings.service_key,
            host=settings.host,
            timeout_seconds=settings.timeout_seconds,
        )
