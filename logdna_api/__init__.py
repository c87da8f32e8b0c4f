"""LogDNA API request pipeline."""

from logdna_api.provider import ProviderConfig
from logdna_api.request import (
    LogdnaRequestError,
    RequestConfig,
    new_request_config,
)


__all__ = [
    "LogdnaRequestError",
    "ProviderConfig",
    "RequestConfig",
    "new_request_config",
]
