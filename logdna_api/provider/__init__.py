"""Provider configuration."""

from logdna_api.provider.config import ProviderConfig


__all__ = ["ProviderConfig"]
