"""View payload models."""

from logdna_api.views.models import (
    ChannelRequest,
    ViewRequest,
    ViewResponse,
    decode_view_response,
)


__all__ = [
    "ChannelRequest",
    "ViewRequest",
    "ViewResponse",
    "decode_view_response",
]
